# rsort

rsort opens a 600 by 400 pixel window with a menu of sorting algorithms.
When you pick one, the program shuffles an array of 600 values and then
sorts it. Each value is drawn as a white bar, and a new frame is drawn as
the work goes on.

## Installing

```
pip install .
```

This installs `pygame` as well.

## Running

```
rsort
```

Options:

- `--font PATH`: the TrueType font used for the button labels. The default
  is `fonts/CaskaydiaCove-Bold.ttf`, looked up relative to the directory
  you start the program from. The font is loaded at size 16.

The package does not ship a font file. If the font file does not exist, the
program stops with `FileNotFoundError` before the window shows the menu.

## The menu

The menu shows five buttons:

- **bubble_sort**: repeats passes that swap out-of-order neighbours, and
  draws one frame per pass
- **selection_sort**: moves the smallest remaining value to the front
- **insertion_sort**: slides each value back into the sorted prefix
- **quick_sort**: partitions around the last element (Lomuto), then recurses
- **\_QUIT\_**: closes the program

When you hover over a button, a highlight grows around it. When the pointer
leaves, the highlight shrinks again. Holding the left mouse button over a
button chooses it.

## While a sort is running

- **Right arrow**: raises the target frame rate, which speeds the animation
  up.
- **Left arrow**: lowers the target frame rate. It never drops to zero.

The shuffle draws a frame after every swap. When the sort finishes, the
program goes back to the menu and the frame rate returns to 60. Closing the
window or pressing **Escape** ends the program at any point, even in the
middle of a shuffle or a sort.

## Using it from Python

The sorting classes in `rsort.sorts` (`BubbleSort`, `SelectionSort`,
`InsertionSort`, `QuickSort`) take a length and an optional
`random.Random`. Their `start(globals, display)` method runs the sort. It
works with any object that offers the drawing and input calls of
`rsort.display.Display`. `rsort.algorithm.generate_array(n)` gives the
starting values `0, 1, 1, 2, 2, ...`.

## Running the tests

```
pip install .[test]
pytest
```