"""The array being sorted, its shuffle and its on-screen bars."""

from __future__ import annotations

import random

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)


def generate_array(length: int) -> list[int]:
    """Values 0, 1, 1, 2, 2, ... in ascending order."""
    return [(i + 1) // 2 for i in range(length)]


class Algorithm:
    """An array of bar heights together with drawing and speed control."""

    def __init__(self, length: int, rng: random.Random | None = None) -> None:
        self.nums = generate_array(length)
        self.length = length
        self.rng = rng if rng is not None else random.Random()

    def window_should_close(self, display, globals) -> bool:
        return globals.acted_to_close or display.window_should_close()

    def manage_speeds(self, globals, display) -> None:
        """Slow down or speed up with the left and right arrow keys."""
        change = globals.fps_change // 2 + globals.fps // globals.fps_change

        if display.is_key_pressed("left"):
            if change >= globals.fps:
                return
            globals.fps -= change
            globals.fps_update = True
        if display.is_key_pressed("right"):
            globals.fps += change
            globals.fps_update = True

        if globals.fps <= 1:
            globals.fps = 1
            globals.fps_update = True

    def algorithm_graphics(self, globals, display) -> None:
        """Handle speed keys and draw one frame."""
        self.manage_speeds(globals, display)

        if globals.fps_update:
            globals.fps_update = False
            display.set_target_fps(globals.fps)

        display.clear(_BLACK)
        self.paint_self(display, globals)
        display.present()

    def shuffle(self, globals, display) -> None:
        """Shuffle in place, drawing a frame after every swap."""
        for i in reversed(range(self.length)):
            if self.window_should_close(display, globals):
                break
            j = self.rng.randrange(i) if i else 0
            self.nums[i], self.nums[j] = self.nums[j], self.nums[i]
            self.algorithm_graphics(globals, display)

    def paint_self(self, display, globals) -> None:
        size = globals.single_size
        x = globals.width // 2 - self.length * size // 2
        for value in self.nums:
            height = value * size
            display.draw_rect(
                (float(x), float(globals.height - height), float(size), float(height)),
                _WHITE,
            )
            x += size