"""Main menu: one button per sorting algorithm and a quit button."""

from __future__ import annotations

from .button import Button
from .sorts import BubbleSort, InsertionSort, QuickSort, SelectionSort

_PURPLE = (200, 122, 255)
_RAYWHITE = (245, 245, 245)
_BLACK = (0, 0, 0)

_ENTRIES = (
    ("bubble_sort", BubbleSort),
    ("selection_sort", SelectionSort),
    ("insertion_sort", InsertionSort),
    ("quick_sort", QuickSort),
    ("_QUIT_", None),
)
_BUTTON_X = 100.0
_FIRST_BUTTON_Y = 100.0
_BUTTON_SPACING = 50.0


class Menu:
    """Shows the buttons and runs the chosen sort until the window closes."""

    def __init__(self, globals, display) -> None:
        self.buttons = [
            Button(
                _PURPLE,
                _RAYWHITE,
                _BUTTON_X,
                _FIRST_BUTTON_Y + index * _BUTTON_SPACING,
                label,
                globals,
                display,
            )
            for index, (label, _) in enumerate(_ENTRIES)
        ]

    def handle_buttons_update(self, actives, globals, display) -> None:
        """Run every sort whose button was clicked; the quit button ends the app."""
        for active, (_, sort_cls) in zip(actives, _ENTRIES):
            if not active:
                continue
            if sort_cls is None:
                globals.acted_to_close = True
            else:
                sort_cls(globals.arr_length).start(globals, display)

    def start(self, globals, display) -> None:
        while not (display.window_should_close() or globals.acted_to_close):
            stop = False
            actives: list[bool] = []
            while not display.window_should_close() and not stop:
                globals.update(display)

                actives = [button.update(globals) for button in self.buttons]
                stop = any(actives)

                if globals.fps != globals.fps_og:
                    display.set_target_fps(globals.fps_og)
                    globals.fps = globals.fps_og

                display.clear(_BLACK)
                for button in self.buttons:
                    button.draw(globals, display)
                display.present()

            self.handle_buttons_update(actives, globals, display)