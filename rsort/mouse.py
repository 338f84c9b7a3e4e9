"""Mouse state sampled once per frame."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Mouse:
    """Cursor position and whether the left button is held."""

    pos: tuple[float, float] = (0.0, 0.0)
    click: bool = False

    def update(self, display) -> None:
        self.pos = display.mouse_position()
        self.click = display.is_mouse_button_down()