"""Menu buttons with a grow-on-hover highlight."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import IntEnum


class _Hover(IntEnum):
    NONE = 0
    HOVER = 1
    CLICK = 2


@dataclass
class _Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: tuple[float, float]) -> bool:
        px, py = point
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return astuple(self)


class Button:
    """A text label with a clickable area and an animated highlight."""

    def __init__(self, fore_color, text_color, midx, midy, text, globals, display):
        font_size = float(globals.font_size)
        text_width = float(display.measure_text(text, globals.font_size))
        self.col_rect = _Rect(
            midx - text_width / 2.0 - font_size,
            midy - font_size / 2.0,
            text_width + font_size,
            font_size,
        )
        self.gra_rect = _Rect(midx - font_size * 0.5, midy, 0.0, 0.0)
        self.fore_col = fore_color
        self.text_col = text_color
        self.text = text

    def check_click(self, globals) -> _Hover:
        if not self.col_rect.contains(globals.mouse.pos):
            return _Hover.NONE
        return _Hover.CLICK if globals.mouse.click else _Hover.HOVER

    def expand(self, globals) -> None:
        speed = globals.button_animation_speed
        g, c = self.gra_rect, self.col_rect
        if g.width < c.width:
            g.width += speed * 2.0
        if g.x > c.x:
            g.x -= speed
        if g.height < c.height:
            g.y -= speed
            g.height += speed * 2.0

    def compress(self, globals) -> None:
        speed = globals.button_animation_speed
        g = self.gra_rect
        if g.width > 0.0:
            g.x += speed
            g.width -= speed * 2.0
        if g.height > 0.0:
            g.y += speed
            g.height -= speed * 2.0

    def update(self, globals) -> bool:
        """Animate the highlight; True when the button was clicked."""
        state = self.check_click(globals)
        if state is _Hover.CLICK:
            return True
        if state is _Hover.HOVER:
            self.expand(globals)
        else:
            self.compress(globals)
        return False

    def draw(self, globals, display) -> None:
        if globals.font is None:
            raise RuntimeError("no font loaded")
        display.draw_rounded_rect(self.gra_rect.as_tuple(), 0.6, self.fore_col)
        display.draw_text(
            globals.font,
            self.text,
            (self.col_rect.x + globals.font_size, self.col_rect.y),
            globals.font_size,
            self.text_col,
        )