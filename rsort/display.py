"""Window, input and drawing primitives built on pygame."""

from __future__ import annotations

import os
from collections.abc import Sequence

import pygame

_Color = Sequence[int]

_KEYS = {
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "escape": pygame.K_ESCAPE,
    "enter": pygame.K_RETURN,
    "space": pygame.K_SPACE,
}
_EXIT_KEY = pygame.K_ESCAPE


def _to_rect(rect: Sequence[float]) -> pygame.Rect:
    x, y, width, height = rect
    return pygame.Rect(int(x), int(y), int(width), int(height))


class Display:
    """A single window with per-frame input state and simple drawing calls."""

    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.init()
        pygame.font.init()
        self.width = width
        self.height = height
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.fps = 60
        self._clock = pygame.time.Clock()
        self._should_close = False
        self._pressed: frozenset[int] = frozenset()
        self._default_fonts: dict[int, pygame.font.Font] = {}

    def __enter__(self) -> Display:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def window_should_close(self) -> bool:
        """True once the window was closed or the exit key was pressed."""
        return self._should_close

    def is_key_pressed(self, key: str) -> bool:
        """True if the named key went down during the last frame."""
        try:
            code = _KEYS[key]
        except KeyError:
            raise ValueError(f"unknown key: {key!r}") from None
        return code in self._pressed

    def set_target_fps(self, fps: int) -> None:
        self.fps = fps

    def mouse_position(self) -> tuple[float, float]:
        x, y = pygame.mouse.get_pos()
        return float(x), float(y)

    def is_mouse_button_down(self) -> bool:
        return bool(pygame.mouse.get_pressed()[0])

    def _default_font(self, size: int) -> pygame.font.Font:
        size = max(size, 1)
        font = self._default_fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._default_fonts[size] = font
        return font

    def measure_text(self, text: str, size: int) -> int:
        """Width in pixels of text drawn with the default font at this size."""
        return self._default_font(size).size(text)[0]

    def load_font(self, name: str, size: int) -> pygame.font.Font:
        if not os.path.isfile(name):
            raise FileNotFoundError(name)
        return pygame.font.Font(name, size)

    def clear(self, color: _Color) -> None:
        self.surface.fill(tuple(color))

    def draw_rect(self, rect: Sequence[float], color: _Color) -> None:
        shape = _to_rect(rect)
        if shape.width <= 0 or shape.height <= 0:
            return
        pygame.draw.rect(self.surface, tuple(color), shape)

    def draw_rounded_rect(
        self, rect: Sequence[float], roundness: float, color: _Color
    ) -> None:
        shape = _to_rect(rect)
        if shape.width <= 0 or shape.height <= 0:
            return
        radius = int(roundness * min(shape.width, shape.height) / 2)
        pygame.draw.rect(self.surface, tuple(color), shape, border_radius=radius)

    def draw_text(
        self,
        font: pygame.font.Font,
        text: str,
        pos: Sequence[float],
        size: int,
        color: _Color,
    ) -> None:
        """Draw text with the given font; the font's own point size is used."""
        rendered = font.render(text, True, tuple(color))
        x, y = pos
        self.surface.blit(rendered, (int(x), int(y)))

    def present(self) -> None:
        """Show the frame, wait for the target frame rate and poll input."""
        pygame.display.flip()
        self._clock.tick(self.fps)
        self._poll_events()

    def _poll_events(self) -> None:
        pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._should_close = True
            elif event.type == pygame.KEYDOWN:
                pressed.add(event.key)
                if event.key == _EXIT_KEY:
                    self._should_close = True
        self._pressed = frozenset(pressed)

    def close(self) -> None:
        pygame.quit()