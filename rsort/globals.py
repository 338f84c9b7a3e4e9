"""Shared application settings and state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .mouse import Mouse


@dataclass
class Globals:
    """Window size, speeds, font and input shared by every screen."""

    acted_to_close: bool = False
    fps: int = 60
    fps_og: int = 60
    fps_update: bool = True
    fps_change: int = 10
    width: int = 600
    height: int = 400
    single_size: int = 1
    arr_length: int = 600
    font: Any = None
    font_size: int = 0
    mouse: Mouse = field(default_factory=Mouse)
    button_animation_speed: float = 2.5

    def load_font(self, display, name: str, size: int) -> None:
        """Load the font once; later calls keep the first one."""
        if self.font is not None:
            return
        self.font = display.load_font(name, size)
        self.font_size = size

    def update(self, display) -> None:
        self.mouse.update(display)