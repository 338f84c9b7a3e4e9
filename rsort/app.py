"""Command-line entry point that opens the window and shows the menu."""

from __future__ import annotations

import argparse

from .display import Display
from .globals import Globals
from .menu import Menu

DEFAULT_FONT = "fonts/CaskaydiaCove-Bold.ttf"
FONT_SIZE = 16
TITLE = "rSort"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rsort", description="Watch sorting algorithms at work."
    )
    parser.add_argument(
        "--font", default=DEFAULT_FONT, help="path of the TrueType font to use"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    state = Globals()
    with Display(state.width, state.height, TITLE) as display:
        state.load_font(display, args.font, FONT_SIZE)
        display.set_target_fps(state.fps)
        menu = Menu(state, display)
        menu.start(state, display)
    return 0