"""Command-line entry point for the game."""

from __future__ import annotations

import argparse
from typing import Sequence

from .ansi import ansi_print
from .controller import Controller
from .unit import Color
from .view import View


def banner(text: str) -> str:
    """Return ``text`` as a bright, blinking yellow-on-red banner."""
    return ansi_print(text, Color.YELLOW, Color.RED, True, True)


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game and print the closing messages."""
    parser = argparse.ArgumentParser(
        prog="busdodge", description="Dodge the obstacles in your terminal."
    )
    parser.add_argument("--id", default="anonymous", help="player id shown at the end")
    args = parser.parse_args(argv)

    view = View()
    controller = Controller(view)
    controller.run()

    if not controller.status:
        print(banner("Serious one lose."), end="\n\n")
    else:
        print(banner("You lose but gwaen-chanh-ayo"), end="\n\n")
    print(banner(f"ID: {args.id}"), end="\n\n")
    return 0