"""Rendering the playing field to an ANSI terminal."""

from __future__ import annotations

import os
import sys
from typing import TextIO, TypeVar

from wcwidth import wcwidth

from .ansi import ansi_print
from .game_object import GameObject
from .unit import (
    GAME_WINDOW_CELL_WIDTH,
    GAME_WINDOW_HEIGHT,
    GAME_WINDOW_WIDTH,
    Color,
)

_T = TypeVar("_T")

_HEADER = "Please play the game when waiting for the bus."
_CLEAR = "\033[2J\033[H"
_HOME = "\033[H"


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies, never less than one."""
    width = sum(max(0, wcwidth(ch)) for ch in text)
    return max(1, width)


def _grid(value: _T) -> list[list[_T]]:
    return [[value] * GAME_WINDOW_WIDTH for _ in range(GAME_WINDOW_HEIGHT)]


class View:
    """Double-buffered view of the field that redraws only when it changes."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._term_size: tuple[int, int] | None = None
        self._last_map: list[list[str]] = _grid("")
        self._last_fg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._last_bg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._latest_map: list[list[str]] = _grid("")
        self._latest_fg: list[list[Color]] = _grid(Color.NOCHANGE)
        self._latest_bg: list[list[Color]] = _grid(Color.NOCHANGE)
        self.reset_latest()

    def reset_latest(self) -> None:
        """Blank the frame being built."""
        self._latest_map = _grid(" ")
        self._latest_fg = _grid(Color.NOCHANGE)
        self._latest_bg = _grid(Color.NOCHANGE)

    def draw(self, obj: GameObject) -> None:
        """Paint an object's icon into the frame being built, clipped to the field."""
        pos = obj.position
        for dy, icon_row in enumerate(obj.icon):
            row = pos.y + dy
            if not 0 <= row < GAME_WINDOW_HEIGHT:
                continue
            for dx, cell in enumerate(icon_row):
                col = pos.x + dx
                if not 0 <= col < GAME_WINDOW_WIDTH:
                    continue
                self._latest_map[row][col] = cell.ascii
                self._latest_bg[row][col] = cell.color

    def compose_frame(self) -> str:
        """Return the bordered text of the frame being built."""
        border = "+" + "-" * (GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH) + "+\n"
        parts = [border]
        for texts, fgs, bgs in zip(self._latest_map, self._latest_fg, self._latest_bg):
            parts.append("|")
            for text, fg, bg in zip(texts, fgs, bgs):
                pad_total = max(0, GAME_WINDOW_CELL_WIDTH - display_width(text))
                pad_left = pad_total // 2
                pad_right = pad_total - pad_left
                blank = ansi_print(" ", Color.NOCHANGE, bg)
                parts.append(blank * pad_left)
                parts.append(ansi_print(text, fg, bg))
                parts.append(blank * pad_right)
            parts.append("|\n")
        parts.append(border)
        return "".join(parts)

    def _terminal_size(self) -> tuple[int, int]:
        try:
            size = os.get_terminal_size(self._out.fileno())
        except (OSError, ValueError, AttributeError):
            return (-1, -1)
        return (size.lines, size.columns)

    def _dirty(self) -> bool:
        return (
            self._last_map != self._latest_map
            or self._last_fg != self._latest_fg
            or self._last_bg != self._latest_bg
        )

    def render(self) -> bool:
        """Write the frame if it changed; return whether a frame was written."""
        size = self._terminal_size()
        if size != self._term_size:
            self._out.write(_CLEAR)
        self._term_size = size

        if not self._dirty():
            return False

        self._out.write(_HEADER + "\n" + _HOME + self.compose_frame())
        self._out.flush()

        self._last_map = [row[:] for row in self._latest_map]
        self._last_fg = [row[:] for row in self._latest_fg]
        self._last_bg = [row[:] for row in self._latest_bg]
        return True