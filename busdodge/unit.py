"""Basic value types and the fixed dimensions of the playing field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GAME_WINDOW_WIDTH = 20
GAME_WINDOW_HEIGHT = 20

GAME_WINDOW_CELL_WIDTH = 2
WINDOW_PIXEL_WIDTH = GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH
WINDOW_PIXEL_HEIGHT = GAME_WINDOW_HEIGHT

SPF = 1.0
"""Seconds per frame."""


class Color(IntEnum):
    """Terminal colours; the value is the ANSI colour offset."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PINK = 5
    CYAN = 6
    WHITE = 7
    NOCHANGE = 8


class Direction(IntEnum):
    """Movement direction; opposite directions are negatives of each other."""

    RIGHT = -2
    DOWN = -1
    NONE = 0
    UP = 1
    LEFT = 2


@dataclass(frozen=True)
class Vec2:
    """An integer pair used both as a position and as a size."""

    e1: int = 0
    e2: int = 0

    @property
    def x(self) -> int:
        return self.e1

    @property
    def y(self) -> int:
        return self.e2

    @property
    def width(self) -> int:
        return self.e1

    @property
    def height(self) -> int:
        return self.e2


Position = Vec2
Size = Vec2