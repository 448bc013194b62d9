"""Icons: rectangular grids of coloured cells."""

from __future__ import annotations

from dataclasses import dataclass

from .unit import Color, Size


@dataclass
class Cell:
    """One character cell of an icon."""

    color: Color
    ascii: str


Icon = list[list[Cell]]


def icon_width(icon: Icon) -> int:
    """Width of an icon, taken from its first row."""
    return len(icon[0]) if icon else 0


def icon_height(icon: Icon) -> int:
    """Number of rows in an icon."""
    return len(icon)


def solid_icon(size: Size, color: Color) -> Icon:
    """Build an icon of ``size`` filled with blank cells of one colour."""
    return [
        [Cell(color, " ") for _ in range(size.width)]
        for _ in range(size.height)
    ]