"""A small terminal dodging game on a coloured grid, with its ANSI, board and game-loop pieces."""

__version__ = "0.1.0"