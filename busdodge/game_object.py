"""Objects on the playing field and the helpers that create them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .icon import Icon, solid_icon
from .unit import (
    GAME_WINDOW_HEIGHT,
    GAME_WINDOW_WIDTH,
    Color,
    Direction,
    Position,
    Size,
)

_default_rng = random.Random()


@dataclass(eq=False)
class GameObject:
    """A movable icon placed on the playing field."""

    icon: Icon
    position: Position = field(default_factory=Position)
    direction: Direction = Direction.NONE

    def update(self) -> None:
        """Move one step in the current direction, staying inside the field."""
        x, y = self.position.x, self.position.y
        if self.direction == Direction.UP and y != 0:
            y -= 1
        elif self.direction == Direction.LEFT and x != 0:
            x -= 1
        elif self.direction == Direction.DOWN and y < GAME_WINDOW_HEIGHT - 1:
            y += 1
        elif self.direction == Direction.RIGHT and x < GAME_WINDOW_WIDTH - 1:
            x += 1
        self.position = Position(x, y)


def _random_position(rng: random.Random) -> Position:
    x = rng.randint(0, GAME_WINDOW_WIDTH - 1)
    y = rng.randint(0, GAME_WINDOW_HEIGHT - 1)
    return Position(x, y)


def player_object(rng: random.Random | None = None) -> GameObject:
    """Create the red player at a random position."""
    rng = rng or _default_rng
    return GameObject(solid_icon(Size(1, 1), Color.RED), _random_position(rng))


def random_object(rng: random.Random | None = None) -> GameObject:
    """Create a blue obstacle at a random position."""
    rng = rng or _default_rng
    return GameObject(solid_icon(Size(1, 1), Color.BLUE), _random_position(rng))


def random_object_avoiding(
    player_pos: Position, rng: random.Random | None = None
) -> GameObject:
    """Create a cyan obstacle at a random position other than ``player_pos``."""
    rng = rng or _default_rng
    pos = _random_position(rng)
    while pos == player_pos:
        pos = _random_position(rng)
    return GameObject(solid_icon(Size(1, 1), Color.CYAN), pos)