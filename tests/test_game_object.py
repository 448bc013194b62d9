import random

import pytest

from busdodge.game_object import (
    GameObject,
    player_object,
    random_object,
    random_object_avoiding,
)
from busdodge.icon import solid_icon
from busdodge.unit import (
    GAME_WINDOW_HEIGHT,
    GAME_WINDOW_WIDTH,
    Color,
    Direction,
    Position,
    Size,
)


class _ScriptedRng:
    """Returns the given values from randint in order."""

    def __init__(self, values):
        self._values = iter(values)

    def randint(self, low, high):
        value = next(self._values)
        assert low <= value <= high
        return value


def _obj(x, y, direction=Direction.NONE):
    return GameObject(solid_icon(Size(1, 1), Color.RED), Position(x, y), direction)


def test_defaults():
    obj = GameObject(solid_icon(Size(1, 1), Color.RED))
    assert obj.position == Position(0, 0)
    assert obj.direction == Direction.NONE


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Position(5, 4)),
        (Direction.DOWN, Position(5, 6)),
        (Direction.LEFT, Position(4, 5)),
        (Direction.RIGHT, Position(6, 5)),
        (Direction.NONE, Position(5, 5)),
    ],
)
def test_update_moves_one_step(direction, expected):
    obj = _obj(5, 5, direction)
    obj.update()
    assert obj.position == expected


def test_update_stops_at_top_left():
    obj = _obj(0, 0, Direction.UP)
    obj.update()
    assert obj.position == Position(0, 0)
    obj.direction = Direction.LEFT
    obj.update()
    assert obj.position == Position(0, 0)


def test_update_stops_at_bottom_right():
    corner = Position(GAME_WINDOW_WIDTH - 1, GAME_WINDOW_HEIGHT - 1)
    obj = _obj(corner.x, corner.y, Direction.DOWN)
    obj.update()
    assert obj.position == corner
    obj.direction = Direction.RIGHT
    obj.update()
    assert obj.position == corner


def test_repeated_update_stays_in_field():
    obj = _obj(3, 3, Direction.RIGHT)
    for _ in range(GAME_WINDOW_WIDTH * 2):
        obj.update()
    assert obj.position == Position(GAME_WINDOW_WIDTH - 1, 3)


def test_objects_compare_by_identity():
    a = _obj(1, 1)
    b = _obj(1, 1)
    assert a == a
    assert not (a == b)


def test_player_object_is_red_and_in_field():
    rng = random.Random(7)
    for _ in range(50):
        obj = player_object(rng)
        assert obj.icon[0][0].color == Color.RED
        assert 0 <= obj.position.x < GAME_WINDOW_WIDTH
        assert 0 <= obj.position.y < GAME_WINDOW_HEIGHT


def test_random_object_is_blue_at_scripted_position():
    obj = random_object(_ScriptedRng([4, 9]))
    assert obj.icon[0][0].color == Color.BLUE
    assert obj.position == Position(4, 9)
    assert obj.direction == Direction.NONE


def test_random_object_avoiding_retries_on_player_position():
    rng = _ScriptedRng([2, 3, 2, 3, 8, 1])
    obj = random_object_avoiding(Position(2, 3), rng)
    assert obj.position == Position(8, 1)
    assert obj.icon[0][0].color == Color.CYAN


def test_random_object_avoiding_never_hits_player():
    rng = random.Random(1)
    player = Position(10, 10)
    for _ in range(200):
        assert random_object_avoiding(player, rng).position != player or False
        assert random_object_avoiding(player, rng).position.x in range(GAME_WINDOW_WIDTH)