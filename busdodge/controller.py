"""Game loop: input, movement, collisions and frame timing."""

from __future__ import annotations

import os
import random
import select
import sys
import termios
import time
from contextlib import contextmanager
from typing import Iterator

from .game_object import (
    GameObject,
    player_object,
    random_object,
    random_object_avoiding,
)
from .unit import SPF, Direction
from .view import View

ESCAPE = 27

_MOVES = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class Controller:
    """Owns the game objects and drives them frame by frame."""

    def __init__(self, view: View, rng: random.Random | None = None) -> None:
        self._view = view
        self._rng = rng
        self.status = True
        self.objects: list[GameObject] = [player_object(rng)]
        self.objects.extend(random_object(rng) for _ in range(5))

    @property
    def player(self) -> GameObject:
        return self.objects[0]

    def collision(self) -> bool:
        """Whether the player shares a position with any other object."""
        return any(obj.position == self.player.position for obj in self.objects[1:])

    def handle_input(self, key: int | None) -> None:
        """Steer the player; every steering key also spawns a new obstacle."""
        if key is None or key < 0:
            return
        direction = _MOVES.get(chr(key).lower())
        if direction is None:
            return
        self.player.direction = direction
        self.objects.append(random_object_avoiding(self.player.position, self._rng))

    def step(self, key: int | None) -> bool:
        """Run one frame with the given key; return False when the game ends."""
        if key == ESCAPE:
            return False
        if self.collision():
            self.status = False
            return False
        self.handle_input(key)
        self._view.reset_latest()
        for obj in self.objects:
            obj.update()
            self._view.draw(obj)
        self._view.render()
        return True

    def run(self) -> None:
        """Play until escape is pressed or the player collides."""
        with raw_terminal():
            while True:
                start = time.monotonic()
                if not self.step(read_input()):
                    break
                elapsed = time.monotonic() - start
                if elapsed < SPF:
                    time.sleep(SPF - elapsed)


@contextmanager
def raw_terminal() -> Iterator[None]:
    """Put stdin in non-canonical, no-echo, non-blocking mode and hide the cursor."""
    try:
        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
    except (OSError, ValueError, AttributeError, termios.error):
        saved = None

    if saved is None:
        yield
        return

    new = list(saved)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    cc = list(new[6])
    cc[termios.VMIN] = 0
    cc[termios.VTIME] = 0
    new[6] = cc
    termios.tcsetattr(fd, termios.TCSANOW, new)
    sys.stdout.write("\x1b[?25l")
    sys.stdout.flush()
    try:
        yield
    finally:
        sys.stdout.write("\x1b[m\x1b[?25h")
        sys.stdout.flush()
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def read_input() -> int | None:
    """Return the last byte waiting on stdin, or None if nothing is waiting."""
    sys.stdout.flush()
    try:
        fd = sys.stdin.fileno()
        ready, _, _ = select.select([fd], [], [], 0)
        if not ready:
            return None
        data = os.read(fd, 4096)
    except (OSError, ValueError, AttributeError):
        return None
    return data[-1] if data else None