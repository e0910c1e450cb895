"""Snake and food pieces for the snake game."""

from __future__ import annotations

import random
from dataclasses import replace
from enum import Enum

from pixelplay.geometry import Rect

SEGMENT_SIZE = 50.0
START_COORD = 100.0


class Direction(Enum):
    """Movement direction, keyed by the WASD letter that selects it."""

    UP = "W"
    LEFT = "A"
    DOWN = "S"
    RIGHT = "D"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
}


class Snake:
    """A snake made of square segments; the first segment is the head."""

    def __init__(self) -> None:
        self.direction = Direction.RIGHT
        self.width = SEGMENT_SIZE
        self.move_distance = SEGMENT_SIZE
        head = Rect(START_COORD, START_COORD, self.width, self.width)
        tail = Rect(head.x - self.width, head.y, self.width, self.width)
        self._body = [head, tail]
        self._previous = self._snapshot()

    def _snapshot(self) -> list[Rect]:
        return [replace(segment) for segment in self._body]

    @property
    def head(self) -> Rect:
        """A copy of the head segment."""
        return replace(self._body[0])

    @property
    def body(self) -> list[Rect]:
        """Copies of all segments, head first."""
        return self._snapshot()

    @property
    def length(self) -> int:
        return len(self._body)

    def set_direction(self, direction: Direction | str) -> None:
        """Set the direction of the next moves; accepts a Direction or W/A/S/D."""
        self.direction = Direction(direction)

    def move(self) -> None:
        """Advance the head one step; every other segment takes its leader's place."""
        dx, dy = self.direction.delta
        head = self._body[0]
        head.x += dx * self.move_distance
        head.y += dy * self.move_distance
        for index in range(1, len(self._body)):
            self._body[index] = replace(self._previous[index - 1])
        self._previous = self._snapshot()

    def grow(self) -> None:
        """Add a segment on top of the current tail."""
        self._body.append(replace(self._body[-1]))


class Food:
    """A square piece of food placed at a random position."""

    def __init__(
        self,
        window_w: float,
        window_h: float,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.width = SEGMENT_SIZE
        x = rng.randrange(int(window_w))
        y = rng.randrange(int(window_h))
        self.body = Rect(float(x), float(y), self.width, self.width)