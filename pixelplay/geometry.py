"""Small geometric value types shared by the games."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple


class Color(NamedTuple):
    """An opaque RGB colour."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Vector2:
    """A two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction, or the zero vector."""
        mag = self.magnitude()
        if mag == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}"


@dataclass
class Rect:
    """An axis-aligned rectangle with float position and size."""

    x: float
    y: float
    w: float
    h: float

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.w / 2, self.y + self.h / 2)


def check_collision(r1: Rect, r2: Rect) -> bool:
    """Return True when the two rectangles overlap; touching edges do not count."""
    return (
        r1.x + r1.w > r2.x
        and r1.x < r2.x + r2.w
        and r1.y + r1.h > r2.y
        and r1.y < r2.y + r2.h
    )