"""Player, bullets and enemies for the top-down shooter."""

from __future__ import annotations

import random

from pixelplay.geometry import Color, Rect, Vector2

WINDOW_WIDTH = 1500
WINDOW_HEIGHT = 1200

BULLET_SIZE = 20.0
BULLET_SPEED = 20.0
BULLET_COLOR = Color(89, 4, 9)

ENEMY_SIZE = 80.0
ENEMY_COLOR = Color(43, 39, 102)

PLAYER_SIZE = 50.0
PLAYER_COLOR = Color(207, 235, 52)
RIFLE_COLOR = Color(235, 156, 52)
RIFLE_LENGTH = 80.0
RIFLE_THICKNESS = 10
MOVE_FRACTION = 2.0 / 100.0


class Bullet:
    """A square projectile flying in a straight line from where it was fired."""

    def __init__(self, spawn: Vector2, aim: Vector2) -> None:
        self.position = spawn
        self.direction = (aim - spawn).normalized()
        self.width = BULLET_SIZE
        self.speed = BULLET_SPEED
        self.color = BULLET_COLOR

    @property
    def rect(self) -> Rect:
        """The square the bullet covers, centred on its position."""
        half = self.width / 2
        return Rect(self.position.x - half, self.position.y - half, self.width, self.width)

    def move(self) -> None:
        """Advance one step along the firing direction."""
        self.position = self.position + self.direction * self.speed


class Enemy:
    """A square enemy placed at a random point along one of the window edges."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.width = ENEMY_SIZE
        self.color = ENEMY_COLOR
        self.velocity = Vector2(0.0, 0.0)
        side = rng.randrange(4)
        if side == 0:  # top
            self.position = Vector2(float(rng.randrange(WINDOW_WIDTH)), 0.0)
        elif side == 1:  # bottom
            x = float(rng.randrange(WINDOW_WIDTH))
            self.position = Vector2(x, WINDOW_HEIGHT - self.width)
        elif side == 2:  # left
            self.position = Vector2(0.0, float(rng.randrange(WINDOW_HEIGHT)))
        else:  # right
            y = float(rng.randrange(WINDOW_HEIGHT))
            self.position = Vector2(WINDOW_WIDTH - self.width, y)

    @property
    def rect(self) -> Rect:
        """The square the enemy covers, with its position as the top-left corner."""
        return Rect(self.position.x, self.position.y, self.width, self.width)

    def move(self) -> None:
        """Advance by the enemy's velocity, which is zero unless set."""
        self.position = self.position + self.velocity


class Player:
    """The player's square body and the rifle that points at the mouse."""

    def __init__(self) -> None:
        self.width = PLAYER_SIZE
        self.body = Rect(
            WINDOW_WIDTH / 2 - self.width / 2,
            WINDOW_HEIGHT / 2 - self.width / 2,
            self.width,
            self.width,
        )
        self.body_color = PLAYER_COLOR
        self.rifle_color = RIFLE_COLOR
        self.rifle_direction = Vector2(0.0, 0.0)
        self.rifle_begin = Vector2(0.0, 0.0)
        self._rifle_end = Vector2(0.0, 0.0)
        self.rifle_length = RIFLE_LENGTH
        self.rifle_thickness = RIFLE_THICKNESS
        self.move_fraction = MOVE_FRACTION

    @property
    def rifle_end(self) -> Vector2:
        """The muzzle point of the rifle, where bullets appear."""
        return self._rifle_end

    @property
    def position(self) -> Vector2:
        """The centre of the player's body."""
        return self.body.center

    def move(self, mouse: Vector2) -> None:
        """Aim the rifle at ``mouse`` and drift the body a fraction of the way there."""
        self._aim(mouse)
        self._drift(mouse)

    def _aim(self, mouse: Vector2) -> None:
        center = self.position
        self.rifle_direction = (mouse - center).normalized()
        self.rifle_begin = center
        self._rifle_end = center + self.rifle_direction * self.rifle_length

    def _drift(self, mouse: Vector2) -> None:
        delta = mouse - self.position
        self.body.x += delta.x * self.move_fraction
        self.body.y += delta.y * self.move_fraction

    def rifle_lines(self) -> list[tuple[Vector2, Vector2]]:
        """Parallel line segments that together draw the thick rifle barrel."""
        perpendicular = Vector2(-self.rifle_direction.y, self.rifle_direction.x)
        lines = []
        for step in range(-self.rifle_thickness, self.rifle_thickness + 1):
            offset = perpendicular * step
            lines.append((self.rifle_begin + offset, self._rifle_end + offset))
        return lines