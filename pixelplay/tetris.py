"""Blocks and tetrominoes for the falling-blocks game."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from enum import Enum

from pixelplay.geometry import Color, Rect

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 1000
FALL_DISTANCE = 5
MOVE_LR_DISTANCE = 25
BLOCK_SIZE = 50.0
BLOCKS_PER_TETROMINO = 4

DEFAULT_COLOR = Color(232, 9, 20)


class Block:
    """A single square cell that falls until it lands on the floor or another block."""

    def __init__(self, x: float, y: float, color: Color = DEFAULT_COLOR) -> None:
        self.rect = Rect(float(x), float(y), BLOCK_SIZE, BLOCK_SIZE)
        self.color = color
        self._fallen = False

    @classmethod
    def spawn(cls, color: Color = DEFAULT_COLOR) -> Block:
        """Create a block centred horizontally at the top of the window."""
        return cls(WINDOW_WIDTH / 2 - BLOCK_SIZE / 2, 0.0, color)

    @property
    def x(self) -> float:
        return self.rect.x

    @property
    def y(self) -> float:
        return self.rect.y

    def __repr__(self) -> str:
        return f"Block(x={self.rect.x!r}, y={self.rect.y!r}, color={self.color!r})"

    def fall(self) -> None:
        """Drop one step unless landed; land when the next step would pass the floor."""
        if not self._fallen:
            self.rect.y += FALL_DISTANCE
        if self.rect.y + self.rect.h + FALL_DISTANCE > WINDOW_HEIGHT:
            self._fallen = True

    def has_fallen(self) -> bool:
        return self._fallen

    def _blocked_sideways(self, others: Iterable[Block]) -> bool:
        r = self.rect
        for other in others:
            o = other.rect
            if r.y + r.h >= o.y and r.y <= o.y + o.h:
                if r.x + r.w + MOVE_LR_DISTANCE > o.x and r.x - MOVE_LR_DISTANCE < o.x + o.w:
                    return True
        return False

    def can_move_left(self, others: Iterable[Block]) -> bool:
        """Return True when no other block is within one sideways step."""
        return not self._blocked_sideways(others)

    def can_move_right(self, others: Iterable[Block]) -> bool:
        """Return True when no other block is within one sideways step."""
        return not self._blocked_sideways(others)

    def check_collisions(self, others: Iterable[Block]) -> None:
        """Mark the block as landed when it touches or overlaps any other block."""
        r = self.rect
        for other in others:
            o = other.rect
            if r.y + r.h >= o.y and r.y <= o.y + o.h:
                if r.x + r.w > o.x and r.x < o.x + o.w:
                    self._fallen = True


class Tetromino:
    """A group of four blocks that fall and move together."""

    def __init__(self, blocks: Sequence[Block]) -> None:
        blocks = list(blocks)
        if len(blocks) != BLOCKS_PER_TETROMINO:
            raise ValueError(
                f"a tetromino needs {BLOCKS_PER_TETROMINO} blocks, got {len(blocks)}"
            )
        self.blocks = blocks

    def __iter__(self):
        return iter(self.blocks)

    def fall(self) -> None:
        for block in self.blocks:
            block.fall()

    def check_collisions(self, others: Iterable[Block]) -> None:
        others = list(others)
        for block in self.blocks:
            block.check_collisions(others)

    def has_fallen(self) -> bool:
        """Return True when any of the blocks has landed."""
        return any(block.has_fallen() for block in self.blocks)

    def move_left(self, others: Iterable[Block]) -> None:
        """Shift every block left one step if none of them is blocked."""
        others = list(others)
        if all(block.can_move_left(others) for block in self.blocks):
            for block in self.blocks:
                block.rect.x -= MOVE_LR_DISTANCE

    def move_right(self, others: Iterable[Block]) -> None:
        """Shift every block right one step if none of them is blocked."""
        others = list(others)
        if all(block.can_move_right(others) for block in self.blocks):
            for block in self.blocks:
                block.rect.x += MOVE_LR_DISTANCE


class Shape(Enum):
    """The tetromino shapes, in the order a random pick chooses them."""

    Z = "Z"
    L = "L"
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741


SHAPE_COLORS = {
    Shape.Z: Color(232, 9, 20),
    Shape.L: Color(245, 161, 66),
    Shape.I: Color(108, 207, 235),
    Shape.O: Color(211, 227, 32),
}

# Cell offsets, in block units, from the spawn position.
_SHAPE_CELLS = {
    Shape.Z: ((0, 0), (1, 0), (1, 1), (2, 1)),
    Shape.L: ((0, 0), (0, 1), (0, 2), (1, 2)),
    Shape.I: ((0, 0), (0, 1), (0, 2), (0, 3)),
    Shape.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
}


def make_tetromino(shape: Shape | str) -> Tetromino:
    """Build a tetromino of the given shape at the spawn position."""
    shape = Shape(shape)
    color = SHAPE_COLORS[shape]
    origin = Block.spawn(color)
    blocks = [
        Block(origin.x + dx * BLOCK_SIZE, origin.y + dy * BLOCK_SIZE, color)
        for dx, dy in _SHAPE_CELLS[shape]
    ]
    return Tetromino(blocks)


def random_tetromino(rng: random.Random | None = None) -> Tetromino:
    """Build a tetromino of a randomly chosen shape."""
    rng = rng if rng is not None else random.Random()
    shapes = list(Shape)
    return make_tetromino(shapes[rng.randrange(len(shapes))])