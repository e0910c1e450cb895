"""The falling-blocks game: state, input handling, drawing and the window loop."""

from __future__ import annotations

import argparse
import random

import pygame

from pixelplay.geometry import Color, Rect
from pixelplay.tetris import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Block,
    Shape,
    Tetromino,
    make_tetromino,
    random_tetromino,
)

REFRESH_TIME = 1.0 / 60.0
BACKGROUND = Color(111, 143, 120)

_LEFT_KEYS = frozenset({pygame.K_a, pygame.K_LEFT})
_RIGHT_KEYS = frozenset({pygame.K_d, pygame.K_RIGHT})


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h))


class TetrisGame:
    """Game state: the falling piece and the blocks already placed."""

    def __init__(self, rng: random.Random | None = None, now: float = 0.0) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.current: Tetromino = make_tetromino(Shape.L)
        self.placed: list[Block] = []
        self.last_time = now
        self.refresh_time = REFRESH_TIME
        self.score = 0

    def handle_key(self, key: int) -> bool:
        """React to a key press; return False when the game should end."""
        if key == pygame.K_ESCAPE:
            return False
        if key in _LEFT_KEYS:
            self.current.move_left(self.placed)
        elif key in _RIGHT_KEYS:
            self.current.move_right(self.placed)
        return True

    def update(self, now: float) -> None:
        """Advance the game to time ``now`` in seconds."""
        if self.last_time + self.refresh_time < now:
            self.last_time = now
            self.current.fall()
            self.current.check_collisions(self.placed)
        self.place_if_fallen()

    def place_if_fallen(self) -> bool:
        """Move a landed piece into the placed blocks and spawn a new one."""
        if not self.current.has_fallen():
            return False
        self.placed.extend(self.current.blocks)
        self.current = random_tetromino(self.rng)
        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current state onto ``surface``."""
        surface.fill(BACKGROUND)
        for block in self.current.blocks:
            pygame.draw.rect(surface, block.color, _to_pygame(block.rect))
        for block in self.placed:
            pygame.draw.rect(surface, block.color, _to_pygame(block.rect))


def main(argv: list[str] | None = None) -> int:
    """Open a window and play until Escape or the window is closed."""
    parser = argparse.ArgumentParser(
        prog="tetris", description="Steer falling blocks with A/D or the arrow keys."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Tetris")
        game = TetrisGame(now=pygame.time.get_ticks() / 1000.0)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and not game.handle_key(event.key):
                    running = False
            game.update(pygame.time.get_ticks() / 1000.0)
            game.draw(screen)
            pygame.display.flip()
            clock.tick(120)
    finally:
        pygame.quit()
    return 0