"""The snake game: state, input handling, drawing and the window loop."""

from __future__ import annotations

import argparse
import logging
import random

import pygame

from pixelplay.geometry import Color, Rect, check_collision
from pixelplay.snake import Direction, Food, Snake

log = logging.getLogger(__name__)

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
FOOD_MARGIN = 50
INITIAL_REFRESH = 0.2
SPEED_UP = 0.1

BACKGROUND = Color(0, 0, 0)
HEAD_COLOR = Color(50, 168, 82)
BODY_COLOR = Color(219, 196, 20)
FOOD_COLOR = Color(250, 0, 17)

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
}


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h))


class SnakeGame:
    """Game state for one round of snake."""

    def __init__(self, rng: random.Random | None = None, now: float = 0.0) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake()
        self.food = self._new_food()
        self.last_time = now
        self.refresh_time = INITIAL_REFRESH
        self.score = 0

    def _new_food(self) -> Food:
        return Food(WINDOW_WIDTH - FOOD_MARGIN, WINDOW_HEIGHT - FOOD_MARGIN, self.rng)

    def handle_key(self, key: int) -> bool:
        """React to a key press; return False when the game should end."""
        if key == pygame.K_ESCAPE:
            return False
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.snake.set_direction(direction)
        return True

    def update(self, now: float) -> None:
        """Advance the game to time ``now`` in seconds."""
        if now - self.refresh_time >= self.last_time:
            self.snake.move()
            self.last_time = now

        if check_collision(self.snake.head, self.food.body):
            self.score += 1
            self.food = self._new_food()
            self.snake.grow()
            self.refresh_time -= self.refresh_time * SPEED_UP
            log.debug("score %d", self.score)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current state onto ``surface``."""
        surface.fill(BACKGROUND)
        body = self.snake.body
        pygame.draw.rect(surface, HEAD_COLOR, _to_pygame(body[0]))
        for segment in body[1:]:
            pygame.draw.rect(surface, BODY_COLOR, _to_pygame(segment))
        pygame.draw.rect(surface, FOOD_COLOR, _to_pygame(self.food.body))


def main(argv: list[str] | None = None) -> int:
    """Open a window and play snake until Escape or the window is closed."""
    parser = argparse.ArgumentParser(prog="snake", description="Play snake with WASD.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake")
        game = SnakeGame(now=pygame.time.get_ticks() / 1000.0)
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