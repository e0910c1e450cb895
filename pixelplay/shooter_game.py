"""The shooter game: state, input handling, drawing and the window loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from pixelplay.geometry import Color, Rect, Vector2
from pixelplay.shooter import WINDOW_HEIGHT, WINDOW_WIDTH, Bullet, Enemy, Player

REFRESH_TIME = 1.0 / 60.0
SHOOT_INTERVAL = 0.7
CLEAR_INTERVAL = 3.5
ENEMY_COUNT = 100
BACKGROUND = Color(111, 143, 120)


def _to_pygame(rect: Rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h))


def _as_vector(point: Vector2 | Sequence[float]) -> Vector2:
    if isinstance(point, Vector2):
        return point
    x, y = point
    return Vector2(float(x), float(y))


class ShooterGame:
    """Game state: the player, the bullets in flight and the enemies."""

    def __init__(self, rng: random.Random | None = None, now: float = 0.0) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player = Player()
        self.bullets: list[Bullet] = []
        self.enemies = [Enemy(self.rng) for _ in range(ENEMY_COUNT)]
        self.last_time = now
        self.last_shot_time = now
        self.last_clear_time = now
        self.refresh_time = REFRESH_TIME
        self.shoot_interval = SHOOT_INTERVAL
        self.clear_interval = CLEAR_INTERVAL
        self.score = 0

    def handle_key(self, key: int) -> bool:
        """React to a key press; return False when the game should end."""
        return key != pygame.K_ESCAPE

    def update(
        self,
        now: float,
        mouse: Vector2 | Sequence[float],
        pressed: bool = False,
    ) -> None:
        """Advance to time ``now`` given the mouse position and left-button state."""
        if not self.last_time + self.refresh_time < now:
            return
        self.last_time = now
        mouse = _as_vector(mouse)

        self.player.move(mouse)
        for bullet in self.bullets:
            bullet.move()

        if pressed and self.last_shot_time + self.shoot_interval < now:
            self.last_shot_time = now
            self.bullets.append(Bullet(self.player.rifle_end, mouse))

        if self.last_clear_time + self.clear_interval < now:
            self.last_clear_time = now
            if self.bullets:
                self.bullets.pop(0)

        for enemy in self.enemies:
            enemy.move()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current state onto ``surface``."""
        surface.fill(BACKGROUND)
        for bullet in self.bullets:
            pygame.draw.rect(surface, bullet.color, _to_pygame(bullet.rect))
        player = self.player
        for begin, end in player.rifle_lines():
            pygame.draw.line(surface, player.rifle_color, (begin.x, begin.y), (end.x, end.y))
        pygame.draw.rect(surface, player.body_color, _to_pygame(player.body))
        for enemy in self.enemies:
            pygame.draw.rect(surface, enemy.color, _to_pygame(enemy.rect))


def main(argv: list[str] | None = None) -> int:
    """Open a window and play until Escape or the window is closed."""
    parser = argparse.ArgumentParser(
        prog="shooter", description="Steer with the mouse, shoot with the left button."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("KillerMachine")
        game = ShooterGame(now=pygame.time.get_ticks() / 1000.0)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and not game.handle_key(event.key):
                    running = False
            pressed = pygame.mouse.get_pressed()[0]
            game.update(pygame.time.get_ticks() / 1000.0, pygame.mouse.get_pos(), pressed)
            game.draw(screen)
            pygame.display.flip()
            clock.tick(120)
    finally:
        pygame.quit()
    return 0