import random

import pygame
import pytest

from pixelplay.geometry import Vector2
from pixelplay.shooter import PLAYER_COLOR, WINDOW_HEIGHT, WINDOW_WIDTH
from pixelplay.shooter_game import ENEMY_COUNT, ShooterGame


@pytest.fixture
def game():
    return ShooterGame(random.Random(7), now=0.0)


MOUSE = (1000.0, 300.0)


def test_starts_with_enemies_and_no_bullets(game):
    assert len(game.enemies) == ENEMY_COUNT
    assert game.bullets == []
    assert game.score == 0


def test_escape_ends_other_keys_continue(game):
    assert game.handle_key(pygame.K_ESCAPE) is False
    assert game.handle_key(pygame.K_a) is True
    assert game.handle_key(pygame.K_LEFT) is True


def test_no_update_before_refresh(game):
    start = game.player.position
    game.update(0.001, MOUSE, True)
    assert game.player.position == start
    assert game.bullets == []


def test_update_moves_player_towards_mouse(game):
    mouse = Vector2(*MOUSE)
    before = (mouse - game.player.position).magnitude()
    game.update(0.5, MOUSE, False)
    assert (mouse - game.player.position).magnitude() < before
    assert game.last_time == 0.5


def test_shot_spawns_at_rifle_end(game):
    game.update(1.0, MOUSE, True)
    assert len(game.bullets) == 1
    assert game.bullets[0].position == game.player.rifle_end


def test_no_shot_without_button(game):
    game.update(1.0, MOUSE, False)
    assert game.bullets == []


def test_shots_limited_by_interval(game):
    game.update(1.0, MOUSE, True)
    game.update(1.5, MOUSE, True)
    assert len(game.bullets) == 1
    game.update(1.8, MOUSE, True)
    assert len(game.bullets) == 2


def test_oldest_bullet_cleared(game):
    game.update(1.0, MOUSE, True)
    game.update(2.0, MOUSE, True)
    second = game.bullets[1]
    game.update(4.0, MOUSE, False)
    assert len(game.bullets) == 1
    assert game.bullets[0] is second
    assert game.last_clear_time == 4.0


def test_enemies_hold_position(game):
    before = [enemy.position for enemy in game.enemies]
    game.update(1.0, MOUSE, False)
    assert [enemy.position for enemy in game.enemies] == before


def test_draw_paints_player_body(game):
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    game.draw(surface)
    center = game.player.position
    assert tuple(surface.get_at((int(center.x), int(center.y))))[:3] == tuple(PLAYER_COLOR)