import math
import random

import pytest

from pixelplay.demos import (
    MovingPoints,
    centered_text_position,
    cycle_color,
    main,
    scattered_points,
    star_lines,
)
from pixelplay.geometry import Vector2


def test_scattered_points_count_and_bounds():
    points = scattered_points(random.Random(1), 500)
    assert len(points) == 500
    assert all(100.0 <= p.x < 700.0 and 100.0 <= p.y < 700.0 for p in points)


def test_scattered_points_deterministic_for_seed():
    first = scattered_points(random.Random(7), 20)
    second = scattered_points(random.Random(7), 20)
    assert len(first) == 20
    assert first == second
    assert first != scattered_points(random.Random(8), 20)


def test_star_lines_shape():
    lines = star_lines(random.Random(3))
    assert len(lines) == 360
    for color, start, end in lines:
        assert start == Vector2(450.0, 75.0)
        assert (end - start).magnitude() == pytest.approx(50.0)
        assert all(0 <= component <= 255 for component in color)


def test_star_first_ray_points_down():
    _, start, end = star_lines(random.Random(0))[0]
    assert end.x == pytest.approx(start.x)
    assert end.y == pytest.approx(start.y + 50.0)


def test_cycle_color_at_zero():
    assert cycle_color(0.0)[0] == pytest.approx(0.5)


@pytest.mark.parametrize("now", [0.0, 0.3, 1.7, 5.0, 123.4])
def test_cycle_color_invariants(now):
    color = cycle_color(now)
    assert all(0.0 <= c <= 1.0 for c in color)
    assert sum(color) == pytest.approx(1.5)


def test_cycle_color_is_periodic():
    a = cycle_color(1.0)
    b = cycle_color(1.0 + 2 * math.pi)
    assert a == pytest.approx(b)


def test_centered_text_position_centres_text():
    x, y = centered_text_position(800, 600, 4.0, "PapaSmurfie")
    assert 2 * x + 8 * len("PapaSmurfie") == pytest.approx(800 / 4.0)
    assert 2 * y + 8 == pytest.approx(600 / 4.0)


def test_centered_text_position_rejects_bad_scale():
    with pytest.raises(ValueError):
        centered_text_position(800, 600, 0, "x")


def test_moving_points_initial_state():
    field = MovingPoints(random.Random(2), 640, 480, 50)
    assert len(field.points) == 50
    assert len(field.speeds) == 50
    assert all(0 <= p.x < 640 and 0 <= p.y < 480 for p in field.points)
    assert all(30.0 <= s < 60.0 for s in field.speeds)


def test_moving_points_zero_elapsed_changes_nothing():
    field = MovingPoints(random.Random(4), 640, 480, 30)
    before = list(field.points)
    field.update(0.0)
    assert field.points == before


def test_moving_points_advance_diagonally():
    field = MovingPoints(random.Random(5), 640, 480, 3)
    field.points = [Vector2(10.0, 10.0)] * 3
    speeds = list(field.speeds)
    field.update(0.5)
    for point, speed in zip(field.points, speeds):
        assert point.x == pytest.approx(10.0 + 0.5 * speed)
        assert point.y == pytest.approx(point.x)
    assert field.speeds == speeds


def test_moving_points_respawn_on_edge():
    field = MovingPoints(random.Random(6), 640, 480, 40)
    field.points = [Vector2(630.0, 470.0)] * 40
    field.update(1.0)
    for point in field.points:
        assert point.x == 0.0 or point.y == 0.0
        assert 0 <= point.x < 640 and 0 <= point.y < 480
    assert all(30.0 <= s < 60.0 for s in field.speeds)


def test_moving_points_rejects_negative_count():
    with pytest.raises(ValueError):
        MovingPoints(random.Random(0), 640, 480, -1)


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["nonexistent"])