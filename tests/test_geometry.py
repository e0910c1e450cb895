import math

import pytest

from pixelplay.geometry import Color, Rect, Vector2, check_collision


def test_magnitude_of_3_4_triangle():
    assert Vector2(3.0, 4.0).magnitude() == pytest.approx(5.0)


def test_normalized_zero_vector_stays_zero():
    assert Vector2(0.0, 0.0).normalized() == Vector2(0.0, 0.0)


@pytest.mark.parametrize("x,y", [(3.0, 4.0), (-2.0, 7.5), (0.0, -9.0), (1e-3, 1e3)])
def test_normalized_has_unit_length_and_same_direction(x, y):
    n = Vector2(x, y).normalized()
    assert n.magnitude() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(y, x))


def test_add_then_subtract_round_trips():
    a = Vector2(1.25, -3.5)
    b = Vector2(10.0, 2.0)
    assert (a + b) - b == a


def test_multiply_then_divide_round_trips():
    a = Vector2(6.0, -2.0)
    assert (a * 4.0) / 4.0 == a


def test_scalar_multiplication_is_commutative():
    a = Vector2(2.0, 3.0)
    assert 2.0 * a == a * 2.0


def test_in_place_add_rebinds_to_sum():
    a = Vector2(1.0, 1.0)
    b = a
    a += Vector2(2.0, 3.0)
    assert a == b + Vector2(2.0, 3.0)
    assert b == Vector2(1.0, 1.0)


def test_str_format():
    assert str(Vector2(1.5, 2.0)) == "1.5, 2"


def test_color_fields():
    c = Color(207, 235, 52)
    assert (c.r, c.g, c.b) == (207, 235, 52)


def test_rect_center():
    assert Rect(100.0, 100.0, 50.0, 50.0).center == Vector2(125.0, 125.0)


def test_overlapping_rects_collide_symmetrically():
    a = Rect(0.0, 0.0, 50.0, 50.0)
    b = Rect(25.0, 25.0, 50.0, 50.0)
    assert check_collision(a, b) is True
    assert check_collision(b, a) is True


def test_touching_edges_do_not_collide():
    a = Rect(0.0, 0.0, 50.0, 50.0)
    assert check_collision(a, Rect(50.0, 0.0, 50.0, 50.0)) is False
    assert check_collision(a, Rect(0.0, 50.0, 50.0, 50.0)) is False


def test_horizontal_overlap_only_is_not_collision():
    a = Rect(0.0, 0.0, 50.0, 50.0)
    assert check_collision(a, Rect(10.0, 200.0, 50.0, 50.0)) is False


def test_identical_rects_collide():
    a = Rect(10.0, 20.0, 5.0, 5.0)
    assert check_collision(a, Rect(10.0, 20.0, 5.0, 5.0)) is True