import pytest

from rtype_engine.vector import Rect, Vector2


def test_create_int_vector():
    vector = Vector2(0, 0)
    assert (vector.x, vector.y) == (0, 0)


def test_int_vector_null_length():
    assert Vector2(0, 0).length() == 0


def test_int_vector_length_0_5():
    assert Vector2(0, 5).length() == 5.0


def test_int_vector_length_42_0():
    assert Vector2(42, 0).length() == 42.0


def test_normalize_gives_unit_length():
    assert Vector2(3.0, -7.0).normalize().length() == pytest.approx(1.0)


def test_normalize_zero_vector_stays_zero():
    assert Vector2(0, 0).normalize() == Vector2(0.0, 0.0)


def test_arithmetic():
    a = Vector2(1, 2)
    b = Vector2(3, 5)
    assert a + b - b == a
    assert a * 3 == Vector2(3, 6)
    assert 2 * a == a + a


def test_in_place_add_rebinds():
    v = Vector2(0.0, 0.0)
    v += Vector2(0.0, -1.0)
    assert v == Vector2(0.0, -1.0)


def test_rect_collides_with_point_inside():
    hitbox = Rect(0, 0, 10, 10)
    assert hitbox.is_colliding(Vector2(100, 100), Rect(0, 0, 1, 1), Vector2(105, 105))


def test_rect_misses_point_outside():
    hitbox = Rect(0, 0, 10, 10)
    assert not hitbox.is_colliding(Vector2(100, 100), Rect(0, 0, 1, 1), Vector2(120, 105))


def test_rect_collision_is_symmetric():
    a, b = Rect(0, 0, 4, 4), Rect(1, 1, 2, 2)
    pa, pb = Vector2(3, 0), Vector2(5, 2)
    assert a.is_colliding(pa, b, pb) == b.is_colliding(pb, a, pa)