import math

import pytest

from algokit.vector2d import Vector2D, convex_hull


def test_modulus():
    v = Vector2D(3, 4)
    assert v.modulus() == pytest.approx(5)
    assert v.modulus_squared() == v.modulus() ** 2


def test_rotate_preserves_length_and_quarter_turn_is_orthogonal():
    v = Vector2D(2.5, -1.5)
    r = v.rotate(math.pi / 2)
    assert r.modulus() == pytest.approx(v.modulus())
    assert v.dot(r) == pytest.approx(0, abs=1e-12)
    assert v.cross(r) > 0


def test_parallel_and_cross():
    a, b = Vector2D(2, 4), Vector2D(1, 2)
    assert a.parallel(b)
    assert not a.parallel(Vector2D(1, 0))
    c = Vector2D(-3, 7)
    assert a.cross(c) == -c.cross(a)


def test_arithmetic():
    a, b = Vector2D(1, 2), Vector2D(5, -3)
    assert (a + b) - b == a
    assert a * b == a.dot(b)
    assert 3 * a == a * 3 == a + a + a


def test_slope():
    assert Vector2D(2, 6).slope() == pytest.approx(3)


def test_alpha():
    assert Vector2D(1, 0).alpha() == pytest.approx(math.pi / 2)
    assert 0 <= Vector2D(-2, 5).alpha() <= math.pi


def test_str():
    assert str(Vector2D(3, 4)) == "3 4"


def test_convex_hull_square_with_inner_points():
    corners = [Vector2D(0, 0), Vector2D(4, 0), Vector2D(4, 4), Vector2D(0, 4)]
    inner = [Vector2D(1, 1), Vector2D(2, 3), Vector2D(2, 0)]
    hull = convex_hull(inner + corners)
    assert set(hull) == set(corners)
    assert len(hull) == 4
    assert hull[0] == Vector2D(0, 0)


def test_convex_hull_contains_all_points():
    points = [Vector2D(x, (x * 7) % 11) for x in range(15)]
    hull = convex_hull(points)
    for a, b in zip(hull, hull[1:] + hull[:1]):
        for p in points:
            assert (b - a).cross(p - a) >= 0


def test_convex_hull_small_inputs():
    assert convex_hull([Vector2D(1, 1)]) == [Vector2D(1, 1)]
    assert convex_hull([]) == []