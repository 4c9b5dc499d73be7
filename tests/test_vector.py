import math

import pytest

from minirt.vector import Ray, Vec3


def test_add_and_sub_are_inverse():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_add_componentwise():
    assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(1 + 4, 2 + 5, 3 + 6)


def test_scale_both_sides():
    v = Vec3(1.0, -2.0, 3.0)
    assert v * 2.0 == Vec3(2.0, -4.0, 6.0)
    assert 2.0 * v == v * 2.0


def test_neg_sums_to_zero():
    v = Vec3(3.0, -7.0, 0.5)
    assert v + (-v) == Vec3(0.0, 0.0, 0.0)


def test_dot_of_axes():
    x = Vec3(1, 0, 0)
    y = Vec3(0, 1, 0)
    assert x.dot(y) == 0
    assert x.dot(x) == 1


def test_cross_of_axes_gives_third_axis():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_perpendicular_to_inputs():
    a = Vec3(1.2, -3.4, 0.7)
    b = Vec3(-0.3, 2.2, 5.1)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_cross_is_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert a.cross(b) == -b.cross(a)


def test_length_matches_length_squared():
    v = Vec3(2.0, -3.0, 6.0)
    assert v.length() == pytest.approx(math.sqrt(v.length_squared()))
    assert v.length_squared() == v.dot(v)


def test_normalized_has_unit_length():
    v = Vec3(2.0, -3.0, 6.0).normalized()
    assert v.length() == pytest.approx(1.0)


def test_normalized_keeps_direction():
    v = Vec3(0.0, 0.0, 9.0)
    assert v.normalized() == Vec3(0.0, 0.0, 1.0)


def test_normalized_tiny_vector_is_zero():
    assert Vec3(1e-12, 0.0, 0.0).normalized() == Vec3(0.0, 0.0, 0.0)


def test_ray_at_zero_is_origin():
    ray = Ray(Vec3(1, 2, 3), Vec3(0, 0, 1))
    assert ray.at(0.0) == Vec3(1, 2, 3)


def test_ray_at_moves_along_direction():
    ray = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.0, 1.0, 0.0))
    assert ray.at(4.0) == Vec3(1.0, 6.0, 3.0)
    assert ray.at(-1.0) == Vec3(1.0, 1.0, 3.0)