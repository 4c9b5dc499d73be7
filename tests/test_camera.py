import math

import pytest

from minirt.camera import setup_camera
from minirt.scene import Camera
from minirt.vector import Vec3


def _xyz(v: Vec3) -> tuple:
    return (v.x, v.y, v.z)


def _camera(direction=Vec3(0.0, 0.0, -1.0), fov=70.0, pos=Vec3(1.0, 2.0, 3.0)):
    return Camera(pos, direction, fov)


def test_centre_ray_follows_camera_direction():
    camera = _camera()
    frame = setup_camera(camera, 80, 60)
    ray = frame.ray(0.5, 0.5)
    assert _xyz(ray.direction) == pytest.approx(_xyz(camera.dir), abs=1e-9)


def test_rays_start_at_camera_position():
    camera = _camera()
    frame = setup_camera(camera, 80, 60)
    assert frame.ray(0.1, 0.9).origin == camera.pos


def test_right_is_unit_and_perpendicular():
    camera = _camera(Vec3(0.6, 0.0, -0.8))
    frame = setup_camera(camera, 80, 60)
    assert frame.right.length() == pytest.approx(1.0)
    assert frame.right.dot(camera.dir) == pytest.approx(0.0, abs=1e-12)
    assert frame.up.dot(camera.dir) == pytest.approx(0.0, abs=1e-12)


def test_viewport_keeps_image_aspect():
    frame = setup_camera(_camera(), 800, 600)
    assert frame.vp_width / frame.vp_height == pytest.approx(800 / 600)


def test_ninety_degree_field_of_view():
    frame = setup_camera(_camera(fov=90.0), 10, 10)
    assert frame.vp_height == pytest.approx(2.0)


def test_vertical_direction_still_has_a_basis():
    camera = _camera(Vec3(0.0, 1.0, 0.0))
    frame = setup_camera(camera, 40, 30)
    assert frame.right.length() == pytest.approx(1.0)
    assert frame.right.dot(camera.dir) == pytest.approx(0.0, abs=1e-12)
    assert all(math.isfinite(c) for c in (frame.up.x, frame.up.y, frame.up.z))


def test_lower_left_corner_ray():
    camera = _camera()
    frame = setup_camera(camera, 80, 60)
    expected = (frame.lower_left - camera.pos).normalized()
    direction = frame.ray(0.0, 0.0).direction
    assert _xyz(direction) == pytest.approx(_xyz(expected), abs=1e-9)


def test_opposite_corners_are_symmetric_about_direction():
    camera = _camera(Vec3(0.0, 0.6, -0.8))
    frame = setup_camera(camera, 80, 60)
    total = frame.ray(0.0, 0.0).direction + frame.ray(1.0, 1.0).direction
    assert _xyz(total.normalized()) == pytest.approx(_xyz(camera.dir), abs=1e-9)


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 5)])
def test_rejects_non_positive_size(width, height):
    with pytest.raises(ValueError):
        setup_camera(_camera(), width, height)