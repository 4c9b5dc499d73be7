"""Pinhole camera: the viewport a camera sees and the rays through it."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.scene import HEIGHT, WIDTH, Camera
from minirt.vector import Ray, Vec3

_VERTICAL_LIMIT = 0.999


@dataclass(frozen=True)
class CameraFrame:
    """A camera's viewport one unit in front of it, ready for casting rays."""

    pos: Vec3
    dir: Vec3
    right: Vec3
    up: Vec3
    lower_left: Vec3
    vp_width: float
    vp_height: float

    def ray(self, u: float, v: float) -> Ray:
        """Ray through the viewport point at fractions ``u`` (right) and ``v`` (up)."""
        point = self.lower_left + self.right * (u * self.vp_width) + self.up * (v * self.vp_height)
        return Ray(self.pos, (point - self.pos).normalized())


def setup_camera(camera: Camera, width: int = WIDTH, height: int = HEIGHT) -> CameraFrame:
    """Build the viewport of ``camera`` for an image of ``width`` by ``height`` pixels."""
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")
    theta = camera.fov * math.pi / 180.0
    half = math.tan(theta / 2.0)
    vp_height = 2.0 * half
    vp_width = vp_height * (width / height)
    world_up = Vec3(0.0, 1.0, 0.0)
    if abs(camera.dir.dot(world_up)) > _VERTICAL_LIMIT:
        world_up = Vec3(0.0, 0.0, 1.0)
    right = camera.dir.cross(world_up).normalized()
    up = right.cross(camera.dir)
    lower_left = camera.pos - right * (vp_width / 2.0) - up * (vp_height / 2.0) + camera.dir
    return CameraFrame(
        pos=camera.pos,
        dir=camera.dir,
        right=right,
        up=up,
        lower_left=lower_left,
        vp_width=vp_width,
        vp_height=vp_height,
    )