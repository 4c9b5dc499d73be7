"""Ray intersection with spheres, planes and finite cylinders."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.color import Color
from minirt.scene import EPSILON, Cylinder, Plane, SceneObject, Sphere
from minirt.vector import Ray, Vec3


@dataclass(frozen=True)
class Hit:
    """Where a ray meets a surface."""

    t: float
    point: Vec3
    normal: Vec3
    color: Color


def _roots(a: float, b: float, c: float) -> tuple[float, float] | None:
    """Both roots of a*t^2 + b*t + c, nearest first, or None."""
    if a == 0:
        return None
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    return (-b - root) / (2.0 * a), (-b + root) / (2.0 * a)


def hit_sphere(ray: Ray, sphere: Sphere, t_min: float) -> Hit | None:
    """Nearest hit on the sphere at or beyond ``t_min``."""
    radius = sphere.diameter / 2.0
    oc = ray.origin - sphere.center
    roots = _roots(
        ray.direction.dot(ray.direction),
        2.0 * oc.dot(ray.direction),
        oc.dot(oc) - radius * radius,
    )
    if roots is None:
        return None
    t = next((root for root in roots if root >= t_min), None)
    if t is None:
        return None
    point = ray.at(t)
    return Hit(t, point, (point - sphere.center).normalized(), sphere.color)


def hit_plane(ray: Ray, plane: Plane, t_min: float) -> Hit | None:
    """Hit on the plane, with the normal turned to face the ray."""
    denom = ray.direction.dot(plane.normal)
    if abs(denom) < EPSILON:
        return None
    t = (plane.point - ray.origin).dot(plane.normal) / denom
    if t < t_min:
        return None
    normal = plane.normal
    if ray.direction.dot(normal) > 0:
        normal = -normal
    return Hit(t, ray.at(t), normal, plane.color)


def hit_cylinder(ray: Ray, cylinder: Cylinder, t_min: float) -> Hit | None:
    """Nearest hit on the cylinder's side; it has no caps.

    The cylinder starts at ``center`` and extends ``height`` along ``axis``.
    """
    axis = cylinder.axis
    oc = ray.origin - cylinder.center
    dir_axis = ray.direction.dot(axis)
    oc_axis = oc.dot(axis)
    roots = _roots(
        ray.direction.dot(ray.direction) - dir_axis**2,
        2 * (ray.direction.dot(oc) - dir_axis * oc_axis),
        oc.dot(oc) - oc_axis**2 - (cylinder.diameter / 2.0) ** 2,
    )
    if roots is None:
        return None
    for t in roots:
        m = dir_axis * t + oc_axis
        if t >= t_min and 0 <= m <= cylinder.height:
            point = ray.at(t)
            normal = (point - cylinder.center - axis * m).normalized()
            return Hit(t, point, normal, cylinder.color)
    return None


def intersect(ray: Ray, obj: SceneObject, t_min: float) -> Hit | None:
    """Hit on any scene object, dispatched on its kind."""
    if isinstance(obj, Sphere):
        return hit_sphere(ray, obj, t_min)
    if isinstance(obj, Plane):
        return hit_plane(ray, obj, t_min)
    if isinstance(obj, Cylinder):
        return hit_cylinder(ray, obj, t_min)
    raise TypeError(f"cannot intersect {obj!r}")