"""Builders for each kind of scene line: A, C, L, sp, pl and cy."""

from __future__ import annotations

from collections.abc import Sequence

from minirt.scene import Ambient, Camera, Cylinder, Light, Plane, Scene, SceneError, Sphere
from minirt.values import parse_color, parse_float, parse_vec3, validate_normal


def _check_params(parts: Sequence[str], count: int, label: str, missing: str) -> None:
    """Require exactly ``count`` non-empty parameters after the identifier."""
    if len(parts) < count + 1:
        raise SceneError(missing)
    if not all(parts[1 : count + 1]):
        raise SceneError(f"{label}: empty parameters")
    if len(parts) > count + 1:
        raise SceneError(f"{label}: too many parameters")


def parse_ambient(scene: Scene, parts: Sequence[str]) -> None:
    """Set the ambient light from ``A ratio R,G,B``."""
    if scene.ambient is not None:
        raise SceneError("Duplicate ambient light")
    _check_params(parts, 2, "Ambient", "Ambient: missing parameters (A ratio R,G,B)")
    ratio = parse_float(parts[1])
    color = parse_color(parts[2])
    if not 0.0 <= ratio <= 1.0:
        raise SceneError("Ambient ratio must be [0.0, 1.0]")
    scene.ambient = Ambient(ratio, color)


def parse_camera(scene: Scene, parts: Sequence[str]) -> None:
    """Set the camera from ``C x,y,z dx,dy,dz fov``."""
    if scene.camera is not None:
        raise SceneError("Duplicate camera")
    _check_params(parts, 3, "Camera", "Camera: missing parameters (C x,y,z dx,dy,dz fov)")
    pos = parse_vec3(parts[1])
    direction = validate_normal(parse_vec3(parts[2]), "Camera direction must be normalized")
    fov = parse_float(parts[3])
    if not 0.0 <= fov <= 180.0:
        raise SceneError("FOV must be [0, 180]")
    scene.camera = Camera(pos, direction.normalized(), fov)


def parse_light(scene: Scene, parts: Sequence[str]) -> None:
    """Set the light from ``L x,y,z ratio [R,G,B]``; the colour defaults to white."""
    if scene.light is not None:
        raise SceneError("Duplicate light")
    if len(parts) < 3:
        raise SceneError("Light: missing parameters (L x,y,z ratio [R,G,B])")
    if not parts[1] or not parts[2]:
        raise SceneError("Light: empty parameters")
    if len(parts) > 4:
        raise SceneError("Light: too many parameters")
    pos = parse_vec3(parts[1])
    ratio = parse_float(parts[2])
    light = Light(pos, ratio)
    if len(parts) == 4 and parts[3]:
        light.color = parse_color(parts[3])
    if not 0.0 <= ratio <= 1.0:
        raise SceneError("Light ratio must be [0.0, 1.0]")
    scene.light = light


def parse_sphere(scene: Scene, parts: Sequence[str]) -> None:
    """Add a sphere from ``sp x,y,z diameter R,G,B``."""
    _check_params(parts, 3, "Sphere", "Sphere: missing parameters (sp x,y,z diameter R,G,B)")
    center = parse_vec3(parts[1])
    diameter = parse_float(parts[2])
    if diameter <= 0.0:
        raise SceneError("Sphere diameter must be positive")
    color = parse_color(parts[3])
    scene.add_object(Sphere(center, diameter, color))


def parse_plane(scene: Scene, parts: Sequence[str]) -> None:
    """Add a plane from ``pl x,y,z nx,ny,nz R,G,B``."""
    _check_params(parts, 3, "Plane", "Plane: missing params (pl x,y,z nx,ny,nz R,G,B)")
    point = parse_vec3(parts[1])
    normal = validate_normal(parse_vec3(parts[2]), "Plane normal must be normalized")
    color = parse_color(parts[3])
    scene.add_object(Plane(point, normal.normalized(), color))


def parse_cylinder(scene: Scene, parts: Sequence[str]) -> None:
    """Add a cylinder from ``cy x,y,z ax,ay,az diameter height R,G,B``."""
    _check_params(parts, 5, "Cylinder", "Cylinder: missing params (cy x,y,z ax,ay,az d h R,G,B)")
    center = parse_vec3(parts[1])
    axis = validate_normal(parse_vec3(parts[2]), "Cylinder axis must be normalized")
    diameter = parse_float(parts[3])
    height = parse_float(parts[4])
    if diameter <= 0.0 or height <= 0.0:
        raise SceneError("Cylinder diameter and height must be positive")
    color = parse_color(parts[5])
    scene.add_object(Cylinder(center, axis.normalized(), diameter, height, color))