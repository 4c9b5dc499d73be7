"""Scene description: lights, camera and the objects to render."""

from __future__ import annotations

from dataclasses import dataclass, field

from minirt.color import Color
from minirt.vector import Vec3

WIDTH = 800
HEIGHT = 600
EPSILON = 1e-6


class SceneError(Exception):
    """Raised when a scene cannot be read or is invalid."""


@dataclass
class Ambient:
    ratio: float
    color: Color


@dataclass
class Camera:
    pos: Vec3
    dir: Vec3
    fov: float


@dataclass
class Light:
    pos: Vec3
    ratio: float
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))


@dataclass
class Sphere:
    center: Vec3
    diameter: float
    color: Color


@dataclass
class Plane:
    point: Vec3
    normal: Vec3
    color: Color


@dataclass
class Cylinder:
    center: Vec3
    axis: Vec3
    diameter: float
    height: float
    color: Color


SceneObject = Sphere | Plane | Cylinder


@dataclass
class Scene:
    """Everything a render needs; objects are kept in file order."""

    ambient: Ambient | None = None
    camera: Camera | None = None
    light: Light | None = None
    objects: list[SceneObject] = field(default_factory=list)

    def add_object(self, obj: SceneObject) -> None:
        """Append a sphere, plane or cylinder to the scene."""
        if not isinstance(obj, (Sphere, Plane, Cylinder)):
            raise TypeError(f"not a scene object: {obj!r}")
        self.objects.append(obj)

    def is_complete(self) -> bool:
        """True when ambient light, camera, light and an object are present."""
        return (
            self.ambient is not None
            and self.camera is not None
            and self.light is not None
            and bool(self.objects)
        )