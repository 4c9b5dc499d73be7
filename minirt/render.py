"""Ray tracing of a scene: closest hits, shadows and diffuse lighting."""

from __future__ import annotations

from minirt.camera import CameraFrame, setup_camera
from minirt.color import Color
from minirt.intersect import Hit, intersect
from minirt.scene import EPSILON, HEIGHT, WIDTH, Ambient, Light, Scene, SceneError
from minirt.vector import Ray, Vec3

_FAR = 1e30
_SHADOW_BIAS = 0.001
_MISSING = "Missing required elements (A, C, L)"


def _lights(scene: Scene) -> tuple[Ambient, Light]:
    if scene.ambient is None or scene.light is None:
        raise SceneError(_MISSING)
    return scene.ambient, scene.light


def trace_ray(ray: Ray, scene: Scene) -> Hit | None:
    """Closest hit of ``ray`` among the scene's objects, or None."""
    closest: Hit | None = None
    for obj in scene.objects:
        hit = intersect(ray, obj, EPSILON)
        limit = closest.t if closest is not None else _FAR
        if hit is not None and hit.t < limit:
            closest = hit
    return closest


def is_in_shadow(hit: Hit, scene: Scene) -> bool:
    """True when an object lies between the hit point and the light."""
    _, light = _lights(scene)
    to_light = light.pos - hit.point
    distance = to_light.length()
    shadow_ray = Ray(hit.point + hit.normal * _SHADOW_BIAS, to_light.normalized())
    for obj in scene.objects:
        blocker = intersect(shadow_ray, obj, EPSILON)
        if blocker is not None and blocker.t < distance:
            return True
    return False


def compute_lighting(hit: Hit, scene: Scene, light_dir: Vec3) -> Color:
    """Ambient plus Lambertian diffuse light at ``hit``, clamped to [0, 1]."""
    ambient, light = _lights(scene)
    ambient_part = hit.color * ambient.color * ambient.ratio
    diffuse = max(0.0, hit.normal.dot(light_dir))
    diffuse_part = hit.color * light.color * (light.ratio * diffuse)
    return (ambient_part + diffuse_part).clamped()


def trace_pixel(
    scene: Scene, frame: CameraFrame, x: int, y: int, width: int = WIDTH, height: int = HEIGHT
) -> Color:
    """Colour of pixel (``x``, ``y``) of a ``width`` by ``height`` image; row 0 is the top."""
    u = x / width
    v = 1.0 - y / height
    hit = trace_ray(frame.ray(u, v), scene)
    if hit is None:
        return Color(0.0, 0.0, 0.0)
    ambient, light = _lights(scene)
    light_dir = (light.pos - hit.point).normalized()
    if is_in_shadow(hit, scene):
        return hit.color * ambient.ratio
    return compute_lighting(hit, scene, light_dir)


def render(scene: Scene, width: int = WIDTH, height: int = HEIGHT) -> list[list[int]]:
    """Render ``scene`` to rows of packed 0xRRGGBB pixels, top row first."""
    if scene.camera is None:
        raise SceneError(_MISSING)
    frame = setup_camera(scene.camera, width, height)
    return [
        [trace_pixel(scene, frame, x, y, width, height).to_int() for x in range(width)]
        for y in range(height)
    ]