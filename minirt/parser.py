"""Reading scene files: line splitting, dispatch and whole-scene checks."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence

from minirt.elements import (
    parse_ambient,
    parse_camera,
    parse_cylinder,
    parse_light,
    parse_plane,
    parse_sphere,
)
from minirt.scene import Scene, SceneError

_SPACE = " \t\n\r"
_EXTENSION = ".rt"

_BUILDERS: dict[str, Callable[[Scene, Sequence[str]], None]] = {
    "A": parse_ambient,
    "C": parse_camera,
    "L": parse_light,
    "sp": parse_sphere,
    "pl": parse_plane,
    "cy": parse_cylinder,
}


def has_scene_extension(filename: str | os.PathLike[str] | None) -> bool:
    """True for names of at least four characters ending in ``.rt``."""
    if filename is None:
        return False
    name = os.fspath(filename)
    return len(name) >= 4 and name.endswith(_EXTENSION)


def is_blank(text: str) -> bool:
    """True when ``text`` holds only spaces, tabs, newlines and carriage returns."""
    return all(ch in _SPACE for ch in text)


def parse_line(scene: Scene, line: str) -> None:
    """Apply one scene line to ``scene``.

    Empty lines and lines starting with ``#`` are ignored. Tabs count as
    spaces, trailing whitespace is dropped and fields are separated by runs
    of spaces.
    """
    if not line or line[0] in "\n#":
        return
    cleaned = line.replace("\t", " ").rstrip(_SPACE)
    if not cleaned:
        return
    parts = [part for part in cleaned.split(" ") if part]
    if not parts:
        return
    builder = _BUILDERS.get(parts[0])
    if builder is None:
        raise SceneError("Invalid identifier (expected: A, C, L, sp, pl, cy)")
    builder(scene, parts)


def _validate(scene: Scene) -> None:
    if scene.ambient is None or scene.camera is None or scene.light is None:
        raise SceneError("Missing required elements (A, C, L)")
    if not scene.objects:
        raise SceneError("Scene must contain at least one object (sp, pl, cy)")


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build and validate a scene from its lines, in order."""
    scene = Scene()
    for line in lines:
        parse_line(scene, line)
    _validate(scene)
    return scene


def _read_text(path: str | os.PathLike[str]) -> str:
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except IsADirectoryError as exc:
        raise SceneError("Cannot read file") from exc
    except FileNotFoundError as exc:
        raise SceneError("Cannot open file") from exc
    except PermissionError as exc:
        raise SceneError("Cannot open file") from exc
    except OSError as exc:
        raise SceneError("Cannot read file") from exc
    return data.decode("utf-8", errors="surrogateescape")


def parse_scene(path: str | os.PathLike[str]) -> Scene:
    """Read, parse and validate the ``.rt`` scene file at ``path``."""
    if not has_scene_extension(path):
        raise SceneError("File must have .rt extension")
    text = _read_text(path)
    if is_blank(text):
        raise SceneError("Empty scene")
    return parse_lines(text.split("\n"))