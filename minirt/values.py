"""Parsing of the scalar, vector and colour fields of a scene line."""

from __future__ import annotations

import re

from minirt.color import Color
from minirt.scene import EPSILON, SceneError
from minirt.vector import Vec3

_SPACE = " \t\n\r"
_NUMBER = re.compile(r"[ \t\n\r]*([+-]?)([0-9]*)(?:\.([0-9]+))?[ \t\n\r]*")


def parse_float(text: str | None) -> float:
    """Read a decimal number such as ``-12.5`` or ``.25``.

    Surrounding whitespace is allowed; exponents, a trailing dot and a
    sign separated from its digits are not.
    """
    match = _NUMBER.fullmatch(text) if text is not None else None
    if match is None:
        raise SceneError("Invalid number format")
    sign, whole, fraction = match.groups()
    if not whole and not fraction:
        raise SceneError("Invalid number format")
    result = 0.0
    for digit in whole:
        result = result * 10 + int(digit)
    decimal = 0.0
    weight = 0.1
    for digit in fraction or "":
        decimal += int(digit) * weight
        weight *= 0.1
    result += decimal
    return -result if sign == "-" else result


def _split_triplet(text: str | None, message: str) -> list[str]:
    """Three comma separated, non-empty, whitespace-trimmed fields."""
    if not text:
        raise SceneError(message)
    fields = [field.strip(_SPACE) for field in text.split(",")]
    if len(fields) != 3 or not all(fields):
        raise SceneError(message)
    return fields


def parse_vec3(text: str | None) -> Vec3:
    """Read a vector written as ``x,y,z``."""
    x, y, z = (parse_float(field) for field in _split_triplet(text, "Invalid vector format"))
    return Vec3(x, y, z)


def parse_color(text: str | None) -> Color:
    """Read a colour written as integer ``R,G,B`` in [0, 255]."""
    fields = _split_triplet(text, "Invalid color format")
    if any("." in field for field in fields):
        raise SceneError("Invalid color format")
    rgb = [int(parse_float(field)) for field in fields]
    if any(not 0 <= value <= 255 for value in rgb):
        raise SceneError("Color values must be in range [0-255]")
    red, green, blue = (value / 255.0 for value in rgb)
    return Color(red, green, blue)


def validate_normal(vec: Vec3, message: str) -> Vec3:
    """Check that ``vec`` is a (roughly) unit direction; return it unchanged.

    Each component must lie in [-1, 1] and the squared length in
    [0.9, 1.1]; ``message`` is the error reported otherwise.
    """
    if any(not -1.0 <= component <= 1.0 for component in (vec.x, vec.y, vec.z)):
        raise SceneError(message)
    magnitude = vec.length_squared()
    if magnitude < EPSILON:
        raise SceneError("Direction vector cannot be zero")
    if not 0.9 <= magnitude <= 1.1:
        raise SceneError(message)
    return vec