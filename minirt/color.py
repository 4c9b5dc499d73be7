"""Linear RGB colours with components nominally in [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class Color:
    """An immutable RGB colour of floats."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Color | float) -> Color:
        """Componentwise product with a colour, or scaling by a number."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    __rmul__ = __mul__

    def clamped(self) -> Color:
        """Each component limited to [0, 1]."""
        return Color(_clamp_unit(self.r), _clamp_unit(self.g), _clamp_unit(self.b))

    def to_int(self) -> int:
        """Packed 0xRRGGBB value of the clamped colour."""
        c = self.clamped()
        red = int(c.r * 255)
        green = int(c.g * 255)
        blue = int(c.b * 255)
        return red << 16 | green << 8 | blue