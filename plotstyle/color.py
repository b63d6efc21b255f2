"""Color representations and the shape style built from them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "BackendColor",
    "Color",
    "RGBAColor",
    "RGBColor",
    "HSLColor",
    "ShapeStyle",
    "WHITE",
    "BLACK",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "TRANSPARENT",
]


def _to_channel(value: float) -> int:
    """Round half away from zero and saturate into the 0..255 range."""
    if math.isnan(value):
        return 0
    rounded = math.copysign(math.floor(abs(value) + 0.5), value)
    return int(min(255.0, max(0.0, rounded)))


def _clamp_unit(value: float) -> float:
    """Clamp into [0, 1]; NaN clamps to the upper bound."""
    if math.isnan(value):
        return 1.0
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class BackendColor:
    """A normalized color: an RGB triple plus an alpha value."""

    rgb: tuple[int, int, int]
    alpha: float

    def mix(self, value: float) -> BackendColor:
        """Return this color with its alpha scaled by ``value``."""
        return BackendColor(self.rgb, self.alpha * value)


class Color(ABC):
    """Any color representation."""

    @abstractmethod
    def to_backend_color(self) -> BackendColor:
        """Normalize this color to a backend color."""

    def rgb(self) -> tuple[int, int, int]:
        """The RGB triple of the color."""
        return self.to_backend_color().rgb

    def alpha(self) -> float:
        """The alpha channel of the color."""
        return self.to_backend_color().alpha

    def mix(self, value: float) -> RGBAColor:
        """Return the color with its opacity scaled by ``value``."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha() * value)

    def to_rgba(self) -> RGBAColor:
        """Convert the color into an RGBA color."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha())

    def filled(self) -> ShapeStyle:
        """A filled shape style of this color."""
        return ShapeStyle.from_color(self).as_filled()

    def stroke_width(self, width: int) -> ShapeStyle:
        """A shape style of this color with the given stroke width."""
        return ShapeStyle.from_color(self).with_stroke_width(width)


@dataclass(frozen=True)
class RGBAColor(Color):
    """A color with red, green, blue and alpha channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: float = 0.0

    def to_backend_color(self) -> BackendColor:
        return BackendColor((self.r, self.g, self.b), self.a)


@dataclass(frozen=True)
class RGBColor(Color):
    """An opaque color given by its RGB value."""

    r: int = 0
    g: int = 0
    b: int = 0

    def to_backend_color(self) -> BackendColor:
        return BackendColor((self.r, self.g, self.b), 1.0)


@dataclass(frozen=True)
class HSLColor(Color):
    """An opaque color in the HSL color space, each component in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741

    def to_backend_color(self) -> BackendColor:
        h, s, l = _clamp_unit(self.h), _clamp_unit(self.s), _clamp_unit(self.l)

        if s == 0.0:
            value = _to_channel(l * 255.0)
            return BackendColor((value, value, value), 1.0)

        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q

        def convert(t: float) -> int:
            if t < 0.0:
                t += 1.0
            if t > 1.0:
                t -= 1.0
            if t < 1.0 / 6.0:
                value = p + (q - p) * 6.0 * t
            elif t < 1.0 / 2.0:
                value = q
            elif t < 2.0 / 3.0:
                value = p + (q - p) * (2.0 / 3.0 - t) * 6.0
            else:
                value = p
            return _to_channel(value * 255.0)

        return BackendColor(
            (convert(h + 1.0 / 3.0), convert(h), convert(h - 1.0 / 3.0)), 1.0
        )


@dataclass(frozen=True)
class ShapeStyle:
    """Style of a shape: its color, whether it is filled and its stroke width."""

    color: RGBAColor
    filled: bool = False
    stroke_width: int = 1

    @classmethod
    def from_color(cls, color: Color) -> ShapeStyle:
        """An unfilled style of stroke width 1 in the given color."""
        return cls(color.to_rgba(), False, 1)

    def as_filled(self) -> ShapeStyle:
        """A filled copy of this style."""
        return ShapeStyle(self.color.to_rgba(), True, self.stroke_width)

    def with_stroke_width(self, width: int) -> ShapeStyle:
        """A copy of this style with another stroke width."""
        return ShapeStyle(self.color.to_rgba(), self.filled, width)

    def backend_color(self) -> BackendColor:
        """The normalized color of this style."""
        return self.color.to_backend_color()


WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)
RED = RGBColor(255, 0, 0)
GREEN = RGBColor(0, 255, 0)
BLUE = RGBColor(0, 0, 255)
YELLOW = RGBColor(255, 255, 0)
CYAN = RGBColor(0, 255, 255)
MAGENTA = RGBColor(255, 0, 255)
TRANSPARENT = RGBAColor(0, 0, 0, 0.0)