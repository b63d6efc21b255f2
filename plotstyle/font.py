"""Font descriptions and a simple estimating font implementation."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar

if TYPE_CHECKING:
    from plotstyle.color import Color
    from plotstyle.text import TextStyle

__all__ = [
    "FontFamily",
    "FontStyle",
    "FontTransform",
    "FontError",
    "FontData",
    "FontDesc",
    "LayoutBox",
    "into_font",
]

LayoutBox = tuple[tuple[int, int], tuple[int, int]]

_DEFAULT_SIZE = 12.0


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class FontError(Exception):
    """Raised when a font operation fails."""

    def __init__(self, message: str = "General Error") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class FontFamily:
    """A font family: one of the generic families or a named typeface."""

    name: str

    SERIF: ClassVar[FontFamily]
    SANS_SERIF: ClassVar[FontFamily]
    MONOSPACE: ClassVar[FontFamily]

    def as_str(self) -> str:
        """The family name."""
        return self.name


FontFamily.SERIF = FontFamily("serif")
FontFamily.SANS_SERIF = FontFamily("sans-serif")
FontFamily.MONOSPACE = FontFamily("monospace")

_GENERIC_FAMILIES = {
    family.name: family
    for family in (FontFamily.SERIF, FontFamily.SANS_SERIF, FontFamily.MONOSPACE)
}


def _family_of(value: FontFamily | str) -> FontFamily:
    if isinstance(value, FontFamily):
        return value
    if isinstance(value, str):
        return _GENERIC_FAMILIES.get(value.lower(), FontFamily(value))
    raise TypeError(f"not a font family: {value!r}")


class FontStyle(Enum):
    """The variation of a font."""

    NORMAL = "normal"
    OBLIQUE = "oblique"
    ITALIC = "italic"
    BOLD = "bold"

    def as_str(self) -> str:
        """The style name."""
        return self.value


def _style_of(value: FontStyle | str) -> FontStyle:
    if isinstance(value, FontStyle):
        return value
    if isinstance(value, str):
        try:
            return FontStyle(value.lower())
        except ValueError:
            return FontStyle.NORMAL
    raise TypeError(f"not a font style: {value!r}")


class FontTransform(Enum):
    """A rotation applied to rendered text."""

    NONE = "none"
    ROTATE90 = "rotate90"
    ROTATE180 = "rotate180"
    ROTATE270 = "rotate270"

    def transform(self, x: int, y: int) -> tuple[int, int]:
        """Apply the rotation to the vector ``(x, y)``."""
        if self is FontTransform.ROTATE90:
            return -y, x
        if self is FontTransform.ROTATE180:
            return -x, -y
        if self is FontTransform.ROTATE270:
            return y, -x
        return x, y


@dataclass(frozen=True)
class FontData:
    """A font known only by family and style, whose layout is estimated."""

    family: str
    style: str

    def estimate_layout(self, size: float, text: str) -> LayoutBox:
        """Estimate the layout box of ``text`` at the given size.

        This is a crude estimate: the top of the box lies above the baseline.
        """
        em = size / 1.24 / 1.24
        length = len(text.encode("utf-8"))
        return (
            (0, -_round_half_away(em)),
            (_round_half_away(em * 0.7 * length), _round_half_away(em * 0.24)),
        )

    def draw(
        self,
        pos: tuple[int, int],
        size: float,
        text: str,
        draw: Callable[[int, int, float], Any],
    ) -> None:
        """Render text; an estimating font has no glyphs, so this raises FontError."""
        x, y = pos
        (_, _), (width, _) = self.estimate_layout(size, text)
        message = (
            "The font implementation is unable to draw text: "
            f"{self.family} {self.style} at {size}px, "
            f"{len(text)} characters at ({x}, {y}), estimated width {width}px"
        )
        raise FontError(message)


@dataclass(frozen=True)
class FontDesc:
    """A description of a font: family, size, style and transformation."""

    family: FontFamily
    size: float = _DEFAULT_SIZE
    style: FontStyle = FontStyle.NORMAL
    transform: FontTransform = FontTransform.NONE

    @property
    def name(self) -> str:
        """The family name of the font."""
        return self.family.as_str()

    @property
    def _data(self) -> FontData:
        return FontData(self.family.as_str(), self.style.as_str())

    def resize(self, size: float) -> FontDesc:
        """A copy of this font with another size."""
        return replace(self, size=float(size))

    def with_style(self, style: FontStyle | str) -> FontDesc:
        """A copy of this font with another style."""
        return replace(self, style=_style_of(style))

    def with_transform(self, trans: FontTransform) -> FontDesc:
        """A copy of this font with another transformation."""
        return replace(self, transform=trans)

    def color(self, color: Color) -> TextStyle:
        """A text style of this font in the given color."""
        from plotstyle.text import TextStyle

        return TextStyle.from_font(self).with_color(color)

    def layout_box(self, text: str) -> LayoutBox:
        """The box ``text`` occupies, relative to the left end of its baseline."""
        return self._data.estimate_layout(self.size, text)

    def box_size(self, text: str) -> tuple[int, int]:
        """The width and height of ``text`` with the transformation applied."""
        (min_x, min_y), (max_x, max_y) = self.layout_box(text)
        w, h = self.transform.transform(max_x - min_x, max_y - min_y)
        return abs(w), abs(h)

    def draw(
        self,
        text: str,
        pos: tuple[int, int],
        draw: Callable[[int, int, float], Any],
    ) -> None:
        """Render ``text`` at ``pos`` through the pixel callback ``draw``."""
        self._data.draw(pos, self.size, text, draw)


def into_font(value: Any) -> FontDesc:
    """Build a font description from a font, a family, or a tuple.

    Tuples are ``(family, size)`` or ``(family, size, style)``.
    """
    if isinstance(value, FontDesc):
        return value
    if isinstance(value, (str, FontFamily)):
        return FontDesc(_family_of(value))
    if isinstance(value, tuple):
        if len(value) == 2:
            family, size = value
            return FontDesc(_family_of(family), float(size))
        if len(value) == 3:
            family, size, style = value
            return FontDesc(_family_of(family), float(size), _style_of(style))
    raise TypeError(f"cannot make a font from {value!r}")