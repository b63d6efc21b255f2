"""Text styles: font, color and anchor position."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable

from plotstyle.color import BLACK, BackendColor, Color
from plotstyle.font import (
    FontDesc,
    FontFamily,
    FontStyle,
    FontTransform,
    LayoutBox,
    _family_of,
    _style_of,
    into_font,
)
from plotstyle.size import in_pixels

__all__ = [
    "HPos",
    "VPos",
    "Pos",
    "TextStyle",
    "TextStyleBuilder",
    "into_text_style",
    "with_color",
    "with_anchor",
]


class HPos(Enum):
    """Horizontal anchor of text."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VPos(Enum):
    """Vertical anchor of text."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Pos:
    """The anchor point of text."""

    h_pos: HPos = HPos.LEFT
    v_pos: VPos = VPos.TOP


@dataclass(frozen=True)
class TextStyle:
    """The style of a piece of text."""

    font: FontDesc
    color: BackendColor = field(default_factory=BLACK.to_backend_color)
    pos: Pos = field(default_factory=Pos)

    @classmethod
    def from_font(cls, font: Any) -> TextStyle:
        """A black, top-left anchored style of the given font."""
        return cls(into_font(font))

    @property
    def size(self) -> float:
        """The font size."""
        return self.font.size

    @property
    def family(self) -> FontFamily:
        """The font family."""
        return self.font.family

    def with_color(self, color: Color) -> TextStyle:
        """A copy of this style in another color."""
        return replace(self, color=color.to_backend_color())

    def with_transform(self, trans: FontTransform) -> TextStyle:
        """A copy of this style with another font transformation."""
        return replace(self, font=self.font.with_transform(trans))

    def with_pos(self, pos: Pos) -> TextStyle:
        """A copy of this style with another anchor position."""
        return replace(self, pos=pos)

    def layout_box(self, text: str) -> LayoutBox:
        """The layout box of ``text`` in this style's font."""
        return self.font.layout_box(text)

    def draw(
        self,
        text: str,
        pos: tuple[int, int],
        draw: Callable[[int, int, BackendColor], Any],
    ) -> None:
        """Render ``text``, passing each pixel's color mixed by its coverage."""
        color = self.color

        def plot(x: int, y: int, coverage: float) -> Any:
            return draw(x, y, color.mix(float(coverage)))

        self.font.draw(text, pos, plot)


@dataclass(frozen=True)
class TextStyleBuilder:
    """A text style source with an overriding color or anchor."""

    base: Any
    new_color: BackendColor | None = None
    new_pos: Pos | None = None

    def into_text_style(self, parent: Any) -> TextStyle:
        """Resolve the base style and apply the overrides."""
        style = into_text_style(self.base, parent)
        if self.new_color is not None:
            style = replace(style, color=self.new_color)
        if self.new_pos is not None:
            style = style.with_pos(self.new_pos)
        return style


def _sized_style(family: Any, size: Any, parent: Any) -> TextStyle:
    return TextStyle(FontDesc(_family_of(family), float(in_pixels(size, parent))))


def into_text_style(value: Any, parent: Any) -> TextStyle:
    """Build a text style from a value, resolving relative sizes against ``parent``.

    Accepted values are text styles, builders, fonts, families, family names,
    numeric sizes, colors, and the tuples ``(family, size)``,
    ``(family, size, color)``, ``(family, size, style)`` and
    ``(family, size, style, color)``.
    """
    if isinstance(value, TextStyleBuilder):
        return value.into_text_style(parent)
    if isinstance(value, TextStyle):
        return value
    if isinstance(value, (FontDesc, FontFamily, str)):
        return TextStyle.from_font(value)
    if isinstance(value, bool):
        raise TypeError("a boolean is not a text style")
    if isinstance(value, (int, float)):
        return TextStyle(FontDesc(FontFamily.SANS_SERIF, float(value)))
    if isinstance(value, Color):
        return TextStyle(FontDesc(FontFamily.SANS_SERIF)).with_color(value)
    if isinstance(value, tuple):
        if len(value) == 2:
            family, size = value
            return _sized_style(family, size, parent)
        if len(value) == 3:
            family, size, extra = value
            style = _sized_style(family, size, parent)
            if isinstance(extra, Color):
                return style.with_color(extra)
            return replace(style, font=style.font.with_style(_style_of(extra)))
        if len(value) == 4:
            family, size, font_style, color = value
            styled = into_text_style((family, size, font_style), parent)
            return styled.with_color(color)
    raise TypeError(f"cannot make a text style from {value!r}")


def with_color(base: Any, color: Color) -> TextStyleBuilder:
    """A builder that gives ``base`` another color."""
    return TextStyleBuilder(base, new_color=color.to_backend_color())


def with_anchor(base: Any, pos: Pos) -> TextStyleBuilder:
    """A builder that gives ``base`` another anchor position."""
    return TextStyleBuilder(base, new_pos=pos)


__all__.append("FontStyle")