"""Accessible color palettes and colors picked from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from plotstyle.color import BackendColor, Color

__all__ = ["Palette", "Palette99", "Palette9999", "Palette100", "PaletteColor"]

RGB = tuple[int, int, int]


def _from_hex(codes: str) -> tuple[RGB, ...]:
    """Parse whitespace separated ``rrggbb`` codes into RGB triples."""
    triples = []
    for code in codes.split():
        red, green, blue = bytes.fromhex(code)
        triples.append((red, green, blue))
    return tuple(triples)


class Palette:
    """A fixed list of RGB colors."""

    COLORS: ClassVar[tuple[RGB, ...]] = ()

    @classmethod
    def pick(cls, idx: int) -> PaletteColor:
        """Pick a color from this palette, wrapping around its length."""
        return PaletteColor.pick(cls, idx)


class Palette99(Palette):
    """The palette of 99% accessibility."""

    COLORS = _from_hex(
        """
        e6194b 3cb44b ffe119 0082c8 f58230 911eb4 46f0f0
        f032e6 d2f53c fabebe 008080 e6beff aa6e28 fffac8
        800000 aaffc3 808000 ffd7b4 000080 808080 000000
        """
    )


class Palette9999(Palette):
    """The palette of 99.99% accessibility."""

    COLORS = _from_hex(
        "ffe119 0082c8 f58230 fabebe e6beff 800000 000080 808080 000000"
    )


class Palette100(Palette):
    """The palette of 100% accessibility."""

    COLORS = _from_hex("ffe119 0082c8 808080 000000")


@dataclass(frozen=True)
class PaletteColor(Color):
    """A color identified by its position in a palette."""

    palette: type[Palette]
    index: int

    @classmethod
    def pick(cls, palette: type[Palette], idx: int) -> PaletteColor:
        """Pick the color at ``idx`` modulo the palette length."""
        if idx < 0:
            raise ValueError("palette index must not be negative")
        if not palette.COLORS:
            raise ValueError("palette has no colors")
        return cls(palette, idx % len(palette.COLORS))

    def to_backend_color(self) -> BackendColor:
        return BackendColor(self.palette.COLORS[self.index], 1.0)