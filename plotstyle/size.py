"""Absolute and relative size descriptions resolved against a parent's dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

__all__ = [
    "SizeKind",
    "RelativeSize",
    "RelativeSizeWithBound",
    "dimension_of",
    "in_pixels",
    "percent_width",
    "percent_height",
    "percent",
]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _to_i32(value: float) -> int:
    """Truncate a float toward zero, saturating into the 32-bit signed range."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, int(value)))


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def dimension_of(parent: Any) -> tuple[int, int]:
    """Return the ``(width, height)`` of a parent.

    The parent is either an object with a ``dim()`` method or a pair.
    """
    dim = getattr(parent, "dim", None)
    if callable(dim):
        width, height = dim()
    else:
        try:
            width, height = parent
        except (TypeError, ValueError) as exc:
            raise TypeError(f"cannot get dimensions of {parent!r}") from exc
    return int(width), int(height)


def in_pixels(size: Any, parent: Any) -> int:
    """Resolve a size description into a number of pixels."""
    if isinstance(size, bool):
        raise TypeError("a boolean is not a size")
    if isinstance(size, int):
        return size
    if isinstance(size, float):
        return _to_i32(size)
    resolve = getattr(size, "in_pixels", None)
    if callable(resolve):
        return resolve(parent)
    raise TypeError(f"not a size description: {size!r}")


class SizeKind(Enum):
    """Which parent dimension a relative size refers to."""

    HEIGHT = "height"
    WIDTH = "width"
    SMALLER = "smaller"


@dataclass(frozen=True)
class RelativeSize:
    """A size given as a ratio of the parent's height, width or smaller side."""

    kind: SizeKind
    ratio: float

    def in_pixels(self, parent: Any) -> int:
        width, height = dimension_of(parent)
        if self.kind is SizeKind.WIDTH:
            base = width
        elif self.kind is SizeKind.HEIGHT:
            base = height
        else:
            base = min(width, height)
        return _to_i32(_round_half_away(self.ratio * float(base)))

    def min(self, min_sz: int) -> RelativeSizeWithBound:
        """Bound this size from below, in pixels."""
        return RelativeSizeWithBound(self, min_px=min_sz)

    def max(self, max_sz: int) -> RelativeSizeWithBound:
        """Bound this size from above, in pixels."""
        return RelativeSizeWithBound(self, max_px=max_sz)


@dataclass(frozen=True)
class RelativeSizeWithBound:
    """A relative size with optional lower and upper bounds in pixels."""

    size: RelativeSize
    min_px: int | None = None
    max_px: int | None = None

    def in_pixels(self, parent: Any) -> int:
        size = self.size.in_pixels(parent)
        lower_capped = size if self.min_px is None else max(self.min_px, size)
        # An upper bound is applied to the unbounded size, not the lower-capped one.
        return lower_capped if self.max_px is None else min(self.max_px, size)

    def min(self, min_sz: int) -> RelativeSizeWithBound:
        """Set the lower bound."""
        return replace(self, min_px=min_sz)

    def max(self, max_sz: int) -> RelativeSizeWithBound:
        """Set the upper bound."""
        return replace(self, max_px=max_sz)


def percent_width(value: float) -> RelativeSize:
    """A size of ``value`` percent of the parent's width."""
    return RelativeSize(SizeKind.WIDTH, float(value) / 100.0)


def percent_height(value: float) -> RelativeSize:
    """A size of ``value`` percent of the parent's height."""
    return RelativeSize(SizeKind.HEIGHT, float(value) / 100.0)


def percent(value: float) -> RelativeSize:
    """A size of ``value`` percent of the parent's smaller side."""
    return RelativeSize(SizeKind.SMALLER, float(value) / 100.0)