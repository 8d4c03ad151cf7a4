"""Absolute and relative sizes measured against a parent's dimension."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace
from typing import Any


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def dimension_of(parent: Any) -> tuple[int, int]:
    """The (width, height) of a parent: a pair, or an object with ``dim()`` or ``get_size()``."""
    if isinstance(parent, (tuple, list)):
        if len(parent) != 2:
            raise ValueError(f"a dimension needs two values, got {parent!r}")
        width, height = parent
        return (int(width), int(height))
    for method in ("dim", "get_size"):
        getter = getattr(parent, method, None)
        if callable(getter):
            width, height = getter()
            return (int(width), int(height))
    raise TypeError(f"{parent!r} has no dimension")


class RelativeDimension(enum.Enum):
    """Which side of the parent a relative size refers to."""

    HEIGHT = "height"
    WIDTH = "width"
    SMALLER = "smaller"


@dataclass(frozen=True)
class RelativeSize:
    """A fraction of the parent's height, width or smaller side."""

    dimension: RelativeDimension
    fraction: float

    def in_pixels(self, parent: Any) -> int:
        """The size in pixels against ``parent``."""
        width, height = dimension_of(parent)
        if self.dimension is RelativeDimension.WIDTH:
            base = width
        elif self.dimension is RelativeDimension.HEIGHT:
            base = height
        else:
            base = min(width, height)
        return _round_half_away(self.fraction * base)

    def min(self, min_size: int) -> RelativeSizeWithBound:
        """This size with a lower bound in pixels."""
        return RelativeSizeWithBound(self, min_size=min_size)

    def max(self, max_size: int) -> RelativeSizeWithBound:
        """This size with an upper bound in pixels."""
        return RelativeSizeWithBound(self, max_size=max_size)


@dataclass(frozen=True)
class RelativeSizeWithBound:
    """A relative size with optional lower and upper bounds in pixels."""

    size: RelativeSize
    min_size: int | None = None
    max_size: int | None = None

    def in_pixels(self, parent: Any) -> int:
        """The bounded size in pixels against ``parent``."""
        size = self.size.in_pixels(parent)
        lower_capped = size if self.min_size is None else max(self.min_size, size)
        # The upper bound is applied to the raw size, not the lower-capped one.
        return lower_capped if self.max_size is None else min(self.max_size, size)

    def min(self, min_size: int) -> RelativeSizeWithBound:
        """This size with another lower bound."""
        return replace(self, min_size=min_size)

    def max(self, max_size: int) -> RelativeSizeWithBound:
        """This size with another upper bound."""
        return replace(self, max_size=max_size)


def size_in_pixels(size: Any, parent: Any) -> int:
    """Resolve an integer or a relative size into pixels against ``parent``."""
    if isinstance(size, bool):
        raise TypeError(f"{size!r} is not a size")
    if isinstance(size, int):
        return size
    resolve = getattr(size, "in_pixels", None)
    if callable(resolve):
        return int(resolve(parent))
    raise TypeError(f"{size!r} is not a size")


def percent_width(value: float) -> RelativeSize:
    """``value`` percent of the parent's width."""
    return RelativeSize(RelativeDimension.WIDTH, float(value) / 100.0)


def percent_height(value: float) -> RelativeSize:
    """``value`` percent of the parent's height."""
    return RelativeSize(RelativeDimension.HEIGHT, float(value) / 100.0)


def percent(value: float) -> RelativeSize:
    """``value`` percent of the parent's smaller side."""
    return RelativeSize(RelativeDimension.SMALLER, float(value) / 100.0)