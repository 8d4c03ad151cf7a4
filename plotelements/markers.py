"""Point markers: crosses and triangles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from plotelements.color import Color, ShapeStyle, as_shape_style
from plotelements.element import BackendCoord, Element
from plotelements.size import size_in_pixels

_TRIANGLE_ANGLES = (-90, -210, -330)


@dataclass(eq=False)
class Cross(Element):
    """An X-shaped marker."""

    center: Any
    size: Any
    style: ShapeStyle | Color

    def __post_init__(self) -> None:
        self.style = as_shape_style(self.style)

    @classmethod
    def make_point(cls, pos: Any, size: Any, style: ShapeStyle | Color) -> Cross:
        """A cross marker at ``pos``."""
        return cls(pos, size, style)

    def point_iter(self) -> Iterator[Any]:
        yield self.center

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        first = next(iter(points), None)
        if first is None:
            return
        x, y = first
        size = size_in_pixels(self.size, parent_dim)
        x0, y0 = x - size, y - size
        x1, y1 = x + size, y + size
        backend.draw_line((x0, y0), (x1, y1), self.style)
        backend.draw_line((x0, y1), (x1, y0), self.style)


@dataclass(eq=False)
class TriangleMarker(Element):
    """A filled upward-pointing triangle marker."""

    center: Any
    size: Any
    style: ShapeStyle | Color

    def __post_init__(self) -> None:
        self.style = as_shape_style(self.style)

    @classmethod
    def make_point(cls, pos: Any, size: Any, style: ShapeStyle | Color) -> TriangleMarker:
        """A triangle marker at ``pos``."""
        return cls(pos, size, style)

    def point_iter(self) -> Iterator[Any]:
        yield self.center

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        first = next(iter(points), None)
        if first is None:
            return
        x, y = first
        size = size_in_pixels(self.size, parent_dim)
        vertices = [
            (
                math.ceil(math.cos(math.radians(deg)) * size + x),
                math.ceil(math.sin(math.radians(deg)) * size + y),
            )
            for deg in _TRIANGLE_ANGLES
        ]
        backend.fill_polygon(vertices, self.style.color)