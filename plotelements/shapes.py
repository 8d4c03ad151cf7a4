"""Basic shapes: pixels, paths, rectangles, circles and polygons."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from plotelements.color import Color, ShapeStyle, as_shape_style
from plotelements.element import BackendCoord, Element
from plotelements.size import size_in_pixels


@dataclass(eq=False)
class Pixel(Element):
    """A single pixel."""

    pos: Any
    style: ShapeStyle | Color

    def __post_init__(self) -> None:
        self.style = as_shape_style(self.style)

    @classmethod
    def make_point(cls, pos: Any, size: Any, style: ShapeStyle | Color) -> Pixel:
        """A pixel at ``pos``; the size is ignored."""
        return cls(pos, style)

    def point_iter(self) -> Iterator[Any]:
        yield self.pos

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        first = next(iter(points), None)
        if first is not None:
            backend.draw_pixel(tuple(first), self.style.color)


@dataclass(eq=False)
class PathElement(Element):
    """A series of connected lines."""

    points: Sequence[Any]
    style: ShapeStyle | Color

    def __post_init__(self) -> None:
        self.points = list(self.points)
        self.style = as_shape_style(self.style)

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        backend.draw_path([tuple(p) for p in points], self.style)


@dataclass(eq=False)
class Rectangle(Element):
    """A rectangle given by two opposite corners."""

    points: Sequence[Any]
    style: ShapeStyle | Color
    margin: tuple[int, int, int, int] = field(default=(0, 0, 0, 0))

    def __post_init__(self) -> None:
        self.points = tuple(self.points)
        if len(self.points) != 2:
            raise ValueError(f"a rectangle needs exactly two corners, got {len(self.points)}")
        self.style = as_shape_style(self.style)

    def set_margin(self, top: int, bottom: int, left: int, right: int) -> Rectangle:
        """Set the margins, in pixels, taken off each side; returns the rectangle."""
        self.margin = (top, bottom, left, right)
        return self

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        it = iter(points)
        a = next(it, None)
        b = next(it, None)
        if a is None or b is None:
            return
        top, bottom, left, right = self.margin
        upper_left = (min(a[0], b[0]) + left, min(a[1], b[1]) + top)
        bottom_right = (max(a[0], b[0]) - right, max(a[1], b[1]) - bottom)
        backend.draw_rect(upper_left, bottom_right, self.style, self.style.is_filled)


@dataclass(eq=False)
class Circle(Element):
    """A circle with a radius that may be relative to the parent's size."""

    center: Any
    size: Any
    style: ShapeStyle | Color

    def __post_init__(self) -> None:
        self.style = as_shape_style(self.style)

    @classmethod
    def make_point(cls, pos: Any, size: Any, style: ShapeStyle | Color) -> Circle:
        """A circle marker at ``pos``."""
        return cls(pos, size, style)

    def point_iter(self) -> Iterator[Any]:
        yield self.center

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        first = next(iter(points), None)
        if first is not None:
            radius = max(size_in_pixels(self.size, parent_dim), 0)
            backend.draw_circle(tuple(first), radius, self.style, self.style.is_filled)


@dataclass(eq=False)
class Polygon(Element):
    """A filled polygon."""

    points: Sequence[Any]
    style: ShapeStyle | Color

    def __post_init__(self) -> None:
        self.points = list(self.points)
        self.style = as_shape_style(self.style)

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        backend.fill_polygon([tuple(p) for p in points], self.style.color)