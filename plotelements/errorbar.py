"""Error bars: a min/average/max marker along a key axis."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from plotelements.color import Color, ShapeStyle, as_shape_style
from plotelements.element import BackendCoord, Element


class ErrorBarOrient(enum.Enum):
    """Whether the bar runs vertically or horizontally."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    def make_coord(self, key: Any, value: Any) -> tuple[Any, Any]:
        """The guest coordinate of a value at the given key."""
        if self is ErrorBarOrient.HORIZONTAL:
            return (value, key)
        return (key, value)

    def ending_coord(self, coord: BackendCoord, width: int) -> tuple[BackendCoord, BackendCoord]:
        """The ends of the cap line drawn across ``coord``."""
        x, y = coord
        half = width // 2
        if self is ErrorBarOrient.HORIZONTAL:
            return ((x, y - half), (x, y + half))
        return ((x - half, y), (x + half, y))


@dataclass(eq=False)
class ErrorBar(Element):
    """An error bar with caps at min and max and a circle at the average."""

    key: Any
    values: tuple[Any, Any, Any]
    style: ShapeStyle | Color
    width: int
    orient: ErrorBarOrient = ErrorBarOrient.VERTICAL

    def __post_init__(self) -> None:
        self.values = tuple(self.values)
        if len(self.values) != 3:
            raise ValueError(f"an error bar needs three values, got {len(self.values)}")
        self.style = as_shape_style(self.style)

    @classmethod
    def new_vertical(
        cls, key: Any, min_value: Any, avg: Any, max_value: Any, style: ShapeStyle | Color, width: int
    ) -> ErrorBar:
        """A vertical error bar at x = ``key``."""
        return cls(key, (min_value, avg, max_value), style, width, ErrorBarOrient.VERTICAL)

    @classmethod
    def new_horizontal(
        cls, key: Any, min_value: Any, avg: Any, max_value: Any, style: ShapeStyle | Color, width: int
    ) -> ErrorBar:
        """A horizontal error bar at y = ``key``."""
        return cls(key, (min_value, avg, max_value), style, width, ErrorBarOrient.HORIZONTAL)

    def point_iter(self) -> Iterator[Any]:
        return iter([self.orient.make_coord(self.key, v) for v in self.values])

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        pts = []
        for p in points:
            pts.append(tuple(p))
            if len(pts) == 3:
                break
        if len(pts) < 3:
            raise ValueError(f"an error bar needs three points to draw, got {len(pts)}")

        start, end = self.orient.ending_coord(pts[0], self.width)
        backend.draw_line(start, end, self.style)
        start, end = self.orient.ending_coord(pts[2], self.width)
        backend.draw_line(start, end, self.style)
        backend.draw_line(pts[0], pts[2], self.style)
        backend.draw_circle(pts[1], self.width // 2, self.style, self.style.is_filled)