"""The boxplot element drawn from five quartile values."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Any

from plotelements.color import BLACK, Color, ShapeStyle, as_shape_style
from plotelements.element import BackendCoord, Element

DEFAULT_WIDTH = 10


class BoxplotOrient(enum.Enum):
    """Whether the boxplot is vertical (key on x) or horizontal (key on y)."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    def make_coord(self, key: Any, value: Any) -> tuple[Any, Any]:
        """The guest coordinate of a value at the given key."""
        if self is BoxplotOrient.HORIZONTAL:
            return (value, key)
        return (key, value)

    def with_offset(self, coord: BackendCoord, offset: float) -> BackendCoord:
        """The coordinate moved along the key axis by ``offset`` pixels (truncated)."""
        x, y = coord
        shift = int(offset)
        if self is BoxplotOrient.HORIZONTAL:
            return (x, y + shift)
        return (x + shift, y)


def _quartile_values(quartiles: Any) -> tuple[float, ...]:
    values_of = getattr(quartiles, "values", None)
    values = values_of() if callable(values_of) else quartiles
    result = tuple(float(v) for v in values)
    if len(result) != 5:
        raise ValueError(f"a boxplot needs five quartile values, got {len(result)}")
    return result


@dataclass(eq=False)
class Boxplot(Element):
    """A box with whiskers spanning five values along one axis."""

    key: Any
    values: tuple[float, ...]
    orient: BoxplotOrient = BoxplotOrient.VERTICAL
    style: ShapeStyle | Color = BLACK
    width: int = DEFAULT_WIDTH
    whisker_width: float = 1.0
    offset: float = 0.0

    def __post_init__(self) -> None:
        self.values = _quartile_values(self.values)
        self.style = as_shape_style(self.style)
        if self.width < 0:
            raise ValueError(f"width must not be negative, got {self.width}")

    @classmethod
    def new_vertical(cls, key: Any, quartiles: Any) -> Boxplot:
        """A vertical boxplot at x = ``key``; ``quartiles`` gives five values."""
        return cls(key, quartiles, BoxplotOrient.VERTICAL)

    @classmethod
    def new_horizontal(cls, key: Any, quartiles: Any) -> Boxplot:
        """A horizontal boxplot at y = ``key``; ``quartiles`` gives five values."""
        return cls(key, quartiles, BoxplotOrient.HORIZONTAL)

    def with_style(self, style: ShapeStyle | Color) -> Boxplot:
        """The same boxplot in another style."""
        return replace(self, style=style)

    def with_width(self, width: int) -> Boxplot:
        """The same boxplot with another bar width."""
        return replace(self, width=width)

    def with_whisker_width(self, whisker_width: float) -> Boxplot:
        """The same boxplot with whiskers this fraction of the bar width."""
        return replace(self, whisker_width=float(whisker_width))

    def with_offset(self, offset: float) -> Boxplot:
        """The same boxplot shifted along the key axis by ``offset`` pixels."""
        return replace(self, offset=float(offset))

    def point_iter(self) -> Iterator[Any]:
        return iter([self.orient.make_coord(self.key, v) for v in self.values])

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        pts: list[BackendCoord] = []
        for p in points:
            pts.append(tuple(p))
            if len(pts) == 5:
                break
        if len(pts) != 5:
            return

        orient = self.orient
        width = float(self.width)
        whisker = width * self.whisker_width

        def moved(coord: BackendCoord) -> BackendCoord:
            return orient.with_offset(coord, self.offset)

        def start_bar(coord: BackendCoord) -> BackendCoord:
            return orient.with_offset(moved(coord), -width / 2.0)

        def end_bar(coord: BackendCoord) -> BackendCoord:
            return orient.with_offset(moved(coord), width / 2.0)

        def start_whisker(coord: BackendCoord) -> BackendCoord:
            return orient.with_offset(moved(coord), -whisker / 2.0)

        def end_whisker(coord: BackendCoord) -> BackendCoord:
            return orient.with_offset(moved(coord), whisker / 2.0)

        backend.draw_line(start_whisker(pts[0]), end_whisker(pts[0]), self.style)
        backend.draw_line(moved(pts[0]), moved(pts[1]), self.style.color)

        corner1 = start_bar(pts[3])
        corner2 = end_bar(pts[1])
        upper_left = (min(corner1[0], corner2[0]), min(corner1[1], corner2[1]))
        bottom_right = (max(corner1[0], corner2[0]), max(corner1[1], corner2[1]))
        backend.draw_rect(upper_left, bottom_right, self.style, False)

        backend.draw_line(start_bar(pts[2]), end_bar(pts[2]), self.style)
        backend.draw_line(moved(pts[3]), moved(pts[4]), self.style)
        backend.draw_line(start_whisker(pts[4]), end_whisker(pts[4]), self.style)