"""Series: iterables that turn data points into drawable elements.

A series is any iterable of elements. Those defined here turn data into
line plots, area plots, point plots and histograms.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from plotelements.color import GREEN, TRANSPARENT, Color, ShapeStyle, as_shape_style
from plotelements.dynamic import DynElement, into_dyn
from plotelements.shapes import Circle, PathElement, Polygon, Rectangle


def _check_non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


class AreaSeries:
    """A filled area between a line and a baseline, plus its border line."""

    def __init__(self, data: Iterable[tuple[Any, Any]], baseline: Any, area_style: ShapeStyle | Color) -> None:
        self.data: list[tuple[Any, Any]] = list(data)
        self.baseline = baseline
        self.area_style = as_shape_style(area_style)
        self.border_style = ShapeStyle.from_color(TRANSPARENT)

    def with_border_style(self, style: ShapeStyle | Color) -> AreaSeries:
        """The same series with another border style."""
        result = copy.copy(self)
        result.border_style = as_shape_style(style)
        return result

    def __iter__(self) -> Iterator[DynElement]:
        area = list(self.data)
        if area:
            area.append((area[-1][0], self.baseline))
            area.append((area[0][0], self.baseline))
        yield into_dyn(Polygon(area, self.area_style))
        yield into_dyn(PathElement(list(self.data), self.border_style))


class LineSeries:
    """A line through the data points, optionally marked with circles."""

    def __init__(self, data: Iterable[Any], style: ShapeStyle | Color, point_size: int = 0) -> None:
        self.data: list[Any] = list(data)
        self.style = as_shape_style(style)
        self.point_size = _check_non_negative("point size", point_size)

    def with_point_size(self, size: int) -> LineSeries:
        """The same series with circles of radius ``size`` at each point (0 for none)."""
        result = copy.copy(self)
        result.point_size = _check_non_negative("point size", size)
        return result

    def __iter__(self) -> Iterator[DynElement]:
        if not self.data:
            return
        if self.point_size > 0:
            for point in self.data:
                yield into_dyn(Circle(point, self.point_size, self.style))
        yield into_dyn(PathElement(list(self.data), self.style))


class PointSeries:
    """One element per data point, made by a point constructor.

    ``element`` is either a class with a ``make_point`` class method or any
    callable taking ``(pos, size, style)``; circles are used by default.
    """

    def __init__(
        self,
        data: Iterable[Any],
        size: Any,
        style: ShapeStyle | Color,
        element: Any = Circle,
    ) -> None:
        self.data = data
        self.size = size
        self.style = as_shape_style(style)
        make_point = getattr(element, "make_point", element)
        if not callable(make_point):
            raise TypeError(f"{element!r} cannot make points")
        self._make_point: Callable[[Any, Any, ShapeStyle], Any] = make_point

    @classmethod
    def of_element(
        cls,
        data: Iterable[Any],
        size: Any,
        style: ShapeStyle | Color,
        make_point: Callable[[Any, Any, ShapeStyle], Any],
    ) -> PointSeries:
        """A point series whose elements are made by ``make_point(pos, size, style)``."""
        return cls(data, size, style, make_point)

    def __iter__(self) -> Iterator[Any]:
        for point in self.data:
            yield self._make_point(point, self.size, self.style)


def _increment(value: Any) -> Any:
    return value + 1


def _decrement(value: Any) -> Any:
    return value - 1


class Histogram:
    """Bars summing the values given for each discrete key.

    ``next_value`` and ``previous_value`` step through the discrete key
    axis; by default keys are integers stepped by one.
    """

    def __init__(
        self,
        data: Iterable[tuple[Any, Any]] = (),
        margin: int = 5,
        style: ShapeStyle | Color = GREEN.filled(),
        *,
        next_value: Callable[[Any], Any] = _increment,
        previous_value: Callable[[Any], Any] = _decrement,
        horizontal: bool = False,
    ) -> None:
        self.margin = _check_non_negative("margin", margin)
        self.next_value = next_value
        self.previous_value = previous_value
        self._horizontal = horizontal
        fixed = as_shape_style(style)
        self._style_func: Callable[[Any, Any], ShapeStyle] = lambda _key, _value: fixed
        self._baseline_func: Callable[[Any], Any] = lambda _key: 0
        self._buckets: dict[Any, Any] = self._aggregate(data)

    @staticmethod
    def _aggregate(data: Iterable[tuple[Any, Any]]) -> dict[Any, Any]:
        buckets: dict[Any, Any] = {}
        for key, value in data:
            buckets[key] = buckets.get(key, 0) + value
        return buckets

    @classmethod
    def vertical(cls, next_value: Callable[[Any], Any], previous_value: Callable[[Any], Any]) -> Histogram:
        """An empty histogram with bars standing on the x axis."""
        return cls(next_value=next_value, previous_value=previous_value, horizontal=False)

    @classmethod
    def horizontal(cls, next_value: Callable[[Any], Any], previous_value: Callable[[Any], Any]) -> Histogram:
        """An empty histogram with bars extending from the y axis."""
        return cls(next_value=next_value, previous_value=previous_value, horizontal=True)

    def _copy(self) -> Histogram:
        result = copy.copy(self)
        result._buckets = dict(self._buckets)
        return result

    def with_style(self, style: ShapeStyle | Color) -> Histogram:
        """The same histogram with every bar in ``style``."""
        fixed = as_shape_style(style)
        result = self._copy()
        result._style_func = lambda _key, _value: fixed
        return result

    def with_style_func(self, style_func: Callable[[Any, Any], ShapeStyle | Color]) -> Histogram:
        """The same histogram styled per bar by ``style_func(key, value)``."""
        result = self._copy()
        result._style_func = lambda key, value: as_shape_style(style_func(key, value))
        return result

    def with_baseline(self, baseline: Any) -> Histogram:
        """The same histogram with bars starting at ``baseline``."""
        result = self._copy()
        result._baseline_func = lambda _key: baseline
        return result

    def with_baseline_func(self, func: Callable[[Any], Any]) -> Histogram:
        """The same histogram with each bar starting at ``func(key)``."""
        result = self._copy()
        result._baseline_func = func
        return result

    def with_margin(self, value: int) -> Histogram:
        """The same histogram with ``value`` pixels of margin on each side of a bar."""
        result = self._copy()
        result.margin = _check_non_negative("margin", value)
        return result

    def with_data(self, data: Iterable[tuple[Any, Any]]) -> Histogram:
        """The same histogram over other data; values of equal keys are summed."""
        result = self._copy()
        result._buckets = self._aggregate(data)
        return result

    def __iter__(self) -> Iterator[Rectangle]:
        for key, value in self._buckets.items():
            upper_key = self.next_value(key)
            base = self._baseline_func(self.previous_value(upper_key))
            style = self._style_func(key, value)
            if self._horizontal:
                rect = Rectangle([(value, key), (base, upper_key)], style)
                rect.set_margin(self.margin, self.margin, 0, 0)
            else:
                rect = Rectangle([(key, value), (upper_key, base)], style)
                rect.set_margin(0, 0, self.margin, self.margin)
            yield rect