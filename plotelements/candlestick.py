"""The candlestick element showing open, high, low and close values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from plotelements.color import Color, ShapeStyle, as_shape_style
from plotelements.element import BackendCoord, Element


class CandleStick(Element):
    """A candlestick data point: a high/low line and an open/close box."""

    def __init__(
        self,
        x: Any,
        open: Any,
        high: Any,
        low: Any,
        close: Any,
        gain_style: ShapeStyle | Color,
        loss_style: ShapeStyle | Color,
        width: int,
    ) -> None:
        if width < 0:
            raise ValueError(f"width must not be negative, got {width}")
        gained = open < close
        self.style: ShapeStyle = as_shape_style(gain_style if gained else loss_style)
        self.width = width
        self.points: tuple[tuple[Any, Any], ...] = (
            (x, open),
            (x, high),
            (x, low),
            (x, close),
        )

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        pts: list[BackendCoord] = []
        for p in points:
            pts.append(tuple(p))
            if len(pts) == 4:
                break
        if len(pts) != 4:
            return
        if pts[0][1] > pts[3][1]:
            pts[0], pts[3] = pts[3], pts[0]
        left = self.width // 2
        right = self.width - left

        backend.draw_line(pts[0], pts[1], self.style)
        backend.draw_line(pts[2], pts[3], self.style)

        upper = (pts[0][0] - left, pts[0][1])
        lower = (pts[3][0] + right, pts[3][1])
        backend.draw_rect(upper, lower, self.style, False)