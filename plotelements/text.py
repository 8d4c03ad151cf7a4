"""Single-line and multi-line text elements."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from plotelements.element import BackendCoord, Element
from plotelements.font import FontDesc, FontError, LayoutBox
from plotelements.text_style import TextStyle, as_text_style


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _text_lines(text: str) -> Iterator[str]:
    if not text:
        return
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def _text_width(font: FontDesc, text: str) -> int:
    try:
        return font.box_size(text)[0]
    except FontError:
        return 0


def layout_multiline_text(text: str, max_width: int, font: FontDesc) -> Iterator[str]:
    """Split text into lines, wrapping lines wider than ``max_width`` (0 disables wrapping)."""
    for line in _text_lines(text):
        if max_width == 0 or not line:
            yield line
            continue
        remaining = line
        while remaining:
            left = 0
            while left < len(remaining):
                if _text_width(font, remaining[: left + 1]) > max_width:
                    break
                left += 1
            left = max(left, 1)
            yield remaining[:left]
            remaining = remaining[left:]


@dataclass(eq=False)
class Text(Element):
    """A single line of text anchored at a coordinate."""

    text: str
    coord: Any
    style: Any

    def __post_init__(self) -> None:
        self.style = as_text_style(self.style)

    def point_iter(self) -> Iterator[Any]:
        yield self.coord

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        first = next(iter(points), None)
        if first is not None:
            backend.draw_text(self.text, self.style, tuple(first))


@dataclass(eq=False)
class MultiLineText(Element):
    """Several left-aligned lines of text anchored at their upper left corner."""

    coord: Any
    style: Any
    line_height: float = 1.25
    lines: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.style: TextStyle = as_text_style(self.style)
        self.lines = list(self.lines)

    @classmethod
    def from_str(cls, text: str, pos: Any, style: Any, max_width: int) -> MultiLineText:
        """Parse text into lines, wrapping at ``max_width`` pixels unless it is 0."""
        result = cls(pos, style)
        for line in layout_multiline_text(text, max_width, result.style.font):
            result.push_line(line)
        return result

    def set_line_height(self, value: float) -> MultiLineText:
        """Set the line height as a multiple of the font size; returns the element."""
        self.line_height = value
        return self

    def push_line(self, line: str) -> None:
        """Append a line."""
        self.lines.append(line)

    def relocate(self, coord: Any) -> None:
        """Move the element to another coordinate."""
        self.coord = coord

    def _layout_lines(self, origin: BackendCoord) -> Iterator[BackendCoord]:
        x0, y0 = origin
        step = self.style.font.size * self.line_height
        for idx in range(len(self.lines)):
            yield (_round_half_away(float(x0)), _round_half_away(y0 + idx * step))

    def estimate_dimension(self) -> tuple[int, int]:
        """The (width, height) of the laid-out text."""
        mx, my = 0, 0
        for (x, y), line in zip(self._layout_lines((0, 0)), self.lines):
            dx, dy = self.style.font.box_size(line)
            mx = max(mx, x + dx)
            my = max(my, y + dy)
        return (mx, my)

    def compute_line_layout(self) -> list[LayoutBox]:
        """The box of every line, for an element anchored at a pixel coordinate."""
        boxes = []
        for (x, y), line in zip(self._layout_lines(tuple(self.coord)), self.lines):
            dx, dy = self.style.font.box_size(line)
            boxes.append(((x, y), (x + dx, y + dy)))
        return boxes

    def point_iter(self) -> Iterator[Any]:
        yield self.coord

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        first = next(iter(points), None)
        if first is None:
            return
        for point, line in zip(self._layout_lines(tuple(first)), self.lines):
            backend.draw_text(line, self.style, point)