"""Ad-hoc elements composed of several pixel-offset parts.

Composition starts with an ``EmptyElement`` placed at a guest coordinate.
Elements whose key points are pixel offsets from that anchor are then
added with ``+``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from plotelements.element import BackendCoord, Element


def _shifted(element: Element, x0: int, y0: int) -> Iterator[BackendCoord]:
    for p in element.point_iter():
        yield (p[0] + x0, p[1] + y0)


@dataclass(eq=False)
class EmptyElement(Element):
    """An element that draws nothing; the anchor of a composed element."""

    coord: Any

    @classmethod
    def at(cls, coord: Any) -> EmptyElement:
        """An empty element anchored at ``coord``."""
        return cls(coord)

    def __add__(self, other: Element) -> BoxedElement:
        if not isinstance(other, Element):
            return NotImplemented
        return BoxedElement(inner=other, offset=self.coord)

    def point_iter(self) -> Iterator[Any]:
        yield self.coord

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        return None


@dataclass(eq=False)
class BoxedElement(Element):
    """A composed element with a single component."""

    inner: Element
    offset: Any

    def __add__(self, other: Element) -> ComposedElement:
        if not isinstance(other, Element):
            return NotImplemented
        return ComposedElement(first=self.inner, second=other, offset=self.offset)

    def point_iter(self) -> Iterator[Any]:
        yield self.offset

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        anchor = next(iter(points), None)
        if anchor is None:
            return
        x0, y0 = anchor
        self.inner.draw(_shifted(self.inner, x0, y0), backend, parent_dim)


@dataclass(eq=False)
class ComposedElement(Element):
    """A composed element with two or more components."""

    first: Element
    second: Element
    offset: Any

    def __add__(self, other: Element) -> ComposedElement:
        if not isinstance(other, Element):
            return NotImplemented
        return ComposedElement(
            first=self.first,
            second=ComposedElement(first=self.second, second=other, offset=(0, 0)),
            offset=self.offset,
        )

    def point_iter(self) -> Iterator[Any]:
        yield self.offset

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        anchor = next(iter(points), None)
        if anchor is None:
            return
        x0, y0 = anchor
        self.first.draw(_shifted(self.first, x0, y0), backend, parent_dim)
        self.second.draw(_shifted(self.second, x0, y0), backend, parent_dim)