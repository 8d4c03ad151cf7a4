"""A uniform container for elements of any kind."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from plotelements.element import BackendCoord, Element


@dataclass(eq=False)
class DynElement(Element):
    """An element wrapper holding a snapshot of the element's key points."""

    points: list[Any]
    drawable: Element

    def point_iter(self) -> Iterator[Any]:
        return iter(self.points)

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        self.drawable.draw(points, backend, parent_dim)


def into_dyn(element: Element) -> DynElement:
    """Wrap an element, copying its key points."""
    if not isinstance(element, Element):
        raise TypeError(f"{element!r} is not an element")
    return DynElement(points=list(element.point_iter()), drawable=element)