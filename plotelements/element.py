"""The element protocol: something with key points that can draw itself on a backend.

An element lists its key points in the guest coordinate system through
``point_iter``. Once those points are translated into pixel coordinates,
``draw`` sends the drawing calls to a backend. A backend offers any of the
methods ``draw_pixel``, ``draw_line``, ``draw_rect``, ``draw_path``,
``draw_circle``, ``fill_polygon``, ``draw_text`` and ``blit_bitmap``, and
raises an exception when drawing fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any

BackendCoord = tuple[int, int]


class Element(ABC):
    """A drawing unit with key points in some coordinate system."""

    @abstractmethod
    def point_iter(self) -> Iterator[Any]:
        """The key points of the element in its own coordinate system."""

    @abstractmethod
    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: Any,
        parent_dim: tuple[int, int],
    ) -> None:
        """Draw the element given its key points already translated into pixels."""