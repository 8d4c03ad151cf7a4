"""An element holding a bitmap to blit onto the backend."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from plotelements.element import BackendCoord, Element

RGB_PIXEL_SIZE = 3


def _required_length(size: tuple[int, int], pixel_size: int) -> int:
    width, height = size
    if width < 0 or height < 0:
        raise ValueError(f"bitmap size must not be negative, got {size!r}")
    if pixel_size <= 0:
        raise ValueError(f"pixel size must be positive, got {pixel_size}")
    return width * height * pixel_size


@dataclass(eq=False)
class BitMapElement(Element):
    """A bitmap of ``size`` pixels anchored at its upper left corner.

    Without a buffer, a zero-filled one of the right length is allocated.
    """

    pos: Any
    size: tuple[int, int]
    image: bytes | bytearray | memoryview | None = None
    pixel_size: int = RGB_PIXEL_SIZE

    def __post_init__(self) -> None:
        self.size = (int(self.size[0]), int(self.size[1]))
        needed = _required_length(self.size, self.pixel_size)
        if self.image is None:
            self.image = bytearray(needed)
        elif len(self.image) < needed:
            raise ValueError(
                f"buffer of {len(self.image)} bytes is too small for a "
                f"{self.size[0]}x{self.size[1]} bitmap ({needed} bytes)"
            )

    @classmethod
    def with_buffer(
        cls,
        pos: Any,
        size: tuple[int, int],
        buffer: bytes | bytearray | memoryview,
        pixel_size: int = RGB_PIXEL_SIZE,
    ) -> BitMapElement:
        """A bitmap using ``buffer`` as its pixel data, without copying it."""
        return cls(pos, size, buffer, pixel_size)

    def mutable_buffer(self) -> bytearray | memoryview:
        """The pixel data as a writable buffer, copying read-only data first."""
        image = self.image
        if isinstance(image, bytearray):
            return image
        if isinstance(image, memoryview) and not image.readonly:
            return image
        self.image = bytearray(image)
        return self.image

    def copy_to(self, pos: Any) -> BitMapElement:
        """A bitmap sharing this pixel data, placed at ``pos``."""
        return BitMapElement(pos, self.size, self.image, self.pixel_size)

    def move_to(self, pos: Any) -> None:
        """Move the bitmap to ``pos``."""
        self.pos = pos

    def point_iter(self) -> Iterator[Any]:
        yield self.pos

    def draw(self, points: Iterable[BackendCoord], backend: Any, parent_dim: tuple[int, int]) -> None:
        first = next(iter(points), None)
        if first is not None:
            backend.blit_bitmap(tuple(first), self.size, self.image)