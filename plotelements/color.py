"""Colors, palettes and shape styles."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar


def _check_channel(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"color channel {name} must be an int, got {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"color channel {name} must be within 0..255, got {value}")


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


class Color(ABC):
    """Any color representation."""

    @abstractmethod
    def rgb(self) -> tuple[int, int, int]:
        """The color as an (r, g, b) tuple of 0..255 values."""

    def alpha(self) -> float:
        """The opacity of the color."""
        return 1.0

    def mix(self, value: float) -> RGBAColor:
        """The color with its opacity scaled by ``value``."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha() * value)

    def to_rgba(self) -> RGBAColor:
        """The color as an RGBA color."""
        r, g, b = self.rgb()
        return RGBAColor(r, g, b, self.alpha())

    def filled(self) -> ShapeStyle:
        """A filled shape style of this color."""
        return ShapeStyle.from_color(self).filled()

    def stroke_width(self, width: int) -> ShapeStyle:
        """A shape style of this color with the given stroke width."""
        return ShapeStyle.from_color(self).stroke_width(width)


@dataclass(frozen=True)
class RGBAColor(Color):
    """A color with red, green, blue channels and an opacity."""

    r: int
    g: int
    b: int
    a: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))
        object.__setattr__(self, "a", float(self.a))

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def alpha(self) -> float:
        return self.a

    def to_rgba(self) -> RGBAColor:
        return self


@dataclass(frozen=True)
class RGBColor(Color):
    """An opaque color described by its RGB value."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HSLColor(Color):
    """An opaque color in HSL space; each component is clamped to 0..1."""

    h: float
    s: float
    l: float  # noqa: E741

    def rgb(self) -> tuple[int, int, int]:
        h, s, l = (min(max(v, 0.0), 1.0) for v in (self.h, self.s, self.l))

        if s == 0.0:
            value = _round_half_away(l * 255.0)
            return (value, value, value)

        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q

        def convert(t: float) -> int:
            if t < 0.0:
                t += 1.0
            if t > 1.0:
                t -= 1.0
            if t < 1.0 / 6.0:
                value = p + (q - p) * 6.0 * t
            elif t < 1.0 / 2.0:
                value = q
            elif t < 2.0 / 3.0:
                value = p + (q - p) * (2.0 / 3.0 - t) * 6.0
            else:
                value = p
            return min(max(_round_half_away(value * 255.0), 0), 255)

        return (convert(h + 1.0 / 3.0), convert(h), convert(h - 1.0 / 3.0))


class Palette:
    """A fixed list of colors to pick from."""

    COLORS: ClassVar[tuple[tuple[int, int, int], ...]] = ()

    @classmethod
    def pick(cls, idx: int) -> PaletteColor:
        """The color at ``idx``, wrapping around the palette."""
        return PaletteColor(cls, idx)


@dataclass(frozen=True)
class PaletteColor(Color):
    """A color taken from a palette."""

    palette: type[Palette]
    index: int

    def __post_init__(self) -> None:
        if not self.palette.COLORS:
            raise ValueError(f"palette {self.palette.__name__} has no colors")
        object.__setattr__(self, "index", self.index % len(self.palette.COLORS))

    def rgb(self) -> tuple[int, int, int]:
        return self.palette.COLORS[self.index]


class Palette99(Palette):
    """The palette of 99% accessibility."""

    COLORS = (
        (230, 25, 75),
        (60, 180, 75),
        (255, 225, 25),
        (0, 130, 200),
        (245, 130, 48),
        (145, 30, 180),
        (70, 240, 240),
        (240, 50, 230),
        (210, 245, 60),
        (250, 190, 190),
        (0, 128, 128),
        (230, 190, 255),
        (170, 110, 40),
        (255, 250, 200),
        (128, 0, 0),
        (170, 255, 195),
        (128, 128, 0),
        (255, 215, 180),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    )


class Palette9999(Palette):
    """The palette of 99.99% accessibility."""

    COLORS = (
        (255, 225, 25),
        (0, 130, 200),
        (245, 130, 48),
        (250, 190, 190),
        (230, 190, 255),
        (128, 0, 0),
        (0, 0, 128),
        (128, 128, 128),
        (0, 0, 0),
    )


class Palette100(Palette):
    """The palette of 100% accessibility."""

    COLORS = ((255, 225, 25), (0, 130, 200), (128, 128, 128), (0, 0, 0))


@dataclass(frozen=True)
class ShapeStyle:
    """Color, fill and stroke width of a shape."""

    color: RGBAColor
    is_filled: bool = False
    line_width: int = 1

    @classmethod
    def from_color(cls, color: Color) -> ShapeStyle:
        """An unfilled style of the given color with a stroke width of 1."""
        return cls(color=color.to_rgba(), is_filled=False, line_width=1)

    def filled(self) -> ShapeStyle:
        """The same style, filled."""
        return replace(self, is_filled=True)

    def stroke_width(self, width: int) -> ShapeStyle:
        """The same style with another stroke width."""
        if width < 0:
            raise ValueError(f"stroke width must not be negative, got {width}")
        return replace(self, line_width=width)


def as_shape_style(value: ShapeStyle | Color) -> ShapeStyle:
    """Turn a shape style or a color into a shape style."""
    if isinstance(value, ShapeStyle):
        return value
    if isinstance(value, Color):
        return ShapeStyle.from_color(value)
    raise TypeError(f"cannot make a shape style from {value!r}")


WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)
RED = RGBColor(255, 0, 0)
GREEN = RGBColor(0, 255, 0)
BLUE = RGBColor(0, 0, 255)
YELLOW = RGBColor(255, 255, 0)
CYAN = RGBColor(0, 255, 255)
MAGENTA = RGBColor(255, 0, 255)
TRANSPARENT = RGBAColor(0, 0, 0, 0.0)