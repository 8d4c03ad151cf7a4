"""Font descriptions and a size estimate for laid-out text."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, ClassVar

from plotelements.color import Color

if TYPE_CHECKING:
    from plotelements.text_style import TextStyle

LayoutBox = tuple[tuple[int, int], tuple[int, int]]


def _round_half_away(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


class FontError(Exception):
    """Raised when a font operation fails."""

    def __init__(self, message: str = "General Error") -> None:
        super().__init__(message)


class FontTransform(enum.Enum):
    """A rotation applied to rendered text."""

    NONE = 0
    ROTATE90 = 90
    ROTATE180 = 180
    ROTATE270 = 270

    def transform(self, x: int, y: int) -> tuple[int, int]:
        """The coordinate after the rotation."""
        if self is FontTransform.ROTATE90:
            return (-y, x)
        if self is FontTransform.ROTATE180:
            return (-x, -y)
        if self is FontTransform.ROTATE270:
            return (y, -x)
        return (x, y)


_GENERIC_FAMILIES = ("serif", "sans-serif", "monospace")


@dataclass(frozen=True)
class FontFamily:
    """A generic family (serif, sans-serif, monospace) or a specific font name."""

    name: str

    SERIF: ClassVar[FontFamily]
    SANS_SERIF: ClassVar[FontFamily]
    MONOSPACE: ClassVar[FontFamily]

    @classmethod
    def parse(cls, value: str) -> FontFamily:
        """The family named by ``value``; generic names are matched case-insensitively."""
        lowered = value.lower()
        if lowered in _GENERIC_FAMILIES:
            return cls(lowered)
        return cls(value)

    def as_str(self) -> str:
        """A CSS compatible name of the family."""
        return self.name


FontFamily.SERIF = FontFamily("serif")
FontFamily.SANS_SERIF = FontFamily("sans-serif")
FontFamily.MONOSPACE = FontFamily("monospace")


class FontStyle(enum.Enum):
    """The style variant of a font."""

    NORMAL = "normal"
    OBLIQUE = "oblique"
    ITALIC = "italic"
    BOLD = "bold"

    @classmethod
    def parse(cls, value: str) -> FontStyle:
        """The style named by ``value``; unknown names give NORMAL."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.NORMAL


def estimate_layout(size: float, text: str) -> LayoutBox:
    """A crude estimate of the box the text takes at the given font size."""
    em = size / 1.24 / 1.24
    length = len(text.encode("utf-8"))
    return (
        (0, -_round_half_away(em)),
        (_round_half_away(em * 0.7 * length), _round_half_away(em * 0.24)),
    )


@dataclass(frozen=True)
class FontDesc:
    """A font: family, size, style and transformation."""

    family: FontFamily
    size: float = 1.0
    style: FontStyle = FontStyle.NORMAL
    transform: FontTransform = FontTransform.NONE

    def __post_init__(self) -> None:
        if isinstance(self.family, str):
            object.__setattr__(self, "family", FontFamily.parse(self.family))
        if isinstance(self.style, str):
            object.__setattr__(self, "style", FontStyle.parse(self.style))
        object.__setattr__(self, "size", float(self.size))

    @property
    def name(self) -> str:
        """The name of the font family."""
        return self.family.as_str()

    def resize(self, size: float) -> FontDesc:
        """The same font with another size."""
        return replace(self, size=float(size))

    def with_style(self, style: FontStyle | str) -> FontDesc:
        """The same font with another style."""
        if isinstance(style, str):
            style = FontStyle.parse(style)
        return replace(self, style=style)

    def with_transform(self, transform: FontTransform) -> FontDesc:
        """The same font with another transformation."""
        return replace(self, transform=transform)

    def color(self, color: Color) -> TextStyle:
        """A text style of this font in the given color."""
        from plotelements.text_style import Pos, TextStyle

        return TextStyle(font=self, color=color.to_rgba(), pos=Pos.default())

    def layout_box(self, text: str) -> LayoutBox:
        """The box the text takes in this font, before transformation."""
        return estimate_layout(self.size, text)

    def box_size(self, text: str) -> tuple[int, int]:
        """The (width, height) the text takes once the transformation is applied."""
        (min_x, min_y), (max_x, max_y) = self.layout_box(text)
        w, h = self.transform.transform(max_x - min_x, max_y - min_y)
        return (abs(w), abs(h))


def _as_family(value: Any) -> FontFamily:
    if isinstance(value, FontFamily):
        return value
    if isinstance(value, str):
        return FontFamily.parse(value)
    raise TypeError(f"{value!r} is not a font family")


def _as_style(value: Any) -> FontStyle:
    if isinstance(value, FontStyle):
        return value
    if isinstance(value, str):
        return FontStyle.parse(value)
    raise TypeError(f"{value!r} is not a font style")


def _as_size(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{value!r} is not a font size")
    return float(value)


def into_font(value: Any) -> FontDesc:
    """Make a font from a font, a family, a name, or a (family, size[, style]) tuple."""
    if isinstance(value, FontDesc):
        return value
    if isinstance(value, (str, FontFamily)):
        return FontDesc(_as_family(value), 1.0, FontStyle.NORMAL)
    if isinstance(value, tuple):
        if len(value) == 2:
            family, size = value
            return FontDesc(_as_family(family), _as_size(size), FontStyle.NORMAL)
        if len(value) == 3:
            family, size, style = value
            return FontDesc(_as_family(family), _as_size(size), _as_style(style))
    raise TypeError(f"cannot make a font from {value!r}")