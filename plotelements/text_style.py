"""Text styles: font, color and anchor position."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any

from plotelements.color import BLACK, Color, RGBAColor
from plotelements.font import FontDesc, FontFamily, FontTransform, _as_family, _as_style, into_font
from plotelements.size import size_in_pixels


class HPos(enum.Enum):
    """Horizontal position of the anchor point relative to the text."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VPos(enum.Enum):
    """Vertical position of the anchor point relative to the text."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Pos:
    """The anchor position of a text."""

    h_pos: HPos = HPos.LEFT
    v_pos: VPos = VPos.TOP

    @classmethod
    def default(cls) -> Pos:
        """The top left anchor."""
        return cls(HPos.LEFT, VPos.TOP)


@dataclass(frozen=True)
class TextStyle:
    """The style of a text."""

    font: FontDesc
    color: RGBAColor = BLACK.to_rgba()
    pos: Pos = Pos()

    @classmethod
    def from_font(cls, font: Any) -> TextStyle:
        """A black, top-left anchored style of the given font."""
        return cls(font=into_font(font), color=BLACK.to_rgba(), pos=Pos.default())

    def with_color(self, color: Color) -> TextStyle:
        """The same style in another color."""
        return replace(self, color=color.to_rgba())

    def with_transform(self, transform: FontTransform) -> TextStyle:
        """The same style with the font transformed."""
        return replace(self, font=self.font.with_transform(transform))

    def with_pos(self, pos: Pos) -> TextStyle:
        """The same style with another anchor position."""
        return replace(self, pos=pos)


def as_text_style(value: Any) -> TextStyle:
    """Turn a text style or anything a font can be made from into a text style."""
    if isinstance(value, TextStyle):
        return value
    return TextStyle.from_font(value)


def into_text_style(value: Any, parent: Any) -> TextStyle:
    """Make a text style, resolving a (family, size[, style]) size against ``parent``."""
    if isinstance(value, (TextStyle, FontDesc, FontFamily, str)):
        return as_text_style(value)
    if isinstance(value, tuple) and len(value) in (2, 3):
        family = _as_family(value[0])
        size = size_in_pixels(value[1], parent)
        if len(value) == 3:
            return TextStyle.from_font(FontDesc(family, size, _as_style(value[2])))
        return TextStyle.from_font(FontDesc(family, size))
    raise TypeError(f"cannot make a text style from {value!r}")