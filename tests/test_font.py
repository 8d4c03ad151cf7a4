import pytest

from plotelements.color import RED
from plotelements.font import (
    FontDesc,
    FontError,
    FontFamily,
    FontStyle,
    FontTransform,
    estimate_layout,
    into_font,
)
from plotelements.text_style import Pos


def test_font_error_default_message():
    assert str(FontError()) == "General Error"


@pytest.mark.parametrize(
    "transform, expected",
    [
        (FontTransform.NONE, (3, 5)),
        (FontTransform.ROTATE90, (-5, 3)),
        (FontTransform.ROTATE180, (-3, -5)),
        (FontTransform.ROTATE270, (5, -3)),
    ],
)
def test_transform(transform, expected):
    assert transform.transform(3, 5) == expected


def test_family_parse_generic_case_insensitive():
    assert FontFamily.parse("Serif") == FontFamily.SERIF
    assert FontFamily.parse("SANS-SERIF").as_str() == "sans-serif"
    assert FontFamily.parse("monospace") == FontFamily.MONOSPACE


def test_family_parse_named_keeps_case():
    assert FontFamily.parse("Arial").as_str() == "Arial"


def test_style_parse():
    assert FontStyle.parse("ITALIC") is FontStyle.ITALIC
    assert FontStyle.parse("bold") is FontStyle.BOLD
    assert FontStyle.parse("whatever") is FontStyle.NORMAL


def test_into_font_from_name():
    font = into_font("sans-serif")
    assert font.family == FontFamily.SANS_SERIF
    assert font.size == 1.0
    assert font.style is FontStyle.NORMAL
    assert font.transform is FontTransform.NONE


def test_into_font_from_tuples():
    font = into_font(("Arial", 20))
    assert font.name == "Arial"
    assert font.size == 20.0
    styled = into_font((FontFamily.SERIF, 10, "bold"))
    assert styled.style is FontStyle.BOLD
    assert styled.size == 10.0


def test_into_font_passthrough():
    font = FontDesc(FontFamily.SERIF, 12)
    assert into_font(font) is font


@pytest.mark.parametrize("value", [42, ("a",), ("a", "big"), ("a", 1, 2, 3)])
def test_into_font_rejects(value):
    with pytest.raises(TypeError):
        into_font(value)


def test_resize_style_transform_keep_other_fields():
    font = into_font(("serif", 10, "italic"))
    resized = font.resize(30)
    assert (resized.family, resized.size, resized.style) == (font.family, 30.0, FontStyle.ITALIC)
    bold = font.with_style(FontStyle.BOLD)
    assert (bold.size, bold.style) == (10.0, FontStyle.BOLD)
    rotated = font.with_transform(FontTransform.ROTATE90)
    assert rotated.transform is FontTransform.ROTATE90
    assert font.transform is FontTransform.NONE


def test_color_makes_text_style():
    font = into_font(("serif", 10))
    style = font.color(RED)
    assert style.font == font
    assert style.color == RED.to_rgba()
    assert style.pos == Pos.default()


def test_layout_of_zero_size_is_empty():
    assert estimate_layout(0, "abc") == ((0, 0), (0, 0))


def test_layout_empty_text_has_no_width():
    (min_x, min_y), (max_x, max_y) = into_font(("serif", 20)).layout_box("")
    assert min_x == 0 and max_x == 0
    assert min_y < 0 < max_y


def test_layout_width_grows_with_text():
    font = into_font(("serif", 20))
    short = font.layout_box("ab")[1][0]
    long = font.layout_box("abcdefgh")[1][0]
    assert long > short > 0


def test_layout_counts_utf8_bytes():
    font = into_font(("serif", 20))
    assert font.layout_box("\u00e9") == font.layout_box("ab")


def test_box_size_rotation_swaps_sides():
    font = into_font(("serif", 20))
    w, h = font.box_size("hello")
    assert font.with_transform(FontTransform.ROTATE90).box_size("hello") == (h, w)
    assert font.with_transform(FontTransform.ROTATE180).box_size("hello") == (w, h)