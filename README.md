# plotelements

Building blocks for drawing figures and charts onto a pixel-based drawing
backend that you supply: colors, palettes, shape and text styles, font
descriptions with a layout estimate, drawable elements and data series.

The package needs nothing beyond the Python standard library (3.10 or later).

## Installation

```bash
pip install plotelements
```

## Modules

- `plotelements.color`: the `Color` base class, `RGBColor`, `RGBAColor`,
  `HSLColor`, `PaletteColor`, the palettes `Palette99`, `Palette9999` and
  `Palette100` (pick a color with `Palette99.pick(idx)`, wrapping around),
  `ShapeStyle` and `as_shape_style`. Predefined colors: `WHITE`, `BLACK`,
  `RED`, `GREEN`, `BLUE`, `YELLOW`, `CYAN`, `MAGENTA` and `TRANSPARENT`.
  Any color offers `rgb()`, `alpha()`, `mix(value)`, `to_rgba()`, `filled()`
  and `stroke_width(width)`.
- `plotelements.size`: relative sizes made with `percent_width`,
  `percent_height` and `percent` (the smaller side), resolved against a
  parent with `in_pixels(parent)`; `.min(...)` and `.max(...)` add bounds in
  pixels. `size_in_pixels(size, parent)` resolves either an integer or a
  relative size.
- `plotelements.font`: `FontDesc`, `FontFamily`, `FontStyle`,
  `FontTransform`, `FontError`, `estimate_layout` and `into_font`.
- `plotelements.text_style`: `TextStyle`, the anchor position `Pos` with
  `HPos` and `VPos`, `as_text_style` and `into_text_style`.
- `plotelements.element`: the `Element` base class.
- `plotelements.shapes`: `Pixel`, `PathElement`, `Rectangle`, `Circle`,
  `Polygon`.
- `plotelements.markers`: `Cross` and `TriangleMarker`.
- `plotelements.text`: `Text`, `MultiLineText` and `layout_multiline_text`.
- `plotelements.errorbar`: `ErrorBar` and `ErrorBarOrient`.
- `plotelements.candlestick`: `CandleStick`.
- `plotelements.boxplot`: `Boxplot` and `BoxplotOrient`.
- `plotelements.bitmap`: `BitMapElement`.
- `plotelements.composable`: `EmptyElement`, `BoxedElement`,
  `ComposedElement`.
- `plotelements.dynamic`: `DynElement` and `into_dyn`.
- `plotelements.series`: `LineSeries`, `PointSeries`, `AreaSeries` and
  `Histogram`.

## Elements and backends

Every element offers `point_iter()`, which yields its key points in its own
(guest) coordinate system, and `draw(points, backend, parent_dim)`, which
receives those points already mapped to pixel coordinates and calls methods
on the backend. Depending on the element these are `draw_pixel`,
`draw_line`, `draw_rect`, `draw_path`, `draw_circle`, `fill_polygon`,
`draw_text` and `blit_bitmap`. A backend is any object with the methods the
elements you draw need; it reports failure by raising.

```python
from plotelements.color import RED
from plotelements.markers import Cross


class RecordingBackend:
    def __init__(self):
        self.lines = []

    def draw_line(self, start, end, style):
        self.lines.append((start, end))


backend = RecordingBackend()
Cross((10, 10), 3, RED).draw([(10, 10)], backend, (100, 100))
print(backend.lines)  # [((7, 7), (13, 13)), ((7, 13), (13, 7))]
```

Sizes of circles and markers may be relative; they are resolved against
`parent_dim`:

```python
from plotelements.size import percent_height

percent_height(10).in_pixels((100, 200))  # 20
```

## Composing elements

```python
from plotelements.color import RED
from plotelements.composable import EmptyElement
from plotelements.shapes import Circle
from plotelements.text import Text

label = (
    EmptyElement.at((0.5, 0.6))
    + Circle((0, 0), 3, RED)
    + Text("(0.50,0.60)", (10, 0), ("sans-serif", 15))
)
```

The only key point of a composed element is its anchor. When drawn, each
component receives its own points as pixel offsets added to the anchor's
pixel position.

`into_dyn(element)` wraps any element in a `DynElement`, which keeps a copy
of the element's key points and draws through the wrapped element.

## Series

A series is an iterable of elements.

- `LineSeries(data, style)` yields one `PathElement` through the points;
  with `.with_point_size(n)` it first yields a `Circle` of radius `n` at each
  point.
- `AreaSeries(data, baseline, area_style)` yields a `Polygon` closed down to
  the baseline, then the border `PathElement` (transparent unless set with
  `.with_border_style(...)`).
- `PointSeries(data, size, style, element=Circle)` yields one element per
  point, made by the class's `make_point` or by any callable taking
  `(pos, size, style)`; `PointSeries.of_element(...)` takes such a callable.
- `Histogram(data, margin=5, style=GREEN.filled())` sums the values given for
  equal keys and yields one `Rectangle` per key. Keys are integers stepped by
  one unless `next_value` and `previous_value` are given;
  `Histogram.vertical(...)` and `Histogram.horizontal(...)` start empty, and
  `with_data`, `with_style`, `with_style_func`, `with_baseline`,
  `with_baseline_func` and `with_margin` return adjusted copies.

```python
from plotelements.series import Histogram

bars = list(Histogram([(1, 3), (1, 2), (2, 4)]))
[b.points for b in bars]  # [((1, 5), (2, 0)), ((2, 4), (3, 0))]
```

## Text and fonts

`FontDesc` records a family, size, style and rotation. Its `layout_box` and
`box_size` give a rough estimate of the space a string takes, based on the
font size and the string's length; no font files are read.
`MultiLineText.from_str(text, pos, style, max_width)` splits text into lines,
wrapping lines wider than `max_width` pixels (0 turns wrapping off), and
`estimate_dimension()` and `compute_line_layout()` use the same estimate.

## What this package does not do

It renders nothing by itself: there is no bitmap, SVG or window backend, no
chart builder, no axis or mesh drawing, and no mapping from data coordinates
to pixels. Elements are handed points already in pixels, and the drawing
calls go to a backend object you provide. Fonts are never loaded or
rasterised; text sizes are estimates. `Boxplot` takes five values (or an
object whose `values()` returns five) and does not compute quartiles from
raw data.

## Running the tests

```bash
pip install -e ".[test]"
pytest
```