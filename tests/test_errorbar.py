import pytest

from plotelements.color import WHITE
from plotelements.errorbar import ErrorBar, ErrorBarOrient


class Recorder:
    def __init__(self):
        self.calls = []

    def draw_line(self, a, b, style):
        self.calls.append(("draw_line", a, b, style))

    def draw_circle(self, center, radius, style, filled):
        self.calls.append(("draw_circle", center, radius, style, filled))


def _draw(element, backend):
    element.draw(iter(element.point_iter()), backend, (300, 300))


def test_preserve_stroke_width():
    style = WHITE.filled().stroke_width(5)
    v = ErrorBar.new_vertical(100, 20, 50, 70, style, 3)
    h = ErrorBar.new_horizontal(100, 20, 50, 70, style, 3)
    assert v.style.line_width == 5
    assert h.style.line_width == 5
    backend = Recorder()
    _draw(h, backend)
    _draw(v, backend)
    lines = [c for c in backend.calls if c[0] == "draw_line"]
    assert len(lines) == 6
    assert [c[3] for c in lines[:3]] == [h.style] * 3
    assert [c[3] for c in lines[3:]] == [v.style] * 3
    assert all(c[3].line_width == 5 for c in lines)


def test_point_iter_orientation():
    v = ErrorBar.new_vertical(100, 20, 50, 70, WHITE, 3)
    h = ErrorBar.new_horizontal(100, 20, 50, 70, WHITE, 3)
    assert list(v.point_iter()) == [(100, 20), (100, 50), (100, 70)]
    assert list(h.point_iter()) == [(20, 100), (50, 100), (70, 100)]


def test_vertical_draw_calls():
    style = WHITE.filled().stroke_width(5)
    v = ErrorBar.new_vertical(100, 20, 50, 70, style, 3)
    backend = Recorder()
    _draw(v, backend)
    assert backend.calls == [
        ("draw_line", (99, 20), (101, 20), v.style),
        ("draw_line", (99, 70), (101, 70), v.style),
        ("draw_line", (100, 20), (100, 70), v.style),
        ("draw_circle", (100, 50), 1, v.style, True),
    ]


def test_horizontal_ending_coord():
    assert ErrorBarOrient.HORIZONTAL.ending_coord((20, 100), 3) == ((20, 99), (20, 101))
    assert ErrorBarOrient.VERTICAL.ending_coord((100, 20), 3) == ((99, 20), (101, 20))


def test_too_few_points_raises():
    v = ErrorBar.new_vertical(100, 20, 50, 70, WHITE, 3)
    with pytest.raises(ValueError):
        v.draw(iter([(1, 1), (2, 2)]), Recorder(), (300, 300))