import pytest

from plotelements.color import BLUE, RED, ShapeStyle
from plotelements.shapes import Circle, PathElement, Pixel, Polygon, Rectangle
from plotelements.size import percent


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def draw_pixel(self, point, color):
        self.calls.append(("pixel", point, color))

    def draw_path(self, points, style):
        self.calls.append(("path", list(points), style))

    def draw_rect(self, upper_left, bottom_right, style, fill):
        self.calls.append(("rect", upper_left, bottom_right, style, fill))

    def draw_circle(self, center, radius, style, fill):
        self.calls.append(("circle", center, radius, style, fill))

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", list(points), color))


def render(element, dim=(300, 300)):
    backend = RecordingBackend()
    element.draw(element.point_iter(), backend, dim)
    return backend.calls


def test_pixel_element():
    calls = render(Pixel((150, 152), RED))
    assert calls == [("pixel", (150, 152), RED.to_rgba())]


def test_pixel_make_point_ignores_size():
    pixel = Pixel.make_point((3, 4), 99, RED)
    assert list(pixel.point_iter()) == [(3, 4)]
    assert pixel.style == ShapeStyle.from_color(RED)


def test_pixel_without_points_draws_nothing():
    backend = RecordingBackend()
    Pixel((1, 1), RED).draw(iter([]), backend, (10, 10))
    assert backend.calls == []


def test_path_element():
    calls = render(
        PathElement([(100, 101), (105, 107), (150, 157)], ShapeStyle.from_color(BLUE).stroke_width(5))
    )
    assert len(calls) == 1
    kind, path, style = calls[0]
    assert kind == "path"
    assert style.color == BLUE.to_rgba()
    assert style.line_width == 5
    assert path == [(100, 101), (105, 107), (150, 157)]


def test_rect_element_stroke():
    calls = render(Rectangle([(100, 101), (105, 107)], BLUE.stroke_width(5)))
    assert len(calls) == 1
    kind, upper, lower, style, fill = calls[0]
    assert kind == "rect"
    assert style.color == BLUE.to_rgba()
    assert fill is False
    assert style.line_width == 5
    assert [upper, lower] == [(100, 101), (105, 107)]


def test_rect_element_filled():
    calls = render(Rectangle([(100, 101), (105, 107)], BLUE.filled()))
    assert len(calls) == 1
    _, upper, lower, style, fill = calls[0]
    assert style.color == BLUE.to_rgba()
    assert fill is True
    assert [upper, lower] == [(100, 101), (105, 107)]


def test_rect_corners_are_normalised():
    forward = render(Rectangle([(100, 101), (105, 107)], BLUE))
    backward = render(Rectangle([(105, 107), (100, 101)], BLUE))
    assert forward == backward


def test_rect_margin():
    rect = Rectangle([(100, 101), (105, 107)], BLUE)
    assert rect.set_margin(1, 2, 3, 4) is rect
    _, upper, lower, _, _ = render(rect)[0]
    assert upper == (103, 102)
    assert lower == (101, 105)


def test_rect_needs_two_corners():
    with pytest.raises(ValueError):
        Rectangle([(1, 2)], BLUE)


def test_circle_element():
    calls = render(Circle((150, 151), 20, BLUE))
    assert len(calls) == 1
    kind, center, radius, style, fill = calls[0]
    assert kind == "circle"
    assert style.color == BLUE.to_rgba()
    assert fill is False
    assert center == (150, 151)
    assert radius == 20


def test_circle_relative_radius():
    _, _, radius, _, _ = render(Circle((0, 0), percent(10), BLUE), (100, 200))[0]
    assert radius == 10


def test_circle_negative_radius_is_clamped():
    _, _, radius, _, _ = render(Circle((0, 0), -5, BLUE))[0]
    assert radius == 0


def test_polygon_element():
    points = [(100, 100), (50, 500), (300, 400), (200, 300), (550, 200)]
    calls = render(Polygon(list(points), BLUE), (800, 800))
    assert len(calls) == 1
    kind, drawn, color = calls[0]
    assert kind == "polygon"
    assert color == BLUE.to_rgba()
    assert len(drawn) == len(points)
    assert drawn == points