from plotelements.color import GREEN, RED, ShapeStyle
from plotelements.markers import Cross, TriangleMarker
from plotelements.size import percent


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def draw_line(self, start, end, style):
        self.calls.append(("line", start, end, style))

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", list(points), color))


def render(element, dim=(300, 300)):
    backend = RecordingBackend()
    element.draw(element.point_iter(), backend, dim)
    return backend.calls


def test_cross_draws_two_lines_through_center():
    style = ShapeStyle.from_color(RED).stroke_width(2)
    calls = render(Cross((50, 60), 5, style))
    assert len(calls) == 2
    for kind, start, end, drawn_style in calls:
        assert kind == "line"
        assert drawn_style == style
        assert ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2) == (50, 60)
        assert abs(end[0] - start[0]) == 10
        assert abs(end[1] - start[1]) == 10


def test_cross_lines_are_different_diagonals():
    (_, s1, e1, _), (_, s2, e2, _) = render(Cross((50, 60), 5, RED))
    slope1 = (e1[1] - s1[1]) * (e1[0] - s1[0])
    slope2 = (e2[1] - s2[1]) * (e2[0] - s2[0])
    assert slope1 > 0 > slope2


def test_cross_relative_size():
    calls = render(Cross((0, 0), percent(10), RED), (100, 200))
    _, start, end, _ = calls[0]
    assert end[0] - start[0] == 20


def test_cross_make_point():
    cross = Cross.make_point((7, 8), 3, GREEN)
    assert list(cross.point_iter()) == [(7, 8)]
    assert cross.style == ShapeStyle.from_color(GREEN)


def test_triangle_fills_three_vertices_near_center():
    calls = render(TriangleMarker((50, 50), 10, GREEN))
    assert len(calls) == 1
    kind, vertices, color = calls[0]
    assert kind == "polygon"
    assert color == GREEN.to_rgba()
    assert len(vertices) == 3
    assert len(set(vertices)) == 3
    for vx, vy in vertices:
        assert abs(vx - 50) <= 11
        assert abs(vy - 50) <= 11


def test_triangle_points_up():
    _, vertices, _ = render(TriangleMarker((50, 50), 10, GREEN))[0]
    assert vertices[0] == (50, 40)
    assert all(vy > vertices[0][1] for _, vy in vertices[1:])


def test_triangle_make_point_and_empty_draw():
    marker = TriangleMarker.make_point((1, 2), 4, RED)
    assert list(marker.point_iter()) == [(1, 2)]
    backend = RecordingBackend()
    marker.draw(iter([]), backend, (10, 10))
    assert backend.calls == []