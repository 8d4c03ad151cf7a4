import pytest

from plotelements.size import (
    RelativeDimension,
    RelativeSize,
    dimension_of,
    percent,
    percent_height,
    percent_width,
    size_in_pixels,
)


def test_relative_size():
    assert percent_height(10).in_pixels((100, 200)) == 20
    assert percent_width(10).in_pixels((100, 200)) == 10
    assert percent_width(-10).in_pixels((100, 200)) == -10

    bounded = percent_width(10).min(30)
    assert bounded.in_pixels((100, 200)) == 30
    assert bounded.in_pixels((400, 200)) == 40

    smaller = percent(10)
    assert smaller.in_pixels((100, 200)) == 10
    assert smaller.in_pixels((400, 200)) == 20


def test_upper_bound():
    bounded = percent_width(10).max(30)
    assert bounded.in_pixels((1000, 200)) == 30
    assert bounded.in_pixels((100, 200)) == 10


def test_bound_chaining_replaces():
    bounded = percent_width(10).min(30).min(5)
    assert bounded.in_pixels((100, 200)) == 10
    assert bounded.max(7).in_pixels((100, 200)) == 7


def test_percent_builds_relative_size():
    assert percent_height(50) == RelativeSize(RelativeDimension.HEIGHT, 0.5)


def test_dimension_of_objects():
    class Area:
        def dim(self):
            return (30, 40)

    class Backend:
        def get_size(self):
            return (50, 60)

    assert dimension_of(Area()) == (30, 40)
    assert dimension_of(Backend()) == (50, 60)
    assert percent_height(10).in_pixels(Backend()) == 6


def test_dimension_of_errors():
    with pytest.raises(TypeError):
        dimension_of(object())
    with pytest.raises(ValueError):
        dimension_of((1, 2, 3))


def test_size_in_pixels():
    assert size_in_pixels(7, (100, 200)) == 7
    assert size_in_pixels(percent_height(10), (100, 200)) == 20
    with pytest.raises(TypeError):
        size_in_pixels("big", (100, 200))
    with pytest.raises(TypeError):
        size_in_pixels(True, (100, 200))