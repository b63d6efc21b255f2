import pytest

from plotstyle.size import (
    RelativeSize,
    RelativeSizeWithBound,
    SizeKind,
    dimension_of,
    in_pixels,
    percent,
    percent_height,
    percent_width,
)


class _Area:
    def __init__(self, width, height):
        self._dims = (width, height)

    def dim(self):
        return self._dims


def test_relative_size():
    size = percent_height(10)
    assert size.in_pixels((100, 200)) == 20

    size = percent_width(10)
    assert size.in_pixels((100, 200)) == 10

    size = percent_width(-10)
    assert size.in_pixels((100, 200)) == -10

    size = percent_width(10).min(30)
    assert size.in_pixels((100, 200)) == 30
    assert size.in_pixels((400, 200)) == 40

    size = percent(10)
    assert size.in_pixels((100, 200)) == 10
    assert size.in_pixels((400, 200)) == 20


def test_constructors_store_ratio():
    assert percent_width(50) == RelativeSize(SizeKind.WIDTH, 0.5)
    assert percent_height(25) == RelativeSize(SizeKind.HEIGHT, 0.25)
    assert percent(100) == RelativeSize(SizeKind.SMALLER, 1.0)


def test_dimension_of_pair_and_object():
    assert dimension_of((100, 200)) == (100, 200)
    assert dimension_of(_Area(30, 40)) == (30, 40)


def test_dimension_of_rejects_other_values():
    with pytest.raises(TypeError):
        dimension_of(5)


def test_relative_size_with_object_parent():
    assert percent_height(10).in_pixels(_Area(100, 200)) == 20
    assert percent(10).in_pixels(_Area(400, 200)) == 20


def test_rounds_half_away_from_zero():
    assert percent_width(50).in_pixels((5, 0)) == 3
    assert percent_width(-50).in_pixels((5, 0)) == -3


def test_in_pixels_of_plain_numbers():
    assert in_pixels(5, (100, 200)) == 5
    assert in_pixels(3.9, (100, 200)) == 3
    assert in_pixels(-3.9, (100, 200)) == -3
    assert in_pixels(float("nan"), (100, 200)) == 0


def test_in_pixels_of_relative_sizes():
    assert in_pixels(percent_height(10), (100, 200)) == 20
    assert in_pixels(percent_width(10).min(30), (100, 200)) == 30


def test_in_pixels_rejects_unknown():
    with pytest.raises(TypeError):
        in_pixels("10", (100, 200))
    with pytest.raises(TypeError):
        in_pixels(True, (100, 200))


def test_upper_bound():
    size = percent_width(10).max(15)
    assert size.in_pixels((100, 200)) == 10
    assert size.in_pixels((400, 200)) == 15


def test_upper_bound_uses_unbounded_size():
    size = percent_width(10).min(30).max(50)
    assert size.in_pixels((100, 200)) == 10
    assert size.in_pixels((1000, 200)) == 50


def test_bound_setters_replace_values():
    size = percent(10).min(5).min(7).max(9)
    assert size == RelativeSizeWithBound(percent(10), min_px=7, max_px=9)
    assert size.max(20).max_px == 20