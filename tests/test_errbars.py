import math

import pytest

from plotkit.errbars import DEFAULT_CAP_WIDTH, ErrorRange, XErrorBars, YErrorBars

POINTS = [(1.0, 2.0), (3.0, 4.0), (-2.0, 7.0)]
ERRORS = [(0.5, 1.0), (-1.0, 2.0), ErrorRange(0.25, -0.75)]


def test_default_cap_width():
    bars = YErrorBars(POINTS, ERRORS)
    assert bars.cap_width == DEFAULT_CAP_WIDTH == 5.0


def test_errors_are_copied_as_ranges():
    bars = YErrorBars(POINTS, ERRORS)
    assert bars.errors[0] == ErrorRange(0.5, 1.0)
    assert bars.errors[2] == ErrorRange(0.25, -0.75)


def test_y_bars_use_absolute_errors():
    bars = YErrorBars(POINTS, ERRORS).bars()
    assert bars[1] == (3.0, 4.0 - 1.0, 4.0 + 2.0)
    for (x, y), (bx, lo, hi) in zip(POINTS, bars):
        assert bx == x
        assert lo <= y <= hi


def test_x_bars_use_absolute_errors():
    bars = XErrorBars(POINTS, ERRORS).bars()
    for (x, y), (by, lo, hi) in zip(POINTS, bars):
        assert by == y
        assert lo <= x <= hi


def test_y_data_range_covers_bars():
    eb = YErrorBars(POINTS, ERRORS)
    xmin, xmax, ymin, ymax = eb.data_range()
    assert (xmin, xmax) == (min(p[0] for p in POINTS), max(p[0] for p in POINTS))
    assert ymin == min(lo for _, lo, _ in eb.bars())
    assert ymax == max(hi for _, _, hi in eb.bars())


def test_x_data_range_covers_bars():
    eb = XErrorBars(POINTS, ERRORS)
    xmin, xmax, ymin, ymax = eb.data_range()
    assert (ymin, ymax) == (min(p[1] for p in POINTS), max(p[1] for p in POINTS))
    assert xmin == min(lo for _, lo, _ in eb.bars())
    assert xmax == max(hi for _, _, hi in eb.bars())


def test_empty_range_is_inverted_infinity():
    assert YErrorBars([], []).data_range() == (math.inf, -math.inf, math.inf, -math.inf)


@pytest.mark.parametrize("cls", [XErrorBars, YErrorBars])
def test_nan_error_rejected(cls):
    with pytest.raises(ValueError):
        cls([(0.0, 0.0)], [(math.nan, 1.0)])


@pytest.mark.parametrize("cls", [XErrorBars, YErrorBars])
def test_infinite_point_rejected(cls):
    with pytest.raises(ValueError):
        cls([(math.inf, 0.0)], [(1.0, 1.0)])


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        YErrorBars(POINTS, ERRORS[:2])