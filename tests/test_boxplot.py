import pytest

from plotkit.boxplot import BoxPlot, five_stat, median

DATA = [1, 2, 3, 4, 5, 6, 7, 8, 9, 100]


def test_median_odd():
    assert median([1.0, 2.0, 3.0]) == 2.0


def test_median_even_averages_middle_pair():
    assert median([1.0, 2.0, 3.0, 4.0]) == 2.5


def test_median_single_and_empty():
    assert median([7.0]) == 7.0
    with pytest.raises(ValueError):
        median([])


def test_five_stat_with_outlier():
    stats = five_stat(DATA, 2.0)
    assert stats.location == 2.0
    assert stats.median == 5.5
    assert stats.quartile1 == 3
    assert stats.quartile3 == 8
    assert stats.min == 1
    assert stats.max == 100
    assert stats.outside == [DATA.index(100)]
    assert stats.adj_low == 1
    assert stats.adj_high == 9


def test_five_stat_keeps_original_order():
    values = [5.0, 1.0, 3.0]
    stats = five_stat(values, 0)
    assert stats.values == values
    assert stats.quartile1 <= stats.median <= stats.quartile3


def test_five_stat_single_value():
    stats = five_stat([4.0], 0)
    assert stats.median == stats.quartile1 == stats.quartile3 == 4.0
    assert stats.min == stats.max == stats.adj_low == stats.adj_high == 4.0
    assert stats.outside == []


def test_five_stat_empty_raises():
    with pytest.raises(ValueError):
        five_stat([], 0)


def test_negative_width_raises():
    with pytest.raises(ValueError):
        BoxPlot(-1, 0, DATA)


def test_cap_width_is_three_quarters_of_width():
    assert BoxPlot(8, 0, DATA).cap_width == 6


def test_data_range_vertical_and_horizontal():
    box = BoxPlot(20, 1.0, DATA)
    assert box.data_range() == (1.0, 1.0, 1, 100)
    box.horizontal = True
    assert box.data_range() == (1, 100, 1.0, 1.0)


def test_outside_labels():
    labels = [f"v{v}" for v in DATA]
    box = BoxPlot(20, 2.0, DATA)
    assert box.outside_labels(labels) == [(2.0, 100.0, "v100")]
    box.horizontal = True
    assert box.outside_labels(labels) == [(100.0, 2.0, "v100")]


def test_outside_labels_none_when_no_outliers():
    box = BoxPlot(20, 0, [1, 2, 3, 4])
    assert box.outside_labels(["a", "b", "c", "d"]) == []