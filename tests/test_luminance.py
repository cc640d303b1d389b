import math

import pytest

from plotkit.luminance import (
    Luminance,
    black_body,
    check_range,
    extended_black_body,
    extended_kindlmann,
    kindlmann,
)
from plotkit.palette import (
    NRGBA,
    ColorMapError,
    ValueNaNError,
    ValueOverflowError,
    ValueUnderflowError,
)

BIT_TOLERANCE = 1.0 / 256.0 * 65535.0
TOL = 1.0e-14


def rgba_list(values):
    return [NRGBA(r, g, b, a) for r, g, b, a in values]


def lab_values(colors):
    return [v for c in colors for v in (c.l, c.a, c.b)]


@pytest.mark.parametrize(
    "controls, factory",
    [
        (
            [(0, 0, 0, 255), (178, 34, 34, 255), (227, 105, 5, 255), (238, 210, 20, 255),
             (255, 255, 255, 255)],
            black_body,
        ),
        (
            [(0, 0, 0, 255), (0, 24, 168, 255), (99, 0, 228, 255), (220, 20, 60, 255),
             (255, 117, 56, 255), (238, 210, 20, 255), (255, 255, 255, 255)],
            extended_black_body,
        ),
        (
            [(0, 0, 0, 255), (46, 4, 76, 255), (63, 7, 145, 255), (8, 66, 165, 255),
             (5, 106, 106, 255), (7, 137, 169, 255), (8, 168, 26, 255), (84, 194, 9, 255),
             (196, 206, 10, 255), (252, 220, 197, 255), (255, 255, 255, 255)],
            kindlmann,
        ),
        (
            [(0, 0, 0, 255), (44, 5, 103, 255), (3, 67, 67, 255), (5, 103, 13, 255),
             (117, 124, 6, 255), (246, 104, 74, 255), (250, 149, 241, 255),
             (232, 212, 253, 255), (255, 255, 255, 255)],
            extended_kindlmann,
        ),
    ],
)
def test_create_luminance(controls, factory):
    cmap = Luminance.from_colors(rgba_list(controls))
    want = factory()
    assert len(cmap.colors) == len(want.colors)
    assert lab_values(cmap.colors) == pytest.approx(lab_values(want.colors), rel=TOL, abs=TOL)
    assert list(cmap.scalars) == pytest.approx(list(want.scalars), rel=TOL, abs=TOL)
    assert (cmap.alpha, cmap.max, cmap.min) == pytest.approx(
        (want.alpha, want.max, want.min), rel=TOL, abs=TOL
    )


def test_extended_black_body():
    scalars = [0, 0.21873483862751875, 0.34506542513775906, 0.4702980511087303,
               0.6517482203230537, 0.8413253643355525, 1]
    want = rgba_list([
        (0, 0, 0, 255),
        (0, 24, 168, 255),
        (99, 0, 228, 255),
        (220, 20, 60, 255),
        (255, 117, 56, 255),
        (238, 210, 20, 255),
        (255, 255, 255, 255),
    ])
    cmap = extended_black_body()
    cmap.max = 1
    for scalar, expected in zip(scalars, want):
        got = cmap.at(scalar).rgba()
        assert got == pytest.approx(expected.rgba(), abs=BIT_TOLERANCE), scalar


def test_check_range_equal_bounds():
    with pytest.raises(ColorMapError, match="max == min"):
        check_range(1, 1, 1)


def test_check_range_inverted_bounds():
    with pytest.raises(ColorMapError, match="< min"):
        check_range(2, 1, 1.5)


@pytest.mark.parametrize(
    "value, error",
    [
        (-1, ValueUnderflowError),
        (2, ValueOverflowError),
        (math.inf, ValueOverflowError),
        (-math.inf, ValueUnderflowError),
        (math.nan, ValueNaNError),
    ],
)
def test_at_out_of_range(value, error):
    cmap = black_body()
    cmap.max = 1
    with pytest.raises(error):
        cmap.at(value)


def test_at_unset_range_raises():
    with pytest.raises(ColorMapError, match="max == min"):
        kindlmann().at(0)


def test_non_monotonic_controls_rejected():
    with pytest.raises(ValueError, match="is not greater than"):
        Luminance.from_colors([NRGBA(255, 255, 255, 255), NRGBA(0, 0, 0, 255)])


def test_from_colors_pins_scalar_ends():
    cmap = Luminance.from_colors([NRGBA(0, 0, 0, 255), NRGBA(128, 128, 128, 255),
                                  NRGBA(255, 255, 255, 255)])
    assert cmap.scalars[0] == 0.0
    assert cmap.scalars[-1] == 1.0
    assert 0 < cmap.scalars[1] < 1


def test_black_white_endpoints():
    cmap = Luminance.from_colors([NRGBA(0, 0, 0, 255), NRGBA(255, 255, 255, 255)])
    cmap.min = 1
    cmap.max = 100
    assert cmap.at(1).rgba() == pytest.approx((0, 0, 0, 65535), abs=BIT_TOLERANCE)
    assert cmap.at(100).rgba() == pytest.approx((65535, 65535, 65535, 65535), abs=BIT_TOLERANCE)


def test_palette_defaults_to_unit_range_without_mutating():
    cmap = extended_black_body()
    colors = cmap.palette(7)
    assert len(colors) == 7
    assert cmap.min == 0 and cmap.max == 0
    assert colors[0].rgba() == pytest.approx((0, 0, 0, 65535), abs=BIT_TOLERANCE)
    assert colors[-1].rgba() == pytest.approx((65535, 65535, 65535, 65535), abs=BIT_TOLERANCE)


def test_palette_round_trip_through_from_colors():
    colors = extended_black_body().palette(6)
    cmap = Luminance.from_colors(colors)
    assert len(cmap.colors) == 6
    assert list(cmap.scalars) == sorted(cmap.scalars)


def test_alpha_applied_and_validated():
    cmap = black_body()
    cmap.max = 1
    cmap.alpha = 0.5
    assert cmap.at(0.5).a == 0.5
    with pytest.raises(ValueError):
        cmap.alpha = 1.5
    assert cmap.alpha == 0.5


def test_colors_clamped_into_unit_range():
    cmap = kindlmann()
    cmap.max = 1
    for i in range(101):
        c = cmap.at(i / 100)
        assert all(0 <= ch <= 1 for ch in (c.r, c.g, c.b, c.a))