"""Smooth diverging colour maps interpolated through MSH colour space."""

from __future__ import annotations

import math

from plotkit.colorspace import MSH, SRGBA, color_to_msh, hue_twist
from plotkit.luminance import check_range
from plotkit.palette import ColorMap, ColorMapError, Palette


def _in_unit_range(value: float) -> bool:
    return 0 <= value <= 1


def _div(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


class SmoothDiverging(ColorMap):
    """A diverging colour map that passes smoothly through a light centre.

    The start and end colours are given in MSH space; converge_m is the
    MSH magnitude of the colour at the convergence point, not its location.
    """

    def __init__(self, start: MSH, end: MSH, converge_m: float = 88.0) -> None:
        super().__init__()
        self._start = start
        self._end = end
        self._converge_m = float(converge_m)
        self._converge_point = math.nan

    @property
    def start(self) -> MSH:
        return self._start

    @property
    def end(self) -> MSH:
        return self._end

    @property
    def converge_m(self) -> float:
        return self._converge_m

    @property
    def converge_point(self) -> float:
        """The value where the diverging colours meet."""
        return self._converge_point

    @converge_point.setter
    def converge_point(self, value: float) -> None:
        if value > self.max or value < self.min:
            raise ValueError(
                f"moreland: convergence point ({value:g}) must be between "
                f"min ({self.min:g}) and max ({self.max:g})"
            )
        self._converge_point = float(value)

    def _range_changed(self) -> None:
        self._converge_point = (self._min + self._max) / 2

    def at(self, v: float) -> SRGBA:
        """Return the colour for v, raising ColorMapError if it cannot be mapped."""
        check_range(self.min, self.max, v)
        span = self.max - self.min
        converge = (self._converge_point - self.min) / span
        scalar = (v - self.min) / span
        color = self.interpolate(scalar, converge).to_lab().to_srgba(self.alpha)
        if not all(_in_unit_range(c) for c in (color.r, color.g, color.b, color.a)):
            raise ColorMapError(
                f"moreland: invalid color r:{color.r:g}, g:{color.g:g}, "
                f"b:{color.b:g}, a:{color.a:g}"
            )
        return color

    def interpolate(self, scalar: float, converge_point: float) -> MSH:
        """Interpolate through MSH space; both arguments are fractions in [0, 1]."""
        start, end, cm = self._start, self._end, self._converge_m
        start_twist = hue_twist(start, cm)
        end_twist = hue_twist(end, cm)
        if scalar < converge_point:
            interp = _div(scalar, converge_point)
            return MSH(
                (cm - start.m) * interp + start.m,
                start.s * (1 - interp),
                start.h + start_twist * interp,
            )
        interp1 = _div(scalar - 1, converge_point - 1)
        interp2 = _div(scalar, converge_point) - 1
        hue = end.h + end_twist * interp1 if scalar > converge_point else 0.0
        return MSH((cm - end.m) * interp1 + end.m, end.s * interp2, hue)

    def palette(self, n: int) -> Palette:
        """Return n colours spread evenly over the range, [0, 1] if unset."""
        return super().palette(n)

    def __repr__(self) -> str:
        return (
            f"SmoothDiverging(start={self._start!r}, end={self._end!r}, "
            f"converge_m={self._converge_m!r}, min={self.min!r}, max={self.max!r})"
        )


def new_smooth_diverging(start: MSH, end: MSH, converge_m: float) -> SmoothDiverging:
    """Return a smooth diverging map between two MSH colours."""
    return SmoothDiverging(start, end, converge_m)


def smooth_diverging_from_colors(start, end, converge_m: float) -> SmoothDiverging:
    """Return a smooth diverging map between two colours with rgba() methods."""
    return SmoothDiverging(color_to_msh(start), color_to_msh(end), converge_m)


def smooth_blue_red() -> SmoothDiverging:
    """A smooth diverging map from blue to red."""
    return SmoothDiverging(MSH(80, 1.08, -1.1), MSH(80, 1.08, 0.5), 88)


def smooth_purple_orange() -> SmoothDiverging:
    """A smooth diverging map from purple to orange."""
    return SmoothDiverging(
        MSH(64.97539711, 0.899434815, -0.899431964),
        MSH(85.00850996, 0.949730284, 0.950636521),
        88,
    )


def smooth_green_purple() -> SmoothDiverging:
    """A smooth diverging map from green to purple."""
    return SmoothDiverging(
        MSH(78.04105346, 0.885011982, 2.499491379),
        MSH(64.97539711, 0.899434815, -0.899431964),
        88,
    )


def smooth_blue_tan() -> SmoothDiverging:
    """A smooth diverging map from blue to tan."""
    return SmoothDiverging(
        MSH(79.94788321, 0.798754784, -1.401313221),
        MSH(80.07193125, 0.799798811, 1.401089787),
        88,
    )


def smooth_green_red() -> SmoothDiverging:
    """A smooth diverging map from green to red."""
    return SmoothDiverging(
        MSH(78.04105346, 0.885011982, 2.499491379),
        MSH(76.96722122, 0.949483656, 0.499492043),
        88,
    )