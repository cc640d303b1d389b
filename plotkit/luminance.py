"""Colour maps that interpolate with luminance linear in the mapped value."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from plotkit.colorspace import CieLAB, SRGBA, color_to_srgba
from plotkit.palette import (
    ColorMap,
    ColorMapError,
    Palette,
    ValueNaNError,
    ValueOverflowError,
    ValueUnderflowError,
)


def _in_unit_range(value: float) -> bool:
    return 0 <= value <= 1


def check_range(low: float, high: float, value: float) -> None:
    """Raise ColorMapError unless value lies within the valid range [low, high]."""
    if high == low:
        raise ColorMapError(f"moreland: color map max == min == {high:g}")
    if low > high:
        raise ColorMapError(f"moreland: color map max ({high:g}) < min ({low:g})")
    if value < low:
        raise ValueUnderflowError()
    if value > high:
        raise ValueOverflowError()
    if math.isnan(value):
        raise ValueNaNError()


def _search(values: Sequence[float], value: float) -> int:
    """Return the first index whose element is not less than value."""
    return next((j for j, v in enumerate(values) if value <= v), len(values))


class Luminance(ColorMap):
    """Interpolates between control colours so luminance is linear in value.

    The control colours must increase monotonically in luminance; the
    scalars are their normalised luminances, from zero to one.
    """

    def __init__(self, colors: Iterable[CieLAB], scalars: Iterable[float]) -> None:
        super().__init__()
        self._colors = tuple(colors)
        self._scalars = tuple(float(s) for s in scalars)
        if len(self._colors) != len(self._scalars):
            raise ValueError("colors and scalars must have the same length")
        if not self._colors:
            raise ValueError("moreland: no control colors")

    @property
    def colors(self) -> tuple[CieLAB, ...]:
        """The control colours in CIE LAB space."""
        return self._colors

    @property
    def scalars(self) -> tuple[float, ...]:
        """The normalised luminance of each control colour."""
        return self._scalars

    @classmethod
    def from_colors(cls, controls: Iterable) -> Luminance:
        """Build a colour map from control colours of increasing luminance."""
        labs: list[CieLAB] = []
        for i, color in enumerate(controls):
            lab = color_to_srgba(color).to_lab()
            if labs and lab.l <= labs[-1].l:
                raise ValueError(
                    f"moreland: luminance of color {i} ({lab.l:g}) is not "
                    f"greater than that of color {i - 1} ({labs[-1].l:g})"
                )
            labs.append(lab)
        if not labs:
            raise ValueError("moreland: no control colors")

        low = min(lab.l for lab in labs)
        high = max(lab.l for lab in labs)
        span = high - low
        scalars = [(lab.l - low) / span if span else math.nan for lab in labs]
        # Pin the ends exactly so rounding never pushes them out of range.
        scalars[0] = 0.0
        scalars[-1] = 1.0
        return cls(labs, scalars)

    def at(self, v: float) -> SRGBA:
        """Return the colour for v, raising ColorMapError if it is out of range."""
        check_range(self.min, self.max, v)
        scalar = (v - self.min) / (self.max - self.min)
        if not _in_unit_range(scalar):
            raise ColorMapError(
                f"moreland: interpolation value ({scalar:g}) out of range "
                f"[{self.min:g},{self.max:g}]"
            )
        i = _search(self._scalars, scalar)
        if i == 0:
            return self._colors[0].to_srgba(self.alpha)
        c1, c2 = self._colors[i - 1], self._colors[i]
        frac = (scalar - self._scalars[i - 1]) / (self._scalars[i] - self._scalars[i - 1])
        mixed = CieLAB(
            frac * (c2.l - c1.l) + c1.l,
            frac * (c2.a - c1.a) + c1.a,
            frac * (c2.b - c1.b) + c1.b,
        )
        return mixed.to_srgba(self.alpha).clamped()

    def palette(self, n: int) -> Palette:
        """Return n colours spread evenly over the range, [0, 1] if unset."""
        return super().palette(n)

    def __repr__(self) -> str:
        return (
            f"Luminance(colors={list(self._colors)!r}, scalars={list(self._scalars)!r}, "
            f"min={self.min!r}, max={self.max!r}, alpha={self.alpha!r})"
        )


def black_body() -> Luminance:
    """A perceptually uniform map inspired by black-body radiation."""
    return Luminance(
        [
            CieLAB(0, 0, 0),
            CieLAB(39.112572747719774, 55.92470934659227, 37.65159714510402),
            CieLAB(58.45705480680232, 43.34389690857626, 65.95409116544081),
            CieLAB(84.13253643355525, -6.459770854468639, 82.41994470228775),
            CieLAB(100, 0, 0),
        ],
        [0, 0.39112572747719776, 0.5845705480680232, 0.8413253643355525, 1],
    )


def extended_black_body() -> Luminance:
    """The black-body map with blue and purple hues added at the low end."""
    return Luminance(
        [
            CieLAB(0, 0, 0),
            CieLAB(21.873483862751876, 50.19882295659109, -74.66982659778306),
            CieLAB(34.506542513775905, 75.41302687474061, -88.73807072507786),
            CieLAB(47.02980511087303, 70.93217189227919, 33.59880053746508),
            CieLAB(65.17482203230537, 49.14591409658836, 56.86480950937553),
            CieLAB(84.13253643355525, -6.459770854468639, 82.41994470228775),
            CieLAB(100, 0, 0),
        ],
        [
            0,
            0.21873483862751875,
            0.34506542513775906,
            0.4702980511087303,
            0.6517482203230537,
            0.8413253643355525,
            1,
        ],
    )


def kindlmann() -> Luminance:
    """A rainbow map with monotonically increasing luminance."""
    return Luminance(
        [
            CieLAB(0, 0, 0),
            CieLAB(10.479520542426698, 34.05557958902206, -34.21934877170809),
            CieLAB(21.03011379005111, 52.30473571100955, -61.852601228346536),
            CieLAB(31.03098927978494, 23.814976212074402, -57.73419358300511),
            CieLAB(40.21480513626115, -24.858012706049536, -7.322176588219942),
            CieLAB(52.73108089333358, -19.064976357731634, -25.558178073848147),
            CieLAB(60.007326812392634, -61.75624590074585, 56.43522875191319),
            CieLAB(69.81578343076002, -58.33353084882392, 68.37457857626646),
            CieLAB(79.55703752324776, -22.50477758899383, 78.57946686200843),
            CieLAB(89.818961593653, 7.586705160677109, 15.375961528833981),
            CieLAB(100, 0, 0),
        ],
        [
            0,
            0.10479520542426699,
            0.2103011379005111,
            0.3103098927978494,
            0.4021480513626115,
            0.5273108089333358,
            0.6000732681239264,
            0.6981578343076003,
            0.7955703752324775,
            0.89818961593653,
            1,
        ],
    )


def extended_kindlmann() -> Luminance:
    """The Kindlmann map looping more than once around the hues."""
    return Luminance(
        [
            CieLAB(0, 0, 0),
            CieLAB(13.371291966477482, 40.39368469479174, -47.73239449160565),
            CieLAB(25.072421338587574, -18.01441053740843, -5.313556572210176),
            CieLAB(37.411516363056116, -43.058336774976055, 39.30203907343062),
            CieLAB(49.75026355291354, -15.774050138318895, 53.507917567416094),
            CieLAB(61.643756252245225, 52.67703578954919, 43.82595336046358),
            CieLAB(74.93187540089825, 50.92061741619164, -30.235411697966242),
            CieLAB(87.64732748562544, 14.355163639545697, -17.471161313826332),
            CieLAB(100, 0, 0),
        ],
        [
            0,
            0.13371291966477483,
            0.25072421338587575,
            0.37411516363056113,
            0.4975026355291354,
            0.6164375625224523,
            0.7493187540089825,
            0.8764732748562544,
            1,
        ],
    )