"""Colour palettes, colour maps and hue helpers."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

# Hues in HSV space, valid within [0, 1].
RED = 0 / 6
YELLOW = 1 / 6
GREEN = 2 / 6
CYAN = 3 / 6
BLUE = 4 / 6
MAGENTA = 5 / 6

_MAX16 = 0xFFFF


@dataclass(frozen=True)
class NRGBA:
    """An 8-bit colour whose channels are not premultiplied by alpha."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"channel value {channel} outside [0, 255]")

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit alpha-premultiplied channels."""

        def premultiplied(value: int) -> int:
            return ((value | value << 8) * self.a) // 0xFF

        return (
            premultiplied(self.r),
            premultiplied(self.g),
            premultiplied(self.b),
            self.a | self.a << 8,
        )


class ColorMapError(ValueError):
    """Raised when a colour map cannot map a value."""


class ValueOverflowError(ColorMapError):
    """The value is greater than the colour map maximum."""

    def __init__(self, message: str = "palette: specified value > maximum") -> None:
        super().__init__(message)


class ValueUnderflowError(ColorMapError):
    """The value is less than the colour map minimum."""

    def __init__(self, message: str = "palette: specified value < minimum") -> None:
        super().__init__(message)


class ValueNaNError(ColorMapError):
    """The value is NaN."""

    def __init__(self, message: str = "palette: specified value == NaN") -> None:
        super().__init__(message)


class Palette(tuple):
    """An ordered, immutable collection of colours."""

    __slots__ = ()

    @property
    def colors(self) -> list:
        return list(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DivergingPalette(Palette):
    """A palette with a critical class or break in the middle."""

    __slots__ = ()

    def critical_index(self) -> tuple[int, int]:
        """Return the indices of the lightest (median) colour or colours."""
        size = len(self)
        return max(size - 1, 0) // 2, size // 2


def _ieee_div(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(value)


def _hsva_to_nrgba(hue: float, sat: float, val: float, alpha: float) -> NRGBA:
    alpha16 = _channel(_MAX16 * alpha)
    red = green = blue = 0.0
    if val == 0:
        pass
    elif sat == 0:
        red = green = blue = val
    elif math.isfinite(hue):
        scaled = math.fmod(hue, 1.0) * 6
        sector = math.floor(scaled)
        frac = scaled - sector
        x = val * (1 - sat)
        y = val * (1 - sat * frac)
        z = val * (1 - sat * (1 - frac))
        sectors = {
            0: (val, z, x),
            1: (y, val, x),
            2: (x, val, z),
            3: (x, y, val),
            4: (z, x, val),
            5: (val, x, y),
        }
        red, green, blue = sectors.get(sector, (0.0, 0.0, 0.0))

    r = _channel(red * alpha16)
    g = _channel(green * alpha16)
    b = _channel(blue * alpha16)
    if alpha16 == _MAX16:
        return NRGBA((r >> 8) & 0xFF, (g >> 8) & 0xFF, (b >> 8) & 0xFF, 0xFF)
    if alpha16 == 0:
        return NRGBA(0, 0, 0, 0)
    r = (r * _MAX16) // alpha16
    g = (g * _MAX16) // alpha16
    b = (b * _MAX16) // alpha16
    return NRGBA((r >> 8) & 0xFF, (g >> 8) & 0xFF, (b >> 8) & 0xFF, (alpha16 >> 8) & 0xFF)


def _check_count(colors: int) -> None:
    if colors < 0:
        raise ValueError(f"negative number of colors: {colors}")


def complement(hue: float) -> float:
    """Return the complementary hue."""
    return math.fmod(hue + 0.5, 1.0)


def rainbow(colors: int, start: float, end: float, sat: float, val: float, alpha: float) -> Palette:
    """Return a rainbow palette with hues from start to end."""
    _check_count(colors)
    step = _ieee_div(end - start, colors - 1)
    return Palette(_hsva_to_nrgba(start + i * step, sat, val, alpha) for i in range(colors))


def heat(colors: int, alpha: float) -> Palette:
    """Return a red to yellow palette."""
    _check_count(colors)
    light = colors // 4
    strong = colors - light

    step = _ieee_div(YELLOW - RED, strong - 1)
    result = [_hsva_to_nrgba(RED + k * step, 1.0, 1.0, alpha) for k in range(strong)]
    if light:
        sat_start = 1 - 1 / (2 * light)
        sat_end = 1 / (2 * light)
        sat_step = _ieee_div(sat_end - sat_start, light - 1)
        result.extend(
            _hsva_to_nrgba(YELLOW, sat_start + k * sat_step, 1.0, alpha) for k in range(light)
        )
    return Palette(result)


def radial(colors: int, start: float, end: float, alpha: float) -> DivergingPalette:
    """Return a diverging palette from start through white to end."""
    _check_count(colors)
    half = colors // 2
    step = _ieee_div(0.5, half)
    low = [_hsva_to_nrgba(start, 0.5 - i * step, 1.0, alpha) for i in range(half)]
    high = [_hsva_to_nrgba(end, 0.5 - i * step, 1.0, alpha) for i in range(half)]
    middle = [NRGBA(0xFF, 0xFF, 0xFF, _channel(0xFF * alpha) & 0xFF)] if colors % 2 else []
    return DivergingPalette(low + middle + high[::-1])


class ColorMap(ABC):
    """Maps scalar values within [min, max] to colours."""

    def __init__(self) -> None:
        self._min = 0.0
        self._max = 0.0
        self._alpha = 1.0

    @property
    def min(self) -> float:
        return self._min

    @min.setter
    def min(self, value: float) -> None:
        self._min = float(value)
        self._range_changed()

    @property
    def max(self) -> float:
        return self._max

    @max.setter
    def max(self, value: float) -> None:
        self._max = float(value)
        self._range_changed()

    @property
    def alpha(self) -> float:
        """Opacity of produced colours; zero is transparent, one is opaque."""
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        if not 0 <= value <= 1:
            raise ValueError(f"invalid alpha: {value}")
        self._alpha = float(value)

    def _range_changed(self) -> None:
        """Called whenever min or max is assigned."""

    @abstractmethod
    def at(self, v: float):
        """Return the colour for v, raising ColorMapError if out of range."""

    def palette(self, n: int) -> Palette:
        """Return a palette of n colours spread evenly over the range."""
        if n < 0:
            raise ValueError(f"negative number of colors: {n}")
        cmap = copy.copy(self)
        if cmap.max == 0 and cmap.min == 0:
            cmap.min = 0.0
            cmap.max = 1.0
        step = _ieee_div(cmap.max - cmap.min, n - 1)
        return Palette(cmap.at(cmap.min + step * i) for i in range(n))


class ReversedColorMap(ColorMap):
    """A colour map running in the opposite direction of another."""

    def __init__(self, color_map: ColorMap) -> None:
        self._inner = color_map

    @property
    def color_map(self) -> ColorMap:
        return self._inner

    @property
    def min(self) -> float:
        return self._inner.min

    @min.setter
    def min(self, value: float) -> None:
        self._inner.min = value

    @property
    def max(self) -> float:
        return self._inner.max

    @max.setter
    def max(self, value: float) -> None:
        self._inner.max = value

    @property
    def alpha(self) -> float:
        return self._inner.alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._inner.alpha = value

    def at(self, v: float):
        return self._inner.at(self.max - (v - self.min))

    def palette(self, n: int) -> Palette:
        return Palette(reversed(self._inner.palette(n)))

    def __repr__(self) -> str:
        return f"ReversedColorMap({self._inner!r})"


def reverse(color_map: ColorMap) -> ReversedColorMap:
    """Return color_map with its direction reversed."""
    return ReversedColorMap(color_map)