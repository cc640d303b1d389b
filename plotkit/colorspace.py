"""Conversions between sRGB, linear RGB, CIE XYZ, CIE LAB and MSH colour spaces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

_SRGB_GAMMA = 5 / 12
_LAB_A = 7.787
_LAB_B = 16 / 116
_LAB_YLIM = float(Fraction("7.787") * Fraction("0.008856") + Fraction(16, 116))
_WHITE_X, _WHITE_Y, _WHITE_Z = 0.95047, 1.0, 1.08883
_MAX16 = 0xFFFF


def _div(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _acos(value: float) -> float:
    return math.acos(value) if -1 <= value <= 1 else math.nan


def _to_u16(value: float) -> int:
    return 0 if math.isnan(value) else int(value)


def _clamp01(value: float) -> float:
    if value > 1:
        return 1.0
    if value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class LinearRGB:
    """A physically linear RGB colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def to_xyz(self) -> CieXYZ:
        return CieXYZ(
            0.4124 * self.r + 0.3576 * self.g + 0.1805 * self.b,
            0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b,
            0.0193 * self.r + 0.1192 * self.g + 0.9505 * self.b,
        )

    def to_srgba(self, alpha: float) -> SRGBA:
        def compand(v: float) -> float:
            if v > 0.0031308:
                return 1.055 * v**_SRGB_GAMMA - 0.055
            return 12.92 * v

        return SRGBA(compand(self.r), compand(self.g), compand(self.b), alpha)


@dataclass(frozen=True)
class CieXYZ:
    """A colour in CIE XYZ space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_rgb(self) -> LinearRGB:
        return LinearRGB(
            self.x * 3.2406 + self.y * -1.5372 + self.z * -0.4986,
            self.x * -0.9689 + self.y * 1.8758 + self.z * 0.0415,
            self.x * 0.0557 + self.y * -0.204 + self.z * 1.057,
        )

    def to_lab(self) -> CieLAB:
        def f(v: float) -> float:
            if v > 0.008856:
                return v ** (1 / 3)
            return 7.787 * v + _LAB_B

        temp_x = f(self.x / 0.9505)
        temp_y = f(self.y)
        temp_z = f(self.z / 1.089)
        return CieLAB(
            (116.0 * temp_y) - 16.0,
            500.0 * (temp_x - temp_y),
            200 * (temp_y - temp_z),
        )


@dataclass(frozen=True)
class SRGBA:
    """A non-premultiplied sRGB colour with alpha; channels in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def to_rgb(self) -> LinearRGB:
        def linearize(v: float) -> float:
            if v > 0.04045:
                return ((v + 0.055) / 1.055) ** 2.4
            return v / 12.92

        return LinearRGB(linearize(self.r), linearize(self.g), linearize(self.b))

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit alpha-premultiplied channels."""
        return (
            _to_u16(self.r * self.a * _MAX16),
            _to_u16(self.g * self.a * _MAX16),
            _to_u16(self.b * self.a * _MAX16),
            _to_u16(self.a * _MAX16),
        )

    def to_lab(self) -> CieLAB:
        return self.to_rgb().to_xyz().to_lab()

    def clamped(self) -> SRGBA:
        """Return a copy with every channel forced into [0, 1]."""
        return SRGBA(_clamp01(self.r), _clamp01(self.g), _clamp01(self.b), _clamp01(self.a))


@dataclass(frozen=True)
class CieLAB:
    """A colour in CIE LAB space."""

    l: float = 0.0  # noqa: E741
    a: float = 0.0
    b: float = 0.0

    def to_srgba(self, alpha: float) -> SRGBA:
        return self.to_xyz().to_rgb().to_srgba(alpha)

    def to_xyz(self) -> CieXYZ:
        def f(v: float) -> float:
            if v > _LAB_YLIM:
                return v * v * v
            return (v - _LAB_B) / _LAB_A

        return CieXYZ(
            _WHITE_X * f((self.a / 500) + (self.l + 16) / 116),
            _WHITE_Y * f((self.l + 16) / 116),
            _WHITE_Z * f((self.l + 16) / 116 - (self.b / 200)),
        )

    def to_msh(self) -> MSH:
        m = math.sqrt(self.l * self.l + self.a * self.a + self.b * self.b)
        return MSH(m, _acos(_div(self.l, m)), math.atan2(self.b, self.a))


@dataclass(frozen=True)
class MSH:
    """A colour in Magnitude-Saturation-Hue space."""

    m: float = 0.0
    s: float = 0.0
    h: float = 0.0

    def to_lab(self) -> CieLAB:
        return CieLAB(
            self.m * math.cos(self.s),
            self.m * math.sin(self.s) * math.cos(self.h),
            self.m * math.sin(self.s) * math.sin(self.h),
        )

    def rgba(self) -> tuple[int, int, int, int]:
        """Return 16-bit alpha-premultiplied channels of the opaque colour."""
        return self.to_lab().to_srgba(1.0).rgba()


def color_to_srgba(color) -> SRGBA:
    """Convert any object with an rgba() method to SRGBA."""
    r, g, b, a = color.rgba()
    if a == 0:
        return SRGBA()
    return SRGBA(r / a, g / a, b / a, a / _MAX16)


def color_to_msh(color) -> MSH:
    """Convert any object with an rgba() method to MSH."""
    return color_to_srgba(color).to_lab().to_msh()


def hue_twist(color: MSH, converge_m: float) -> float:
    """Return the hue twist between color and the convergence magnitude."""
    sign_h = _div(color.h, abs(color.h))
    radicand = converge_m * converge_m - color.m * color.m
    root = math.sqrt(radicand) if radicand >= 0 else math.nan
    return _div(sign_h * color.s * root, color.m * math.sin(color.s))