"""Error bars denoting the uncertainty of X or Y values."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_CAP_WIDTH = 5.0
DEFAULT_LINE_WIDTH = 1.0

Point = tuple[float, float]


@dataclass(frozen=True)
class ErrorRange:
    """The low and high error of a value; signs are ignored when drawn."""

    low: float
    high: float


def _check_floats(*values: float) -> None:
    for value in values:
        if math.isnan(value):
            raise ValueError("plotter: NaN data point")
        if math.isinf(value):
            raise ValueError("plotter: infinite data point")


def _copy_points(points: Iterable[Sequence[float]]) -> list[Point]:
    result = []
    for x, y in points:
        x, y = float(x), float(y)
        _check_floats(x, y)
        result.append((x, y))
    return result


def _copy_errors(errors: Iterable) -> list[ErrorRange]:
    result = []
    for err in errors:
        low, high = (err.low, err.high) if isinstance(err, ErrorRange) else err
        low, high = float(low), float(high)
        _check_floats(low, high)
        result.append(ErrorRange(low, high))
    return result


def _range(values: Iterable[float]) -> tuple[float, float]:
    low, high = math.inf, -math.inf
    for v in values:
        low = min(low, v)
        high = max(high, v)
    return low, high


class _ErrorBars:
    def __init__(
        self,
        xys: Iterable[Sequence[float]],
        errors: Iterable,
        cap_width: float = DEFAULT_CAP_WIDTH,
        line_width: float = DEFAULT_LINE_WIDTH,
    ) -> None:
        self.errors = _copy_errors(errors)
        self.xys = _copy_points(xys)
        if len(self.errors) != len(self.xys):
            raise ValueError("plotter: number of errors does not match number of points")
        self.cap_width = float(cap_width)
        self.line_width = float(line_width)

    def _spans(self, axis: int) -> list[tuple[float, float, float]]:
        return [
            (p[axis], p[axis] - abs(err.low), p[axis] + abs(err.high))
            for p, err in zip(self.xys, self.errors)
        ]

    def _span_range(self, axis: int) -> tuple[float, float]:
        low, high = math.inf, -math.inf
        for value, lo, hi in self._spans(axis):
            low = min(low, value, lo, hi)
            high = max(high, value, lo, hi)
        return low, high


class YErrorBars(_ErrorBars):
    """Vertical error bars at each (x, y) point."""

    def data_range(self) -> tuple[float, float, float, float]:
        """Return (xmin, xmax, ymin, ymax) including the bars."""
        xmin, xmax = _range(x for x, _ in self.xys)
        ymin, ymax = self._span_range(1)
        return xmin, xmax, ymin, ymax

    def bars(self) -> list[tuple[float, float, float]]:
        """Return (x, ylow, yhigh) in data coordinates for each bar."""
        return [(x, lo, hi) for (x, _), (_, lo, hi) in zip(self.xys, self._spans(1))]


class XErrorBars(_ErrorBars):
    """Horizontal error bars at each (x, y) point."""

    def data_range(self) -> tuple[float, float, float, float]:
        """Return (xmin, xmax, ymin, ymax) including the bars."""
        xmin, xmax = self._span_range(0)
        ymin, ymax = _range(y for _, y in self.xys)
        return xmin, xmax, ymin, ymax

    def bars(self) -> list[tuple[float, float, float]]:
        """Return (y, xlow, xhigh) in data coordinates for each bar."""
        return [(y, lo, hi) for (_, y), (_, lo, hi) in zip(self.xys, self._spans(0))]