"""Bar charts: bars whose lengths are proportional to data values."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from plotkit.palette import NRGBA


def _or_zero(value: float) -> float:
    return 0.0 if math.isnan(value) else value


@dataclass(eq=False)
class BarChart:
    """Grouped data drawn as rectangular bars, one bar per value.

    Bar i sits at category xmin + i * interval. With horizontal set, the
    categories run along the Y axis and the values along the X axis.
    """

    values: list[float]
    width: float
    color: Any = field(default_factory=lambda: NRGBA(0, 0, 0, 0xFF))
    offset: float = 0.0
    xmin: float = 0.0
    horizontal: bool = False
    interval: float = 0.0
    _stacked_on: BarChart | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.width > 0:
            raise ValueError("Width parameter was not positive")
        self.values = [float(v) for v in self.values]

    @property
    def stacked_on(self) -> BarChart | None:
        """The bar chart this one is stacked upon, if any."""
        return self._stacked_on

    def bar_height(self, i: int) -> float:
        """Return the top of bar i, including every bar it is stacked upon."""
        height = 0.0
        if 0 <= i < len(self.values):
            height += _or_zero(self.values[i])
        if self._stacked_on is not None:
            height += self._stacked_on.bar_height(i)
        return height

    def _bottom(self, i: int) -> float:
        return self._stacked_on.bar_height(i) if self._stacked_on is not None else 0.0

    def stack_on(self, on: BarChart) -> None:
        """Stack this chart on top of on, taking its xmin and offset."""
        self.xmin = on.xmin
        self.offset = on.offset
        self._stacked_on = on

    def data_range(self) -> tuple[float, float, float, float]:
        """Return (xmin, xmax, ymin, ymax) covered by the bars."""
        cat_min = self.xmin
        cat_max = cat_min + float(len(self.values) - 1)
        val_min = math.inf
        val_max = -math.inf
        for i, value in enumerate(self.values):
            bottom = self._bottom(i)
            top = bottom + _or_zero(value)
            val_min = min(val_min, bottom, top)
            val_max = max(val_max, bottom, top)
        if not self.horizontal:
            return cat_min, cat_max, val_min, val_max
        return val_min, val_max, cat_min, cat_max

    def bar_positions(self) -> list[tuple[float, float, float]]:
        """Return (category, bottom, top) in data coordinates for each bar."""
        return [
            (self.xmin + i * self.interval, bottom, bottom + _or_zero(value))
            for i, value, bottom in (
                (i, value, self._bottom(i)) for i, value in enumerate(self.values)
            )
        ]

    @classmethod
    def _of(cls, values: Iterable[float], width: float) -> BarChart:
        return cls(list(values), width)