"""Plotting a function of x as a sampled line."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_SAMPLES = 50


def _div(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


@dataclass
class Function:
    """A line through samples of f over [x_min, x_max].

    When both x_min and x_max are zero the axis range is sampled instead.
    """

    f: Callable[[float], float]
    x_min: float = 0.0
    x_max: float = 0.0
    samples: int = DEFAULT_SAMPLES
    line_width: float = 1.0

    def sample(self, x_min: float, x_max: float) -> list[tuple[float, float]]:
        """Return (x, f(x)) points; x_min and x_max are the axis range fallback."""
        if self.samples < 0:
            raise ValueError(f"negative number of samples: {self.samples}")
        low, high = self.x_min, self.x_max
        if low == 0 and high == 0:
            low, high = x_min, x_max
        step = _div(high - low, self.samples - 1)
        points = []
        for i in range(self.samples):
            x = low + i * step
            points.append((x, self.f(x)))
        return points