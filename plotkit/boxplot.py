"""Box plots summarising a distribution by its five-number statistics."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


def median(values: Sequence[float]) -> float:
    """Return the median of already sorted values."""
    if not values:
        raise ValueError("median of no values")
    if len(values) == 1:
        return values[0]
    mid = len(values) // 2
    result = values[mid]
    if len(values) % 2 == 0:
        result = (result + values[mid - 1]) / 2
    return result


@dataclass
class FiveStat:
    """The summary statistics behind quartile and box-whisker plots."""

    values: list[float]
    location: float
    median: float
    quartile1: float
    quartile3: float
    adj_low: float
    adj_high: float
    min: float
    max: float
    outside: list[int] = field(default_factory=list)


def five_stat(values: Iterable[float], location: float) -> FiveStat:
    """Compute the statistics of values for a box placed at location.

    Values beyond 1.5 interquartile ranges from the quartiles are outside
    points; the adjacent values are the extremes of those that are not.
    """
    data = [float(v) for v in values]
    if not data:
        raise ValueError("boxplot: no data")
    ordered = sorted(data, key=lambda v: (not math.isnan(v), v))

    if len(ordered) == 1:
        med = q1 = q3 = ordered[0]
    else:
        half = len(ordered) // 2
        med = median(ordered)
        q1 = median(ordered[:half])
        q3 = median(ordered[half:])

    spread = 1.5 * (q3 - q1)
    low, high = q1 - spread, q3 + spread
    adj_low, adj_high = math.inf, -math.inf
    outside = []
    for i, v in enumerate(data):
        if v > high or v < low:
            outside.append(i)
            continue
        adj_low = min(adj_low, v)
        adj_high = max(adj_high, v)

    return FiveStat(
        values=data,
        location=float(location),
        median=med,
        quartile1=q1,
        quartile3=q3,
        adj_low=adj_low,
        adj_high=adj_high,
        min=ordered[0],
        max=ordered[-1],
        outside=outside,
    )


class BoxPlot:
    """A Tukey schematic box plot of a distribution of values."""

    def __init__(self, width: float, location: float, values: Iterable[float]) -> None:
        if width < 0:
            raise ValueError("Negative boxplot width")
        self.stats = five_stat(values, location)
        self.width = float(width)
        self.cap_width = 3 * self.width / 4
        self.offset = 0.0
        self.horizontal = False

    def data_range(self) -> tuple[float, float, float, float]:
        """Return (xmin, xmax, ymin, ymax) covered by the box."""
        s = self.stats
        if self.horizontal:
            return s.min, s.max, s.location, s.location
        return s.location, s.location, s.min, s.max

    def outside_labels(self, labels: Sequence[str]) -> list[tuple[float, float, str]]:
        """Return (x, y, label) for each outside point.

        labels is indexed like the values the box plot was made from.
        """
        s = self.stats
        result = []
        for index in s.outside:
            value = s.values[index]
            x, y = (value, s.location) if self.horizontal else (s.location, value)
            result.append((x, y, labels[index]))
        return result

    def __repr__(self) -> str:
        return (
            f"BoxPlot(width={self.width!r}, location={self.stats.location!r}, "
            f"horizontal={self.horizontal!r})"
        )