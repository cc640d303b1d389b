"""The CONREC contouring algorithm over a rectangular grid."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from itertools import product
from typing import Protocol, runtime_checkable

Point = tuple[float, float]


@runtime_checkable
class GridXYZ(Protocol):
    """A grid of Z values at X, Y coordinates arranged in columns and rows."""

    def dims(self) -> tuple[int, int]:
        """Return the number of columns and rows."""

    def z(self, c: int, r: int) -> float:
        """Return the value at column c, row r."""

    def x(self, c: int) -> float:
        """Return the coordinate of column c."""

    def y(self, r: int) -> float:
        """Return the coordinate of row r."""


@dataclass(frozen=True)
class Segment:
    """A line segment between two points."""

    p1: Point
    p2: Point


# Corner offsets (column, row) of vertices 1 to 4; vertex 0 is the cell centre.
_CORNERS = ((0, 0), (1, 0), (1, 1), (0, 1))

# Indexed by the signs (+1) of triangle vertices m1, m2 (centre) and m3.
# The all-on-level entry is 0 rather than 3 so that a flat region lying on
# a contour level yields no internal segments.
_CASES = (
    ((0, 0, 8), (0, 2, 5), (7, 6, 9)),
    ((0, 3, 4), (1, 0, 1), (4, 3, 0)),
    ((9, 6, 7), (5, 2, 0), (8, 0, 0)),
)

# For each case, the two ends of the segment: a vertex role (1, 2 or 3) or
# a side given as a pair of roles.
_ENDS = {
    1: (1, 2),
    2: (2, 3),
    3: (3, 1),
    4: (1, (2, 3)),
    5: (2, (3, 1)),
    6: (3, (1, 2)),
    7: ((1, 2), (2, 3)),
    8: ((2, 3), (3, 1)),
    9: ((3, 1), (1, 2)),
}

ConrecLine = Callable[[int, int, Segment, float], None]


def _div(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _nan_min(values: Sequence[float]) -> float:
    return math.nan if any(math.isnan(v) for v in values) else min(values)


def _nan_max(values: Sequence[float]) -> float:
    return math.nan if any(math.isnan(v) for v in values) else max(values)


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def conrec(grid: GridXYZ, heights: Sequence[float], fn: ConrecLine) -> None:
    """Call fn(i, j, segment, height) for every contour segment in the grid.

    heights must be sorted ascending. Each cell (i, j) to (i+1, j+1) is split
    into four triangles around its centre and each triangle is cut at every
    height that falls within the cell's range.
    """
    if not heights:
        raise ValueError("conrec: no contour heights")
    lowest, highest = heights[0], heights[-1]
    cols, rows = grid.dims()

    for i, j in product(range(cols - 1), range(rows - 1)):
        zs = [grid.z(i + dc, j + dr) for dc, dr in _CORNERS]
        dmin = _nan_min(zs)
        dmax = _nan_max(zs)
        if dmax < lowest or highest < dmin:
            continue

        xs = [0.5 * (grid.x(i) + grid.x(i + 1))] + [grid.x(i + dc) for dc, _ in _CORNERS]
        ys = [0.5 * (grid.y(j) + grid.y(j + 1))] + [grid.y(j + dr) for _, dr in _CORNERS]

        for height in heights:
            if height < dmin or dmax < height:
                continue
            corner_h = [z - height for z in zs]
            h = [0.25 * (corner_h[0] + corner_h[1] + corner_h[2] + corner_h[3]), *corner_h]
            signs = [_sign(v) for v in h]

            def vertex(m: int) -> Point:
                return (xs[m], ys[m])

            def sect(a: int, b: int) -> Point:
                den = h[b] - h[a]
                return (
                    _div(h[b] * xs[a] - h[a] * xs[b], den),
                    _div(h[b] * ys[a] - h[a] * ys[b], den),
                )

            for m in range(1, 5):
                roles = {1: m, 2: 0, 3: m + 1 if m != 4 else 1}
                case = _CASES[signs[roles[1]] + 1][signs[roles[2]] + 1][signs[roles[3]] + 1]
                if case == 0:
                    continue
                p1, p2 = (
                    vertex(roles[end]) if isinstance(end, int) else sect(roles[end[0]], roles[end[1]])
                    for end in _ENDS[case]
                )
                fn(i, j, Segment(p1, p2), height)