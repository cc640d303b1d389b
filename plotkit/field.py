"""Vector fields drawn as glyphs on a rectangular grid."""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

Vector = tuple[float, float]
Bounds = tuple[float, float, float, float]


@runtime_checkable
class FieldXY(Protocol):
    """A two dimensional vector field on a rectangular grid."""

    def dims(self) -> tuple[int, int]:
        """Return the number of columns and rows."""

    def vector(self, c: int, r: int) -> Vector:
        """Return the vector at column c, row r."""

    def x(self, c: int) -> float:
        """Return the coordinate of column c."""

    def y(self, r: int) -> float:
        """Return the coordinate of row r."""


def _div(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _half_widths(coord, index: int, count: int) -> tuple[float, float]:
    """Return the (negative, positive) half extents of a grid cell."""
    if index == 0:
        upper = 0.5 if count == 1 else (coord(1) - coord(0)) / 2
        return -upper, upper
    if index == count - 1:
        upper = (coord(count - 1) - coord(count - 2)) / 2
        return -upper, upper
    return -(coord(index) - coord(index - 1)) / 2, (coord(index + 1) - coord(index)) / 2


class Field:
    """A plotter of the vectors of a FieldXY, scaled by the largest magnitude."""

    def __init__(self, field: FieldXY, line_width: float = 1.0) -> None:
        self.field = field
        self.line_width = float(line_width)
        largest = -math.inf
        cols, rows = field.dims()
        for c in range(cols):
            for r in range(rows):
                vx, vy = field.vector(c, r)
                magnitude = math.hypot(vx, vy)
                if not math.isnan(magnitude):
                    largest = max(largest, magnitude)
        self._max = largest

    @property
    def max_magnitude(self) -> float:
        """The largest vector magnitude in the field."""
        return self._max

    def data_range(self) -> tuple[float, float, float, float]:
        """Return (xmin, xmax, ymin, ymax), padding each side by half a cell."""
        f = self.field
        cols, rows = f.dims()
        if cols == 1:
            xmin, xmax = f.x(0) - 0.5, f.x(0) + 0.5
        else:
            xmax = f.x(cols - 1) + (f.x(cols - 1) - f.x(cols - 2)) / 2
            xmin = f.x(0) - (f.x(1) - f.x(0)) / 2
        if rows == 1:
            ymin, ymax = f.y(0) - 0.5, f.y(0) + 0.5
        else:
            ymax = f.y(rows - 1) + (f.y(rows - 1) - f.y(rows - 2)) / 2
            ymin = f.y(0) - (f.y(1) - f.y(0)) / 2
        return xmin, xmax, ymin, ymax

    def cells(self) -> list[tuple[int, int, Bounds, Vector]]:
        """Return (column, row, bounds, vector) for every grid cell.

        bounds is (x0, y0, x1, y1) in data coordinates and vector is the
        field's vector divided by the largest magnitude.
        """
        f = self.field
        cols, rows = f.dims()
        result = []
        for c in range(cols):
            left, right = _half_widths(f.x, c, cols)
            for r in range(rows):
                down, up = _half_widths(f.y, r, rows)
                bounds = (f.x(c) + left, f.y(r) + down, f.x(c) + right, f.y(r) + up)
                vx, vy = f.vector(c, r)
                result.append((c, r, bounds, (_div(vx, self._max), _div(vy, self._max))))
        return result