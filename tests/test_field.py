import math
from dataclasses import dataclass
from typing import Callable

import pytest

from plotkit.field import Field, FieldXY


@dataclass
class GridField:
    cols: int
    rows: int
    fn: Callable[[float, float], tuple[float, float]]

    def dims(self):
        return self.cols, self.rows

    def vector(self, c, r):
        return self.fn(self.x(c), self.y(r))

    def x(self, c):
        if c < 0 or c >= self.cols:
            raise IndexError("column index out of range")
        return float(c - self.cols // 2)

    def y(self, r):
        if r < 0 or r >= self.rows:
            raise IndexError("row index out of range")
        return float(r - self.rows // 2)


def rotation(x, y):
    return (y, -x)


def test_grid_field_matches_protocol():
    grid = GridField(2, 2, rotation)
    f = Field(grid)
    assert f.field is grid
    assert isinstance(f.field, FieldXY)
    assert len(f.cells()) == 4


def test_single_vector_magnitude():
    f = Field(GridField(1, 1, lambda x, y: (3.0, 4.0)))
    assert f.max_magnitude == 5.0
    (_, _, _, vector), = f.cells()
    assert vector == pytest.approx((0.6, 0.8))


def test_normalised_vectors_peak_at_one():
    f = Field(GridField(19, 17, rotation))
    mags = [math.hypot(*v) for _, _, _, v in f.cells()]
    assert max(mags) == pytest.approx(1.0)
    assert all(m <= 1.0 + 1e-12 for m in mags)


def test_data_range_single_column_uses_unit_width():
    grid = GridField(1, 3, rotation)
    xmin, xmax, ymin, ymax = Field(grid).data_range()
    assert (xmin, xmax) == (grid.x(0) - 0.5, grid.x(0) + 0.5)
    assert ymin < grid.y(0) and ymax > grid.y(2)


def test_data_range_matches_cell_bounds():
    f = Field(GridField(19, 17, rotation))
    bounds = [b for _, _, b, _ in f.cells()]
    xmin, xmax, ymin, ymax = f.data_range()
    assert xmin == min(b[0] for b in bounds)
    assert ymin == min(b[1] for b in bounds)
    assert xmax == max(b[2] for b in bounds)
    assert ymax == max(b[3] for b in bounds)


@pytest.mark.parametrize("rows,cols", [(1, 2), (2, 1), (2, 2)])
def test_small_dims(rows, cols):
    f = Field(GridField(cols, rows, rotation))
    cells = f.cells()
    assert len(cells) == rows * cols
    for c, r, (x0, y0, x1, y1), _ in cells:
        assert x0 < f.field.x(c) < x1
        assert y0 < f.field.y(r) < y1


def test_cells_are_column_major():
    cells = Field(GridField(3, 2, rotation)).cells()
    assert [(c, r) for c, r, _, _ in cells] == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]


def test_nan_vectors_ignored_for_maximum():
    f = Field(GridField(2, 1, lambda x, y: (math.nan, 0.0) if x < 0 else (0.0, 2.0)))
    assert f.max_magnitude == 2.0