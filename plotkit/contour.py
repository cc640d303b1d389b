"""Contour path reconstruction from CONREC segments and the contour plotter."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from plotkit.conrec import GridXYZ, Point, Segment, conrec
from plotkit.palette import NRGBA

DEFAULT_QUANTILES = (0.01, 0.05, 0.25, 0.5, 0.75, 0.95, 0.99)

Transform = Callable[[float], float]


def _div(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _sorted_levels(levels: Iterable[float]) -> list[float]:
    """Sort ascending with NaN values first."""
    return sorted(levels, key=lambda v: (not math.isnan(v), v))


@dataclass(eq=False)
class Contour:
    """Points lying in sequence along a contour line at height z.

    The contour runs from the last point of backward, through backward in
    reverse, to the last point of forward. Both lists always hold a point.
    """

    z: float
    backward: list[Point]
    forward: list[Point]

    def __post_init__(self) -> None:
        self.backward = list(self.backward)
        self.forward = list(self.forward)
        if not self.backward or not self.forward:
            raise ValueError("contour: backward and forward must each hold a point")

    @classmethod
    def _from_segment(cls, segment: Segment, z: float) -> Contour:
        return cls(z, [segment.p2], [segment.p1])

    def front(self) -> Point:
        """Return the first point of the contour."""
        return self.backward[-1]

    def back(self) -> Point:
        """Return the last point of the contour."""
        return self.forward[-1]

    def points(self) -> list[Point]:
        """Return the points of the contour from front to back."""
        return self.backward[::-1] + self.forward

    def path(self, tr_x: Transform, tr_y: Transform) -> list[Point]:
        """Return the contour's points mapped through the coordinate transforms."""
        return [(tr_x(x), tr_y(y)) for x, y in self.points()]

    def extend(self, segment: Segment, ends: dict[Point, Contour]) -> bool:
        """Attach segment to a matching end, updating ends; return whether it fitted."""
        p1, p2 = segment.p1, segment.p2
        for tail, is_front in ((self.front(), True), (self.back(), False)):
            for shared, new in ((p1, p2), (p2, p1)):
                if tail == shared:
                    (self.backward if is_front else self.forward).append(new)
                    ends.pop(shared, None)
                    ends[new] = self
                    return True
        return False

    def connect(self, other: Contour, ends: dict[Point, Contour]) -> bool:
        """Join other onto a shared end, updating ends; return whether they met."""
        front, back = self.front(), self.back()
        if front == other.front():
            ends.pop(front, None)
            ends[other.back()] = self
            self.backward.extend(other.backward[::-1][1:])
            self.backward.extend(other.forward)
            return True
        if front == other.back():
            ends.pop(front, None)
            ends[other.front()] = self
            self.backward.extend(other.forward[::-1][1:])
            self.backward.extend(other.backward)
            return True
        if back == other.front():
            ends.pop(back, None)
            ends[other.back()] = self
            self.forward.extend(other.backward[::-1][1:])
            self.forward.extend(other.forward)
            return True
        if back == other.back():
            ends.pop(back, None)
            ends[other.front()] = self
            self.forward.extend(other.forward[::-1][1:])
            self.forward.extend(other.backward)
            return True
        return False

    def excise_loops(self, contours: set[Contour], quick: bool) -> None:
        """Move loops that do not include the ends into separate contours.

        With quick set, a contour with a single crossing is handled by a
        fast heuristic; otherwise every elementary cycle is found.
        """
        if quick:
            inner = self.backward + self.forward[:-1]
            crossings = len(inner) - len(set(inner))
            if crossings == 0:
                return
            if crossings == 1:
                self._excise_quick(contours)
                return

        walk = self.points()
        graph = _graph_from(walk)
        cycles = _cycles_in(graph)
        if not cycles:
            return
        contours.discard(self)

        for cycle in cycles:
            loop = [walk[n] for n in cycle]
            contours.add(Contour(self.z, loop[:1], loop[1:]))

        _remove_cycles(graph, cycles)
        for line in _linear_paths_in(walk, graph):
            contours.add(Contour(self.z, line[:1], line[1:]))

    def _excise_quick(self, contours: set[Contour]) -> None:
        walk = self.points()
        seen: dict[Point, int] = {}
        j = 0
        while j < len(walk):
            p = walk[j]
            i = seen.get(p)
            if i is not None and p != walk[0] and p != walk[-1]:
                contours.add(Contour(self.z, [walk[i]], walk[i + 1 : j + 1]))
                walk = walk[:i] + walk[j:]
                j = i + 1
            else:
                seen[p] = j
                j += 1
        self.backward = [walk[0]]
        self.forward = walk[1:]


def _graph_from(walk: Sequence[Point]) -> list[set[int]]:
    """Return a successor graph over the first index of each distinct point."""
    first: dict[Point, int] = {}
    for i, p in enumerate(walk):
        first.setdefault(p, i)
    graph: list[set[int]] = [set() for _ in walk]
    for i in range(len(walk) - 1):
        graph[first[walk[i]]].add(first[walk[i + 1]])
    return graph


def _cycles_in(graph: Sequence[set[int]]) -> list[list[int]]:
    """Return every elementary cycle, each rooted at its lowest node and closed."""
    roots = sorted({w for v, outs in enumerate(graph) for w in outs if w <= v})
    cycles: list[list[int]] = []
    for root in roots:
        trail = [root]
        on_trail = {root}
        stack = [iter(sorted(w for w in graph[root] if w >= root))]
        while stack:
            w = next(stack[-1], None)
            if w is None:
                stack.pop()
                on_trail.discard(trail.pop())
                continue
            if w == root:
                cycles.append(trail + [root])
            elif w not in on_trail:
                trail.append(w)
                on_trail.add(w)
                stack.append(iter(sorted(x for x in graph[w] if x >= root)))
    return cycles


def _remove_cycles(graph: list[set[int]], cycles: Iterable[list[int]]) -> None:
    for cycle in cycles:
        for a, b in zip(cycle, cycle[1:]):
            graph[a].discard(b)


def _linear_paths_in(walk: Sequence[Point], graph: Sequence[set[int]]) -> list[list[Point]]:
    """Return the linear paths left in an acyclic graph built from walk."""
    lines: list[list[Point]] = []
    size = len(graph)
    u = 0
    while u < size:
        while u < size and not graph[u]:
            u += 1
        if u == size:
            return lines
        current: list[Point] = []
        while True:
            if not graph[u]:
                current.append(walk[u])
                lines.append(current)
                if u == size - 1:
                    return lines
                break
            if len(graph[u]) > 1:
                raise RuntimeError("contour: not a linear path")
            current.append(walk[u])
            u = next(iter(graph[u]))
    return lines


def _add_segment(
    segment: Segment,
    z: float,
    ends: dict[float, dict[Point, Contour]],
    contours: set[Contour],
) -> None:
    """Fold one CONREC segment into the working contours for height z."""
    z_ends = ends.get(z)
    if z_ends is None:
        z_ends = ends[z] = {}
    first = z_ends.get(segment.p1)
    second = z_ends.get(segment.p2)

    if first is None and second is None:
        contour = Contour._from_segment(segment, z)
        z_ends[segment.p1] = contour
        z_ends[segment.p2] = contour
        contours.add(contour)
        return

    owner = first if first is not None else second
    if not owner.extend(segment, z_ends):
        raise RuntimeError("contour: internal link")

    if first is second:
        return
    if first is not None and second is not None:
        if not first.connect(second, z_ends):
            raise RuntimeError("contour: internal link")
        contours.discard(second)


def is_loop(path: Sequence[Point]) -> bool:
    """Return whether the path ends where it starts."""
    return path[0] == path[-1]


def contour_paths(
    grid: GridXYZ,
    levels: Iterable[float],
    tr_x: Transform,
    tr_y: Transform,
) -> dict[float, list[list[Point]]]:
    """Return contour paths of grid cut at levels, keyed by level.

    Each path is a list of transformed points; a closed loop repeats its
    first point at the end.
    """
    ordered = _sorted_levels(levels)
    ends: dict[float, dict[Point, Contour]] = {}
    contours: set[Contour] = set()
    conrec(grid, ordered, lambda _i, _j, seg, z: _add_segment(seg, z, ends, contours))

    for contour in list(contours):
        if contour in contours:
            contour.excise_loops(contours, True)

    paths: dict[float, list[list[Point]]] = {}
    for contour in contours:
        paths.setdefault(contour.z, []).append(contour.path(tr_x, tr_y))
    return paths


def quantiles_r7(grid: GridXYZ, probabilities: Iterable[float]) -> list[float]:
    """Return the quantiles of the grid's non-NaN values by the R-7 method."""
    cols, rows = grid.dims()
    data = sorted(
        v for c in range(cols) for r in range(rows) if not math.isnan(v := grid.z(c, r))
    )
    if not data:
        raise ValueError("contour: no data for quantiles")
    result = []
    for q in probabilities:
        if not 0 <= q <= 1:
            raise ValueError(f"contour: quantile {q} outside [0, 1]")
        if q == 1:
            result.append(data[-1])
            continue
        h = (len(data) - 1) * q
        i = int(h)
        upper = data[min(i + 1, len(data) - 1)]
        result.append(data[i] + (h - math.floor(h)) * (upper - data[i]))
    return result


@dataclass
class ContourPlotter:
    """Contour lines of a grid at given levels, coloured from a palette."""

    grid: GridXYZ
    levels: list[float]
    palette: Sequence[Any] | None = None
    min: float = 0.0
    max: float = 0.0
    underflow: Any = None
    overflow: Any = None
    line_color: Any = field(default_factory=lambda: NRGBA(0, 0, 0, 0xFF))

    def data_range(self) -> tuple[float, float, float, float]:
        """Return (xmin, xmax, ymin, ymax) of the grid."""
        cols, rows = self.grid.dims()
        return (self.grid.x(0), self.grid.x(cols - 1), self.grid.y(0), self.grid.y(rows - 1))

    def level_colors(self) -> list[tuple[float, Any]]:
        """Return (level, colour) for each non-NaN level in ascending order.

        A colour of None means contours at that level are not drawn.
        """
        if self.min > self.max:
            raise ValueError("contour: invalid Z range: min greater than max")
        levels = _sorted_levels(self.levels)
        if not levels:
            return []
        pal = list(self.palette) if self.palette is not None else []
        scale = 0.0 if len(levels) == 1 else _div(len(pal) - 1, levels[-1] - levels[0])

        result = []
        for z in levels:
            if math.isnan(z):
                continue
            if z < self.min:
                color = self.underflow
            elif z > self.max:
                color = self.overflow
            elif not pal:
                color = self.line_color
            else:
                position = (z - levels[0]) * scale + 0.5
                color = pal[0 if math.isnan(position) else int(position)]
            result.append((z, color))
        return result


def new_contour(
    grid: GridXYZ,
    levels: Sequence[float] | None = None,
    palette: Sequence[Any] | None = None,
) -> ContourPlotter:
    """Return a contour plotter for grid.

    Without levels, contours are cut at DEFAULT_QUANTILES of the data. If the
    grid has min() and max() methods they set the plotter's range; otherwise
    the range is that of the grid's non-NaN values.
    """
    grid_min = getattr(grid, "min", None)
    grid_max = getattr(grid, "max", None)
    if callable(grid_min) and callable(grid_max):
        low, high = grid_min(), grid_max()
    else:
        low, high = math.inf, -math.inf
        cols, rows = grid.dims()
        for c in range(cols):
            for r in range(rows):
                v = grid.z(c, r)
                if math.isnan(v):
                    continue
                low = min(low, v)
                high = max(high, v)

    chosen = list(levels) if levels else quantiles_r7(grid, DEFAULT_QUANTILES)
    return ContourPlotter(grid=grid, levels=chosen, palette=palette, min=low, max=high)