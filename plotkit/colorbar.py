"""A colour bar legend for a colour map."""

from __future__ import annotations

from dataclasses import dataclass

from plotkit.palette import ColorMap


@dataclass
class ColorBar:
    """Shows the colours of a colour map along a horizontal or vertical bar."""

    color_map: ColorMap | None
    vertical: bool = False
    colors_shown: int = 0

    def _check(self) -> ColorMap:
        if self.color_map is None:
            raise ValueError("plotter: nil ColorMap in ColorBar")
        if self.color_map.max == self.color_map.min:
            raise ValueError("plotter: ColorMap Max==Min")
        return self.color_map

    def color_count(self, extent: tuple[float, float]) -> int:
        """Return the number of colours shown on a bar of (width, height).

        Without an explicit count, one colour is used per unit of length.
        """
        if self.colors_shown > 0:
            return self.colors_shown
        width, height = extent
        return int(height if self.vertical else width)

    def colors(self, extent: tuple[float, float]) -> list:
        """Return the bar's colours from the map minimum upwards."""
        cmap = self._check()
        count = self.color_count(extent)
        if count <= 0:
            return []
        delta = (cmap.max - cmap.min) / count
        return [cmap.at(cmap.min + delta * i) for i in range(count)]

    def data_range(self) -> tuple[float, float, float, float]:
        """Return (xmin, xmax, ymin, ymax); the bar is one unit thick."""
        cmap = self._check()
        if self.vertical:
            return 0.0, 1.0, cmap.min, cmap.max
        return cmap.min, cmap.max, 0.0, 1.0