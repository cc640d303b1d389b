# plotkit

plotkit works out the colors and the data geometry that a plotting library
needs. It has no runtime dependencies. It contains:

- `plotkit.palette`: the `rainbow`, `heat` and `radial` palettes built in HSV
  space, the hue constants (`RED`, `YELLOW`, `GREEN`, `CYAN`, `BLUE`,
  `MAGENTA`), `complement`, the `ColorMap` base class and `reverse`, which
  flips a color map.
- `plotkit.colorspace`: conversions between sRGB (`SRGBA`), linear RGB
  (`LinearRGB`), CIE XYZ (`CieXYZ`), CIE LAB (`CieLAB`) and MSH (`MSH`).
  There are also `color_to_srgba`, `color_to_msh` and `hue_twist`.
- `plotkit.luminance`: color maps whose luminance is linear in the mapped
  value. The built-in ones are `black_body`, `extended_black_body`,
  `kindlmann` and `extended_kindlmann`. `Luminance.from_colors` builds one
  from your own control colors.
- `plotkit.smooth`: smooth diverging color maps. The built-in ones are
  `smooth_blue_red`, `smooth_purple_orange`, `smooth_green_purple`,
  `smooth_blue_tan` and `smooth_green_red`. `new_smooth_diverging` builds one
  from MSH colors and `smooth_diverging_from_colors` builds one from ordinary
  colors.
- `plotkit.conrec`: the CONREC contouring algorithm (`conrec`) and the
  `GridXYZ` protocol.
- `plotkit.contour`: `contour_paths`, which joins CONREC segments into paths
  and splits loops out of them. The module also has `quantiles_r7` and
  `new_contour`. `new_contour` returns a `ContourPlotter` that gives the data
  range and a color for each level.
- `plotkit.barchart`, `plotkit.boxplot`, `plotkit.errbars`, `plotkit.field`,
  `plotkit.function` and `plotkit.colorbar` compute data ranges and positions
  for bar charts, box plots, X and Y error bars, vector fields, sampled
  functions and color bars.

## Installation

```
pip install .
```

## Examples

### Palettes

Colors come back as `NRGBA` values, with 8-bit channels that are not
premultiplied.

```python
from plotkit.palette import rainbow, heat, radial, CYAN, MAGENTA

colors = rainbow(10, 0, 1, 1, 1, 1).colors
warm = heat(10, 1).colors
div = radial(10, CYAN, MAGENTA, 1)
div.critical_index()            # (4, 5)
```

### Color maps

```python
from plotkit.smooth import smooth_blue_red

cmap = smooth_blue_red()
cmap.min = 0
cmap.max = 1
color = cmap.at(0.25)           # an SRGBA color
ramp = cmap.palette(33).colors
```

`at` raises one of these errors, all of which derive from `ColorMapError`:

- `ValueUnderflowError` when the value is below `min`;
- `ValueOverflowError` when the value is above `max`;
- `ValueNaNError` when the value is NaN.

`at` also raises `ColorMapError` when `min` equals `max` or is greater than
it.

If `min` and `max` are both zero, `palette(n)` spreads its colors over
`[0, 1]`. Setting `min` or `max` on a `SmoothDiverging` map moves
`converge_point` back to the middle of the range.

`reverse(cmap)` returns a `ReversedColorMap`. It maps values and builds
palettes in the opposite direction.

### Contours

```python
from plotkit.contour import contour_paths

paths = contour_paths(grid, [1.5, 2.5], float, float)
```

`grid` is any object with these four methods (the `GridXYZ` protocol):

- `dims()` returns the number of columns and rows;
- `z(c, r)` returns the value at column `c`, row `r`;
- `x(c)` returns the coordinate of column `c`;
- `y(r)` returns the coordinate of row `r`.

The result maps each level to a list of paths. Each path is a list of
`(x, y)` points passed through the two transforms. A closed loop repeats its
first point at the end, which `is_loop` checks for.

### Box plot statistics

```python
from plotkit.boxplot import five_stat, BoxPlot

stats = five_stat([1, 2, 3, 4, 100], location=0)
stats.median, stats.quartile1, stats.quartile3, stats.outside

box = BoxPlot(20, 0, [1, 2, 3, 4, 100])
box.outside_labels(["a", "b", "c", "d", "e"])   # [(x, y, label), ...]
```

### Other plot elements

- `BarChart(values, width)`:
  - `bar_height` and `bar_positions` give the bar sizes and places;
  - `stack_on` stacks one chart on another;
  - `data_range` gives the range covered.
- `YErrorBars(xys, errors)` and `XErrorBars(xys, errors)`:
  - `bars()` gives the low and high end of each bar;
  - `data_range()` gives the range covered, bars included.
- `Field(field)`: `cells()` gives each grid cell's bounds and its vector,
  scaled by the largest magnitude in the field.
- `Function(f)`: `sample(x_min, x_max)` gives 50 `(x, f(x))` points by
  default.
- `ColorBar(color_map)`: `colors(extent)` lists the colors to show on a bar
  of the given `(width, height)`.

## What plotkit does not do

plotkit does no drawing. It has:

- no canvas, no axes, no ticks and no legend;
- no image or vector output;
- no plot object to which plotters are added.

It returns colors, coordinates and ranges. Your own drawing code renders
them.

## Tests

```
pip install .[test]
pytest
```