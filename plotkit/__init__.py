"""Color palettes, perceptual color maps, contouring and plot-element geometry."""

__version__ = "0.1.0"