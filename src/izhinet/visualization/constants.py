"""Visualization constants for raster plots."""

DPI_DEFAULT = 100
"""Dots per inch used to convert pixel sizes to figure sizes."""

FIGURE_SIZE_PX_DEFAULT = (800, 1200)
"""Default raster image size in pixels (width, height)."""

SPIKE_COLOR = 'black'
SPIKE_ALPHA = 0.3
SPIKE_MARKER_SIZE = 2.0
