"""
Visualization utilities for spike histories.

Provides raster plots built from the network's spike history; the engine
itself never renders anything.
"""

from .raster import plot_raster, save_raster
from .constants import (
    DPI_DEFAULT,
    FIGURE_SIZE_PX_DEFAULT,
)

__all__ = [
    'plot_raster',
    'save_raster',
    'DPI_DEFAULT',
    'FIGURE_SIZE_PX_DEFAULT',
]
