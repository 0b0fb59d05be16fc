"""
Rendering

Raster output for Walsh matrices: the grid logo, the demo canvas, and a
sequency plot.
"""

from .grid import (
    render_logo,
    cell_size,
    chip_color,
    save_png,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
)
from .canvas import Canvas, draw_demo
from .plots import plot_sequency_profile

__all__ = [
    "render_logo",
    "cell_size",
    "chip_color",
    "save_png",
    "NEGATIVE_COLOR",
    "POSITIVE_COLOR",
    "Canvas",
    "draw_demo",
    "plot_sequency_profile",
]
