"""
figura rendering
================

Bounded Context: Drawing surfaces.

    figura_render/
    ├── base.py      # RenderTarget (draw_circle, draw_polygon)
    ├── null.py      # NullRenderer (production no-op)
    ├── console.py   # ConsoleRenderer (printing test double)
    └── raster.py    # RasterRenderer (numpy canvas, supervision + OpenCV)
"""

from figura_render.base import RenderTarget
from figura_render.null import NullRenderer
from figura_render.console import ConsoleRenderer
from figura_render.raster import RasterRenderer

__all__ = [
    "RenderTarget",
    "NullRenderer",
    "ConsoleRenderer",
    "RasterRenderer",
]
