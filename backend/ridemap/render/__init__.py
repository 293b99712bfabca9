"""
Rendering package: the raster surface and the layered map renderer.
"""
from .surface import RasterSurface
from .renderer import Renderer, RenderTheme, route_runs

__all__ = [
    'RasterSurface',
    'Renderer',
    'RenderTheme',
    'route_runs'
]
