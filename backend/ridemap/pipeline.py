"""
One full layout-and-render pass.
"""
from typing import Optional, Sequence, Tuple
import logging

from .layout.engine import LayoutEngine, LayoutResult
from .render.renderer import Renderer
from .render.surface import RasterSurface
from .schemas.graph import GraphSnapshot

logger = logging.getLogger(__name__)


def render_frame(graph: GraphSnapshot,
                 route_path: Optional[Sequence[str]],
                 width: int,
                 height: int,
                 engine: Optional[LayoutEngine] = None,
                 renderer: Optional[Renderer] = None,
                 surface: Optional[RasterSurface] = None) -> Tuple[RasterSurface, LayoutResult]:
    """Lay out the graph for the given viewport and draw it onto a surface.

    A passed-in surface is resized to the viewport if needed and redrawn from
    scratch; nothing from a previous pass is reused.
    """
    engine = engine or LayoutEngine()
    renderer = renderer or Renderer()
    if surface is None:
        surface = RasterSurface(width, height)
    elif (surface.width, surface.height) != (width, height):
        surface.resize(width, height)

    result = engine.layout_snapshot(graph, width, height)
    renderer.render(surface, graph.places, graph.roads, result.positions, route_path)
    return surface, result
