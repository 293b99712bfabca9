"""
Viewport controller: owns the current graph, route and pixel size, and runs exactly
one full layout-and-render pass per observed change to any of them.

Changes are observed explicitly through set_graph / set_route / resize / update. A
value equal to the current one is not a change. Passes are synchronous, so a new
pass always fully replaces the previous frame and positions.
"""
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import logging

from .layout.engine import LayoutEngine, LayoutResult
from .pipeline import render_frame
from .render.renderer import Renderer
from .render.surface import RasterSurface
from .schemas.graph import GraphSnapshot, NodePosition

logger = logging.getLogger(__name__)

_UNSET = object()

FrameCallback = Callable[[RasterSurface, LayoutResult], None]


class ViewportController:

    def __init__(self,
                 engine: Optional[LayoutEngine] = None,
                 renderer: Optional[Renderer] = None,
                 dpi: int = 100,
                 on_frame: Optional[FrameCallback] = None):
        self.engine = engine or LayoutEngine()
        self.renderer = renderer or Renderer()
        self.dpi = dpi
        self.on_frame = on_frame

        self.graph: Optional[GraphSnapshot] = None
        self.route: Tuple[str, ...] = ()
        self.size: Optional[Tuple[int, int]] = None

        self.surface: Optional[RasterSurface] = None
        self.last_result: Optional[LayoutResult] = None
        self.pass_count = 0

    # ========================================================================
    # OBSERVED INPUTS
    # ========================================================================

    def set_graph(self, graph: GraphSnapshot) -> bool:
        return self.update(graph=graph)

    def set_route(self, route_path: Optional[Sequence[str]]) -> bool:
        return self.update(route=route_path)

    def resize(self, width: int, height: int) -> bool:
        return self.update(size=(width, height))

    def update(self, graph=_UNSET, route=_UNSET, size=_UNSET) -> bool:
        """Apply any number of input changes; recompute once if anything changed.

        Returns True when a pass ran.
        """
        changed: List[str] = []

        if graph is not _UNSET and graph != self.graph:
            self.graph = graph
            changed.append("graph")

        if route is not _UNSET:
            route = tuple(route or ())
            if route != self.route:
                self.route = route
                changed.append("route")

        if size is not _UNSET:
            size = (int(size[0]), int(size[1]))
            if size != self.size:
                self.size = size
                changed.append("size")

        if not changed:
            return False
        logger.debug(f"Invalidated by change to: {', '.join(changed)}")
        return self._recompute()

    # ========================================================================
    # RECOMPUTE
    # ========================================================================

    @property
    def ready(self) -> bool:
        return self.graph is not None and self.size is not None and self.size[0] > 0 and self.size[1] > 0

    @property
    def positions(self) -> Dict[str, NodePosition]:
        return self.last_result.positions if self.last_result else {}

    def _recompute(self) -> bool:
        if not self.ready:
            logger.debug("Recompute deferred: graph or viewport size not known yet")
            return False

        width, height = self.size
        if self.surface is None:
            self.surface = RasterSurface(width, height, dpi=self.dpi)

        self.surface, self.last_result = render_frame(
            self.graph,
            self.route,
            width,
            height,
            engine=self.engine,
            renderer=self.renderer,
            surface=self.surface,
        )
        self.pass_count += 1
        logger.info(
            f"Pass {self.pass_count}: {len(self.last_result.positions)} places, "
            f"route of {len(self.route)}, {width}x{height}"
        )

        if self.on_frame is not None:
            self.on_frame(self.surface, self.last_result)
        return True
