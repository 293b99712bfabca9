# Layered map renderer: background, roads with costs, route, places

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union
import logging

from matplotlib.patches import Circle, Rectangle

from ..layout.graph import place_name
from ..schemas.graph import NodePosition, Place, Road
from .surface import RasterSurface

logger = logging.getLogger(__name__)

# Artist group ids
GID_BACKGROUND = "background"
GID_ROAD = "road"
GID_ROAD_COST = "road-cost"
GID_ROUTE = "route"
GID_PLACE = "place"
GID_PLACE_LABEL = "place-label"

# Layer z-orders; within a layer, later draws occlude earlier ones
Z_BACKGROUND = 0
Z_ROADS = 1
Z_ROUTE = 2
Z_PLACES = 3


@dataclass
class RenderTheme:
    """Colours and pixel sizes of every drawn element"""
    background: str = "#0a0a0a"
    road_color: str = "#ffffff33"
    road_width: float = 2.0
    cost_color: str = "#ffffff99"
    cost_font_size: float = 11.0
    cost_font_family: str = "monospace"
    cost_offset: float = 2.0
    route_color: str = "#2F6BFF"
    route_width: float = 5.0
    node_radius: float = 12.0
    node_fill: str = "#000000b3"
    node_outline: str = "#ffffffcc"
    node_outline_width: float = 2.0
    label_color: str = "#ffffffe6"
    label_font_size: float = 12.0
    label_font_family: str = "sans-serif"
    label_offset: float = 18.0


def route_runs(route_path: Sequence[str], positions: Dict[str, NodePosition]) -> List[List[NodePosition]]:
    """
    Split a route into polylines of consecutive drawable segments.

    A segment is drawable when both of its endpoints have positions; a segment with
    a missing endpoint breaks the current polyline.
    """
    runs: List[List[NodePosition]] = []
    current: List[NodePosition] = []
    for a, b in zip(route_path, route_path[1:]):
        pa = positions.get(a)
        pb = positions.get(b)
        if pa is None or pb is None:
            if len(current) >= 2:
                runs.append(current)
            current = []
            continue
        if not current:
            current = [pa]
        current.append(pb)
    if len(current) >= 2:
        runs.append(current)
    return runs


class Renderer:
    """Draws a laid-out road graph onto a RasterSurface."""

    def __init__(self, theme: Optional[RenderTheme] = None):
        self.theme = theme or RenderTheme()

    def render(self,
               surface: RasterSurface,
               places: Sequence[Union[Place, str]],
               roads: Sequence[Road],
               positions: Dict[str, NodePosition],
               route_path: Optional[Sequence[str]] = None) -> None:
        """Redraw the whole frame. Unknown names only reduce what gets drawn."""
        route_path = list(route_path or [])
        surface.clear()

        self._draw_background(surface)
        drawn_roads = self._draw_roads(surface, roads, positions)
        drawn_segments = self._draw_route(surface, route_path, positions)
        drawn_places = self._draw_places(surface, places, positions)

        logger.debug(
            f"Rendered {drawn_places} places, {drawn_roads}/{len(roads)} roads, "
            f"{drawn_segments} route segments on {surface.width}x{surface.height}"
        )

    # ========================================================================
    # LAYERS
    # ========================================================================

    def _draw_background(self, surface: RasterSurface) -> None:
        surface.figure.set_facecolor(self.theme.background)
        surface.ax.set_facecolor(self.theme.background)
        surface.ax.add_patch(Rectangle(
            (0, 0), surface.width, surface.height,
            facecolor=self.theme.background,
            linewidth=0,
            zorder=Z_BACKGROUND,
            gid=GID_BACKGROUND,
        ))

    def _draw_roads(self, surface: RasterSurface, roads: Sequence[Road], positions: Dict[str, NodePosition]) -> int:
        t = self.theme
        drawn = 0
        for road in roads:
            a = positions.get(road.from_)
            b = positions.get(road.to)
            if a is None or b is None:
                logger.debug(f"Skipping road {road.from_}-{road.to}: endpoint not laid out")
                continue

            surface.ax.plot(
                [a.x, b.x], [a.y, b.y],
                color=t.road_color,
                linewidth=surface.points(t.road_width),
                zorder=Z_ROADS,
                gid=GID_ROAD,
            )
            surface.ax.text(
                (a.x + b.x) / 2, (a.y + b.y) / 2 - t.cost_offset,
                road.cost_label(),
                color=t.cost_color,
                fontsize=surface.points(t.cost_font_size),
                family=t.cost_font_family,
                ha="center",
                va="center",
                zorder=Z_ROADS,
                gid=GID_ROAD_COST,
                parse_math=False,
            )
            drawn += 1
        return drawn

    def _draw_route(self, surface: RasterSurface, route_path: List[str], positions: Dict[str, NodePosition]) -> int:
        if len(route_path) < 2:
            return 0

        t = self.theme
        segments = 0
        for run in route_runs(route_path, positions):
            surface.ax.plot(
                [p.x for p in run], [p.y for p in run],
                color=t.route_color,
                linewidth=surface.points(t.route_width),
                solid_capstyle="round",
                solid_joinstyle="round",
                zorder=Z_ROUTE,
                gid=GID_ROUTE,
            )
            segments += len(run) - 1

        skipped = len(route_path) - 1 - segments
        if skipped:
            logger.debug(f"Skipped {skipped} route segments with unknown endpoints")
        return segments

    def _draw_places(self,
                     surface: RasterSurface,
                     places: Sequence[Union[Place, str]],
                     positions: Dict[str, NodePosition]) -> int:
        t = self.theme
        drawn = 0
        for place in places:
            name = place_name(place)
            pos = positions.get(name)
            if pos is None:
                continue

            surface.ax.add_patch(Circle(
                (pos.x, pos.y), t.node_radius,
                facecolor=t.node_fill,
                edgecolor=t.node_outline,
                linewidth=surface.points(t.node_outline_width),
                zorder=Z_PLACES,
                gid=GID_PLACE,
            ))
            surface.ax.text(
                pos.x, pos.y + t.label_offset,
                name,
                color=t.label_color,
                fontsize=surface.points(t.label_font_size),
                family=t.label_font_family,
                ha="center",
                va="top",
                zorder=Z_PLACES,
                gid=GID_PLACE_LABEL,
                parse_math=False,
            )
            drawn += 1
        return drawn
