from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel, Field
from typing import List, Dict, Optional
import logging
import time

from backend.ridemap.clients.ride_api import RideApiClient, RideApiError
from backend.ridemap.layout.engine import LayoutEngine
from backend.ridemap.layout.metrics import node_overlaps
from backend.ridemap.pipeline import render_frame
from backend.ridemap.render.renderer import RenderTheme
from backend.ridemap.render.surface import RasterSurface
from backend.ridemap.config import get_settings
from backend.ridemap.schemas.graph import GraphSnapshot

router = APIRouter()
logger = logging.getLogger(__name__)

MAX_DIMENSION = 4096


class LayoutRequest(BaseModel):
    graph: GraphSnapshot
    width: int = Field(..., gt=0, le=MAX_DIMENSION)
    height: int = Field(..., gt=0, le=MAX_DIMENSION)
    seed: Optional[int] = None


class LayoutResponse(BaseModel):
    positions: Dict[str, Dict[str, float]]
    algorithm: str
    node_count: int
    warnings: List[str] = []


class RenderRequest(LayoutRequest):
    route: List[str] = []


def get_client() -> RideApiClient:
    return RideApiClient()


def _png_response(surface: RasterSurface) -> Response:
    return Response(content=surface.to_png(), media_type="image/png")


@router.post("/layout", response_model=LayoutResponse)
async def compute_layout(request: LayoutRequest):
    """Compute node positions for a graph snapshot and viewport."""
    try:
        t0 = time.time()
        logger.info(
            "[layout] request received: places=%d, roads=%d, viewport=%dx%d",
            len(request.graph.places), len(request.graph.roads), request.width, request.height
        )
        result = LayoutEngine(seed=request.seed).layout_snapshot(request.graph, request.width, request.height)

        warnings = []
        dangling = request.graph.dangling_roads()
        if dangling:
            warnings.append(f"{len(dangling)} roads reference unknown places and were ignored")
        overlaps = node_overlaps(result.positions, RenderTheme().node_radius)
        if overlaps:
            warnings.append(f"{len(overlaps)} node pairs overlap")

        resp = LayoutResponse(
            positions={name: pos.as_dict() for name, pos in result.positions.items()},
            algorithm=result.algorithm,
            node_count=len(result.positions),
            warnings=warnings,
        )
        logger.info("[layout] success: algorithm=%s, time=%.3fs", result.algorithm, time.time() - t0)
        return resp
    except Exception as e:
        logger.exception("[layout] error: %s", str(e))
        raise HTTPException(status_code=500, detail=f"Layout error: {str(e)}")


@router.post("/render")
async def render_map(request: RenderRequest):
    """Render a graph snapshot with an optional highlighted route to PNG."""
    try:
        logger.info(
            "[render] request received: places=%d, route=%d, viewport=%dx%d",
            len(request.graph.places), len(request.route), request.width, request.height
        )
        surface = RasterSurface(request.width, request.height, dpi=get_settings().dpi)
        render_frame(
            request.graph,
            request.route,
            request.width,
            request.height,
            engine=LayoutEngine(seed=request.seed),
            surface=surface,
        )
        return _png_response(surface)
    except Exception as e:
        logger.exception("[render] error: %s", str(e))
        raise HTTPException(status_code=500, detail=f"Render error: {str(e)}")


@router.get("/frame")
async def live_frame(
    from_place: Optional[str] = Query(None, alias="from"),
    to_place: Optional[str] = Query(None, alias="to"),
    width: Optional[int] = Query(None, gt=0, le=MAX_DIMENSION),
    height: Optional[int] = Query(None, gt=0, le=MAX_DIMENSION),
    seed: Optional[int] = None,
    client: RideApiClient = Depends(get_client),
):
    """Fetch the live graph (and route, when both ends are given) and render it."""
    settings = get_settings()
    width = width or settings.default_width
    height = height or settings.default_height
    if bool(from_place) != bool(to_place):
        raise HTTPException(status_code=400, detail="Both 'from' and 'to' are required for a route")

    try:
        graph = client.fetch_graph()
        route = client.fetch_route(from_place, to_place).path if from_place else []
    except RideApiError as e:
        logger.error("[frame] upstream error: %s", str(e))
        raise HTTPException(status_code=502, detail=f"Ride API error: {str(e)}")

    try:
        surface = RasterSurface(width, height, dpi=settings.dpi)
        render_frame(graph, route, width, height, engine=LayoutEngine(seed=seed), surface=surface)
        return _png_response(surface)
    except Exception as e:
        logger.exception("[frame] error: %s", str(e))
        raise HTTPException(status_code=500, detail=f"Render error: {str(e)}")
