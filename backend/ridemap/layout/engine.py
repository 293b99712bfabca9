"""
Layout engine: picks the force simulation for small graphs and the grid for
large ones, and always returns a position for every input place.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Union
import logging
import time

import numpy as np

from ..schemas.graph import GraphSnapshot, NodePosition, Place, Road
from .force_simulator import ForceSimulator
from .grid_layout import GridFallbackLayout
from .params import LayoutParams

logger = logging.getLogger(__name__)

ALGORITHM_EMPTY = "empty"
ALGORITHM_FORCE = "force"
ALGORITHM_GRID = "grid"


@dataclass
class LayoutResult:
    """Positions for one pass plus which algorithm produced them"""
    positions: Dict[str, NodePosition] = field(default_factory=dict)
    algorithm: str = ALGORITHM_EMPTY
    elapsed: float = 0.0


class LayoutEngine:

    def __init__(self,
                 params: Optional[LayoutParams] = None,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self.params = params or LayoutParams()
        self.force = ForceSimulator(self.params, rng=rng, seed=seed)
        self.grid = GridFallbackLayout(self.params)

    def select_algorithm(self, node_count: int) -> str:
        if node_count == 0:
            return ALGORITHM_EMPTY
        if node_count <= self.params.force_threshold:
            return ALGORITHM_FORCE
        return ALGORITHM_GRID

    def compute(self,
                places: Sequence[Union[Place, str]],
                roads: Sequence[Road],
                width: float,
                height: float) -> LayoutResult:
        start = time.perf_counter()
        algorithm = self.select_algorithm(len(places))

        if algorithm == ALGORITHM_FORCE:
            positions = self.force.layout(places, roads, width, height)
        elif algorithm == ALGORITHM_GRID:
            logger.info(
                f"{len(places)} places exceed force threshold {self.params.force_threshold}, using grid layout"
            )
            positions = self.grid.layout(places, width, height)
        else:
            positions = {}

        elapsed = time.perf_counter() - start
        logger.info(f"Layout complete: {len(positions)} nodes, algorithm={algorithm}, {elapsed * 1000:.1f}ms")
        return LayoutResult(positions=positions, algorithm=algorithm, elapsed=elapsed)

    def layout(self,
               places: Sequence[Union[Place, str]],
               roads: Sequence[Road],
               width: float,
               height: float) -> Dict[str, NodePosition]:
        """name -> NodePosition for every place in this pass"""
        return self.compute(places, roads, width, height).positions

    def layout_snapshot(self, graph: GraphSnapshot, width: float, height: float) -> LayoutResult:
        return self.compute(graph.places, graph.roads, width, height)


def layout(places: Sequence[Union[Place, str]],
           roads: Sequence[Road],
           width: float,
           height: float,
           seed: Optional[int] = None) -> Dict[str, NodePosition]:
    """
    Entry point for the layout engine.
    Empty input -> {}, up to 20 places -> force simulation, otherwise grid.
    """
    return LayoutEngine(seed=seed).layout(places, roads, width, height)
