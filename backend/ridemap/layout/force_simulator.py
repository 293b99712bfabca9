# Force-directed layout for small road graphs (spring embedder)

from typing import Dict, Optional, Sequence, Union
import logging
import math

import networkx as nx
import numpy as np

from ..schemas.graph import NodePosition, Place, Road
from .graph import build_road_graph, edge_index_arrays
from .params import LayoutParams

logger = logging.getLogger(__name__)


class ForceSimulator:
    """
    Fruchterman-Reingold style spring embedder.

    - Every pair of places repels with magnitude k^2 / d
    - Every road attracts its endpoints with magnitude (d / k) * k
    - Each iteration applies position += force * damping, then clamps into the
      padded viewport

    There is no velocity carried between iterations. Positions and forces live in
    (n, 2) arrays indexed by node index and are thrown away after each call.
    """

    def __init__(self,
                 params: Optional[LayoutParams] = None,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        self.params = params or LayoutParams()
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    # ========================================================================
    # FORCE CALCULATION
    # ========================================================================

    @staticmethod
    def ideal_edge_length(width: float, height: float, node_count: int) -> float:
        return math.sqrt((width * height) / node_count)

    def _initialize_positions(self, node_count: int, width: float, height: float) -> np.ndarray:
        """Uniform random start inside [padding, dim - padding] on both axes"""
        pad = self.params.padding
        positions = np.empty((node_count, 2), dtype=float)
        positions[:, 0] = pad + self.rng.random(node_count) * (width - 2 * pad)
        positions[:, 1] = pad + self.rng.random(node_count) * (height - 2 * pad)
        return positions

    def _calculate_repulsive_forces(self, positions: np.ndarray, repulsion: float) -> np.ndarray:
        """Pairwise repulsion, summed per node"""
        # delta[i, j] points from node i to node j
        delta = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        distance = np.sqrt(np.sum(delta * delta, axis=-1))
        distance[distance == 0] = 1.0

        magnitude = repulsion / distance
        unit = delta / distance[..., np.newaxis]
        # Node i is pushed away from every j; the diagonal has a zero delta
        return -np.sum(unit * magnitude[..., np.newaxis], axis=1)

    def _calculate_attractive_forces(self,
                                     positions: np.ndarray,
                                     src: np.ndarray,
                                     dst: np.ndarray,
                                     k: float,
                                     attraction: float) -> np.ndarray:
        """Spring pull along every road"""
        forces = np.zeros_like(positions)
        if len(src) == 0:
            return forces

        delta = positions[dst] - positions[src]
        distance = np.sqrt(np.sum(delta * delta, axis=-1))
        distance[distance == 0] = 1.0

        magnitude = (distance / k) * attraction
        force = (delta / distance[:, np.newaxis]) * magnitude[:, np.newaxis]

        np.add.at(forces, src, force)
        np.add.at(forces, dst, -force)
        return forces

    def _clamp(self, positions: np.ndarray, width: float, height: float) -> None:
        """Clamp in place; on a viewport narrower than 2*padding the lower bound wins"""
        pad = self.params.padding
        positions[:, 0] = np.maximum(pad, np.minimum(width - pad, positions[:, 0]))
        positions[:, 1] = np.maximum(pad, np.minimum(height - pad, positions[:, 1]))

    def _physics_step(self,
                      positions: np.ndarray,
                      src: np.ndarray,
                      dst: np.ndarray,
                      k: float,
                      width: float,
                      height: float) -> float:
        """Execute one damped-Euler step, return the largest node displacement"""
        forces = self._calculate_repulsive_forces(positions, k * k)
        forces += self._calculate_attractive_forces(positions, src, dst, k, k)

        previous = positions.copy()
        positions += forces * self.params.damping
        self._clamp(positions, width, height)

        moved = np.sqrt(np.sum((positions - previous) ** 2, axis=-1))
        return float(moved.max()) if len(moved) else 0.0

    def _run_simulation(self, G: nx.MultiGraph, width: float, height: float) -> np.ndarray:
        node_count = G.number_of_nodes()
        k = self.ideal_edge_length(width, height, node_count)
        src, dst = edge_index_arrays(G)
        src = np.asarray(src, dtype=int)
        dst = np.asarray(dst, dtype=int)

        positions = self._initialize_positions(node_count, width, height)
        for iteration in range(self.params.iterations):
            max_move = self._physics_step(positions, src, dst, k, width, height)
            if iteration % 20 == 0:
                logger.debug(f"Iteration {iteration}: max_move={max_move:.3f}")
        return positions

    # ========================================================================
    # ENTRY POINT
    # ========================================================================

    def layout(self,
               places: Sequence[Union[Place, str]],
               roads: Sequence[Road],
               width: float,
               height: float) -> Dict[str, NodePosition]:
        """Compute a position for every place. Empty input gives an empty mapping."""
        if len(places) == 0:
            return {}
        if width < 2 * self.params.padding or height < 2 * self.params.padding:
            logger.warning(
                f"Viewport {width}x{height} is smaller than twice the padding "
                f"({self.params.padding}); nodes will collapse onto the padding line"
            )

        G = build_road_graph(places, roads)
        positions = self._run_simulation(G, width, height)

        names = list(G.nodes)
        return {
            name: NodePosition(float(positions[i, 0]), float(positions[i, 1]))
            for i, name in enumerate(names)
        }


def force_layout(places: Sequence[Union[Place, str]],
                 roads: Sequence[Road],
                 width: float,
                 height: float,
                 seed: Optional[int] = None) -> Dict[str, NodePosition]:
    """Convenience wrapper with default parameters."""
    return ForceSimulator(seed=seed).layout(places, roads, width, height)
