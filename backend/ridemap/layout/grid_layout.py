"""
Deterministic row-major grid layout used above the force-layout threshold.
"""
from typing import Dict, Optional, Sequence, Tuple, Union
import math

from ..schemas.graph import NodePosition, Place
from .graph import place_names
from .params import LayoutParams


class GridFallbackLayout:
    """Place node i at row i // cols, column i % cols, centred in its cell."""

    def __init__(self, params: Optional[LayoutParams] = None):
        self.params = params or LayoutParams()

    @staticmethod
    def grid_shape(node_count: int) -> Tuple[int, int]:
        """(rows, cols) with cols = ceil(sqrt(n)) and rows = ceil(n / cols)"""
        if node_count <= 0:
            return 0, 0
        cols = math.ceil(math.sqrt(node_count))
        rows = math.ceil(node_count / cols)
        return rows, cols

    def cell_size(self, node_count: int, width: float, height: float) -> Tuple[float, float]:
        rows, cols = self.grid_shape(node_count)
        pad = self.params.padding
        return (width - 2 * pad) / cols, (height - 2 * pad) / rows

    def layout(self,
               places: Sequence[Union[Place, str]],
               width: float,
               height: float) -> Dict[str, NodePosition]:
        names = place_names(places)
        if not names:
            return {}

        _, cols = self.grid_shape(len(names))
        cell_w, cell_h = self.cell_size(len(names), width, height)
        pad = self.params.padding

        positions: Dict[str, NodePosition] = {}
        for i, name in enumerate(names):
            row, col = divmod(i, cols)
            positions[name] = NodePosition(
                pad + col * cell_w + cell_w / 2,
                pad + row * cell_h + cell_h / 2,
            )
        return positions
