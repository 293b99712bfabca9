"""
Helper functions for checking computed layouts.
"""
from typing import Dict, List, Tuple
import math

from shapely.geometry import Point

from ..schemas.graph import NodePosition


def positions_in_bounds(positions: Dict[str, NodePosition],
                        width: float,
                        height: float,
                        padding: float) -> bool:
    """True if every position lies within [padding, dim - padding] on both axes."""
    return all(
        padding <= p.x <= width - padding and padding <= p.y <= height - padding
        for p in positions.values()
    )


def node_overlaps(positions: Dict[str, NodePosition], radius: float) -> List[Tuple[str, str]]:
    """Pairs of nodes whose discs of the given radius overlap."""
    names = list(positions.keys())
    discs = [Point(positions[n].x, positions[n].y).buffer(radius) for n in names]

    overlaps = []
    for i, name1 in enumerate(names):
        for j in range(i + 1, len(names)):
            # Touching discs share only a boundary point; that is not an overlap
            if discs[i].intersection(discs[j]).area > 1e-9:
                overlaps.append((name1, names[j]))
    return overlaps


def min_node_distance(positions: Dict[str, NodePosition]) -> float:
    """Smallest centre-to-centre distance, inf for fewer than two nodes."""
    points = [Point(p.x, p.y) for p in positions.values()]
    best = math.inf
    for i, p1 in enumerate(points):
        for p2 in points[i + 1:]:
            best = min(best, p1.distance(p2))
    return best
