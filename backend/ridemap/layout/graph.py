"""
Road graph construction for a single layout pass.

Nodes are place names in input order; every road whose endpoints are both known
places becomes one edge of a MultiGraph, so parallel roads keep their individual
pull on the simulation.
"""
from typing import List, Sequence, Tuple, Union
import logging

import networkx as nx

from ..schemas.graph import Place, Road

logger = logging.getLogger(__name__)


def place_name(place: Union[Place, str]) -> str:
    """Accept either a Place model or a bare name."""
    if isinstance(place, Place):
        return place.name
    return str(place)


def place_names(places: Sequence[Union[Place, str]]) -> List[str]:
    return [place_name(p) for p in places]


def build_road_graph(places: Sequence[Union[Place, str]], roads: Sequence[Road]) -> nx.MultiGraph:
    """Build an undirected multigraph of places and roads, dropping dangling roads."""
    G = nx.MultiGraph()
    for name in place_names(places):
        # first occurrence wins; indices stay dense
        if name in G:
            continue
        G.add_node(name, index=G.number_of_nodes())

    skipped = 0
    for road in roads:
        if road.from_ not in G or road.to not in G:
            skipped += 1
            continue
        G.add_edge(road.from_, road.to, cost=road.cost)

    if skipped:
        logger.debug(f"Skipped {skipped} roads referencing unknown places")
    logger.debug(f"Built road graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G


def edge_index_arrays(G: nx.MultiGraph) -> Tuple[List[int], List[int]]:
    """Return (src, dst) node index lists for every edge, in insertion order."""
    src = []
    dst = []
    for u, v in G.edges():
        src.append(G.nodes[u]['index'])
        dst.append(G.nodes[v]['index'])
    return src, dst
