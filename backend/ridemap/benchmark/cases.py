"""
Standard graph cases for benchmarking a full layout-and-render pass.
Each case provides a graph snapshot, an optional route and the viewport size.
"""
from typing import List, Optional
import networkx as nx

from ..schemas.graph import GraphSnapshot, Place, Road


class BenchmarkCase:
    def __init__(self,
                 name: str,
                 graph: GraphSnapshot,
                 route: Optional[List[str]] = None,
                 width: int = 1280,
                 height: int = 800):
        self.name = name
        self.graph = graph
        self.route = route or []
        self.width = width
        self.height = height

    @property
    def node_count(self) -> int:
        return len(self.graph.places)


def snapshot_from_nx(G: nx.Graph, prefix: str = "P", seed: int = 0) -> GraphSnapshot:
    """Convert a networkx graph with integer nodes to a named snapshot with costs 1..9."""
    places = [Place(name=f"{prefix}{n}") for n in G.nodes]
    roads = [
        Road(**{"from": f"{prefix}{u}", "to": f"{prefix}{v}", "cost": 1 + (u * 7 + v * 3 + seed) % 9})
        for u, v in G.edges
    ]
    return GraphSnapshot(places=places, roads=roads)


def create_ring_case(n: int = 12) -> BenchmarkCase:
    """Ring of n places, route half way round."""
    graph = snapshot_from_nx(nx.cycle_graph(n))
    route = [f"P{i}" for i in range(n // 2 + 1)]
    return BenchmarkCase(f'ring_{n}', graph, route)


def create_star_case(n: int = 15) -> BenchmarkCase:
    """Hub with n spokes."""
    graph = snapshot_from_nx(nx.star_graph(n))
    return BenchmarkCase(f'star_{n + 1}', graph, ["P1", "P0", f"P{n}"])


def create_chain_case(n: int = 20) -> BenchmarkCase:
    """Longest path the force layout still handles."""
    graph = snapshot_from_nx(nx.path_graph(n))
    return BenchmarkCase(f'chain_{n}', graph, [f"P{i}" for i in range(n)])


def create_random_case(n: int = 18, m: int = 30, seed: int = 7) -> BenchmarkCase:
    graph = snapshot_from_nx(nx.gnm_random_graph(n, m, seed=seed), seed=seed)
    return BenchmarkCase(f'random_{n}_{m}', graph, ["P0", "P1", "P2"])


def create_grid_case(n: int = 100) -> BenchmarkCase:
    """Above the threshold: exercised through the grid fallback."""
    side = int(n ** 0.5)
    G = nx.convert_node_labels_to_integers(nx.grid_2d_graph(side, side))
    return BenchmarkCase(f'grid_{side * side}', snapshot_from_nx(G), ["P0", "P1", f"P{side + 1}"])


# List of all available benchmark cases
BENCHMARK_CASES = [
    create_ring_case(),
    create_star_case(),
    create_chain_case(),
    create_random_case(),
    create_grid_case(25),
    create_grid_case(100)
]
