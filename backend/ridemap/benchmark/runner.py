"""
Benchmark harness timing full layout-and-render passes.
Collects runtime, chosen algorithm and layout quality metrics per run.
"""
from typing import List, Optional
import time
import logging
from dataclasses import dataclass

from ..layout.engine import LayoutEngine
from ..layout.metrics import min_node_distance, node_overlaps, positions_in_bounds
from ..pipeline import render_frame
from ..render.renderer import Renderer
from .cases import BenchmarkCase, BENCHMARK_CASES

logger = logging.getLogger(__name__)

# Interactive budget for one pass
PASS_BUDGET_SECONDS = 0.050


@dataclass
class BenchmarkResult:
    """Results from a single pass."""
    case_name: str
    node_count: int
    algorithm: str
    layout_seconds: float
    render_seconds: float
    total_seconds: float
    overlap_count: int
    min_distance: float
    in_bounds: bool

    @property
    def within_budget(self) -> bool:
        return self.total_seconds <= PASS_BUDGET_SECONDS


class BenchmarkRunner:
    def __init__(self, cases: Optional[List[BenchmarkCase]] = None, rasterize: bool = True):
        """Initialize with optional specific cases.

        With rasterize=True the Agg canvas is drawn too, which is where most of the
        render time goes.
        """
        self.cases = cases or BENCHMARK_CASES
        self.rasterize = rasterize
        self.renderer = Renderer()

    def run_benchmark(self, runs_per_case: int = 3, seed: Optional[int] = None) -> List[BenchmarkResult]:
        results = []
        for case in self.cases:
            logger.info(f"Running benchmark case: {case.name}")
            for run in range(runs_per_case):
                engine = LayoutEngine(seed=None if seed is None else seed + run)
                results.append(self._run_single_case(case, engine))
        return results

    def _run_single_case(self, case: BenchmarkCase, engine: LayoutEngine) -> BenchmarkResult:
        start = time.perf_counter()
        surface, layout = render_frame(
            case.graph, case.route, case.width, case.height,
            engine=engine, renderer=self.renderer,
        )
        if self.rasterize:
            surface.to_rgba()
        total = time.perf_counter() - start

        positions = layout.positions
        result = BenchmarkResult(
            case_name=case.name,
            node_count=case.node_count,
            algorithm=layout.algorithm,
            layout_seconds=layout.elapsed,
            render_seconds=total - layout.elapsed,
            total_seconds=total,
            overlap_count=len(node_overlaps(positions, self.renderer.theme.node_radius)),
            min_distance=min_node_distance(positions),
            in_bounds=positions_in_bounds(positions, case.width, case.height, engine.params.padding),
        )
        if not result.within_budget:
            logger.warning(f"{case.name}: pass took {total * 1000:.1f}ms, over the {PASS_BUDGET_SECONDS * 1000:.0f}ms budget")
        return result
