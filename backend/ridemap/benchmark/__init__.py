"""
Benchmark package for layout and render pass timing.
"""
from .cases import BENCHMARK_CASES, BenchmarkCase
from .runner import BenchmarkRunner, BenchmarkResult

__all__ = [
    'BENCHMARK_CASES',
    'BenchmarkCase',
    'BenchmarkRunner',
    'BenchmarkResult'
]
