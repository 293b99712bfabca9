"""
Script to run pass benchmarks and generate timing reports.

    python -m backend.ridemap.benchmark.run_benchmarks --runs 5 --output benchmark_results
"""
import argparse
import logging
from pathlib import Path
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from typing import List
from .runner import BenchmarkRunner, BenchmarkResult, PASS_BUDGET_SECONDS

logger = logging.getLogger(__name__)


def results_frame(results: List[BenchmarkResult]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            'case': r.case_name,
            'nodes': r.node_count,
            'algorithm': r.algorithm,
            'layout_ms': r.layout_seconds * 1000,
            'render_ms': r.render_seconds * 1000,
            'total_ms': r.total_seconds * 1000,
            'overlaps': r.overlap_count,
            'min_distance': r.min_distance,
            'in_bounds': r.in_bounds,
            'within_budget': r.within_budget
        }
        for r in results
    ])


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    return df.groupby(['case', 'algorithm']).agg({
        'nodes': 'first',
        'layout_ms': ['mean', 'std'],
        'render_ms': ['mean', 'std'],
        'total_ms': ['mean', 'max'],
        'overlaps': 'mean',
        'within_budget': 'mean'
    }).round(3)


def plot_results(results: List[BenchmarkResult], output_dir: Path):
    """Generate timing plots and CSVs for the benchmark results."""
    if not results:
        logger.warning("No results to plot!")
        return

    df = results_frame(results)

    plots_dir = output_dir / 'plots'
    plots_dir.mkdir(exist_ok=True)

    # Pass time per case against the interactive budget
    plt.figure(figsize=(10, 6))
    sns.boxplot(data=df, x='case', y='total_ms', hue='algorithm')
    plt.axhline(PASS_BUDGET_SECONDS * 1000, color='red', linestyle='--', label='budget')
    plt.title('Layout + Render Pass Time')
    plt.xticks(rotation=45)
    plt.tight_layout()
    plt.savefig(plots_dir / 'pass_time.png')
    plt.close()

    # Layout vs render split
    fig, axes = plt.subplots(1, 2, figsize=(15, 6))
    sns.boxplot(data=df, x='case', y='layout_ms', hue='algorithm', ax=axes[0])
    axes[0].set_title('Layout Time')
    axes[0].tick_params(labelrotation=45)
    sns.boxplot(data=df, x='case', y='render_ms', hue='algorithm', ax=axes[1])
    axes[1].set_title('Render Time')
    axes[1].tick_params(labelrotation=45)
    plt.tight_layout()
    plt.savefig(plots_dir / 'layout_vs_render.png')
    plt.close()

    df.to_csv(output_dir / 'benchmark_results.csv', index=False)
    summarize(df).to_csv(output_dir / 'summary_stats.csv')


def main():
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description='Run layout and render benchmarks')
    parser.add_argument('--output', type=str, default='benchmark_results',
                        help='Output directory for results')
    parser.add_argument('--runs', type=int, default=5,
                        help='Number of runs per case')
    parser.add_argument('--seed', type=int, default=None,
                        help='Base seed for the force layout')
    parser.add_argument('--no-raster', action='store_true',
                        help='Skip drawing the Agg canvas')
    args = parser.parse_args()

    output_dir = Path(args.output)
    output_dir.mkdir(exist_ok=True)

    runner = BenchmarkRunner(rasterize=not args.no_raster)
    results = runner.run_benchmark(runs_per_case=args.runs, seed=args.seed)

    plot_results(results, output_dir)

    logger.info(f"Benchmark results saved to {output_dir}")

if __name__ == '__main__':
    main()
