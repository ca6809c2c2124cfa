"""
Tool Retrieval Benchmarking Suite

Replays YAML-described scenarios (block, inventory, chests) against the
simulated host and reports how often each ends in the expected outcome.

Modules:
    base_benchmark: Result collection and statistics
    benchmark_config: YAML scenario loader
    retrieval_benchmark: Per-scenario trial runner
    run_benchmarks: Command line entry point

Example usage:
    from benchmarks.benchmark_config import BenchmarkConfig
    from benchmarks.run_benchmarks import run_full_benchmark_suite

    results = run_full_benchmark_suite(BenchmarkConfig(), trials=3)
"""

from benchmarks.base_benchmark import BenchmarkResult
from benchmarks.benchmark_config import BenchmarkConfig

__all__ = [
    'BenchmarkResult',
    'BenchmarkConfig',
]
