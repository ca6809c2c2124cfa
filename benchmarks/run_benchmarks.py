"""
Master Benchmark Runner

Runs every configured tool retrieval scenario and writes a summary report.
"""

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from minetool.logging_config import setup_logging
from minetool.utils.serialization import to_json_file
from benchmarks.benchmark_config import BenchmarkConfig
from benchmarks.retrieval_benchmark import run_scenario_benchmark


def run_full_benchmark_suite(
    config: BenchmarkConfig,
    scenarios: Optional[List[str]] = None,
    output_dir: Optional[str] = None,
    trials: Optional[int] = None,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Run the selected scenarios (all of them by default).

    Args:
        config: Loaded benchmark configuration
        scenarios: Scenario names to run
        output_dir: Base directory for all results
        trials: Overrides the per-scenario trial count
        seed: Overrides the configured RNG seed
    """
    scenarios = scenarios or config.get_all_scenarios()
    output_dir = output_dir or config.get_output_dir()
    seed = config.get_seed() if seed is None else seed

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    suite_dir = os.path.join(output_dir, f"benchmark_suite_{timestamp}")
    os.makedirs(suite_dir, exist_ok=True)

    print("=" * 80)
    print("TOOL RETRIEVAL BENCHMARKS")
    print(f"Scenarios: {scenarios}")
    print(f"Output: {suite_dir}")
    print("=" * 80)

    all_results = {"timestamp": timestamp, "seed": seed, "scenarios": {}}

    for name in scenarios:
        result = run_scenario_benchmark(
            scenario_name=name,
            scenario=config.get_scenario(name),
            num_trials=trials or config.get_scenario_trials(name),
            seed=seed,
            settle_delay_ms=config.get_settle_delay_ms(),
            output_dir=suite_dir,
        )
        all_results["scenarios"][name] = result.compute_statistics()

    to_json_file(all_results, os.path.join(suite_dir, "benchmark_summary.json"))
    generate_report(all_results, suite_dir)

    return all_results


def generate_report(results: Dict[str, Any], output_dir: str):
    """Write a human-readable summary table and echo it to the console."""
    lines = [
        "=" * 80,
        "TOOL RETRIEVAL REPORT",
        f"Generated: {results['timestamp']}",
        "=" * 80,
        f"{'Scenario':<32s} {'Expect':<14s} {'Met':>6s} {'Chests':>8s} {'Items':>7s} {'ms':>8s}",
        "-" * 80,
    ]

    for name, stats in results["scenarios"].items():
        lines.append(
            f"{name:<32s} {stats['expect']:<14s} "
            f"{stats['expectation_rate'] * 100:5.1f}% "
            f"{stats['avg_chests_visited']:8.2f} "
            f"{stats['avg_items_withdrawn']:7.2f} "
            f"{stats.get('avg_wall_time', 0.0) * 1000:8.2f}"
        )

    lines.append("=" * 80)
    report = "\n".join(lines) + "\n"

    report_file = os.path.join(output_dir, "report.txt")
    with open(report_file, 'w') as f:
        f.write(report)

    print(f"\nReport saved to: {report_file}")
    print("\n" + report)


def main():
    parser = argparse.ArgumentParser(description="Run tool retrieval benchmarks")
    parser.add_argument("--config", type=str, default=None, help="Path to benchmark YAML")
    parser.add_argument("--scenarios", type=str, nargs='+', default=None,
                        help="Scenarios to run (default: all)")
    parser.add_argument("--trials", type=int, default=None, help="Trials per scenario")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for chest order")
    parser.add_argument("--output-dir", type=str, default=None, help="Output directory")
    parser.add_argument("--verbose", action="store_true", help="Show minetool logs")

    args = parser.parse_args()

    setup_logging(verbose=args.verbose)
    config = BenchmarkConfig(args.config)
    config.print_config()

    run_full_benchmark_suite(
        config,
        scenarios=args.scenarios,
        output_dir=args.output_dir,
        trials=args.trials,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
