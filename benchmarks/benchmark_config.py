"""
Benchmark configuration loader.
Loads scenarios from YAML and provides easy access to parameters.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class BenchmarkConfig:
    """Configuration for tool retrieval benchmarks."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to config file. If None, uses default benchmark_config.yaml
        """
        if config_path is None:
            config_path = Path(__file__).parent / "benchmark_config.yaml"

        with open(config_path, 'r') as f:
            self.config = yaml.safe_load(f)

    def get_output_dir(self) -> str:
        return self.config['general']['output_dir']

    def get_seed(self) -> int:
        return int(self.config['general'].get('seed', 0))

    def get_settle_delay_ms(self) -> int:
        return int(self.config['general'].get('settle_delay_ms', 0))

    def get_scenario(self, name: str) -> Dict[str, Any]:
        try:
            return self.config['scenarios'][name]
        except KeyError:
            raise ValueError(
                f"Unknown scenario: {name}. Available: {self.get_all_scenarios()}"
            ) from None

    def get_scenario_trials(self, name: str) -> int:
        """Number of trials for a scenario, honouring the overrides section."""
        override = (self.config.get('overrides') or {}).get(name, {}).get('trials')
        if override:
            return override

        return self.get_scenario(name).get('trials', 1)

    def get_all_scenarios(self) -> List[str]:
        return list(self.config['scenarios'].keys())

    def print_config(self):
        print("=" * 80)
        print("BENCHMARK CONFIGURATION")
        print("=" * 80)
        print(f"\nOutput Directory: {self.get_output_dir()}")
        print(f"Seed: {self.get_seed()}")

        print("\nScenarios:")
        for name in self.get_all_scenarios():
            scenario = self.get_scenario(name)
            print(f"  {name}:")
            print(f"    Block: {scenario['block']}, Trials: {self.get_scenario_trials(name)}, "
                  f"Chests: {len(scenario.get('chests') or [])}")

        print("=" * 80)


if __name__ == "__main__":
    config = BenchmarkConfig()
    config.print_config()
