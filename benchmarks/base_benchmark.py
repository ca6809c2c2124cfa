import os
from typing import Any, Dict, List

import numpy as np

from minetool.utils.serialization import to_json_file


class BenchmarkResult:

    def __init__(self, scenario_name: str, expect: str = "success"):
        self.scenario_name = scenario_name
        self.expect = expect
        self.trials: List[Dict[str, Any]] = []
        self.start_time = None
        self.end_time = None

    def add_trial(self, trial_data: Dict[str, Any]):
        self.trials.append(trial_data)

    def compute_statistics(self) -> Dict[str, Any]:
        if not self.trials:
            return {}

        stats = {
            "scenario": self.scenario_name,
            "expect": self.expect,
            "num_trials": len(self.trials),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "duration_seconds": (
                (self.end_time - self.start_time)
                if self.start_time and self.end_time
                else None
            ),
        }

        successes = [t.get("success", False) for t in self.trials]
        stats["success_rate"] = sum(successes) / len(successes)
        stats["num_successes"] = sum(successes)

        outcomes = [t.get("outcome") for t in self.trials]
        stats["expectation_rate"] = sum(o == self.expect for o in outcomes) / len(outcomes)
        stats["outcomes"] = {o: outcomes.count(o) for o in sorted(set(outcomes), key=str)}

        wall_times = [t["wall_time"] for t in self.trials if t.get("wall_time") is not None]
        if wall_times:
            stats["avg_wall_time"] = float(np.mean(wall_times))
            stats["std_wall_time"] = float(np.std(wall_times))
            stats["min_wall_time"] = float(np.min(wall_times))
            stats["max_wall_time"] = float(np.max(wall_times))

        visited = [len(t.get("visited", [])) for t in self.trials]
        stats["avg_chests_visited"] = float(np.mean(visited))
        stats["max_chests_visited"] = int(np.max(visited))

        withdrawn = [len(t.get("withdrawn", [])) for t in self.trials]
        stats["avg_items_withdrawn"] = float(np.mean(withdrawn))

        return stats

    def save(self, output_dir: str):
        os.makedirs(output_dir, exist_ok=True)

        trials_file = os.path.join(output_dir, f"{self.scenario_name}_trials.json")
        to_json_file(
            {"scenario": self.scenario_name, "expect": self.expect, "trials": self.trials},
            trials_file,
        )

        stats_file = os.path.join(output_dir, f"{self.scenario_name}_stats.json")
        to_json_file(self.compute_statistics(), stats_file)

        print(f"Saved results to {output_dir}")
