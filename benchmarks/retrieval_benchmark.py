"""
Tool Retrieval Benchmark

Replays a YAML scenario against the simulated host: the bot is given a
starting inventory, a set of chests and a block to break, then asked to
equip for it. Every trial shuffles the chest list handed to the selector.
"""

import asyncio
import time
from typing import Any, Dict, Optional

import numpy as np

from minetool.core import block as blocks
from minetool.core.config import ToolConfig
from minetool.core.errors import ToolError
from minetool.core.items import make_item
from minetool.core.types import EquipOptions, Vec3
from minetool.plugin import create_plugin
from minetool.testing import make_sim_bot
from benchmarks.base_benchmark import BenchmarkResult

BLOCK_FACTORIES = {
    "stone": blocks.stone,
    "cobblestone": blocks.cobblestone,
    "obsidian": blocks.obsidian,
    "iron_ore": blocks.iron_ore,
    "dirt": blocks.dirt,
    "oak_log": blocks.oak_log,
    "cobweb": blocks.cobweb,
    "bedrock": blocks.bedrock,
}


def _vec(coords) -> Vec3:
    return Vec3(*(float(c) for c in coords))


def run_trial(
    scenario: Dict[str, Any],
    rng: np.random.Generator,
    settle_delay_ms: int = 0,
) -> Dict[str, Any]:
    """Run one scenario trial and describe what happened."""
    chests = list(scenario.get("chests") or [])
    order = rng.permutation(len(chests)) if chests else []
    shuffled = [chests[i] for i in order]

    bot = make_sim_bot(
        [make_item(name) for name in scenario.get("inventory") or []],
        position=_vec(scenario.get("position", [0, 64, 0])),
        chests={
            _vec(c["position"]): [make_item(name) for name in c.get("items") or []]
            for c in shuffled
        },
    )
    bot.navigator.unreachable.update(_vec(p) for p in scenario.get("unreachable") or [])

    selector = create_plugin(bot.handle(), ToolConfig(settle_delay_ms=settle_delay_ms))
    selector.add_chest_locations(_vec(c["position"]) for c in shuffled)
    options = EquipOptions(**(scenario.get("options") or {}))
    target = BLOCK_FACTORIES[scenario["block"]]()

    start = time.perf_counter()
    equipped = None
    try:
        equipped = asyncio.run(selector.equip_for_block(target, options))
        outcome = "success"
    except ToolError as e:
        outcome = e.code
    wall_time = time.perf_counter() - start

    withdrawn = [
        item.name
        for chest in bot.containers.chests.values()
        for item in chest.withdrawals
    ]

    return {
        "success": outcome == "success",
        "outcome": outcome,
        "equipped": equipped.name if equipped is not None else None,
        "chest_order": [c["position"] for c in shuffled],
        "visited": [goal.position for goal in bot.navigator.goals],
        "withdrawn": withdrawn,
        "wall_time": wall_time,
    }


def run_scenario_benchmark(
    scenario_name: str,
    scenario: Dict[str, Any],
    num_trials: int = 10,
    seed: int = 0,
    settle_delay_ms: int = 0,
    output_dir: Optional[str] = None,
) -> BenchmarkResult:
    if scenario["block"] not in BLOCK_FACTORIES:
        raise ValueError(
            f"Unknown block: {scenario['block']}. Available: {list(BLOCK_FACTORIES.keys())}"
        )

    print(f"\n[BENCHMARK] Scenario '{scenario_name}' ({num_trials} trials)")

    result = BenchmarkResult(scenario_name, expect=scenario.get("expect", "success"))
    rng = np.random.default_rng(seed)

    result.start_time = time.time()
    for trial in range(num_trials):
        trial_data = run_trial(scenario, rng, settle_delay_ms=settle_delay_ms)
        trial_data["trial"] = trial
        result.add_trial(trial_data)
        print(f"  Trial {trial + 1}/{num_trials}: {trial_data['outcome']} "
              f"(visited {len(trial_data['visited'])}, equipped {trial_data['equipped']})")
    result.end_time = time.time()

    if output_dir:
        result.save(output_dir)

    return result
