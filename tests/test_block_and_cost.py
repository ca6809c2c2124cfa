from __future__ import annotations

import math

import pytest

from minetool.core.block import bedrock, cobweb, dirt, obsidian, oak_log, stone
from minetool.core.items import ITEM_IDS, enchanted_nbt, make_item
from minetool.core.types import HASTE, MINING_FATIGUE, StatusEffect
from minetool.selection.cost import dig_cost, rank_by_cost


@pytest.mark.parametrize(
    "tool, expected",
    [
        ("wooden_pickaxe", 23.0),
        ("stone_pickaxe", 12.0),
        ("iron_pickaxe", 8.0),
        ("diamond_pickaxe", 6.0),
        ("golden_pickaxe", 4.0),
    ],
)
def test_pickaxe_tiers_on_stone(tool: str, expected: float) -> None:
    assert dig_cost(stone(), make_item(tool)) == expected


def test_bare_hands_and_wrong_tool_cost_the_same_on_stone() -> None:
    block = stone()
    hands = dig_cost(block, None)
    assert hands == 150.0
    assert dig_cost(block, make_item("iron_shovel")) == hands
    assert dig_cost(block, make_item("stick")) == hands


def test_harvest_requirements() -> None:
    assert not stone().can_harvest(None)
    assert stone().can_harvest(ITEM_IDS["wooden_pickaxe"])
    assert dirt().can_harvest(None)
    assert not obsidian().can_harvest(ITEM_IDS["iron_pickaxe"])
    assert obsidian().can_harvest(ITEM_IDS["diamond_pickaxe"])
    assert cobweb().can_harvest(ITEM_IDS["shears"])


def test_unharvestable_block_takes_longer() -> None:
    assert dig_cost(obsidian(), make_item("iron_pickaxe")) == 834.0
    assert dig_cost(obsidian(), make_item("diamond_pickaxe")) == 188.0


def test_axe_is_best_for_logs() -> None:
    block = oak_log()
    assert dig_cost(block, make_item("stone_axe")) < dig_cost(block, make_item("stone_pickaxe"))


def test_unbreakable_and_instant_blocks() -> None:
    assert math.isinf(dig_cost(bedrock(), make_item("diamond_pickaxe")))

    shovel = make_item("golden_shovel", nbt=enchanted_nbt(efficiency=5))
    assert dig_cost(dirt(), shovel) == 0.0


def test_efficiency_lowers_cost_only_for_the_right_tool() -> None:
    plain = make_item("iron_pickaxe")
    enchanted = make_item("iron_pickaxe", nbt=enchanted_nbt(efficiency=5))
    assert dig_cost(stone(), enchanted) == 2.0
    assert dig_cost(stone(), enchanted) < dig_cost(stone(), plain)

    enchanted_shovel = make_item("iron_shovel", nbt=enchanted_nbt(efficiency=5))
    assert dig_cost(stone(), enchanted_shovel) == dig_cost(stone(), None)


def test_haste_and_fatigue() -> None:
    block = dirt()
    base = dig_cost(block, None)
    assert base == 15.0

    hasted = dig_cost(block, None, {HASTE: StatusEffect(HASTE, amplifier=1)})
    assert hasted == 11.0

    fatigued = dig_cost(block, None, {MINING_FATIGUE: StatusEffect(MINING_FATIGUE)})
    assert fatigued > base


def test_cost_is_deterministic() -> None:
    item = make_item("stone_pickaxe", nbt=enchanted_nbt(efficiency=2))
    costs = {dig_cost(stone(), item) for _ in range(20)}
    assert len(costs) == 1


def test_rank_by_cost_is_stable_and_scores_once() -> None:
    calls = []

    def cost(name: str) -> float:
        calls.append(name)
        return {"a": 2.0, "b": 1.0, "c": 2.0, "d": 1.0}[name]

    ranked = rank_by_cost(["a", "b", "c", "d"], cost)

    assert [name for name, _ in ranked] == ["b", "d", "a", "c"]
    assert sorted(calls) == ["a", "b", "c", "d"]
