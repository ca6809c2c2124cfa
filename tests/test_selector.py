from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, Optional

import pytest

from minetool.core.block import dirt, stone
from minetool.core.config import ToolConfig
from minetool.core.errors import HostRejected, NoContainer, NoSuitableTool
from minetool.core.items import ITEM_IDS, make_item
from minetool.core.types import HASTE, EquipOptions, StatusEffect, Vec3
from minetool.plugin import create_plugin
from minetool.selection.selector import ToolSelector
from minetool.testing import make_sim_bot

FAST = ToolConfig(settle_delay_ms=0)


@dataclass
class TableBlock:
    """Obstacle whose dig time comes straight from a lookup table."""

    name: str = "table_block"
    times: Dict[Optional[int], float] = field(default_factory=dict)
    default: float = 100.0
    harvestable: Optional[set] = None

    def can_harvest(self, item_type):
        return self.harvestable is None or item_type in self.harvestable

    def dig_time(self, item_type, enchantments=(), effects=None):
        return self.times.get(item_type, self.default)


def names(items):
    return [item.name if item is not None else None for item in items]


def test_equips_fastest_tool() -> None:
    bot = make_sim_bot(
        [make_item("wooden_pickaxe", slot=3), make_item("iron_pickaxe", slot=4)]
    )
    selector = create_plugin(bot.handle(), FAST)

    equipped = asyncio.run(selector.equip_for_block(stone()))

    assert equipped.name == "iron_pickaxe"
    assert bot.inventory.held_item().name == "iron_pickaxe"
    assert names(bot.inventory.equip_calls) == ["iron_pickaxe"]


def test_keeps_held_item_when_another_ties() -> None:
    bot = make_sim_bot(
        [make_item("iron_pickaxe", slot=0), make_item("iron_pickaxe", slot=5)]
    )
    selector = create_plugin(bot.handle(), FAST)

    equipped = asyncio.run(selector.equip_for_block(stone()))

    assert equipped.slot == 0
    assert bot.inventory.equip_calls == []


def test_never_reequips_when_held_item_is_already_best() -> None:
    bot = make_sim_bot(
        [
            make_item("diamond_pickaxe", slot=0),
            make_item("stone_pickaxe", slot=1),
            make_item("iron_shovel", slot=2),
        ]
    )
    selector = create_plugin(bot.handle(), FAST)

    for _ in range(3):
        asyncio.run(selector.equip_for_block(stone()))

    assert bot.inventory.equip_calls == []


def test_tie_with_bare_hands_keeps_held_item() -> None:
    bot = make_sim_bot([make_item("stick", slot=0)])
    selector = create_plugin(bot.handle(), FAST)

    equipped = asyncio.run(selector.equip_for_block(dirt()))

    assert equipped.name == "stick"
    assert bot.inventory.equip_calls == []


def test_unequips_when_bare_hands_are_strictly_better() -> None:
    stick = ITEM_IDS["stick"]
    block = TableBlock(times={None: 5.0, stick: 50.0})
    bot = make_sim_bot([make_item("stick", slot=0)])
    selector = create_plugin(bot.handle(), FAST)

    equipped = asyncio.run(selector.equip_for_block(block))

    assert equipped is None
    assert bot.inventory.held_item() is None
    assert bot.inventory.equip_calls == [None]


def test_no_bare_hands_candidate_without_a_free_slot() -> None:
    stick = ITEM_IDS["stick"]
    block = TableBlock(times={None: 1.0, stick: 50.0})
    bot = make_sim_bot([make_item("stick") for _ in range(36)])
    selector = create_plugin(bot.handle(), FAST)

    ranked = selector.rank_candidates(block, EquipOptions())

    assert None not in [item for item, _ in ranked]
    assert asyncio.run(selector.equip_for_block(block)).name == "stick"
    assert bot.inventory.equip_calls == []


def test_require_harvest_without_chests_fails() -> None:
    bot = make_sim_bot([make_item("stick", slot=0)])
    selector = create_plugin(bot.handle(), FAST)

    with pytest.raises(NoSuitableTool):
        asyncio.run(selector.equip_for_block(stone(), EquipOptions(require_harvest=True)))


def test_nothing_to_do_with_empty_inventory() -> None:
    bot = make_sim_bot()
    selector = create_plugin(bot.handle(), FAST)

    assert asyncio.run(selector.equip_for_block(stone())) is None
    assert bot.inventory.equip_calls == []


def test_fetches_tool_from_chest_then_equips_it() -> None:
    chest = Vec3(4.0, 64.0, 0.0)
    bot = make_sim_bot(
        [make_item("stick", slot=0)],
        chests={
            chest: [
                make_item("apple"),
                make_item("stone_pickaxe"),
                make_item("iron_pickaxe"),
            ]
        },
    )
    selector = create_plugin(bot.handle(), FAST)
    selector.add_chest_locations([chest])

    equipped = asyncio.run(
        selector.equip_for_block(
            stone(), EquipOptions(require_harvest=True, get_from_chest=True)
        )
    )

    assert equipped.name == "iron_pickaxe"
    assert bot.inventory.held_item().name == "iron_pickaxe"
    assert names(bot.containers.chests[chest].withdrawals) == ["iron_pickaxe"]
    assert "stone_pickaxe" not in names(bot.inventory.items())


def test_fetched_tool_that_still_cannot_harvest_fails() -> None:
    chest = Vec3(4.0, 64.0, 0.0)
    bot = make_sim_bot(chests={chest: [make_item("iron_sword")]})
    selector = create_plugin(bot.handle(), FAST)
    selector.add_chest_locations([chest])

    with pytest.raises(NoSuitableTool):
        asyncio.run(
            selector.equip_for_block(
                stone(), EquipOptions(require_harvest=True, get_from_chest=True)
            )
        )

    assert len(bot.navigator.goals) == 1


def test_retrieval_failure_propagates() -> None:
    bot = make_sim_bot()
    selector = create_plugin(bot.handle(), FAST)

    with pytest.raises(NoContainer):
        asyncio.run(
            selector.equip_for_block(
                stone(), EquipOptions(require_harvest=True, get_from_chest=True)
            )
        )


def test_equip_rejection_is_classified() -> None:
    bot = make_sim_bot([make_item("iron_pickaxe", slot=2)])
    bot.inventory.fail_equip = True
    selector = create_plugin(bot.handle(), FAST)

    with pytest.raises(HostRejected) as excinfo:
        asyncio.run(selector.equip_for_block(stone()))

    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_options_default_from_config() -> None:
    bot = make_sim_bot([make_item("stick", slot=0)])
    selector = create_plugin(bot.handle(), ToolConfig(require_harvest=True, settle_delay_ms=0))

    with pytest.raises(NoSuitableTool):
        asyncio.run(selector.equip_for_block(stone()))


def test_status_effects_feed_the_cost() -> None:
    bot = make_sim_bot()
    selector = create_plugin(bot.handle(), FAST)
    before = selector.dig_cost(dirt(), None)

    bot.entity.effects[HASTE] = StatusEffect(HASTE, amplifier=1)

    assert selector.dig_cost(dirt(), None) < before


def test_add_chest_locations_skips_known_ones() -> None:
    bot = make_sim_bot()
    selector = create_plugin(bot.handle(), FAST)
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(4.0, 5.0, 6.0)

    selector.add_chest_locations([a, b])
    selector.add_chest_locations([b, a, a])

    assert selector.chest_locations == [a, b]


def test_max_tools_must_be_positive() -> None:
    with pytest.raises(ValueError):
        EquipOptions(max_tools=0)


def test_chest_retrieval_without_retriever_is_a_wiring_error() -> None:
    bot = make_sim_bot([make_item("stick", slot=0)])
    selector = ToolSelector(bot.handle(), config=FAST)
    selector.add_chest_locations([Vec3(4.0, 64.0, 0.0)])

    with pytest.raises(ValueError):
        asyncio.run(
            selector.equip_for_block(
                stone(), EquipOptions(require_harvest=True, get_from_chest=True)
            )
        )

    assert bot.navigator.goals == []
