from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, Mapping, Optional, Sequence

from .items import ITEM_IDS
from .nbt import enchantment_level
from .types import MINING_FATIGUE, HASTE, Enchantment, StatusEffect, Vec3

_TIERS: Dict[str, float] = {
    "wooden": 2.0,
    "stone": 4.0,
    "iron": 6.0,
    "diamond": 8.0,
    "golden": 12.0,
}


def _tier_table(tool: str) -> Dict[int, float]:
    return {ITEM_IDS[f"{tier}_{tool}"]: speed for tier, speed in _TIERS.items()}


# material -> {item id: breaking speed multiplier}
MATERIAL_TOOL_MULTIPLIERS: Dict[str, Dict[int, float]] = {
    "rock": _tier_table("pickaxe"),
    "wood": _tier_table("axe"),
    "dirt": _tier_table("shovel"),
    "plant": {**_tier_table("sword"), ITEM_IDS["shears"]: 1.5},
    "web": {**{k: 15.0 for k in _tier_table("sword")}, ITEM_IDS["shears"]: 15.0},
}


def _harvest_set(*tools: str, min_tier: str = "wooden") -> FrozenSet[int]:
    # golden tools harvest at the wooden level
    ranked = ["wooden", "golden", "stone", "iron", "diamond"]
    allowed = ranked[ranked.index(min_tier):]
    return frozenset(ITEM_IDS[f"{tier}_{tool}"] for tool in tools for tier in allowed)


@dataclass(frozen=True)
class Block:
    """
    Reference obstacle model following the vanilla breaking-speed rules.

    hardness: None or negative means unbreakable
    material: key into MATERIAL_TOOL_MULTIPLIERS, None for no preferred tool
    harvest_tools: item ids that yield drops; None means anything (bare hands too)
    """

    name: str
    hardness: Optional[float]
    material: Optional[str] = None
    harvest_tools: Optional[FrozenSet[int]] = None
    position: Optional[Vec3] = None

    def can_harvest(self, item_type: Optional[int]) -> bool:
        if self.harvest_tools is None:
            return True
        return item_type is not None and item_type in self.harvest_tools

    def _best_tool_speed(self, item_type: Optional[int]) -> Optional[float]:
        if item_type is None or self.material is None:
            return None
        return MATERIAL_TOOL_MULTIPLIERS.get(self.material, {}).get(item_type)

    def dig_time(
        self,
        item_type: Optional[int],
        enchantments: Sequence[Enchantment] = (),
        effects: Optional[Mapping[int, StatusEffect]] = None,
    ) -> float:
        if self.hardness is None or self.hardness < 0:
            return math.inf
        if self.hardness == 0:
            return 0.0

        effects = effects or {}
        speed = 1.0

        best_tool_speed = self._best_tool_speed(item_type)
        if best_tool_speed is not None:
            speed = best_tool_speed
            efficiency = enchantment_level(tuple(enchantments), "efficiency")
            if efficiency > 0:
                speed += efficiency * efficiency + 1

        haste = effects.get(HASTE)
        if haste is not None:
            speed *= 1 + 0.2 * (haste.amplifier + 1)

        fatigue = effects.get(MINING_FATIGUE)
        if fatigue is not None:
            speed *= 0.3 ** min(fatigue.amplifier + 1, 4)

        divisor = 30 if self.can_harvest(item_type) else 100
        ticks = self.hardness * divisor / speed

        # more than a full break per tick
        if ticks < 1:
            return 0.0
        return float(math.ceil(ticks))

    def at(self, position: Vec3) -> "Block":
        return Block(
            name=self.name,
            hardness=self.hardness,
            material=self.material,
            harvest_tools=self.harvest_tools,
            position=position,
        )


def stone() -> Block:
    return Block("stone", 1.5, "rock", _harvest_set("pickaxe"))


def cobblestone() -> Block:
    return Block("cobblestone", 2.0, "rock", _harvest_set("pickaxe"))


def obsidian() -> Block:
    return Block("obsidian", 50.0, "rock", _harvest_set("pickaxe", min_tier="diamond"))


def iron_ore() -> Block:
    return Block("iron_ore", 3.0, "rock", _harvest_set("pickaxe", min_tier="stone"))


def dirt() -> Block:
    return Block("dirt", 0.5, "dirt")


def oak_log() -> Block:
    return Block("oak_log", 2.0, "wood")


def cobweb() -> Block:
    return Block(
        "cobweb",
        4.0,
        "web",
        frozenset(_tier_table("sword")) | {ITEM_IDS["shears"]},
    )


def bedrock() -> Block:
    return Block("bedrock", None)


def chest() -> Block:
    return Block("chest", 2.5, "wood")


__all__ = [
    "Block",
    "MATERIAL_TOOL_MULTIPLIERS",
    "stone",
    "cobblestone",
    "obsidian",
    "iron_ore",
    "dirt",
    "oak_log",
    "cobweb",
    "bedrock",
    "chest",
]
