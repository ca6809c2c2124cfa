from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .types import Item

ITEM_IDS: Dict[str, int] = {
    "dirt": 3,
    "cobblestone": 4,
    "oak_log": 17,
    "iron_shovel": 256,
    "iron_pickaxe": 257,
    "iron_axe": 258,
    "apple": 260,
    "iron_sword": 267,
    "wooden_sword": 268,
    "wooden_shovel": 269,
    "wooden_pickaxe": 270,
    "wooden_axe": 271,
    "stone_sword": 272,
    "stone_shovel": 273,
    "stone_pickaxe": 274,
    "stone_axe": 275,
    "diamond_sword": 276,
    "diamond_shovel": 277,
    "diamond_pickaxe": 278,
    "diamond_axe": 279,
    "stick": 280,
    "golden_sword": 283,
    "golden_shovel": 284,
    "golden_pickaxe": 285,
    "golden_axe": 286,
    "wooden_hoe": 290,
    "stone_hoe": 291,
    "iron_hoe": 292,
    "diamond_hoe": 293,
    "golden_hoe": 294,
    "bread": 297,
    "shears": 359,
}

ITEM_NAMES: Dict[int, str] = {v: k for k, v in ITEM_IDS.items()}


def make_item(
    name: str,
    count: int = 1,
    metadata: int = 0,
    slot: Optional[int] = None,
    nbt: Optional[Mapping[str, Any]] = None,
) -> Item:
    if name not in ITEM_IDS:
        raise KeyError(f"Unknown item: {name}")
    return Item(
        type=ITEM_IDS[name],
        name=name,
        metadata=metadata,
        count=count,
        slot=slot,
        nbt=nbt,
    )


def enchanted_nbt(**levels: int) -> Dict[str, Any]:
    """Build a tagged NBT compound carrying the given enchantment levels."""
    entries = [
        {
            "id": {"type": "string", "value": f"minecraft:{name}"},
            "lvl": {"type": "short", "value": level},
        }
        for name, level in levels.items()
    ]
    return {
        "type": "compound",
        "name": "",
        "value": {
            "Enchantments": {
                "type": "list",
                "value": {"type": "compound", "value": entries},
            }
        },
    }


__all__ = ["ITEM_IDS", "ITEM_NAMES", "make_item", "enchanted_nbt"]
