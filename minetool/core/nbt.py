"""
Enchantment extraction from item NBT.

Items read from the host carry prismarine-style tagged NBT, where every value
is wrapped as ``{"type": <tag type>, "value": <payload>}`` and lists wrap their
element type once more. ``simplify`` strips those wrappers so the enchantment
list can be read as plain dictionaries.

Two layouts exist:
- 1.13+: ``Enchantments`` list of ``{"id": "minecraft:efficiency", "lvl": 5}``
- legacy: ``ench`` list of ``{"id": 32, "lvl": 5}`` with numeric ids
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from .types import Enchantment, Item

logger = logging.getLogger(__name__)

LEGACY_ENCHANTMENT_NAMES: Dict[int, str] = {
    0: "protection",
    1: "fire_protection",
    2: "feather_falling",
    3: "blast_protection",
    4: "projectile_protection",
    5: "respiration",
    6: "aqua_affinity",
    7: "thorns",
    16: "sharpness",
    17: "smite",
    18: "bane_of_arthropods",
    19: "knockback",
    20: "fire_aspect",
    21: "looting",
    32: "efficiency",
    33: "silk_touch",
    34: "unbreaking",
    35: "fortune",
    48: "power",
    49: "punch",
    50: "flame",
    51: "infinity",
    61: "luck_of_the_sea",
    62: "lure",
    70: "mending",
}


def _is_tag(value: Any) -> bool:
    return isinstance(value, dict) and "type" in value and "value" in value


def simplify(tag: Any) -> Any:
    if not _is_tag(tag):
        if isinstance(tag, dict):
            return {k: simplify(v) for k, v in tag.items()}
        if isinstance(tag, list):
            return [simplify(v) for v in tag]
        return tag

    kind = tag["type"]
    value = tag["value"]

    if kind == "compound":
        return {k: simplify(v) for k, v in value.items()}
    if kind == "list":
        # list payload is {"type": <element type>, "value": [...]}
        elements = value.get("value", []) if isinstance(value, dict) else value
        element_type = value.get("type") if isinstance(value, dict) else None
        return [
            simplify({"type": element_type, "value": v}) if element_type else simplify(v)
            for v in elements
        ]
    return value


def _enchantment_name(raw_id: Any) -> Optional[str]:
    if isinstance(raw_id, int):
        return LEGACY_ENCHANTMENT_NAMES.get(raw_id)
    if isinstance(raw_id, str):
        return raw_id.split(":", 1)[-1]
    return None


def enchantments_of(item: Optional[Item]) -> Tuple[Enchantment, ...]:
    """Return the item's enchantments; never raises on missing or malformed NBT."""
    if item is None or not item.nbt:
        return ()

    try:
        data = simplify(item.nbt)
        entries = data.get("Enchantments")
        if entries is None:
            entries = data.get("ench", [])

        found = []
        for entry in entries:
            name = _enchantment_name(entry.get("id"))
            if name is None:
                continue
            found.append(Enchantment(name=name, level=int(entry.get("lvl", 0))))
        return tuple(found)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.debug(f"Ignoring unreadable NBT on {item.name}: {e}")
        return ()


def enchantment_level(enchantments: Tuple[Enchantment, ...], name: str) -> int:
    for enchantment in enchantments:
        if enchantment.name == name:
            return enchantment.level
    return 0


__all__ = ["simplify", "enchantments_of", "enchantment_level", "LEGACY_ENCHANTMENT_NAMES"]
