from __future__ import annotations

from ..core.types import Item

TOOL_KEYWORDS = ("sword", "pickaxe", "shovel", "axe", "hoe")


def standard_tool_filter(item: Item) -> bool:
    """True for swords, pickaxes, shovels, axes and hoes."""
    return any(keyword in item.name for keyword in TOOL_KEYWORDS)


__all__ = ["standard_tool_filter", "TOOL_KEYWORDS"]
