from __future__ import annotations

from typing import Callable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from ..core.host import Obstacle
from ..core.nbt import enchantments_of
from ..core.types import Item, StatusEffect

T = TypeVar("T")


def dig_cost(
    block: Obstacle,
    item: Optional[Item],
    effects: Optional[Mapping[int, StatusEffect]] = None,
) -> float:
    """
    Ticks needed to break ``block`` holding ``item`` (None for bare hands).

    Enchantments come from the item's NBT; the agent's status effects are
    passed through to the block's own breaking-speed rules.
    """
    enchantments = enchantments_of(item)
    item_type = item.type if item is not None else None
    return block.dig_time(item_type, enchantments, dict(effects or {}))


def rank_by_cost(
    candidates: Sequence[T], cost: Callable[[T], float]
) -> List[Tuple[T, float]]:
    """Stable ascending sort; each cost is computed once, ties keep input order."""
    scored = [(candidate, cost(candidate)) for candidate in candidates]
    return sorted(scored, key=lambda pair: pair[1])


__all__ = ["dig_cost", "rank_by_cost"]
