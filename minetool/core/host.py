"""
Capability interfaces consumed from the host agent.

The selector and retriever never reach into a shared bot object; they are
constructed with a ``BotHandle`` bundling these collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from .types import Enchantment, Item, StatusEffect, Vec3


class Obstacle(Protocol):
    name: str

    def can_harvest(self, item_type: Optional[int]) -> bool:
        ...

    def dig_time(
        self,
        item_type: Optional[int],
        enchantments: Sequence[Enchantment] = (),
        effects: Optional[Mapping[int, StatusEffect]] = None,
    ) -> float:
        """Ticks needed to break this block."""
        ...


class Entity(Protocol):
    position: Vec3
    effects: Mapping[int, StatusEffect]


class Navigator(Protocol):
    """
    Events:
      goal_reached(goal)
      path_update(PathUpdate)
      goal_updated(goal)  -- fired whenever a new goal replaces the current one
    """

    def set_goal(self, goal: Any) -> None:
        ...

    def on(self, event: str, handler: Callable[..., None]) -> None:
        ...

    def remove_listener(self, event: str, handler: Callable[..., None]) -> None:
        ...


class WorldView(Protocol):
    def block_at(self, position: Vec3) -> Optional[Obstacle]:
        ...


class Inventory(Protocol):
    def items(self) -> Sequence[Item]:
        ...

    def empty_slot_count(self) -> int:
        ...

    def held_item(self, hand: str = "hand") -> Optional[Item]:
        ...

    async def equip(self, item: Item, hand: str = "hand") -> None:
        ...

    async def unequip(self, hand: str = "hand") -> None:
        ...


class Container(Protocol):
    def items(self) -> Sequence[Item]:
        ...

    async def withdraw(self, item_type: int, metadata: int, count: int) -> None:
        ...

    def close(self) -> None:
        ...


class ContainerOpener(Protocol):
    async def open_container(self, block: Obstacle) -> Container:
        ...


@dataclass(frozen=True)
class BotHandle:
    entity: Entity
    inventory: Inventory
    world: WorldView
    containers: ContainerOpener
    navigator: Optional[Navigator] = None


__all__ = [
    "Obstacle",
    "Entity",
    "Navigator",
    "WorldView",
    "Inventory",
    "Container",
    "ContainerOpener",
    "BotHandle",
]
