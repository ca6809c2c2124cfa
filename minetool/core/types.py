from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def distance_to(self, other: "Vec3") -> float:
        return float(np.linalg.norm(self.as_array() - other.as_array()))

    def offset(self, dx: float, dy: float, dz: float) -> "Vec3":
        return Vec3(self.x + dx, self.y + dy, self.z + dz)

    def floored(self) -> "Vec3":
        return Vec3(float(np.floor(self.x)), float(np.floor(self.y)), float(np.floor(self.z)))


@dataclass(frozen=True)
class Item:
    """
    Snapshot of one item stack, read from the agent inventory or a chest.

    type: numeric item id
    name: registry name (e.g. "iron_pickaxe")
    metadata: sub-variant / damage value
    count: stack size
    slot: inventory or chest slot the stack was read from
    nbt: prismarine-style tagged NBT compound, if the stack carries one
    """

    type: int
    name: str
    metadata: int = 0
    count: int = 1
    slot: Optional[int] = None
    nbt: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class Enchantment:
    name: str
    level: int


HASTE = 3
MINING_FATIGUE = 4


@dataclass(frozen=True)
class StatusEffect:
    id: int
    amplifier: int = 0
    duration: int = 0


@dataclass(frozen=True)
class GoalGetToBlock:
    """Navigation goal: stand next to the block at ``position``."""

    position: Vec3


PATH_SUCCESS = "success"
PATH_NO_PATH = "noPath"


@dataclass(frozen=True)
class PathUpdate:
    status: str  # success | partial | timeout | noPath


@dataclass
class EquipOptions:
    """
    require_harvest: only consider items able to harvest the block
    get_from_chest: fetch a tool from a known chest when nothing qualifies
    max_tools: maximum number of stacks to withdraw per chest visit
    """

    require_harvest: bool = False
    get_from_chest: bool = False
    max_tools: int = 1

    def __post_init__(self) -> None:
        if self.max_tools < 1:
            raise ValueError(f"max_tools must be at least 1, got {self.max_tools}")

    @classmethod
    def from_config(cls, config: Any) -> "EquipOptions":
        return cls(
            require_harvest=config.require_harvest,
            get_from_chest=config.get_from_chest,
            max_tools=config.max_tools,
        )


ToolFilter = Callable[[Item], bool]
ToolCost = Callable[[Item], float]


@dataclass
class RetrievalOptions:
    chest_locations: Sequence[Vec3]
    tool_filter: ToolFilter
    tool_cost: ToolCost
    max_tools: int = 1
    settle_delay: float = 0.2

    def __post_init__(self) -> None:
        if self.max_tools < 1:
            raise ValueError(f"max_tools must be at least 1, got {self.max_tools}")


@dataclass
class RetrievalReport:
    chest: Vec3
    withdrawn: List[Item] = field(default_factory=list)
    visited: List[Vec3] = field(default_factory=list)


EffectMap = Dict[int, StatusEffect]
