"""
Core components of minetool.

Domain types, the failure taxonomy, host capability interfaces, the reference
block model and configuration.
"""

from .types import (
    Vec3,
    Item,
    Enchantment,
    StatusEffect,
    GoalGetToBlock,
    PathUpdate,
    PATH_SUCCESS,
    PATH_NO_PATH,
    EquipOptions,
    RetrievalOptions,
    RetrievalReport,
    HASTE,
    MINING_FATIGUE,
)
from .errors import (
    ToolError,
    NoSuitableTool,
    NoContainer,
    NoPath,
    Interrupted,
    UnloadedChunk,
    HostRejected,
)
from .host import BotHandle
from .block import Block
from .config import ToolConfig, get_config, set_config

__all__ = [
    "Vec3",
    "Item",
    "Enchantment",
    "StatusEffect",
    "GoalGetToBlock",
    "PathUpdate",
    "PATH_SUCCESS",
    "PATH_NO_PATH",
    "EquipOptions",
    "RetrievalOptions",
    "RetrievalReport",
    "HASTE",
    "MINING_FATIGUE",
    "ToolError",
    "NoSuitableTool",
    "NoContainer",
    "NoPath",
    "Interrupted",
    "UnloadedChunk",
    "HostRejected",
    "BotHandle",
    "Block",
    "ToolConfig",
    "get_config",
    "set_config",
]
