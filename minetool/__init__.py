"""
minetool - tool selection and chest retrieval for Minecraft agents

Organized module structure:
- core: Domain types, errors, host interfaces, block model and configuration
- selection: Dig cost model, tool filters and the tool selector
- execution: Sequential task queue and the chest retrieval orchestrator
- testing: In-memory simulated host
- utils: Utility functions (serialization)

Usage:
    from minetool import create_plugin, EquipOptions
    from minetool.core import BotHandle, ToolConfig, get_config

    selector = create_plugin(bot)
    selector.add_chest_locations(known_chests)
    await selector.equip_for_block(block, EquipOptions(require_harvest=True, get_from_chest=True))
"""

__version__ = "0.1.0"

from .core.types import EquipOptions, RetrievalOptions, Vec3
from .execution.retrieval import ChestRetriever
from .plugin import create_plugin
from .selection.selector import ToolSelector

__all__ = [
    "EquipOptions",
    "RetrievalOptions",
    "Vec3",
    "ChestRetriever",
    "ToolSelector",
    "create_plugin",
]
