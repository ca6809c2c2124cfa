import asyncio

from minetool import EquipOptions, Vec3, create_plugin
from minetool.core.block import iron_ore, obsidian
from minetool.core.config import ToolConfig
from minetool.core.errors import ToolError
from minetool.core.items import make_item
from minetool.logging_config import setup_logging
from minetool.testing import make_sim_bot

setup_logging(verbose=True)

chests = {
    Vec3(4.0, 64.0, 1.0): [make_item("bread", count=8), make_item("apple", count=3)],
    Vec3(-7.0, 64.0, 3.0): [
        make_item("wooden_pickaxe"),
        make_item("stone_pickaxe"),
        make_item("iron_pickaxe"),
        make_item("iron_sword"),
    ],
    Vec3(15.0, 63.0, -9.0): [make_item("diamond_pickaxe")],
}

bot = make_sim_bot([make_item("oak_log", count=16)], chests=chests)
selector = create_plugin(bot.handle(), ToolConfig(settle_delay_ms=50))
selector.add_chest_locations(chests)

# Grab up to 3 tools per chest visit
options = EquipOptions(require_harvest=True, get_from_chest=True, max_tools=3)


async def main():
    for block in (iron_ore(), obsidian()):
        try:
            held = await selector.equip_for_block(block, options)
            print(f"Ready to mine {block.name} with {held.name}")
        except ToolError as e:
            print(f"Cannot mine {block.name}: [{e.code}] {e}")

    print(f"Chests visited: {[goal.position for goal in bot.navigator.goals]}")
    print(f"Inventory: {sorted(item.name for item in bot.inventory.items())}")


asyncio.run(main())
