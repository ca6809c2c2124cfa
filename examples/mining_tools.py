import asyncio

from minetool import create_plugin
from minetool.core.block import cobweb, dirt, oak_log, stone
from minetool.core.config import ToolConfig
from minetool.core.items import enchanted_nbt, make_item
from minetool.logging_config import setup_logging
from minetool.testing import make_sim_bot

setup_logging(verbose=True)

bot = make_sim_bot([
    make_item("dirt", count=32),
    make_item("wooden_pickaxe"),
    make_item("iron_pickaxe"),
    make_item("stone_axe"),
    make_item("iron_shovel", nbt=enchanted_nbt(efficiency=3)),
    make_item("iron_sword"),
])
selector = create_plugin(bot.handle(), ToolConfig(settle_delay_ms=0))


async def main():
    # Equip the fastest held item for each block in turn
    for block in (stone(), oak_log(), dirt(), cobweb(), stone()):
        held = await selector.equip_for_block(block)
        cost = selector.dig_cost(block, held)
        print(f"{block.name:>8s}: {held.name if held else 'bare hands'} ({cost:.0f} ticks)")

    print(f"Equip calls: {[i.name if i else None for i in bot.inventory.equip_calls]}")


asyncio.run(main())
