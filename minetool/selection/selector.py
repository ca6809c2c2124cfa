from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Iterable, List, Optional

from ..core.config import ToolConfig
from ..core.errors import HostRejected, NoSuitableTool, ToolError
from ..core.host import BotHandle, Obstacle
from ..core.types import EquipOptions, Item, RetrievalOptions, Vec3
from .cost import dig_cost, rank_by_cost
from .filters import standard_tool_filter

if TYPE_CHECKING:
    from ..execution.retrieval import ChestRetriever

logger = logging.getLogger(__name__)


class ToolSelector:
    """Equips the fastest held item for breaking a block.

    When nothing held qualifies and ``get_from_chest`` is set, a tool is
    fetched from ``chest_locations`` first and the selection runs once more.
    """

    def __init__(
        self,
        bot: BotHandle,
        retriever: Optional[ChestRetriever] = None,
        config: Optional[ToolConfig] = None,
    ) -> None:
        self.bot = bot
        self.retriever = retriever
        self.config = config or ToolConfig()

        # chests the agent is allowed to take tools from
        self.chest_locations: List[Vec3] = []

    def add_chest_locations(self, locations: Iterable[Vec3]) -> None:
        for location in locations:
            if location not in self.chest_locations:
                self.chest_locations.append(location)

    def dig_cost(self, block: Obstacle, item: Optional[Item]) -> float:
        return dig_cost(block, item, self.bot.entity.effects)

    def rank_candidates(
        self, block: Obstacle, options: EquipOptions
    ) -> List[tuple[Optional[Item], float]]:
        inventory = self.bot.inventory
        candidates: List[Optional[Item]] = list(inventory.items())

        # bare hands are only an option if the held item has somewhere to go
        if inventory.empty_slot_count() >= 1:
            candidates.insert(0, None)

        if options.require_harvest:
            candidates = [
                item
                for item in candidates
                if block.can_harvest(item.type if item is not None else None)
            ]

        return rank_by_cost(candidates, lambda item: self.dig_cost(block, item))

    async def equip_for_block(
        self, block: Obstacle, options: Optional[EquipOptions] = None
    ) -> Optional[Item]:
        """
        Equip the best tool for ``block``; returns what ends up in hand.

        Raises NoSuitableTool when ``require_harvest`` leaves nothing and
        chest retrieval is off; retrieval and host failures propagate as-is.
        ValueError if retrieval is requested but no retriever is wired in.
        """
        options = options or EquipOptions.from_config(self.config)
        ranked = self.rank_candidates(block, options)

        if not ranked:
            if options.get_from_chest:
                await self._retrieve_for(block, options)
                return await self.equip_for_block(
                    block, dataclasses.replace(options, get_from_chest=False)
                )

            if options.require_harvest:
                raise NoSuitableTool(f"Bot does not have a harvestable tool for {block.name}!")

            return self.bot.inventory.held_item(self.config.hand)

        best, best_cost = ranked[0]
        held = self.bot.inventory.held_item(self.config.hand)

        # Same performance as what is already held: do nothing. Re-equipping
        # on ties spams equipment packets and can loop forever.
        if not self._is_better(held, best_cost, ranked):
            logger.debug(f"Keeping {held.name if held else 'bare hands'} for {block.name}")
            return held

        await self._equip(best)
        return best

    def _is_better(
        self,
        held: Optional[Item],
        best_cost: float,
        ranked: List[tuple[Optional[Item], float]],
    ) -> bool:
        for candidate, cost in ranked:
            if candidate == held:
                return best_cost < cost
        return True

    async def _retrieve_for(self, block: Obstacle, options: EquipOptions) -> None:
        if self.retriever is None:
            raise ValueError("get_from_chest requires a ChestRetriever; use create_plugin()")

        logger.info(f"No suitable tool for {block.name}, checking chests")
        await self.retriever.retrieve_tools(
            RetrievalOptions(
                chest_locations=self.chest_locations,
                tool_filter=standard_tool_filter,
                tool_cost=lambda item: self.dig_cost(block, item),
                max_tools=options.max_tools,
                settle_delay=self.config.settle_delay,
            )
        )

    async def _equip(self, item: Optional[Item]) -> None:
        hand = self.config.hand
        try:
            if item is not None:
                logger.info(f"Equipping {item.name}")
                await self.bot.inventory.equip(item, hand)
            else:
                logger.info("Unequipping to use bare hands")
                await self.bot.inventory.unequip(hand)
        except ToolError:
            raise
        except Exception as e:
            raise HostRejected(f"Host rejected equipment change: {e}") from e


__all__ = ["ToolSelector"]
