"""
Chest retrieval orchestrator.

Visits known chests nearest-first, withdrawing the cheapest qualifying tools
from the first chest that has any.

Per call:
  SELECT_CONTAINER -> MOVING -> OPENING -> WITHDRAWING -> DONE
with every state able to fail. A chest with nothing that passes the filter
sends the loop back to SELECT_CONTAINER; every other failure ends the call.
Each location is dropped from the working set as soon as it is selected, so
no chest is visited twice in one call.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from ..core.errors import (
    HostRejected,
    Interrupted,
    NoContainer,
    NoPath,
    ToolError,
    UnloadedChunk,
)
from ..core.host import BotHandle, Container, Navigator, Obstacle
from ..core.types import (
    PATH_NO_PATH,
    GoalGetToBlock,
    Item,
    PathUpdate,
    RetrievalOptions,
    RetrievalReport,
    Vec3,
)
from ..selection.cost import rank_by_cost
from .task_queue import TaskQueue

logger = logging.getLogger(__name__)


class RetrievalState(str, Enum):
    SELECT_CONTAINER = "SELECT_CONTAINER"
    MOVING = "MOVING"
    OPENING = "OPENING"
    WITHDRAWING = "WITHDRAWING"
    DONE = "DONE"
    FAILED = "FAILED"


def closest_index(origin: Vec3, locations: Sequence[Vec3]) -> Optional[int]:
    """Index of the location nearest to ``origin``; the first one wins ties."""
    if not locations:
        return None
    points = np.array([[p.x, p.y, p.z] for p in locations], dtype=float)
    distances = np.linalg.norm(points - origin.as_array(), axis=1)
    return int(np.argmin(distances))


class ChestRetriever:

    def __init__(self, bot: BotHandle) -> None:
        if bot.navigator is None:
            raise ValueError("ChestRetriever needs a navigator")
        self.bot = bot
        self.navigator: Navigator = bot.navigator
        self.state = RetrievalState.DONE

    def _transition(self, state: RetrievalState, location: Optional[Vec3] = None) -> None:
        self.state = state
        where = f" {location}" if location is not None else ""
        logger.debug(f"[ChestRetriever] -> {state.value}{where}")

    async def retrieve_tools(self, options: RetrievalOptions) -> RetrievalReport:
        """
        Move from chest to chest until at least one tool has been withdrawn.

        Raises NoContainer once every location has been tried, or the first
        NoPath / Interrupted / UnloadedChunk / HostRejected encountered.
        """
        remaining: List[Vec3] = list(dict.fromkeys(options.chest_locations))
        visited: List[Vec3] = []

        try:
            while True:
                self._transition(RetrievalState.SELECT_CONTAINER)
                index = closest_index(self.bot.entity.position, remaining)
                if index is None:
                    raise NoContainer("There are no chests with available tools in them!")
                location = remaining.pop(index)
                visited.append(location)

                self._transition(RetrievalState.MOVING, location)
                logger.info(f"Going to chest at {location}")
                await self.goto_chest(location)

                self._transition(RetrievalState.OPENING, location)
                block = self.bot.world.block_at(location)
                if block is None:
                    raise UnloadedChunk(f"Chest at {location} is in an unloaded chunk!")
                container = await self._open(block, location)

                self._transition(RetrievalState.WITHDRAWING, location)
                withdrawn = await self.pull_from_chest(container, options)
                if withdrawn:
                    self._transition(RetrievalState.DONE, location)
                    logger.info(
                        f"Withdrew {len(withdrawn)} tool(s) from chest at {location}: "
                        f"{[item.name for item in withdrawn]}"
                    )
                    return RetrievalReport(chest=location, withdrawn=withdrawn, visited=visited)

                logger.info(f"Chest at {location} has no usable tools, trying the next one")
        except ToolError as e:
            self._transition(RetrievalState.FAILED)
            logger.warning(f"Tool retrieval failed ({e.code}): {e}")
            raise
        except BaseException as e:
            # cancellation or an error from a caller-supplied filter/cost
            self._transition(RetrievalState.FAILED)
            logger.warning(f"Tool retrieval aborted: {type(e).__name__}")
            raise

    async def goto_chest(self, location: Vec3) -> None:
        """Walk next to the chest; resolves on the first navigation outcome."""
        loop = asyncio.get_running_loop()
        outcome: asyncio.Future = loop.create_future()
        goal = GoalGetToBlock(location)

        def settle(error: Optional[ToolError]) -> None:
            if outcome.done():
                return
            if error is None:
                outcome.set_result(None)
            else:
                outcome.set_exception(error)

        def on_goal_reached(reached_goal=None) -> None:
            if reached_goal is None or reached_goal == goal:
                settle(None)

        def on_path_update(update: PathUpdate) -> None:
            if update.status == PATH_NO_PATH:
                settle(NoPath(f"No path to chest at {location}"))

        def on_goal_updated(new_goal=None) -> None:
            if new_goal != goal:
                settle(Interrupted(f"Goal to chest at {location} was replaced"))

        handlers = {
            "goal_reached": on_goal_reached,
            "path_update": on_path_update,
            "goal_updated": on_goal_updated,
        }
        for event, handler in handlers.items():
            self.navigator.on(event, handler)

        try:
            try:
                self.navigator.set_goal(goal)
            except Exception as e:
                raise HostRejected(f"Navigator refused goal {goal}: {e}") from e
            await outcome
        finally:
            for event, handler in handlers.items():
                self.navigator.remove_listener(event, handler)

    async def _open(self, block: Obstacle, location: Vec3) -> Container:
        try:
            return await self.bot.containers.open_container(block)
        except ToolError:
            raise
        except Exception as e:
            raise HostRejected(f"Could not open chest at {location}: {e}") from e

    async def pull_from_chest(
        self, container: Container, options: RetrievalOptions
    ) -> List[Item]:
        """
        Withdraw the cheapest ``max_tools`` qualifying stacks, in cost order.

        Returns an empty list (chest already closed) when nothing qualifies.
        """
        closed = False

        def close() -> None:
            nonlocal closed
            closed = True
            container.close()

        try:
            candidates = [item for item in container.items() if options.tool_filter(item)]
            if not candidates:
                return []

            ranked = [item for item, _ in rank_by_cost(candidates, options.tool_cost)]
            to_pull = ranked[: options.max_tools]

            queue = TaskQueue()
            for item in to_pull:
                queue.add(lambda item=item: self._withdraw(container, item))
            queue.add_sync(close)
            queue.add_delay(options.settle_delay)
            await queue.run()
        finally:
            if not closed:
                container.close()
        return to_pull

    async def _withdraw(self, container: Container, item: Item) -> None:
        logger.debug(f"Withdrawing {item.count}x {item.name}")
        try:
            await container.withdraw(item.type, item.metadata, item.count)
        except ToolError:
            raise
        except Exception as e:
            raise HostRejected(f"Withdraw of {item.name} rejected: {e}") from e


__all__ = ["ChestRetriever", "RetrievalState", "closest_index"]
