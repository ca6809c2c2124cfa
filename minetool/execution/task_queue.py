"""
Sequential task pipeline.

Steps run strictly one after another in the order they were added; a step
starts only once the previous one has finished. The first exception aborts
the remaining steps and becomes the outcome of ``run()``.

Used for chest withdrawals, which must happen as one ordered burst followed
by closing the chest and a settle delay before its state is read again.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Tuple

logger = logging.getLogger(__name__)

AsyncStep = Callable[[], Awaitable[Any]]
SyncStep = Callable[[], Any]


class TaskQueue:

    def __init__(self) -> None:
        self._steps: List[Tuple[str, Callable[[], Any]]] = []
        self._running = False

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def running(self) -> bool:
        return self._running

    def add(self, step: AsyncStep) -> "TaskQueue":
        self._steps.append(("async", step))
        return self

    def add_sync(self, step: SyncStep) -> "TaskQueue":
        """Queue a synchronous, fire-and-forget step."""
        self._steps.append(("sync", step))
        return self

    def add_delay(self, seconds: float) -> "TaskQueue":
        return self.add(lambda: asyncio.sleep(seconds))

    async def run(self) -> None:
        if self._running:
            raise RuntimeError("TaskQueue is already running")

        steps, self._steps = self._steps, []
        self._running = True
        try:
            for index, (kind, step) in enumerate(steps):
                logger.debug(f"Running {kind} step {index + 1}/{len(steps)}")
                if kind == "sync":
                    step()
                else:
                    await step()
        finally:
            self._running = False


__all__ = ["TaskQueue"]
