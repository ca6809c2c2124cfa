from __future__ import annotations

from typing import Optional

from .core.config import ToolConfig
from .core.host import BotHandle
from .execution.retrieval import ChestRetriever
from .selection.selector import ToolSelector


def create_plugin(bot: BotHandle, config: Optional[ToolConfig] = None) -> ToolSelector:
    """
    Build the tool selector for one bot, with chest retrieval wired in.

    The bot handle must already carry a navigator; chest trips are impossible
    without one.
    """
    if bot.navigator is None:
        raise ValueError("create_plugin requires a BotHandle with a navigator")

    retriever = ChestRetriever(bot)
    return ToolSelector(bot, retriever=retriever, config=config)


__all__ = ["create_plugin"]
