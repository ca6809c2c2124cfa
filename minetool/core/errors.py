"""Failure taxonomy for tool selection and chest retrieval."""

from __future__ import annotations


class ToolError(Exception):
    """Base class for every classified failure raised by minetool."""

    code = "ToolError"


class NoSuitableTool(ToolError):
    """No held item can harvest the block and fetching from chests is disabled."""

    code = "NoItem"


class NoContainer(ToolError):
    code = "NoChest"


class NoPath(ToolError):
    code = "NoPath"


class Interrupted(ToolError):
    """The navigation goal was replaced by another request before arrival."""

    code = "Interrupted"


class UnloadedChunk(ToolError):
    code = "UnloadedChunk"


class HostRejected(ToolError):
    """
    The host refused an equip, unequip, open or withdraw action.

    The original host exception is available as ``__cause__``.
    """

    code = "HostRejected"


__all__ = [
    "ToolError",
    "NoSuitableTool",
    "NoContainer",
    "NoPath",
    "Interrupted",
    "UnloadedChunk",
    "HostRejected",
]
