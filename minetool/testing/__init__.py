"""In-memory host for exercising minetool without a server."""

from .sim import (
    SimBot,
    SimChest,
    SimContainers,
    SimEntity,
    SimInventory,
    SimNavigator,
    SimWorld,
    make_sim_bot,
)

__all__ = [
    "SimBot",
    "SimChest",
    "SimContainers",
    "SimEntity",
    "SimInventory",
    "SimNavigator",
    "SimWorld",
    "make_sim_bot",
]
