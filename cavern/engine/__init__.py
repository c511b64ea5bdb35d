"""
Game engine: world graph, loader, command pipeline.

GameEngine lives in cavern.engine.engine; it is not re-exported here because
the command modules import from this package.
"""

from .world import (
    ContainmentError,
    World,
    WorldItem,
    WorldPlayer,
    WorldRoom,
    transfer_item,
)
from .loader import WorldLoadError, load_world, load_world_from_dict

__all__ = [
    "ContainmentError",
    "World",
    "WorldItem",
    "WorldPlayer",
    "WorldRoom",
    "transfer_item",
    "WorldLoadError",
    "load_world",
    "load_world_from_dict",
]
