# cavern/engine/systems/context.py
"""
GameContext - the session object handed to every command handler.

Provides:
- Access to the World state and the single player
- The command router (for help text)
- Small lookups shared by several handlers

Replaces module-level mutable state: everything a handler may touch is
reachable from here.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..world import World, WorldPlayer, WorldRoom
    from .router import CommandRouter


class GameContext:
    """
    Shared context object passed to all command handlers.

    Usage:
        ctx = GameContext(world, player)
        ctx.router = CommandRouter()
    """

    def __init__(self, world: "World", player: "WorldPlayer") -> None:
        self.world = world
        self.player = player

        # Set by GameEngine once the router is built
        self.router: "CommandRouter | None" = None

    def current_room(self) -> "WorldRoom | None":
        """The room the player stands in, or None if the key is dangling."""
        return self.world.get_room(self.player.room_id)
