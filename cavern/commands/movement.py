"""
Movement commands

Commands:
- go <direction> - Follow an exit out of the current room
- north/n, south/s, east/e, west/w - Shortcuts for 'go <direction>'
"""

import logging
from typing import TYPE_CHECKING, Callable

from ..engine.systems.look_helpers import format_room
from ..engine.systems.parser import CommandUsageError, ParsedCommand

if TYPE_CHECKING:
    from ..engine.systems.context import GameContext

logger = logging.getLogger(__name__)

# shortcut -> direction
DIRECTION_SHORTCUTS = {
    "north": "north", "n": "north",
    "south": "south", "s": "south",
    "east": "east", "e": "east",
    "west": "west", "w": "west",
}


def move_player(ctx: "GameContext", direction: str) -> str:
    """
    Move the player through an exit.

    Unknown directions are just missing exits. An exit whose destination
    doesn't exist is a world data defect and is reported as such; the player
    stays put.
    """
    world = ctx.world
    player = ctx.player

    destination_id = world.get_exit(player.room_id, direction)
    if destination_id is None:
        return "You can't go that way!"

    destination = world.get_room(destination_id)
    if destination is None:
        logger.error(
            "Exit %s:%s points at missing room '%s'",
            player.room_id, direction, destination_id,
        )
        return "Error: destination room not found in map data."

    player.room_id = destination.id
    return format_room(world, destination)


def go(ctx: "GameContext", command: ParsedCommand) -> str:
    """Handler for 'go <direction>'. Multi-word directions are joined."""
    if not command.args:
        raise CommandUsageError("Go where? (north, south, etc.)")
    return move_player(ctx, command.arg_text)


def make_move_handler(direction: str) -> Callable[["GameContext", ParsedCommand], str]:
    """Build the handler for a direction shortcut such as 'n'."""
    def handler(ctx: "GameContext", command: ParsedCommand) -> str:
        return move_player(ctx, direction)
    return handler
