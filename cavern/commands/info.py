"""
Information commands

Commands:
- look [object] - Describe the room, or an object in it
- examine [object] - Same as look (alias: x)
- help - List commands (alias: ?)

None of these change the world.
"""

from typing import TYPE_CHECKING

from ..engine.systems.look_helpers import format_item, format_room
from ..engine.systems.parser import ParsedCommand
from ..engine.systems.targeting import (
    Found,
    default_scope,
    describe_failure,
    resolve_item,
)

if TYPE_CHECKING:
    from ..engine.systems.context import GameContext

QUIT_HELP = "quit - Exit the game (or exit)"


def look(ctx: "GameContext", command: ParsedCommand) -> str:
    """Describe the room, or resolve an object across room and inventory."""
    words = command.args
    if words and words[0] == "at":  # "look at chest"
        words = words[1:]

    if not words:
        room = ctx.current_room()
        if room is None:
            return "There is only darkness. (Room not found)"
        return format_room(ctx.world, room)

    result = resolve_item(words, default_scope(ctx))
    if isinstance(result, Found):
        return format_item(result.item)
    return describe_failure(result)


def examine(ctx: "GameContext", command: ParsedCommand) -> str:
    return look(ctx, command)


def help_command(ctx: "GameContext", command: ParsedCommand) -> str:
    if ctx.router is None:
        return QUIT_HELP
    return ctx.router.get_help(extra_lines=[QUIT_HELP])
