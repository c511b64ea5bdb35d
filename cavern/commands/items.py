"""
Item commands

Commands:
- take [item] [and item...] / take all - Pick items up (aliases: get, pickup)
- drop [item] [and item...] / drop all - Put carried items down
- inventory - List carried items (alias: i)
"""

from typing import TYPE_CHECKING, List, Tuple

from ..engine.systems.look_helpers import format_inventory
from ..engine.systems.parser import ParsedCommand
from ..engine.systems.targeting import (
    SCOPE_INVENTORY,
    SCOPE_ROOM,
    Found,
    describe_failure,
    resolve_exact,
)
from ..engine.world import transfer_item

if TYPE_CHECKING:
    from ..engine.systems.context import GameContext

ALL_WORDS = frozenset({"all", "everything"})


def _wants_all(phrases: Tuple[Tuple[str, ...], ...]) -> bool:
    return len(phrases) == 1 and len(phrases[0]) == 1 and phrases[0][0] in ALL_WORDS


def take(ctx: "GameContext", command: ParsedCommand) -> str:
    """
    Move items from the current room into the inventory.

    With no item named, a lone item in the room is taken implicitly.
    """
    room = ctx.current_room()
    if room is None:
        return "There is only darkness. (Room not found)"
    inventory = ctx.player.inventory_items

    if not command.phrases:
        if not room.items:
            return "There is nothing here to take."
        if len(room.items) > 1:
            return "Take what?"
        item = room.items[0]
        transfer_item(item, room.items, inventory)
        return f"You take the {item.name}."

    if _wants_all(command.phrases):
        if not room.items:
            return "There is nothing here to take."
        lines: List[str] = []
        for item in list(room.items):
            transfer_item(item, room.items, inventory)
            lines.append(f"You take the {item.name}.")
        return "\n".join(lines)

    lines = []
    for phrase in command.phrases:
        result = resolve_exact(phrase, room.items)
        if isinstance(result, Found):
            transfer_item(result.item, room.items, inventory)
            lines.append(f"You take the {result.item.name}.")
            continue

        held = resolve_exact(phrase, inventory)
        if isinstance(held, Found):
            lines.append(f"You already have the {held.item.name}.")
        else:
            lines.append(describe_failure(result, SCOPE_ROOM))
    return "\n".join(lines)


def drop(ctx: "GameContext", command: ParsedCommand) -> str:
    """Move items from the inventory into the current room."""
    room = ctx.current_room()
    if room is None:
        return "There is only darkness. (Room not found)"
    inventory = ctx.player.inventory_items

    if not command.phrases:
        if not inventory:
            return "You aren't carrying anything."
        if len(inventory) > 1:
            return "Drop what?"
        item = inventory[0]
        transfer_item(item, inventory, room.items)
        return f"You drop the {item.name}."

    if _wants_all(command.phrases):
        if not inventory:
            return "You aren't carrying anything."
        lines: List[str] = []
        for item in list(inventory):
            transfer_item(item, inventory, room.items)
            lines.append(f"You drop the {item.name}.")
        return "\n".join(lines)

    lines = []
    for phrase in command.phrases:
        result = resolve_exact(phrase, inventory)
        if isinstance(result, Found):
            transfer_item(result.item, inventory, room.items)
            lines.append(f"You drop the {result.item.name}.")
        else:
            lines.append(describe_failure(result, SCOPE_INVENTORY))
    return "\n".join(lines)


def inventory(ctx: "GameContext", command: ParsedCommand) -> str:
    return format_inventory(ctx.player)
