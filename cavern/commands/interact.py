"""
Interaction commands

Commands:
- use <item> on|with|in|to <object> - Use a carried item on something in the room
"""

from typing import TYPE_CHECKING

from ..engine.systems.interactions import apply_use
from ..engine.systems.parser import ParsedCommand, split_preposition
from ..engine.systems.targeting import (
    SCOPE_INVENTORY,
    SCOPE_ROOM,
    Found,
    describe_failure,
    inventory_scope,
    resolve_item,
    room_scope,
)

if TYPE_CHECKING:
    from ..engine.systems.context import GameContext


def use(ctx: "GameContext", command: ParsedCommand) -> str:
    """
    Handler for 'use X on Y'.

    The item must be carried and the target must be in the room; each phrase
    is resolved independently and the first failure aborts the command.
    """
    parts = split_preposition(command.args)

    item_result = resolve_item(parts.item_words, inventory_scope(ctx))
    if not isinstance(item_result, Found):
        return describe_failure(item_result, SCOPE_INVENTORY)

    target_result = resolve_item(parts.target_words, room_scope(ctx))
    if not isinstance(target_result, Found):
        return describe_failure(target_result, SCOPE_ROOM)

    return apply_use(ctx, item_result.item, target_result.item, parts.preposition)
