"""
Verb handlers.

Every handler takes (ctx, command) and returns the text to show the player.
"""

from .info import examine, help_command, look
from .interact import use
from .items import drop, inventory, take
from .movement import DIRECTION_SHORTCUTS, go, make_move_handler, move_player

__all__ = [
    "examine",
    "help_command",
    "look",
    "use",
    "drop",
    "inventory",
    "take",
    "DIRECTION_SHORTCUTS",
    "go",
    "make_move_handler",
    "move_player",
]
