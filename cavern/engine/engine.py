# cavern/engine/engine.py
import logging
from typing import Any

from ..commands.info import examine, help_command, look
from ..commands.interact import use
from ..commands.items import drop, inventory, take
from ..commands.movement import DIRECTION_SHORTCUTS, go, make_move_handler
from .systems import CommandRouter, GameContext, parse_command
from .systems.look_helpers import format_room
from .world import World, WorldPlayer

logger = logging.getLogger(__name__)

QUIT_WORDS = frozenset({"quit", "exit"})
REPEAT_COMMAND = "!"


class GameEngine:
    """
    Core game engine for one single-player session.

    - Owns the World and the player (via GameContext).
    - Builds the verb table once, at construction.
    - Turns each raw input line into output text; one command runs to
      completion before the next is read.

    quit/exit are not dispatched: callers check is_quit() and stop reading.
    """

    def __init__(self, world: World) -> None:
        self.world = world
        self.player = WorldPlayer(room_id=world.start_room_id)

        self.ctx = GameContext(world, self.player)
        self.command_router = CommandRouter()
        self.ctx.router = self.command_router

        # Last dispatched line, for "!"
        self._last_command: str | None = None

        self._register_command_handlers()

    def _register_command_handlers(self) -> None:
        """Register all verbs, their synonyms and the direction shortcuts."""
        router = self.command_router

        router.register_handler(
            "go", go,
            category="movement",
            description="Move in a direction (e.g., 'go north', 'n')",
            usage="<direction>",
        )
        # Direction shortcuts - one closure per spelling so the handler knows the direction
        for shortcut, direction in DIRECTION_SHORTCUTS.items():
            router.register_handler(
                shortcut, make_move_handler(direction),
                category="movement",
                description=f"Move {direction}",
                show_in_help=False,
            )

        router.register_handler(
            "take", take,
            aliases=["get", "pickup"],
            category="items",
            description="Pick up an item (e.g., 'take key', 'get all')",
            usage="[item]",
        )
        router.register_handler(
            "drop", drop,
            category="items",
            description="Put down an item from inventory",
            usage="[item]",
        )
        router.register_handler(
            "use", use,
            category="items",
            description="Combine items (e.g., 'use key on chest')",
            usage="<item> on <object>",
        )
        router.register_handler(
            "inventory", inventory,
            aliases=["i"],
            category="items",
            description="Check your inventory",
        )
        router.register_handler(
            "look", look,
            category="view",
            description="Look around the room",
            usage="[object]",
        )
        router.register_handler(
            "examine", examine,
            aliases=["x"],
            category="view",
            description="Look closely at something (e.g., 'examine chest', 'x key')",
            usage="<object>",
        )
        router.register_handler(
            "help", help_command,
            aliases=["?"],
            category="system",
            description="Display this help message",
        )

    # ---------- Session ----------

    def welcome(self) -> str:
        """Opening text: greeting plus the starting room."""
        room = self.world.get_room(self.player.room_id)
        return "Welcome to the Adventure Game!\n\n" + format_room(self.world, room)

    @staticmethod
    def is_quit(raw: str) -> bool:
        return (raw or "").strip().lower() in QUIT_WORDS

    def handle_command(self, raw: str) -> str:
        """
        Parse a raw command line and execute it.

        Returns:
            Text to show the player
        """
        line = (raw or "").strip()

        if line == REPEAT_COMMAND:
            if self._last_command is None:
                return "No previous command to repeat."
            line = self._last_command
            logger.debug("Repeating '%s'", line)

        command = parse_command(line)
        if not command.is_empty:
            self._last_command = line

        return self.command_router.dispatch(self.ctx, command)

    def snapshot(self) -> dict[str, Any]:
        """Summary of mutable state, for debugging and tests."""
        return {
            "room": self.player.room_id,
            "inventory": [item.name for item in self.player.inventory_items],
            "rooms": {
                room_id: [item.name for item in room.items]
                for room_id, room in self.world.rooms.items()
            },
        }
