"""
CommandRouter: verb-to-handler routing for game commands.

Provides:
- register_handler() for handler registration
- Lookup of primary names, abbreviations and synonyms
- Command metadata and the help table

The table is built once at startup; dispatch is a plain dictionary lookup.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from .parser import CommandUsageError

if TYPE_CHECKING:
    from .context import GameContext
    from .parser import ParsedCommand

logger = logging.getLogger(__name__)

CommandHandler = Callable[["GameContext", "ParsedCommand"], str]


@dataclass
class CommandMeta:
    """Metadata for a registered command."""
    name: str  # Primary command name
    aliases: List[str]  # Abbreviations / synonyms routed to the same handler
    handler: CommandHandler
    category: str  # movement, items, view, system
    description: str  # Human-readable description
    usage: str = ""  # e.g. "<item> on <object>"
    show_in_help: bool = True


class CommandRouter:
    """
    Routes parsed commands to handlers.

    Every name and alias maps to the same CommandMeta, so dispatch never needs
    to know which spelling the player used.
    """

    def __init__(self) -> None:
        self.commands: Dict[str, CommandMeta] = {}  # name or alias -> meta
        self.categories: Dict[str, List[str]] = {}  # category -> [primary names]

    def register_handler(
        self,
        name: str,
        handler: CommandHandler,
        aliases: Optional[List[str]] = None,
        category: str = "misc",
        description: str = "",
        usage: str = "",
        show_in_help: bool = True,
    ) -> None:
        """
        Register a command handler under its name and aliases.

        Args:
            name: Primary command name
            handler: Handler function taking (ctx, command) and returning text
            aliases: Alternate spellings routed to the same handler
            category: Command category
            description: Description text for help
            usage: Usage text for help
            show_in_help: False for sugar such as direction shortcuts
        """
        meta = CommandMeta(
            name=name,
            aliases=list(aliases or []),
            handler=handler,
            category=category,
            description=description,
            usage=usage,
            show_in_help=show_in_help,
        )
        for key in [name, *meta.aliases]:
            key = key.lower()
            if key in self.commands:
                logger.warning("Command '%s' re-registered (was '%s')", key, self.commands[key].name)
            self.commands[key] = meta

        if show_in_help:
            names = self.categories.setdefault(category, [])
            if name not in names:
                names.append(name)

    def lookup(self, verb: str) -> CommandMeta | None:
        """Find the command registered under a name or alias."""
        return self.commands.get(verb.lower())

    def dispatch(self, ctx: "GameContext", command: "ParsedCommand") -> str:
        """
        Route a parsed command to its handler.

        Args:
            ctx: The session context
            command: Output of parse_command()

        Returns:
            Text to show the player
        """
        if command.is_empty:
            return "Please enter a command."

        meta = self.lookup(command.verb)
        if meta is None:
            return f"I don't know how to {command.verb}."

        logger.debug("Dispatching '%s' -> %s %s", command.verb, meta.name, command.args)
        try:
            return meta.handler(ctx, command)
        except CommandUsageError as e:
            return str(e)
        except Exception:
            logger.exception("Command '%s' failed", command.raw)
            return "Something went wrong executing that command."

    def get_help(self, extra_lines: Optional[List[str]] = None) -> str:
        """
        Build the verb/description table.

        Args:
            extra_lines: Lines for commands handled outside the router (quit)
        """
        lines = ["Available commands:"]
        for category in self.categories:
            for name in self.categories[category]:
                meta = self.commands[name]
                usage = f"{name} {meta.usage}" if meta.usage else name
                aliases_str = f" (or {', '.join(meta.aliases)})" if meta.aliases else ""
                lines.append(f"  {usage} - {meta.description}{aliases_str}")
        for line in extra_lines or []:
            lines.append(f"  {line}")
        return "\n".join(lines)
