# cavern/engine/systems/__init__.py
"""
Game systems - the pieces of the command pipeline.

- parser: tokenizing, noise words, preposition boundary
- targeting: alias resolution against a scope
- router: verb -> handler dispatch and help text
- context: the session object handed to handlers
- interactions: "use X on Y" rule table and effects
- look_helpers: room / item / inventory text
"""

from .context import GameContext
from .interactions import USE_EFFECTS, UseRule, apply_use, build_rule
from .parser import (
    NOISE_WORDS,
    PREPOSITIONS,
    CommandUsageError,
    ParsedCommand,
    TwoObjectArgs,
    parse_command,
    split_preposition,
)
from .router import CommandMeta, CommandRouter
from .targeting import (
    Ambiguous,
    Found,
    NotFound,
    Resolution,
    describe_failure,
    resolve_exact,
    resolve_item,
)

__all__ = [
    "GameContext",
    "USE_EFFECTS",
    "UseRule",
    "apply_use",
    "build_rule",
    "NOISE_WORDS",
    "PREPOSITIONS",
    "CommandUsageError",
    "ParsedCommand",
    "TwoObjectArgs",
    "parse_command",
    "split_preposition",
    "CommandMeta",
    "CommandRouter",
    "Ambiguous",
    "Found",
    "NotFound",
    "Resolution",
    "describe_failure",
    "resolve_exact",
    "resolve_item",
]
