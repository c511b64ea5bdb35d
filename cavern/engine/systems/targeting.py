"""
Alias Resolver: map a player phrase to exactly one item in a scope.

Resolution results are tagged values rather than Optional items so that
callers have to handle all three outcomes:

- Found(item)                 exactly one match
- NotFound(phrase)            nothing matched
- Ambiguous(phrase, items)    more than one match; never pick silently
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Sequence, Tuple, Union

from .parser import strip_noise, tokenize

if TYPE_CHECKING:
    from ..world import WorldItem
    from .context import GameContext


@dataclass(frozen=True)
class Found:
    item: "WorldItem"


@dataclass(frozen=True)
class NotFound:
    phrase: str


@dataclass(frozen=True)
class Ambiguous:
    phrase: str
    candidates: Tuple["WorldItem", ...]

    @property
    def names(self) -> List[str]:
        return [item.name for item in self.candidates]


Resolution = Union[Found, NotFound, Ambiguous]

# Scope labels, used to word failure messages
SCOPE_ROOM = "room"
SCOPE_INVENTORY = "inventory"
SCOPE_ALL = "all"


def normalize_phrase(phrase: str | Sequence[str]) -> List[str]:
    """
    Turn a phrase into its distinct lower-case words, noise words removed.

    Accepts either raw text or an already tokenized word sequence.
    """
    words = tokenize(phrase) if isinstance(phrase, str) else [w.lower() for w in phrase]
    unique: List[str] = []
    for word in strip_noise(words):
        if word not in unique:
            unique.append(word)
    return unique


def item_matches(item: "WorldItem", words: Sequence[str]) -> bool:
    """Every word must be a substring of some alias of the item."""
    if not words:
        return False
    return all(item.matches_keyword(word) for word in words)


def _result(phrase: str, matches: List["WorldItem"]) -> Resolution:
    if len(matches) == 1:
        return Found(matches[0])
    if not matches:
        return NotFound(phrase)
    return Ambiguous(phrase, tuple(matches))


def resolve_item(phrase: str | Sequence[str], scope: Iterable["WorldItem"]) -> Resolution:
    """
    Resolve a phrase against a scope using substring alias matching.

    "key" matches an item aliased "rusty key"; "rusty key" matches it too,
    since both words occur in its aliases.
    """
    words = normalize_phrase(phrase)
    display = " ".join(words) if words else (phrase if isinstance(phrase, str) else "")
    matches = [item for item in scope if item_matches(item, words)]
    return _result(display, matches)


def resolve_exact(phrase: str | Sequence[str], scope: Iterable["WorldItem"]) -> Resolution:
    """
    Resolve a phrase by exact alias equality, falling back to substring matching.

    Used by take/drop so "take key" picks the one item literally aliased "key"
    instead of every item with "key" somewhere in an alias.
    """
    candidates = list(scope)
    words = normalize_phrase(phrase)
    joined = " ".join(words)
    exact = [item for item in candidates if joined and item.has_alias(joined)]
    if exact:
        return _result(joined, exact)
    return resolve_item(words, candidates)


def describe_failure(result: Resolution, scope: str = SCOPE_ALL) -> str:
    """Render a NotFound / Ambiguous result as a one-line message."""
    if isinstance(result, Ambiguous):
        return f"Which do you mean: {' or '.join(result.names)}?"
    if isinstance(result, NotFound):
        if scope == SCOPE_ROOM:
            return f"There is no {result.phrase} here."
        if scope == SCOPE_INVENTORY:
            return f"You don't have a {result.phrase} in your inventory."
        return f"There is no {result.phrase} here or in your inventory."
    raise ValueError(f"{result!r} is not a failed resolution")


# ---------- Scopes ----------


def room_scope(ctx: "GameContext") -> List["WorldItem"]:
    """Items lying in the player's current room."""
    room = ctx.current_room()
    return list(room.items) if room else []


def inventory_scope(ctx: "GameContext") -> List["WorldItem"]:
    """Items the player is carrying."""
    return list(ctx.player.inventory_items)


def default_scope(ctx: "GameContext") -> List["WorldItem"]:
    """Current room items followed by inventory."""
    return room_scope(ctx) + inventory_scope(ctx)
