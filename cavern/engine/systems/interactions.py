"""
Item interactions for two-object verbs ("use rusty key on chest").

A UseRule binds an (item, target) pair - optionally restricted to some
prepositions - to a named effect. Effects are plain functions registered in
USE_EFFECTS; world data refers to them by name.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, FrozenSet, Iterable, Optional

from ..world import transfer_item

if TYPE_CHECKING:
    from ..world import WorldItem
    from .context import GameContext

logger = logging.getLogger(__name__)

# (ctx, item, target, preposition) -> text
UseEffect = Callable[["GameContext", "WorldItem", "WorldItem", str], str]


@dataclass(frozen=True)
class UseRule:
    """One entry of the interaction table."""
    item: str  # primary item name
    target: str  # primary target name
    effect: str  # key into USE_EFFECTS
    prepositions: FrozenSet[str] = field(default_factory=frozenset)  # empty = any

    def applies_to(self, item: "WorldItem", target: "WorldItem", preposition: str) -> bool:
        if item.name.lower() != self.item or target.name.lower() != self.target:
            return False
        return not self.prepositions or preposition in self.prepositions


def unlock_container(
    ctx: "GameContext",
    item: "WorldItem",
    target: "WorldItem",
    preposition: str,
) -> str:
    """
    Unlock a container and spill its contents into the room holding it.

    A second use reports that it is already unlocked and moves nothing.
    """
    if not target.locked:
        return f"The {target.name} is already unlocked."

    # Contents fall into whichever room holds the container
    room_id = ctx.world.find_room_holding(target) or ctx.player.room_id
    room = ctx.world.get_room(room_id)
    target.locked = False
    logger.info("%s unlocked with %s", target.name, item.name)

    lines = [f"You use the {item.name} {preposition} the {target.name}. With a click, the {target.name} unlocks!"]

    # Snapshot before moving so removal doesn't skip elements
    found = list(target.contents)
    if not found:
        lines.append(f"The {target.name} is empty.")
        return "\n".join(lines)

    for child in found:
        transfer_item(child, target.contents, room.items)
    names = ", ".join(child.name for child in found)
    lines.append(f"Inside you discover: {names}.")
    return "\n".join(lines)


USE_EFFECTS: Dict[str, UseEffect] = {
    "unlock": unlock_container,
}


def build_rule(
    item: str,
    target: str,
    effect: str,
    prepositions: Optional[Iterable[str]] = None,
) -> UseRule:
    """
    Create a UseRule, checking that the effect exists.

    Raises:
        KeyError: if `effect` isn't registered in USE_EFFECTS
    """
    if effect not in USE_EFFECTS:
        raise KeyError(f"Unknown use effect '{effect}'")
    return UseRule(
        item=item.lower(),
        target=target.lower(),
        effect=effect,
        prepositions=frozenset(p.lower() for p in prepositions or ()),
    )


def find_rule(
    rules: Iterable[UseRule],
    item: "WorldItem",
    target: "WorldItem",
    preposition: str,
) -> UseRule | None:
    """First rule that applies, or None."""
    return next((rule for rule in rules if rule.applies_to(item, target, preposition)), None)


def apply_use(
    ctx: "GameContext",
    item: "WorldItem",
    target: "WorldItem",
    preposition: str,
) -> str:
    """Run the matching rule's effect, or report that nothing happens."""
    rule = find_rule(ctx.world.use_rules, item, target, preposition)
    if rule is None:
        return f"You use the {item.name} {preposition} the {target.name}. It doesn't work."
    return USE_EFFECTS[rule.effect](ctx, item, target, preposition)
