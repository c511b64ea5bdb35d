"""
Look helpers: text formatting shared by go / look / examine / inventory.

Exit lists are computed from the World's exit relation on every call; the
room itself doesn't store them.
"""

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from ..world import World, WorldItem, WorldPlayer, WorldRoom


def format_name_list(items: Iterable["WorldItem"], empty: str = "none") -> str:
    """Join primary names with commas, or return `empty`."""
    names = [item.name for item in items]
    return ", ".join(names) if names else empty


def format_exits(world: "World", room_id: str) -> str:
    """The 'Exits:' line for a room."""
    directions = world.exits_from(room_id)
    return f"Exits: {', '.join(directions) if directions else 'none'}"


def format_room(world: "World", room: "WorldRoom") -> str:
    """
    Full room description: text, exits, items.

    Returns:
        Three lines, e.g.
            You are in a dimly lit entrance hall. The air is cold.
            Exits: south, north
            Items in the room: rusty key
    """
    lines = [
        room.description,
        format_exits(world, room.id),
        f"Items in the room: {format_name_list(room.items)}",
    ]
    return "\n".join(lines)


def format_item(item: "WorldItem") -> str:
    """Item description, plus contents for an open container."""
    lines: List[str] = [item.get_description()]
    if item.is_container and not item.locked and item.contents:
        lines.append(f"It contains: {format_name_list(item.contents)}")
    return "\n".join(lines)


def format_inventory(player: "WorldPlayer") -> str:
    return f"Inventory: {format_name_list(player.inventory_items, empty='empty')}"
