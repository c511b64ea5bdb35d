# cavern/engine/loader.py
"""
Build the in-memory World from YAML world data.

The file layout is documented in world_data/cave.yaml. Loading is strict
about things that would make the world inconsistent (unknown references,
items placed twice, containment cycles) and lenient about exits that lead
nowhere: those are logged and reported when a player tries them.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .systems.interactions import UseRule, build_rule
from .world import World, WorldItem, WorldRoom

logger = logging.getLogger(__name__)


class WorldLoadError(Exception):
    """World data is malformed or inconsistent."""


def load_world(path: str | Path) -> World:
    """
    Load a world from a YAML file.

    Raises:
        WorldLoadError: if the file can't be read or describes a broken world
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise WorldLoadError(f"Cannot read world file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise WorldLoadError(f"Invalid YAML in {path}: {e}") from e

    world = load_world_from_dict(data)
    logger.info(
        "Loaded world from %s: %d rooms, %d exits, start '%s'",
        path, len(world.rooms), len(world.exits), world.start_room_id,
    )
    return world


def load_world_from_dict(data: Any) -> World:
    """
    Build a World from already-parsed world data.

    Called by load_world(), and directly by tests.
    """
    if not isinstance(data, dict):
        raise WorldLoadError("World data must be a mapping")

    rooms_data = data.get("rooms")
    if not isinstance(rooms_data, dict) or not rooms_data:
        raise WorldLoadError("World data needs a non-empty 'rooms' mapping")

    # ----- Items -----
    items = _build_items(data.get("items") or {})

    # ----- Rooms -----
    rooms: Dict[str, WorldRoom] = {}
    for room_id, room_data in rooms_data.items():
        room_data = room_data or {}
        rooms[room_id] = WorldRoom(
            id=room_id,
            description=room_data.get("description", ""),
        )

    world = World(rooms=rooms)

    # ----- Exits -----
    for room_id, room_data in rooms_data.items():
        for direction, destination in ((room_data or {}).get("exits") or {}).items():
            world.add_exit(room_id, str(direction), destination)

    for room_id, direction in world.dangling_exits():
        logger.warning(
            "Exit %s:%s leads to unknown room '%s'",
            room_id, direction, world.exits[(room_id, direction)],
        )

    # ----- Placement -----
    placed: Dict[str, str] = {}  # item key -> owner label

    def place(name: str, owner_label: str) -> WorldItem:
        key = str(name).lower()
        if key not in items:
            raise WorldLoadError(f"{owner_label} refers to unknown item '{name}'")
        if key in placed:
            raise WorldLoadError(
                f"Item '{name}' is placed in both {placed[key]} and {owner_label}"
            )
        placed[key] = owner_label
        return items[key]

    for room_id, room_data in rooms_data.items():
        for name in (room_data or {}).get("items") or []:
            rooms[room_id].items.append(place(name, f"room '{room_id}'"))

    items_data = data.get("items") or {}
    for name, item_data in items_data.items():
        parent = items[str(name).lower()]
        for child_name in (item_data or {}).get("contents") or []:
            parent.contents.append(place(child_name, f"item '{name}'"))

    _check_cycles(list(items.values()))

    for key, item in items.items():
        if key not in placed:
            logger.warning("Item '%s' is defined but never placed", item.name)

    # ----- Start room -----
    start_room = data.get("start_room")
    if start_room not in rooms:
        raise WorldLoadError(f"Start room '{start_room}' does not exist")
    world.start_room_id = start_room

    # ----- Interactions -----
    for entry in data.get("interactions") or []:
        world.use_rules.append(_build_use_rule(entry, items))

    return world


def _build_items(items_data: Any) -> Dict[str, WorldItem]:
    """Create every item, keyed by lower-cased primary name."""
    if not isinstance(items_data, dict):
        raise WorldLoadError("'items' must be a mapping of name -> item data")

    items: Dict[str, WorldItem] = {}
    for name, item_data in items_data.items():
        item_data = item_data or {}
        key = str(name).lower()
        if key in items:
            raise WorldLoadError(f"Item '{name}' is defined twice")

        contents = item_data.get("contents") or []
        locked = bool(item_data.get("locked", False))
        items[key] = WorldItem(
            name=str(name),
            description=item_data.get("description", ""),
            aliases=[str(alias) for alias in item_data.get("aliases") or []],
            is_container=bool(item_data.get("container", bool(contents) or locked)),
            locked=locked,
            unlocked_description=item_data.get("unlocked_description"),
        )
    return items


def _check_cycles(items: List[WorldItem]) -> None:
    """Refuse containment cycles (an item inside itself, directly or not)."""
    done: set[int] = set()

    def visit(item: WorldItem, path: List[WorldItem]) -> None:
        if any(seen is item for seen in path):
            chain = " -> ".join(i.name for i in [*path, item])
            raise WorldLoadError(f"Containment cycle: {chain}")
        if id(item) in done:
            return
        for child in item.contents:
            visit(child, [*path, item])
        done.add(id(item))

    for item in items:
        visit(item, [])


def _build_use_rule(entry: Any, items: Dict[str, WorldItem]) -> UseRule:
    if not isinstance(entry, dict):
        raise WorldLoadError(f"Interaction entry must be a mapping, got {entry!r}")
    try:
        item_name = str(entry["item"])
        target_name = str(entry["target"])
        effect = str(entry["effect"])
    except KeyError as e:
        raise WorldLoadError(f"Interaction entry missing {e}") from e

    for name in (item_name, target_name):
        if name.lower() not in items:
            raise WorldLoadError(f"Interaction refers to unknown item '{name}'")

    try:
        return build_rule(item_name, target_name, effect, entry.get("prepositions"))
    except KeyError as e:
        raise WorldLoadError(e.args[0]) from e
