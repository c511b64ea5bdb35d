# cavern/engine/world.py
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from .systems.interactions import UseRule


# Simple type aliases for clarity
RoomId = str
ItemName = str
Direction = str  # free-form: "north", "up", "through the crack", ...
ExitKey = Tuple[RoomId, Direction]


class ContainmentError(Exception):
    """Raised when an item is moved out of a holder that doesn't contain it."""


@dataclass(eq=False)
class WorldItem:
    """
    Runtime representation of an item.

    Identity is the primary name. Aliases are matched case-insensitively and
    always include the primary name. Any item can hold other items in
    `contents`; only items flagged as containers are described as such.

    Items compare by identity (eq=False) so two containers never confuse
    one another when removing from a list.
    """
    name: ItemName
    description: str = ""
    aliases: List[str] = field(default_factory=list)

    # Container state
    is_container: bool = False
    locked: bool = False
    contents: List["WorldItem"] = field(default_factory=list)

    # Optional text shown once the container has been unlocked
    unlocked_description: str | None = None

    def __post_init__(self) -> None:
        normalized: List[str] = []
        for alias in [*self.aliases, self.name]:
            alias_lower = alias.strip().lower()
            if alias_lower and alias_lower not in normalized:
                normalized.append(alias_lower)
        self.aliases = normalized

    def get_description(self) -> str:
        """Return the description, switching to the unlocked text if present."""
        if self.is_container and not self.locked and self.unlocked_description:
            return self.unlocked_description
        return self.description

    def has_alias(self, alias: str) -> bool:
        """Exact (case-insensitive) alias equality."""
        return alias.lower() in self.aliases

    def matches_keyword(self, keyword: str) -> bool:
        """Substring match of a single word against any alias."""
        keyword_lower = keyword.lower()
        return any(keyword_lower in alias for alias in self.aliases)

    def __repr__(self) -> str:
        return f"WorldItem({self.name!r})"


@dataclass
class WorldRoom:
    """Runtime representation of a room in the world."""
    id: RoomId
    description: str
    # Items lying in this room
    items: List[WorldItem] = field(default_factory=list)


@dataclass
class WorldPlayer:
    """
    The single player of a session.

    Holds the key of the current room (never the room object) and owns its
    inventory list.
    """
    room_id: RoomId
    inventory_items: List[WorldItem] = field(default_factory=list)


def transfer_item(
    item: WorldItem,
    source: List[WorldItem],
    destination: List[WorldItem],
) -> None:
    """
    Move an item between two holder lists as one remove-then-add pair.

    Args:
        item: The item to move
        source: The list currently holding the item
        destination: The list that will hold the item

    Raises:
        ContainmentError: if the item isn't in `source`
    """
    if not any(held is item for held in source):
        raise ContainmentError(f"{item.name} is not in the source container")

    # Remove by identity; list.remove() would use __eq__
    for index, held in enumerate(source):
        if held is item:
            del source[index]
            break
    destination.append(item)


@dataclass
class World:
    """
    In-memory world state.

    Owns every room and the exit relation. Built once by the loader and then
    mutated only by command handlers.
    """
    rooms: Dict[RoomId, WorldRoom]
    exits: Dict[ExitKey, RoomId] = field(default_factory=dict)
    start_room_id: RoomId = ""

    # Item interactions ("use X on Y"), filled by the loader
    use_rules: List["UseRule"] = field(default_factory=list)

    def get_room(self, room_id: RoomId) -> WorldRoom | None:
        """Get a room by key, or None if it doesn't exist."""
        return self.rooms.get(room_id)

    def add_exit(self, room_id: RoomId, direction: Direction, destination: RoomId) -> None:
        """Register a one-way exit. Directions are stored lower-cased."""
        self.exits[(room_id, direction.lower())] = destination

    def get_exit(self, room_id: RoomId, direction: Direction) -> RoomId | None:
        """
        Get the destination of an exit.

        Returns:
            The destination room key, or None when there is no such exit.
        """
        return self.exits.get((room_id, direction.lower()))

    def exits_from(self, room_id: RoomId) -> List[Direction]:
        """List the directions leading out of a room (derived, not stored)."""
        return [direction for (source, direction) in self.exits if source == room_id]

    def dangling_exits(self) -> List[ExitKey]:
        """Exits whose destination room doesn't exist."""
        return [key for key, dest in self.exits.items() if dest not in self.rooms]

    def find_room_holding(self, item: WorldItem) -> RoomId | None:
        """
        Find which room lists this exact item instance.

        Items inside containers are not considered to be held by the room.
        """
        for room in self.rooms.values():
            if any(held is item for held in room.items):
                return room.id
        return None
