"""
Global pytest configuration and shared fixtures.

Provides:
- The bundled cave world, freshly loaded per test
- A GameEngine over that world
- A small hand-built world for resolver and handler tests
- An item factory
"""

import pytest

from cavern.config import DEFAULT_WORLD_FILE
from cavern.engine.engine import GameEngine
from cavern.engine.loader import load_world
from cavern.engine.systems.context import GameContext
from cavern.engine.systems.parser import parse_command
from cavern.engine.world import World, WorldItem, WorldPlayer, WorldRoom

# ============================================================================
# Item Fixtures
# ============================================================================


@pytest.fixture
def item_factory():
    """Factory for creating WorldItem instances."""

    def _create_item(name: str, *aliases: str, **kwargs) -> WorldItem:
        return WorldItem(
            name=name,
            description=kwargs.pop("description", f"A {name}."),
            aliases=list(aliases),
            **kwargs,
        )

    return _create_item


# ============================================================================
# World Fixtures
# ============================================================================


@pytest.fixture
def cave_world() -> World:
    """The bundled reference world (outside -> cave_entrance -> treasure_room)."""
    return load_world(DEFAULT_WORLD_FILE)


@pytest.fixture
def engine(cave_world: World) -> GameEngine:
    """GameEngine over a fresh copy of the cave world."""
    return GameEngine(cave_world)


@pytest.fixture
def small_world(item_factory) -> World:
    """
    Two rooms (hall <-> vault) with similar items.

    hall:      brass lamp, oil lamp, rope
    vault:     box (locked container holding a coin)
    inventory: set by tests
    """
    hall = WorldRoom(id="hall", description="A long hall.")
    vault = WorldRoom(id="vault", description="A cold vault.")

    hall.items.extend([
        item_factory("brass lamp", "lamp", "brass"),
        item_factory("oil lamp", "lamp", "oil"),
        item_factory("rope", "coil of rope"),
    ])
    box = item_factory("box", "wooden box", is_container=True, locked=True)
    box.contents.append(item_factory("coin", "gold coin"))
    vault.items.append(box)

    world = World(rooms={"hall": hall, "vault": vault}, start_room_id="hall")
    world.add_exit("hall", "east", "vault")
    world.add_exit("vault", "west", "hall")
    return world


@pytest.fixture
def small_ctx(small_world: World) -> GameContext:
    """GameContext with the player standing in the small world's hall."""
    return GameContext(small_world, WorldPlayer(room_id="hall"))


@pytest.fixture
def run():
    """Call a handler with a raw command line: run(handler, ctx, "take lamp")."""

    def _run(handler, ctx: GameContext, line: str) -> str:
        return handler(ctx, parse_command(line))

    return _run
