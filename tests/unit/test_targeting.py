"""
Unit tests for the alias resolver.

Tests substring and exact-alias resolution, ambiguity reporting and the
per-scope failure messages.
"""

import pytest

from cavern.engine.systems.targeting import (
    SCOPE_ALL,
    SCOPE_INVENTORY,
    SCOPE_ROOM,
    Ambiguous,
    Found,
    NotFound,
    default_scope,
    describe_failure,
    item_matches,
    normalize_phrase,
    resolve_exact,
    resolve_item,
    room_scope,
    inventory_scope,
)


@pytest.fixture
def hall_items(small_world):
    return small_world.rooms["hall"].items


# ============================================================================
# Phrase normalization
# ============================================================================


@pytest.mark.unit
def test_normalize_phrase_from_text():
    assert normalize_phrase("The Brass LAMP") == ["brass", "lamp"]


@pytest.mark.unit
def test_normalize_phrase_from_words_drops_duplicates():
    assert normalize_phrase(["lamp", "the", "Lamp"]) == ["lamp"]


@pytest.mark.unit
def test_item_matches_needs_every_word(item_factory):
    lamp = item_factory("brass lamp", "lamp")

    assert item_matches(lamp, ["brass", "lamp"])
    assert item_matches(lamp, ["ras"])
    assert not item_matches(lamp, ["brass", "oil"])
    assert not item_matches(lamp, [])


# ============================================================================
# resolve_item
# ============================================================================


@pytest.mark.unit
class TestResolveItem:
    """Substring alias resolution."""

    def test_single_match(self, hall_items):
        result = resolve_item("rope", hall_items)

        assert isinstance(result, Found)
        assert result.item.name == "rope"

    def test_match_through_secondary_alias(self, hall_items):
        result = resolve_item("coil", hall_items)

        assert isinstance(result, Found)
        assert result.item.name == "rope"

    def test_ambiguous_never_picks(self, hall_items):
        result = resolve_item("lamp", hall_items)

        assert isinstance(result, Ambiguous)
        assert result.names == ["brass lamp", "oil lamp"]

    def test_extra_word_disambiguates(self, hall_items):
        result = resolve_item("the brass lamp", hall_items)

        assert isinstance(result, Found)
        assert result.item.name == "brass lamp"

    def test_word_sequence_accepted(self, hall_items):
        result = resolve_item(("oil", "lamp"), hall_items)

        assert isinstance(result, Found)
        assert result.item.name == "oil lamp"

    def test_not_found(self, hall_items):
        result = resolve_item("sword", hall_items)

        assert result == NotFound("sword")

    def test_noise_only_phrase_is_not_found(self, hall_items):
        assert isinstance(resolve_item("the", hall_items), NotFound)

    def test_empty_scope(self):
        assert isinstance(resolve_item("lamp", []), NotFound)

    def test_items_inside_containers_are_not_in_scope(self, small_world):
        vault_items = small_world.rooms["vault"].items

        assert isinstance(resolve_item("coin", vault_items), NotFound)


# ============================================================================
# resolve_exact
# ============================================================================


@pytest.mark.unit
class TestResolveExact:
    """Exact alias equality with substring fallback."""

    def test_exact_alias_beats_substring(self, item_factory):
        key = item_factory("key")
        ring = item_factory("key ring", "ring")

        assert isinstance(resolve_item("key", [key, ring]), Ambiguous)

        result = resolve_exact("key", [key, ring])
        assert isinstance(result, Found)
        assert result.item is key

    def test_two_exact_matches_are_ambiguous(self, hall_items):
        result = resolve_exact("lamp", hall_items)

        assert isinstance(result, Ambiguous)
        assert len(result.candidates) == 2

    def test_falls_back_to_substring(self, hall_items):
        result = resolve_exact("brass", hall_items)

        assert isinstance(result, Found)
        assert result.item.name == "brass lamp"

        result = resolve_exact("oil la", hall_items)
        assert isinstance(result, Found)
        assert result.item.name == "oil lamp"

    def test_not_found(self, hall_items):
        assert resolve_exact("sword", hall_items) == NotFound("sword")


# ============================================================================
# Failure messages
# ============================================================================


@pytest.mark.unit
def test_describe_ambiguous(item_factory):
    result = Ambiguous("key", (item_factory("rusty key"), item_factory("golden key")))

    assert describe_failure(result) == "Which do you mean: rusty key or golden key?"


@pytest.mark.unit
@pytest.mark.parametrize(
    "scope,expected",
    [
        (SCOPE_ROOM, "There is no sword here."),
        (SCOPE_INVENTORY, "You don't have a sword in your inventory."),
        (SCOPE_ALL, "There is no sword here or in your inventory."),
    ],
)
def test_describe_not_found(scope, expected):
    assert describe_failure(NotFound("sword"), scope) == expected


@pytest.mark.unit
def test_describe_found_is_an_error(item_factory):
    with pytest.raises(ValueError):
        describe_failure(Found(item_factory("coin")))


# ============================================================================
# Scopes
# ============================================================================


@pytest.mark.unit
def test_scopes(small_ctx, item_factory):
    coin = item_factory("coin")
    small_ctx.player.inventory_items.append(coin)

    assert [i.name for i in room_scope(small_ctx)] == ["brass lamp", "oil lamp", "rope"]
    assert inventory_scope(small_ctx) == [coin]
    assert [i.name for i in default_scope(small_ctx)] == [
        "brass lamp", "oil lamp", "rope", "coin",
    ]


@pytest.mark.unit
def test_room_scope_for_missing_room(small_ctx):
    small_ctx.player.room_id = "nowhere"

    assert room_scope(small_ctx) == []
