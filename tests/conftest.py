"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from townspaces import InMemoryTownRegistry, LocalSpaceStore, Player, Space


class RecordingListener:
    """SpaceListener that records every callback as (event, player_id)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str | None]] = []

    def on_player_walked_in(self, player: Player) -> None:
        self.events.append(("in", player.id))

    def on_player_walked_out(self, player: Player) -> None:
        self.events.append(("out", player.id))

    def on_space_disbanded(self) -> None:
        self.events.append(("disbanded", None))


@pytest.fixture
def registry():
    """Registry with town1 (alice, bob, carol) and an empty town2."""
    registry = InMemoryTownRegistry()
    town = registry.add_town("town1", "Town One")
    for player_id in ("alice", "bob", "carol"):
        town.add_player(Player(id=player_id, user_name=player_id.title()))
    registry.add_town("town2")
    return registry


@pytest.fixture
def town(registry):
    return registry.resolve_town("town1")


@pytest.fixture
def store(registry):
    """Store with spaces town1_1 and town1_2."""
    store = LocalSpaceStore(towns=registry)
    store.create_spaces_for_town("town1", ["1", "2"])
    return store


@pytest.fixture
def space(town):
    """Standalone public space backed by town1's players."""
    return Space("town1_1", town_id="town1", players=town)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def listener_cls():
    return RecordingListener
