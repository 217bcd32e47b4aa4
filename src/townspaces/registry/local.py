"""In-memory town registry.

Reference implementation of TownResolver/TownHandle for tests and for
single-process deployments where towns live in the same process.

Usage:
    registry = InMemoryTownRegistry()
    town = registry.add_town("town1")
    town.add_player(Player(id="alice", user_name="Alice"))
"""

from __future__ import annotations

import threading
from collections.abc import Iterator

from townspaces.registry.models import Player


class InMemoryTown:
    """A town and its currently connected players.

    Args:
        town_id: Identifier of the town.
        friendly_name: Human readable name.
    """

    def __init__(self, town_id: str, friendly_name: str = ""):
        self._town_id = town_id
        self.friendly_name = friendly_name or town_id
        self._players: dict[str, Player] = {}
        self._lock = threading.Lock()

    @property
    def town_id(self) -> str:
        return self._town_id

    def resolve_player(self, player_id: str) -> Player | None:
        with self._lock:
            return self._players.get(player_id)

    def add_player(self, player: Player) -> Player:
        """Register a connected player, replacing any previous value for its ID."""
        with self._lock:
            self._players[player.id] = player
        return player

    def remove_player(self, player_id: str) -> bool:
        """Disconnect a player. Returns True if the player was connected."""
        with self._lock:
            return self._players.pop(player_id, None) is not None

    def players(self) -> Iterator[Player]:
        """Iterate a snapshot of the connected players."""
        with self._lock:
            players = list(self._players.values())
        yield from players


class InMemoryTownRegistry:
    """Dict-backed registry of towns."""

    def __init__(self) -> None:
        self._towns: dict[str, InMemoryTown] = {}
        self._lock = threading.Lock()

    def add_town(self, town_id: str, friendly_name: str = "") -> InMemoryTown:
        """Create a town, or return the existing one with this ID."""
        with self._lock:
            town = self._towns.get(town_id)
            if town is None:
                town = InMemoryTown(town_id, friendly_name)
                self._towns[town_id] = town
            return town

    def remove_town(self, town_id: str) -> bool:
        with self._lock:
            return self._towns.pop(town_id, None) is not None

    def resolve_town(self, town_id: str) -> InMemoryTown | None:
        with self._lock:
            return self._towns.get(town_id)
