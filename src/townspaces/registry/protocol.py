"""Protocols for the town/player registry collaborator.

The registry is external: it owns towns and their connected players. The
space layer consumes it through these two lookups only.

Usage:
    town = resolver.resolve_town("town1")
    if town is not None:
        player = town.resolve_player("alice")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from townspaces.registry.models import Player


@runtime_checkable
class PlayerLookup(Protocol):
    """Town-scoped player lookup."""

    def resolve_player(self, player_id: str) -> Player | None:
        """Get the connected player with this ID, or None."""
        ...


@runtime_checkable
class TownHandle(PlayerLookup, Protocol):
    """A resolved town. Doubles as the town's player lookup."""

    @property
    def town_id(self) -> str:
        """Identifier of the town."""
        ...


@runtime_checkable
class TownResolver(Protocol):
    """Resolves town IDs, used when creating spaces."""

    def resolve_town(self, town_id: str) -> TownHandle | None:
        """Get the town with this ID, or None if it does not exist."""
        ...
