"""Space store protocol.

The store is the single entry point request handlers use. Player-facing
operations are total: unknown spaces or players, and non-host callers,
give False/None/the World sentinel instead of raising.

Usage:
    store = LocalSpaceStore(towns=registry)
    store.create_space("1", "town1")
    store.join_space("alice", "town1_1")
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from townspaces.space import Space, SpaceInfo, SpaceListener


class Unset(Enum):
    """Marker for "leave this field alone" in partial updates."""

    UNSET = "UNSET"


UNSET = Unset.UNSET


@runtime_checkable
class SpaceStore(Protocol):
    """Indexes spaces and brokers every mutation on them."""

    def create_space(self, local_space_id: str, town_id: str) -> Space:
        """Create a public space. Raises on unknown town or duplicate ID."""
        ...

    def create_spaces_for_town(self, town_id: str, local_space_ids: Iterable[str]) -> list[Space]:
        """Create one space per zone declared by the town's map."""
        ...

    def get_space(self, space_id: str) -> Space | None:
        """Get a space by composite ID."""
        ...

    def get_space_for_player(self, player_id: str) -> SpaceInfo:
        """Snapshot of the space holding the player, or the World sentinel."""
        ...

    def join_space(self, player_id: str, space_id: str) -> bool:
        """Move a player into a space. Returns True if admitted."""
        ...

    def leave_space(self, player_id: str, space_id: str) -> bool:
        """Remove a player from a space. Returns True if they were inside."""
        ...

    def leave_all_spaces(self, player_id: str) -> bool:
        """Remove a player from whatever space holds them."""
        ...

    def claim_space(self, space_id: str, player_id: str) -> bool:
        """Make a public space private with the player as host."""
        ...

    def update_space(
        self,
        space_id: str,
        requesting_player_id: str,
        presenter_id: str | None | Unset = UNSET,
        whitelist: Iterable[str] | None = None,
    ) -> bool:
        """Host-only presenter/whitelist update."""
        ...

    def add_to_whitelist(self, space_id: str, requesting_player_id: str, player_id: str) -> bool:
        """Host-only: allow one more player into the space."""
        ...

    def remove_from_whitelist(
        self, space_id: str, requesting_player_id: str, player_id: str
    ) -> bool:
        """Host-only: withdraw one player's permission to enter."""
        ...

    def disband_space(self, space_id: str, requesting_player_id: str) -> bool:
        """Host-only disband."""
        ...

    def list_spaces(self) -> list[SpaceInfo]:
        """Snapshots of every space."""
        ...

    def list_spaces_for_town(self, town_id: str) -> list[SpaceInfo]:
        """Snapshots of one town's spaces."""
        ...

    def add_space_listener(self, space_id: str, listener: SpaceListener) -> bool:
        """Subscribe a listener to a space."""
        ...

    def remove_space_listener(self, space_id: str, listener: SpaceListener) -> bool:
        """Unsubscribe a listener from a space."""
        ...
