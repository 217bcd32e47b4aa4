"""Local in-memory space store.

Dict-based index suitable for a single process. One instance per process,
constructed by the bootstrap and handed to request handlers.

Usage:
    store = LocalSpaceStore(towns=registry)
    store.create_spaces_for_town("town1", ["1", "2"])
    store.claim_space("town1_1", "alice")
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from townspaces.core.errors import DuplicateSpaceError, TownNotFoundError
from townspaces.core.identity import compose_space_id
from townspaces.space import Space, SpaceInfo
from townspaces.store.protocol import UNSET, Unset

if TYPE_CHECKING:
    from townspaces.registry.models import Player
    from townspaces.registry.protocol import TownResolver
    from townspaces.space import SpaceListener

logger = logging.getLogger(__name__)


class LocalSpaceStore:
    """In-memory index of spaces across towns.

    Structure:
        _spaces[space_id] = Space

    "Which space is player p in" is derived by scanning occupants, so it
    can never disagree with the spaces themselves.

    Args:
        towns: Resolves towns at creation time and players on join/claim.
        thread_safe: Serialize operations under a store-wide lock. Disable
            only when a single event loop dispatches every request.
    """

    def __init__(self, towns: TownResolver, thread_safe: bool = True):
        self._towns = towns
        self._spaces: dict[str, Space] = {}
        self._lock: contextlib.AbstractContextManager[object] = (
            threading.RLock() if thread_safe else contextlib.nullcontext()
        )

    def __len__(self) -> int:
        return len(self._spaces)

    def __contains__(self, space_id: object) -> bool:
        return space_id in self._spaces

    def __iter__(self) -> Iterator[Space]:
        with self._lock:
            spaces = list(self._spaces.values())
        return iter(spaces)

    # Administrative operations: raise on bad configuration

    def create_space(self, local_space_id: str, town_id: str) -> Space:
        """Create and index a public space for a town's zone.

        Args:
            local_space_id: Zone ID as declared by the town's map.
            town_id: Owning town.

        Returns:
            The new Space, with ID ``{town_id}_{local_space_id}``.

        Raises:
            TownNotFoundError: If the town does not resolve.
            DuplicateSpaceError: If the composite ID is already indexed.
        """
        with self._lock:
            town = self._towns.resolve_town(town_id)
            if town is None:
                raise TownNotFoundError(town_id)
            space_id = compose_space_id(town_id, local_space_id)
            if space_id in self._spaces:
                raise DuplicateSpaceError(space_id)
            space = Space(space_id, town_id=town_id, players=town)
            self._spaces[space_id] = space
            logger.info("Created space %s", space_id)
            return space

    def create_spaces_for_town(self, town_id: str, local_space_ids: Iterable[str]) -> list[Space]:
        """Create one space per zone declared by a town's map.

        Every ID is checked before any space is created, so a failure leaves
        the index untouched.

        Raises:
            TownNotFoundError: If the town does not resolve.
            DuplicateSpaceError: If any zone was already created, or is
                listed twice.
        """
        local_ids = list(local_space_ids)
        with self._lock:
            if self._towns.resolve_town(town_id) is None:
                raise TownNotFoundError(town_id)
            seen: set[str] = set()
            for local_id in local_ids:
                space_id = compose_space_id(town_id, local_id)
                if space_id in self._spaces or space_id in seen:
                    raise DuplicateSpaceError(space_id)
                seen.add(space_id)
            return [self.create_space(local_id, town_id) for local_id in local_ids]

    # Player-facing operations: total, never raise

    def get_space(self, space_id: str) -> Space | None:
        """Get the live Space for a composite ID.

        Use it for reads. Mutations should go through the store methods:
        a mutation on the Space itself runs its listeners under the space
        lock without holding the store lock, and a listener that then calls
        the store inverts the lock order used by every store operation.
        """
        with self._lock:
            return self._spaces.get(space_id)

    def get_space_for_player(self, player_id: str) -> SpaceInfo:
        """Find the space holding a player.

        Returns:
            Snapshot of that space, or ``SpaceInfo.world()`` if none.
        """
        with self._lock:
            space = self._space_holding(player_id)
            return space.snapshot() if space is not None else SpaceInfo.world()

    def join_space(self, player_id: str, space_id: str) -> bool:
        """Move a player into a space.

        The player must resolve in the space's town and pass the space's
        admission rules. If admitted while inside another space, they are
        removed from that space first.

        Returns:
            True if the player is now inside ``space_id`` as a result of
            this call.
        """
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None:
                logger.debug("Join of %s failed: no space %s", player_id, space_id)
                return False
            if self._resolve_player(space.town_id, player_id) is None:
                logger.debug("Join of %s failed: not a player of %s", player_id, space.town_id)
                return False
            if space.is_occupant(player_id) or not space.can_admit(player_id):
                return False
            previous = self._space_holding(player_id)
            if previous is not None:
                previous.remove_occupant(player_id)
            return space.add_occupant(player_id)

    def leave_space(self, player_id: str, space_id: str) -> bool:
        """Remove a player from a space.

        Not gated on the registry, so a player who already disconnected from
        the town can still be cleaned out.

        Returns:
            False if the space is unknown or the player was not inside.
        """
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None:
                return False
            return space.remove_occupant(player_id)

    def leave_all_spaces(self, player_id: str) -> bool:
        """Remove a player from whichever space holds them (e.g. on disconnect)."""
        with self._lock:
            space = self._space_holding(player_id)
            if space is None:
                return False
            return space.remove_occupant(player_id)

    def claim_space(self, space_id: str, player_id: str) -> bool:
        """Claim a public space. First come, first served.

        Returns:
            False if the space is unknown, already private, or the claimant
            is not a player of the space's town.
        """
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None:
                return False
            if self._resolve_player(space.town_id, player_id) is None:
                return False
            return space.claim(player_id)

    def update_space(
        self,
        space_id: str,
        requesting_player_id: str,
        presenter_id: str | None | Unset = UNSET,
        whitelist: Iterable[str] | None = None,
    ) -> bool:
        """Update presenter and/or whitelist on behalf of the host.

        Allowed when the requester is the host, or when the space has no host
        yet. Nothing is applied when authorization fails.

        Args:
            space_id: Space to update.
            requesting_player_id: Player asking for the change.
            presenter_id: New presenter, None to clear, UNSET to keep.
            whitelist: New whitelist, None to keep.

        Returns:
            True if the update was applied. False if the space is unknown,
            the requester may not change it, or ``whitelist`` is a bare
            string rather than a collection of player IDs.
        """
        if isinstance(whitelist, str):
            logger.warning("Whitelist for %s must be a collection of IDs, got a string", space_id)
            return False
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None or not self._may_edit(space, requesting_player_id, "update"):
                return False
            if whitelist is not None:
                space.update_whitelist(whitelist)
            if not isinstance(presenter_id, Unset):
                space.update_presenter(presenter_id)
            return True

    def add_to_whitelist(self, space_id: str, requesting_player_id: str, player_id: str) -> bool:
        """Whitelist one player, on behalf of the host.

        Same authorization as ``update_space``. Concurrent single-player
        edits do not overwrite each other.

        Returns:
            True if the player was added to the whitelist.
        """
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None or not self._may_edit(space, requesting_player_id, "whitelist add"):
                return False
            return space.add_to_whitelist(player_id)

    def remove_from_whitelist(
        self, space_id: str, requesting_player_id: str, player_id: str
    ) -> bool:
        """Remove one player from the whitelist, on behalf of the host.

        Returns:
            True if the player was on the whitelist.
        """
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None or not self._may_edit(
                space, requesting_player_id, "whitelist removal"
            ):
                return False
            return space.remove_from_whitelist(player_id)

    def disband_space(self, space_id: str, requesting_player_id: str) -> bool:
        """Disband a private space. Only its host may do this."""
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None:
                return False
            if not space.is_host(requesting_player_id):
                logger.warning(
                    "Player %s is not the host of %s, disband rejected",
                    requesting_player_id,
                    space_id,
                )
                return False
            return space.unclaim(requesting_player_id)

    def list_spaces(self) -> list[SpaceInfo]:
        with self._lock:
            return [space.snapshot() for space in self._spaces.values()]

    def list_spaces_for_town(self, town_id: str) -> list[SpaceInfo]:
        with self._lock:
            return [
                space.snapshot() for space in self._spaces.values() if space.town_id == town_id
            ]

    def add_space_listener(self, space_id: str, listener: SpaceListener) -> bool:
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None:
                return False
            space.add_listener(listener)
            return True

    def remove_space_listener(self, space_id: str, listener: SpaceListener) -> bool:
        with self._lock:
            space = self._spaces.get(space_id)
            if space is None:
                return False
            return space.remove_listener(listener)

    def _may_edit(self, space: Space, requesting_player_id: str, action: str) -> bool:
        """Host, or anyone while the space has no host."""
        if space.host_id is None or space.host_id == requesting_player_id:
            return True
        logger.warning(
            "Player %s is not the host of %s, %s rejected",
            requesting_player_id,
            space.space_id,
            action,
        )
        return False

    def _space_holding(self, player_id: str) -> Space | None:
        for space in self._spaces.values():
            if space.is_occupant(player_id):
                return space
        return None

    def _resolve_player(self, town_id: str, player_id: str) -> Player | None:
        town = self._towns.resolve_town(town_id)
        if town is None:
            return None
        return town.resolve_player(player_id)
