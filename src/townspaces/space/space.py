"""Space: state machine for one claimable zone of a town.

A space is Public (no host) or Private (host set). Claiming makes it
private and whitelists the host; disbanding returns it to public and
evicts everyone.

Usage:
    space = Space("town1_1", town_id="town1", players=town)
    space.add_occupant("alice")     # True, public spaces admit anyone
    space.claim("alice")            # True, now private
    space.add_occupant("bob")       # False, bob is not whitelisted
    space.update_whitelist({"alice", "bob"})
    space.add_occupant("bob")       # True
    space.unclaim("alice")          # True, public again and empty
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from townspaces.registry.models import Player
from townspaces.space.fanout import ListenerFanout
from townspaces.space.models import SpaceInfo

if TYPE_CHECKING:
    from townspaces.registry.protocol import PlayerLookup
    from townspaces.space.protocol import SpaceListener

logger = logging.getLogger(__name__)


class Space:
    """Occupants, host, presenter and whitelist of one space.

    Stores player IDs only. Full Player values are resolved through
    ``players`` when a listener needs a payload.

    Host authority is not checked for whitelist/presenter updates here;
    the store enforces it. ``unclaim`` does check, since only the host may
    disband.

    Every method holds the space's reentrant lock, so a disband is observed
    all-or-nothing and listeners may call back into the space.

    Warning:
        Listeners run with the space lock held. When the space belongs to a
        ``LocalSpaceStore``, mutate it through the store, which always takes
        its own lock first. Calling ``unclaim`` or ``add_occupant`` here
        directly while a listener calls back into the store can take the two
        locks in opposite order and deadlock against another thread.

    Args:
        space_id: Composite ID ``{town_id}_{local_space_id}``.
        town_id: Owning town.
        players: Town-scoped player lookup for notification payloads.
    """

    def __init__(self, space_id: str, town_id: str, players: PlayerLookup | None = None):
        self._space_id = space_id
        self._town_id = town_id
        self._players = players
        self._host_id: str | None = None
        self._presenter_id: str | None = None
        self._whitelist: set[str] = set()
        self._occupants: dict[str, None] = {}  # ordered set, arrival order
        self._listeners = ListenerFanout(owner=space_id)
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        state = "private" if self.is_private else "public"
        return f"Space({self._space_id!r}, {state}, occupants={self.occupancy})"

    @property
    def space_id(self) -> str:
        return self._space_id

    @property
    def town_id(self) -> str:
        return self._town_id

    @property
    def host_id(self) -> str | None:
        return self._host_id

    @property
    def presenter_id(self) -> str | None:
        return self._presenter_id

    @property
    def is_private(self) -> bool:
        return self._host_id is not None

    @property
    def whitelist(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._whitelist)

    @property
    def occupants(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._occupants)

    @property
    def occupancy(self) -> int:
        return len(self._occupants)

    def is_occupant(self, player_id: str) -> bool:
        return player_id in self._occupants

    def is_host(self, player_id: str) -> bool:
        return self._host_id is not None and self._host_id == player_id

    def can_admit(self, player_id: str) -> bool:
        """Check whether the privacy rules let ``player_id`` in.

        Does not consider current membership.
        """
        with self._lock:
            if self._host_id is None:
                return True
            return player_id == self._host_id or player_id in self._whitelist

    def add_occupant(self, player_id: str) -> bool:
        """Add a player to the space.

        Args:
            player_id: Player to admit.

        Returns:
            True if the player was added. False if already inside, or if the
            space is private and the player is neither host nor whitelisted.
        """
        with self._lock:
            if player_id in self._occupants:
                return False
            if not self.can_admit(player_id):
                logger.debug("Rejected %s from private space %s", player_id, self._space_id)
                return False
            self._occupants[player_id] = None
            logger.debug("Player %s walked into %s", player_id, self._space_id)
            self._listeners.player_walked_in(self._resolve(player_id))
            return True

    def remove_occupant(self, player_id: str) -> bool:
        """Remove a player from the space.

        Removing a player who is not inside changes nothing and notifies
        nobody.

        Returns:
            True if the player was inside.
        """
        with self._lock:
            if player_id not in self._occupants:
                return False
            del self._occupants[player_id]
            logger.debug("Player %s walked out of %s", player_id, self._space_id)
            self._listeners.player_walked_out(self._resolve(player_id))
            return True

    def claim(self, player_id: str) -> bool:
        """Make the space private with ``player_id`` as host.

        The host is whitelisted but not added as an occupant.

        Returns:
            False if the space is already private.
        """
        with self._lock:
            if self._host_id is not None:
                return False
            self._host_id = player_id
            self._whitelist = {player_id}
            logger.debug("Space %s claimed by %s", self._space_id, player_id)
            return True

    def unclaim(self, player_id: str) -> bool:
        """Disband the space: back to public, empty and un-whitelisted.

        Host, presenter, whitelist and occupants are all reset before any
        listener runs. Each evicted occupant is reported as a departure,
        then the disband itself.

        Args:
            player_id: Must be the current host.

        Returns:
            False if ``player_id`` is not the host (or the space is public).
        """
        with self._lock:
            if not self.is_host(player_id):
                return False
            evicted = list(self._occupants)
            self._host_id = None
            self._presenter_id = None
            self._whitelist = set()
            self._occupants = {}
            logger.info(
                "Space %s disbanded by %s, evicted %d player(s)",
                self._space_id,
                player_id,
                len(evicted),
            )
            for evicted_id in evicted:
                self._listeners.player_walked_out(self._resolve(evicted_id))
            self._listeners.space_disbanded()
            return True

    disband = unclaim

    def update_whitelist(self, player_ids: Iterable[str]) -> None:
        """Replace the whitelist. Occupants no longer on it are not evicted."""
        new_whitelist = set(player_ids)
        with self._lock:
            self._whitelist = new_whitelist

    def add_to_whitelist(self, player_id: str) -> bool:
        """Whitelist one player. Returns False if already whitelisted."""
        with self._lock:
            if player_id in self._whitelist:
                return False
            self._whitelist.add(player_id)
            return True

    def remove_from_whitelist(self, player_id: str) -> bool:
        """Drop one player from the whitelist.

        The player is not evicted if inside, but cannot rejoin after leaving.

        Returns:
            False if the player was not whitelisted.
        """
        with self._lock:
            if player_id not in self._whitelist:
                return False
            self._whitelist.discard(player_id)
            return True

    def update_presenter(self, player_id: str | None) -> None:
        """Set or clear the presenter. The presenter need not be an occupant."""
        with self._lock:
            self._presenter_id = player_id

    def snapshot(self) -> SpaceInfo:
        """Get an immutable view of the current state."""
        with self._lock:
            return SpaceInfo(
                space_id=self._space_id,
                occupant_ids=tuple(self._occupants),
                whitelist_ids=tuple(sorted(self._whitelist)),
                host_id=self._host_id,
                presenter_id=self._presenter_id,
            )

    def add_listener(self, listener: SpaceListener) -> None:
        """Subscribe to membership events of this space."""
        with self._lock:
            self._listeners.add(listener)

    def remove_listener(self, listener: SpaceListener) -> bool:
        """Unsubscribe. Unknown listeners are a no-op (returns False)."""
        with self._lock:
            return self._listeners.remove(listener)

    def _resolve(self, player_id: str) -> Player:
        """Full Player for a payload; a bare Player if the town no longer knows it."""
        if self._players is not None:
            player = self._players.resolve_player(player_id)
            if player is not None:
                return player
        return Player(id=player_id)
