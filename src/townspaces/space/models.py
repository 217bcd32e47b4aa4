"""Read model for spaces.

SpaceInfo is the only shape in which space state leaves the space layer.
It is frozen and holds tuples, so callers never get live references.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from townspaces.core.identity import WORLD_SPACE_ID


@dataclass(frozen=True, slots=True)
class SpaceInfo:
    """Immutable snapshot of one space.

    Attributes:
        space_id: Composite space ID, or "World" for the sentinel.
        occupant_ids: Players inside the space, in arrival order.
        whitelist_ids: Players allowed in while private, sorted.
        host_id: Host player ID, None when public.
        presenter_id: Presenter player ID, None when unset.

    Example:
        info = store.get_space_for_player("alice")
        if info.is_world:
            ...  # alice is not in any space
    """

    space_id: str
    occupant_ids: tuple[str, ...] = ()
    whitelist_ids: tuple[str, ...] = ()
    host_id: str | None = None
    presenter_id: str | None = None

    @classmethod
    def world(cls) -> SpaceInfo:
        """The sentinel for a player who is not in any space."""
        return cls(space_id=WORLD_SPACE_ID)

    @property
    def is_world(self) -> bool:
        return self.space_id == WORLD_SPACE_ID

    @property
    def is_private(self) -> bool:
        return self.host_id is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire-level JSON shape."""
        return {
            "coveySpaceID": self.space_id,
            "currentPlayers": list(self.occupant_ids),
            "whitelist": list(self.whitelist_ids),
            "hostID": self.host_id,
            "presenterID": self.presenter_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceInfo:
        """Create from the wire-level shape (for clients and tests)."""
        return cls(
            space_id=data["coveySpaceID"],
            occupant_ids=tuple(data.get("currentPlayers", ())),
            whitelist_ids=tuple(data.get("whitelist", ())),
            host_id=data.get("hostID"),
            presenter_id=data.get("presenterID"),
        )
