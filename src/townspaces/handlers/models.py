"""Request and response shapes exchanged with the transport layer.

Requests are parsed from the wire dicts the HTTP layer receives; responses
are wrapped in a ResponseEnvelope whose ``to_dict()`` is what gets sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from townspaces.store.protocol import UNSET, Unset


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Envelope that wraps any response.

    Attributes:
        is_ok: Whether the operation succeeded.
        message: Human readable outcome, mostly for failures.
        response: Operation-specific payload.
    """

    is_ok: bool
    message: str | None = None
    response: dict[str, Any] | None = None

    @classmethod
    def ok(cls, message: str | None = None, **response: Any) -> ResponseEnvelope:
        return cls(is_ok=True, message=message, response=response)

    @classmethod
    def fail(cls, message: str) -> ResponseEnvelope:
        return cls(is_ok=False, message=message, response={})

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"isOK": self.is_ok}
        if self.message is not None:
            result["message"] = self.message
        if self.response is not None:
            result["response"] = self.response
        return result


@dataclass(frozen=True, slots=True)
class SpaceCreateRequest:
    """Create a space for one zone of a town."""

    town_id: str
    space_id: str  # local zone ID, not the composite ID

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceCreateRequest:
        return cls(town_id=data["coveyTownID"], space_id=data["coveySpaceID"])


@dataclass(frozen=True, slots=True)
class SpaceJoinRequest:
    player_id: str
    space_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceJoinRequest:
        return cls(player_id=data["playerID"], space_id=data["coveySpaceID"])


@dataclass(frozen=True, slots=True)
class SpaceLeaveRequest:
    player_id: str
    space_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceLeaveRequest:
        return cls(player_id=data["playerID"], space_id=data["coveySpaceID"])


@dataclass(frozen=True, slots=True)
class SpaceClaimRequest:
    space_id: str
    host_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceClaimRequest:
        return cls(space_id=data["coveySpaceID"], host_id=data["hostID"])


@dataclass(frozen=True, slots=True)
class SpaceUpdateRequest:
    """Host request to change a space.

    ``host_id=None`` asks for a disband. Any other host value is ignored:
    hosts only change through claim and disband. ``presenter_id`` and
    ``whitelist`` are applied only when present.
    """

    space_id: str
    player_id: str
    host_id: str | None | Unset = UNSET
    presenter_id: str | None | Unset = UNSET
    whitelist: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceUpdateRequest:
        """Parse a wire update request.

        Raises:
            ValueError: If ``whitelist`` is present but not a list of player
                ID strings.
        """
        whitelist = data.get("whitelist")
        if whitelist is not None and not is_player_id_list(whitelist):
            raise ValueError(f"whitelist must be a list of player IDs, got {whitelist!r}")
        return cls(
            space_id=data["coveySpaceID"],
            player_id=data["playerID"],
            host_id=data["hostID"] if "hostID" in data else UNSET,
            presenter_id=data["presenterID"] if "presenterID" in data else UNSET,
            whitelist=tuple(whitelist) if whitelist is not None else None,
        )


def is_player_id_list(value: object) -> bool:
    """True for a list or tuple whose items are all strings."""
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)


@dataclass(frozen=True, slots=True)
class SpaceDisbandRequest:
    space_id: str
    player_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceDisbandRequest:
        return cls(space_id=data["coveySpaceID"], player_id=data["playerID"])


@dataclass(frozen=True, slots=True)
class SpaceGetForPlayerRequest:
    player_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceGetForPlayerRequest:
        return cls(player_id=data["playerID"])


@dataclass(frozen=True, slots=True)
class SpaceListRequest:
    """List spaces, optionally only those of one town."""

    town_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpaceListRequest:
        return cls(town_id=data.get("coveyTownID"))
