"""Player models as seen by the space layer.

Players are owned by the town/player registry. The space layer only keeps
player IDs and resolves full values when it needs a notification payload.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Direction(Enum):
    """Facing direction of a player avatar."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class UserLocation:
    """Position of a player in the 2D world."""

    x: float = 0.0
    y: float = 0.0
    rotation: Direction = Direction.FRONT
    moving: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation.value,
            "moving": self.moving,
        }


@dataclass(frozen=True, slots=True)
class Player:
    """A connected player.

    Attributes:
        id: Stable unique identifier.
        user_name: Display name. Empty when the player could not be resolved.
        location: Current world location.
    """

    id: str
    user_name: str = ""
    location: UserLocation = field(default_factory=UserLocation)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape sent to real-time clients."""
        return {
            "_id": self.id,
            "_userName": self.user_name,
            "location": self.location.to_dict(),
        }
