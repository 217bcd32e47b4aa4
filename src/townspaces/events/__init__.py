"""Real-time event names and the listener adapter that emits them."""

from townspaces.events.listener import (
    PLAYER_JOINED_SPACE,
    PLAYER_LEFT_SPACE,
    SPACE_DISBANDED,
    Emit,
    RealtimeEventListener,
)

__all__ = [
    "RealtimeEventListener",
    "Emit",
    "PLAYER_JOINED_SPACE",
    "PLAYER_LEFT_SPACE",
    "SPACE_DISBANDED",
]
