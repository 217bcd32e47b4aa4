"""Adapter from space listener callbacks to named real-time events.

Usage:
    def emit(event: str, payload: dict | None) -> None:
        socket.emit(event, payload)

    store.add_space_listener("town1_1", RealtimeEventListener(emit))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from townspaces.registry.models import Player

PLAYER_JOINED_SPACE = "player-joined-space"
PLAYER_LEFT_SPACE = "player-left-space"
SPACE_DISBANDED = "space-disbanded"

Emit = Callable[[str, dict[str, Any] | None], None]


class RealtimeEventListener:
    """SpaceListener that forwards each event to one client connection.

    Attributes:
        emit: Called as ``emit(event_name, payload)``. Payload is the
            player's wire dict, or None for a disband.
    """

    def __init__(self, emit: Emit):
        self.emit = emit

    def on_player_walked_in(self, player: Player) -> None:
        self.emit(PLAYER_JOINED_SPACE, player.to_dict())

    def on_player_walked_out(self, player: Player) -> None:
        self.emit(PLAYER_LEFT_SPACE, player.to_dict())

    def on_space_disbanded(self) -> None:
        self.emit(SPACE_DISBANDED, None)
