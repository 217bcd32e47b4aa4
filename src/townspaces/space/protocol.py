"""Listener protocol for space membership events.

Listeners are adapters to the real-time transport: one per subscribed
client connection.

Usage:
    class PrintListener:
        def on_player_walked_in(self, player: Player) -> None:
            print("in", player.id)

        def on_player_walked_out(self, player: Player) -> None:
            print("out", player.id)

        def on_space_disbanded(self) -> None:
            print("disbanded")

    space.add_listener(PrintListener())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from townspaces.registry.models import Player


@runtime_checkable
class SpaceListener(Protocol):
    """Receives membership events for one space."""

    def on_player_walked_in(self, player: Player) -> None:
        """Called after a player was added to the space."""
        ...

    def on_player_walked_out(self, player: Player) -> None:
        """Called after a player left or was evicted from the space."""
        ...

    def on_space_disbanded(self) -> None:
        """Called once the space went back to public and was emptied."""
        ...
