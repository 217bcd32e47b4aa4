"""Synchronous listener fan-out with per-listener failure isolation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from townspaces.registry.models import Player
    from townspaces.space.protocol import SpaceListener

logger = logging.getLogger(__name__)


class ListenerFanout:
    """Ordered set of listeners notified in registration order.

    Notification iterates a copy of the listener list, so a listener may
    add or remove listeners (itself included) while being notified. A
    listener that raises is logged and skipped; the rest still run.

    Args:
        owner: Label used in log messages (usually the space ID).
    """

    def __init__(self, owner: str = ""):
        self._owner = owner
        self._listeners: list[SpaceListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return any(registered is listener for registered in self._listeners)

    def add(self, listener: SpaceListener) -> None:
        """Register a listener. Registering the same object twice is a no-op."""
        if listener not in self:
            self._listeners.append(listener)

    def remove(self, listener: SpaceListener) -> bool:
        """Unregister a listener. Returns False if it was not registered."""
        remaining = [registered for registered in self._listeners if registered is not listener]
        removed = len(remaining) != len(self._listeners)
        self._listeners = remaining
        return removed

    def clear(self) -> None:
        self._listeners = []

    def player_walked_in(self, player: Player) -> int:
        return self._dispatch("on_player_walked_in", player)

    def player_walked_out(self, player: Player) -> int:
        return self._dispatch("on_player_walked_out", player)

    def space_disbanded(self) -> int:
        return self._dispatch("on_space_disbanded")

    def _dispatch(self, callback: str, *args: object) -> int:
        """Call ``callback`` on every listener.

        Returns:
            Number of listeners that raised.
        """
        failures = 0
        for listener in list(self._listeners):
            try:
                getattr(listener, callback)(*args)
            except Exception:
                failures += 1
                logger.exception(
                    "Listener %r failed during %s for space %s", listener, callback, self._owner
                )
        return failures
