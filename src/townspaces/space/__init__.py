"""Per-space state machine, read model and listener fan-out."""

from townspaces.space.fanout import ListenerFanout
from townspaces.space.models import SpaceInfo
from townspaces.space.protocol import SpaceListener
from townspaces.space.space import Space

__all__ = [
    "Space",
    "SpaceInfo",
    "SpaceListener",
    "ListenerFanout",
]
