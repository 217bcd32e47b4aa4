"""Space store backends."""

from townspaces.store.local import LocalSpaceStore
from townspaces.store.protocol import UNSET, SpaceStore, Unset

__all__ = [
    "SpaceStore",
    "LocalSpaceStore",
    "UNSET",
    "Unset",
]
