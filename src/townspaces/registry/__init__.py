"""Town and player registry: external collaborator interfaces.

Provides:
- Player, UserLocation, Direction: player values looked up by ID
- PlayerLookup, TownHandle, TownResolver: what the space layer consumes
- InMemoryTownRegistry: reference implementation
"""

from townspaces.registry.local import InMemoryTown, InMemoryTownRegistry
from townspaces.registry.models import Direction, Player, UserLocation
from townspaces.registry.protocol import PlayerLookup, TownHandle, TownResolver

__all__ = [
    # Models
    "Player",
    "UserLocation",
    "Direction",
    # Protocols
    "PlayerLookup",
    "TownHandle",
    "TownResolver",
    # Implementations
    "InMemoryTown",
    "InMemoryTownRegistry",
]
