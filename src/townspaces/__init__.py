"""townspaces: claimable private spaces for a multiplayer town.

Usage:
    from townspaces import InMemoryTownRegistry, Player, build_store

    registry = InMemoryTownRegistry()
    town = registry.add_town("town1")
    town.add_player(Player(id="alice", user_name="Alice"))

    store = build_store(registry)
    store.create_space("1", "town1")          # "town1_1"
    store.join_space("alice", "town1_1")      # True, spaces start public
    store.claim_space("town1_1", "alice")     # True, now private
    store.update_space("town1_1", "alice", presenter_id="alice")
    store.get_space_for_player("alice").to_dict()
"""

__version__ = "0.1.0"

# Bootstrap
from townspaces.bootstrap import build_store, configure_logging, initialize_town

# Configuration
from townspaces.config import SpaceSettings

# Core primitives
from townspaces.core import (
    WORLD_SPACE_ID,
    DuplicateSpaceError,
    SpaceConfigurationError,
    TownNotFoundError,
    compose_space_id,
)

# Real-time events
from townspaces.events import (
    PLAYER_JOINED_SPACE,
    PLAYER_LEFT_SPACE,
    SPACE_DISBANDED,
    RealtimeEventListener,
)

# Registry collaborator
from townspaces.registry import (
    InMemoryTownRegistry,
    Player,
    PlayerLookup,
    TownHandle,
    TownResolver,
    UserLocation,
)

# Spaces
from townspaces.space import ListenerFanout, Space, SpaceInfo, SpaceListener

# Store
from townspaces.store import UNSET, LocalSpaceStore, SpaceStore

__all__ = [
    # Version
    "__version__",
    # Core
    "WORLD_SPACE_ID",
    "compose_space_id",
    "SpaceConfigurationError",
    "TownNotFoundError",
    "DuplicateSpaceError",
    # Registry
    "Player",
    "UserLocation",
    "PlayerLookup",
    "TownHandle",
    "TownResolver",
    "InMemoryTownRegistry",
    # Spaces
    "Space",
    "SpaceInfo",
    "SpaceListener",
    "ListenerFanout",
    # Store
    "SpaceStore",
    "LocalSpaceStore",
    "UNSET",
    # Events
    "RealtimeEventListener",
    "PLAYER_JOINED_SPACE",
    "PLAYER_LEFT_SPACE",
    "SPACE_DISBANDED",
    # Config and bootstrap
    "SpaceSettings",
    "build_store",
    "configure_logging",
    "initialize_town",
]
