"""Core primitives: identities and errors.

Architecture Note:
    core/ is stateless. Stateful services (spaces, the store) live in
    space/ and store/.
"""

from townspaces.core.errors import (
    DuplicateSpaceError,
    SpaceConfigurationError,
    TownNotFoundError,
)
from townspaces.core.identity import WORLD_SPACE_ID, compose_space_id

__all__ = [
    "WORLD_SPACE_ID",
    "compose_space_id",
    "SpaceConfigurationError",
    "TownNotFoundError",
    "DuplicateSpaceError",
]
