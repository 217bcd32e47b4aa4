"""Identity functionality: composite space IDs and the World sentinel."""

from townspaces.core.identity.models import (
    SPACE_ID_SEPARATOR,
    WORLD_SPACE_ID,
    compose_space_id,
)

__all__ = [
    "SPACE_ID_SEPARATOR",
    "WORLD_SPACE_ID",
    "compose_space_id",
]
