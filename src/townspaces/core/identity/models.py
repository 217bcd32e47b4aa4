"""Identity helpers for spaces.

Usage:
    space_id = compose_space_id("town1", "1")  # "town1_1"
    space_id == WORLD_SPACE_ID  # never true for a real space
"""

SPACE_ID_SEPARATOR = "_"

WORLD_SPACE_ID = "World"
"""Sentinel space ID meaning "not in any private space"."""


def compose_space_id(town_id: str, local_space_id: str) -> str:
    """Build the composite space ID for a zone of a town.

    Args:
        town_id: Owning town.
        local_space_id: Zone identifier as declared by the town's map.

    Returns:
        ``"{town_id}_{local_space_id}"``.
    """
    return f"{town_id}{SPACE_ID_SEPARATOR}{local_space_id}"
