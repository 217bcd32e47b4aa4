"""Hard errors for administrative operations.

Player-facing operations never raise; they return False/None/sentinel values.
Only space creation, which is driven by map configuration, fails loudly.
"""

from __future__ import annotations


class SpaceConfigurationError(ValueError):
    """Base class for errors caused by bad map/town configuration."""

    pass


class TownNotFoundError(SpaceConfigurationError):
    """Raised when a space is created for a town that does not resolve."""

    def __init__(self, town_id: str) -> None:
        super().__init__(f"Town {town_id!r} not found")
        self.town_id = town_id


class DuplicateSpaceError(SpaceConfigurationError):
    """Raised when a composite space ID is created twice."""

    def __init__(self, space_id: str) -> None:
        super().__init__(f"Space {space_id!r} already exists")
        self.space_id = space_id
