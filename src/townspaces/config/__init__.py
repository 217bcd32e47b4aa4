"""Configuration module using Pydantic Settings.

Usage:
    from townspaces.config import SpaceSettings

    settings = SpaceSettings(log_level="DEBUG")
"""

from townspaces.config.settings import SpaceSettings

__all__ = [
    "SpaceSettings",
]
