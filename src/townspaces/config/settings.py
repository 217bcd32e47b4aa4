"""Configuration settings using Pydantic Settings.

Usage:
    from townspaces.config import SpaceSettings

    # Load from environment variables (SPACES_*)
    settings = SpaceSettings()

    # Or override with explicit values
    settings = SpaceSettings(map_space_ids=["1", "2", "3"])
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install townspaces"
    ) from e


class SpaceSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the space store process.

    Attributes:
        log_level: Level for the ``townspaces`` logger.
        thread_safe: Serialize store operations under a lock. Turn off only
            when one event loop dispatches every request.
        map_space_ids: Local zone IDs created for each town at startup.

    Environment Variables:
        SPACES_LOG_LEVEL
        SPACES_THREAD_SAFE
        SPACES_MAP_SPACE_IDS (JSON list, e.g. '["1", "2"]')
    """

    model_config = SettingsConfigDict(
        env_prefix="SPACES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    thread_safe: bool = True
    map_space_ids: list[str] = []
