"""Process bootstrap: logging and the single space store.

The store is constructed once here and passed to request handlers, instead
of being reached through a global.

Usage:
    settings = SpaceSettings()
    registry = InMemoryTownRegistry()
    store = build_store(registry, settings)

    registry.add_town("town1")
    initialize_town(store, "town1", settings)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from townspaces.config import SpaceSettings
from townspaces.store import LocalSpaceStore

if TYPE_CHECKING:
    from townspaces.registry.protocol import TownResolver
    from townspaces.space import Space

PACKAGE_LOGGER = "townspaces"


def configure_logging(settings: SpaceSettings) -> logging.Logger:
    """Set the package logger level. Handlers are left to the host application.

    Raises:
        ValueError: If ``settings.log_level`` is not a logging level name.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level.upper())
    return logger


def build_store(towns: TownResolver, settings: SpaceSettings | None = None) -> LocalSpaceStore:
    """Create the process-wide space store."""
    settings = settings or SpaceSettings()
    configure_logging(settings)
    return LocalSpaceStore(towns=towns, thread_safe=settings.thread_safe)


def initialize_town(
    store: LocalSpaceStore,
    town_id: str,
    settings: SpaceSettings | None = None,
    local_space_ids: Iterable[str] | None = None,
) -> list[Space]:
    """Create the spaces declared by a town's map.

    Args:
        store: Process store.
        town_id: Town that was just created in the registry.
        settings: Supplies ``map_space_ids`` when ``local_space_ids`` is None.
        local_space_ids: Zone IDs read from the town's map.

    Raises:
        TownNotFoundError: If the town is not in the registry.
        DuplicateSpaceError: If the town was already initialized.
    """
    if local_space_ids is None:
        local_space_ids = (settings or SpaceSettings()).map_space_ids
    return store.create_spaces_for_town(town_id, local_space_ids)
