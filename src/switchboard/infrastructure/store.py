"""Store — the single persistence dependency handed to services and the interpreter.

Owns the SQLAlchemy engine for ``{root}/.switchboard/<filename>`` and
the repositories built on it. One Store is shared by all invocations of
a process; repositories open a fresh connection per call and hold no
locks between calls.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from switchboard.infrastructure.database.engine import database_path, init_database
from switchboard.infrastructure.repositories.entities import EntityRepository
from switchboard.infrastructure.repositories.identities import IdentityRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from switchboard.config.settings import SwitchboardSettings

logger = logging.getLogger(__name__)


class Store:
    """Database-backed entity store and identity cache."""

    def __init__(self, settings: SwitchboardSettings) -> None:
        self._settings = settings
        self._root = settings.root
        self._engine: Engine = init_database(self._root, settings.database.filename)
        self._entities = EntityRepository(self._engine)
        self._identities = IdentityRepository(self._engine)
        logger.debug("Opened store at %s", self.path)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def path(self) -> Path:
        return database_path(self._root, self._settings.database.filename)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def entities(self) -> EntityRepository:
        return self._entities

    @property
    def identities(self) -> IdentityRepository:
        return self._identities

    def close(self) -> None:
        """Dispose the engine's connection pool."""
        self._engine.dispose()
