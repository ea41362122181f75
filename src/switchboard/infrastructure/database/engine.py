"""Database engine setup for SQLite with WAL mode.

The DB is stored at ``{root}/.switchboard/{filename}``. SQLAlchemy Core
(not ORM) is used: every command invocation is a handful of point
lookups, with no benefit from session management or identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from switchboard.infrastructure.database.schema import metadata

DATA_DIRNAME = ".switchboard"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def database_path(root: Path, filename: str = "switchboard.db") -> Path:
    """Location of the database file under *root*."""
    return root / DATA_DIRNAME / filename


def init_database(root: Path, filename: str = "switchboard.db") -> Engine:
    """Initialize the database at ``{root}/.switchboard/{filename}``.

    Creates the data directory and all tables from :data:`schema.metadata`.
    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    db_path = database_path(root, filename)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    return engine
