"""SQLite database engine and schema via SQLAlchemy Core."""

from switchboard.infrastructure.database.engine import (
    create_db_engine,
    database_path,
    init_database,
)
from switchboard.infrastructure.database.schema import (
    accounts,
    identities,
    members,
    metadata,
    systems,
)

__all__ = [
    "accounts",
    "create_db_engine",
    "database_path",
    "identities",
    "init_database",
    "members",
    "metadata",
    "systems",
]
