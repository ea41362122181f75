"""SQLAlchemy Core table definitions for the switchboard database.

Handles (``hid``) are stored lowercase and are unique per table. A chat
account links to at most one system; a member belongs to exactly one.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

systems = Table(
    "systems",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("hid", Text, nullable=False, unique=True),
    Column("name", Text),
    Column("description", Text),
    Column("tag", Text),
    Column("created", Text, nullable=False),
)

# Chat accounts linked to a system. Account ids are unsigned 64-bit and are
# stored as text so values above the signed range survive SQLite.
accounts = Table(
    "accounts",
    metadata,
    Column("account_id", Text, primary_key=True),
    Column("system_id", Integer, ForeignKey("systems.id", ondelete="CASCADE"), nullable=False),
)

members = Table(
    "members",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("hid", Text, nullable=False, unique=True),
    Column("system_id", Integer, ForeignKey("systems.id", ondelete="CASCADE"), nullable=False),
    Column("name", Text, nullable=False),
    Column("avatar_url", Text),
    Column("created", Text, nullable=False),
)

# Local cache of chat-transport accounts, consulted by the identity lookup.
identities = Table(
    "identities",
    metadata,
    Column("account_id", Text, primary_key=True),
    Column("username", Text, nullable=False),
    Column("discriminator", Text, nullable=False, server_default="0000"),
)

Index("ix_accounts_system", accounts.c.system_id)
Index("ix_members_system_name", members.c.system_id, members.c.name)
