"""Repository for known chat-transport identities.

Stands in for the gateway's user lookup: the bot records every account
it sees, and the resolver asks this cache before reporting an account
as unknown.
"""

from __future__ import annotations

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Engine

from switchboard.domain.entities import Identity
from switchboard.infrastructure.database.schema import identities


class IdentityRepository:
    """Implements ``IdentityLookup`` over the ``identities`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def resolve_identity(self, account_id: int) -> Identity | None:
        stmt = select(identities).where(identities.c.account_id == str(account_id))
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return Identity(
            id=int(row["account_id"]),
            username=row["username"],
            discriminator=row["discriminator"],
        )

    def upsert_identity(self, identity: Identity) -> None:
        key = str(identity.id)
        values = {"username": identity.username, "discriminator": identity.discriminator}
        with self._engine.begin() as conn:
            exists = conn.execute(
                select(identities.c.account_id).where(identities.c.account_id == key)
            ).first()
            if exists is None:
                conn.execute(insert(identities).values(account_id=key, **values))
            else:
                conn.execute(
                    update(identities).where(identities.c.account_id == key).values(**values)
                )
