"""Repository for systems, linked accounts and members.

Implements the ``EntityStore`` collaborator consumed by the routing
core. Every finder returns ``None`` on a miss; nothing here raises for
an unknown id or handle.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Engine

from switchboard.domain.entities import Member, System
from switchboard.domain.references import normalize_handle
from switchboard.infrastructure.database.schema import accounts, members, systems


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _system(row: Any) -> System:
    return System(
        id=row["id"],
        hid=row["hid"],
        name=row["name"],
        description=row["description"],
        tag=row["tag"],
        created=row["created"],
    )


def _member(row: Any) -> Member:
    return Member(
        id=row["id"],
        hid=row["hid"],
        system_id=row["system_id"],
        name=row["name"],
        avatar_url=row["avatar_url"],
        created=row["created"],
    )


class EntityRepository:
    """Encapsulates SQL for system and member lookups and fixture writes."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Systems
    # ------------------------------------------------------------------

    def find_system_by_id(self, system_id: int) -> System | None:
        return self._first_system(select(systems).where(systems.c.id == system_id))

    def find_system_by_account(self, account_id: int) -> System | None:
        """Fetch the system an account is linked to."""
        stmt = (
            select(systems)
            .join(accounts, accounts.c.system_id == systems.c.id)
            .where(accounts.c.account_id == str(account_id))
        )
        return self._first_system(stmt)

    def find_system_by_handle(self, handle: str) -> System | None:
        """Fetch a system by its short handle (case-insensitive)."""
        stmt = select(systems).where(systems.c.hid == normalize_handle(handle))
        return self._first_system(stmt)

    def list_accounts(self, system: System) -> list[int]:
        """Account ids linked to *system*, ascending."""
        stmt = select(accounts.c.account_id).where(accounts.c.system_id == system.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return sorted(int(row.account_id) for row in rows)

    def upsert_system(
        self,
        hid: str,
        *,
        name: str | None = None,
        description: str | None = None,
        tag: str | None = None,
    ) -> System:
        """Insert a system, or update the descriptive fields of an existing one."""
        hid = normalize_handle(hid)
        values = {"name": name, "description": description, "tag": tag}
        with self._engine.begin() as conn:
            existing = conn.execute(select(systems.c.id).where(systems.c.hid == hid)).first()
            if existing is None:
                conn.execute(insert(systems).values(hid=hid, created=_now_iso(), **values))
            else:
                conn.execute(update(systems).where(systems.c.id == existing.id).values(**values))
        system = self.find_system_by_handle(hid)
        assert system is not None
        return system

    def link_account(self, system: System, account_id: int) -> None:
        """Link *account_id* to *system*, moving it if linked elsewhere."""
        key = str(account_id)
        with self._engine.begin() as conn:
            row = conn.execute(
                select(accounts.c.system_id).where(accounts.c.account_id == key)
            ).first()
            if row is None:
                conn.execute(insert(accounts).values(account_id=key, system_id=system.id))
            elif row.system_id != system.id:
                conn.execute(
                    update(accounts)
                    .where(accounts.c.account_id == key)
                    .values(system_id=system.id)
                )

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def find_member_by_name(self, system: System, name: str) -> Member | None:
        """Fetch a member of *system* by exact display name.

        Display names are not unique; the lowest handle wins.
        """
        stmt = (
            select(members)
            .where(members.c.system_id == system.id, members.c.name == name)
            .order_by(members.c.hid)
            .limit(1)
        )
        return self._first_member(stmt)

    def find_member_by_handle(self, handle: str) -> Member | None:
        """Fetch a member by its globally unique handle (case-insensitive)."""
        stmt = select(members).where(members.c.hid == normalize_handle(handle))
        return self._first_member(stmt)

    def list_members(self, system: System) -> list[Member]:
        """Members of *system*, ordered by name then handle."""
        stmt = (
            select(members)
            .where(members.c.system_id == system.id)
            .order_by(members.c.name, members.c.hid)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_member(row) for row in rows]

    def upsert_member(
        self,
        system: System,
        hid: str,
        name: str,
        *,
        avatar_url: str | None = None,
    ) -> Member:
        """Insert a member of *system*, or update an existing member's fields."""
        hid = normalize_handle(hid)
        values = {"system_id": system.id, "name": name, "avatar_url": avatar_url}
        with self._engine.begin() as conn:
            existing = conn.execute(select(members.c.id).where(members.c.hid == hid)).first()
            if existing is None:
                conn.execute(insert(members).values(hid=hid, created=_now_iso(), **values))
            else:
                conn.execute(update(members).where(members.c.id == existing.id).values(**values))
        member = self.find_member_by_handle(hid)
        assert member is not None
        return member

    def set_member_avatar(self, member: Member, avatar_url: str | None) -> Member:
        """Store a new avatar URL and return the refreshed member."""
        with self._engine.begin() as conn:
            conn.execute(
                update(members).where(members.c.id == member.id).values(avatar_url=avatar_url)
            )
        return member.model_copy(update={"avatar_url": avatar_url})

    # ------------------------------------------------------------------
    # Row helpers
    # ------------------------------------------------------------------

    def _first_system(self, stmt: Any) -> System | None:
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _system(row) if row is not None else None

    def _first_member(self, stmt: Any) -> Member | None:
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _member(row) if row is not None else None
