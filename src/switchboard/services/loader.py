"""LoadService — import systems, members and identities from a JSON fixture.

The fixture is validated in full before anything is written, so a bad
document leaves the store untouched. Loading the same fixture twice is
idempotent: rows are matched by handle / account id and updated.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from switchboard.domain.entities import Identity
from switchboard.services.base import BaseService
from switchboard.services.contracts import FixtureDocument, LoadResultData, dump_validated
from switchboard.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class LoadService(BaseService):
    """Bulk import for bootstrapping a store."""

    def load(self, path: Path) -> ServiceResult:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            return ServiceResult.failure(
                "load", ErrorCode.INVALID_FIXTURE, f"Cannot read {path}: {exc.strerror}"
            )

        try:
            document = FixtureDocument.model_validate(json.loads(raw))
        except json.JSONDecodeError as exc:
            return ServiceResult.failure(
                "load", ErrorCode.INVALID_FIXTURE, f"Invalid JSON in {path}: {exc.msg}"
            )
        except ValidationError as exc:
            return ServiceResult.failure(
                "load",
                ErrorCode.INVALID_FIXTURE,
                f"Invalid fixture {path}: {exc.error_count()} error(s)",
                errors=[err["msg"] for err in exc.errors()],
            )

        return self.apply(document, source=str(path))

    def apply(self, document: FixtureDocument, *, source: str = "<memory>") -> ServiceResult:
        """Write a validated fixture document to the store."""
        entities = self._store.entities
        identities = self._store.identities

        for fixture in document.identities:
            identities.upsert_identity(
                Identity(
                    id=fixture.id,
                    username=fixture.username,
                    discriminator=fixture.discriminator,
                )
            )

        account_count = member_count = 0
        for sys_fixture in document.systems:
            system = entities.upsert_system(
                sys_fixture.hid,
                name=sys_fixture.name,
                description=sys_fixture.description,
                tag=sys_fixture.tag,
            )
            for account_id in sys_fixture.accounts:
                entities.link_account(system, account_id)
                account_count += 1
            for mem_fixture in sys_fixture.members:
                entities.upsert_member(
                    system,
                    mem_fixture.hid,
                    mem_fixture.name,
                    avatar_url=mem_fixture.avatar_url,
                )
                member_count += 1

        logger.info("Loaded %d systems from %s", len(document.systems), source)
        data = dump_validated(
            LoadResultData,
            {
                "path": source,
                "identities": len(document.identities),
                "systems": len(document.systems),
                "accounts": account_count,
                "members": member_count,
            },
        )
        return ServiceResult(ok=True, op="load", data=data)
