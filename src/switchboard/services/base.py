"""BaseService — foundation for switchboard services.

Every service receives a :class:`Store` at construction time and returns
:class:`ServiceResult` from its public operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from switchboard.infrastructure.store import Store


class BaseService:
    """Base for service-layer classes.

    Usage::

        class LoadService(BaseService):
            def load(self, path: Path) -> ServiceResult:
                repo = self._store.entities
                ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store
