"""Repositories encapsulating SQL for entity and identity access."""

from switchboard.infrastructure.repositories.entities import EntityRepository
from switchboard.infrastructure.repositories.identities import IdentityRepository

__all__ = ["EntityRepository", "IdentityRepository"]
