"""Persistence adapters."""

from pling.infrastructure.persistence.in_memory_organization_repository import (
    InMemoryOrganizationRepository,
    RepositoryError,
)

__all__ = ["InMemoryOrganizationRepository", "RepositoryError"]
