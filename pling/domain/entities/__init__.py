"""Domain entities (aggregate roots)."""

from pling.domain.entities.organization import (
    Organization,
    OrganizationError,
    OrganizationProps,
)

__all__ = ["Organization", "OrganizationError", "OrganizationProps"]
