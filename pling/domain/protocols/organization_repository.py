"""OrganizationRepository protocol for organization persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from pling.core.result import Result
from pling.domain.entities.organization import Organization
from pling.domain.unique_id import UniqueId


class OrganizationRepository(Protocol):
    """Organization repository protocol (port).

    Methods:
        find_by_id: Retrieve organization by id
        find_by_member: Organizations a user belongs to
        save: Create or update (optimistic version check)
        delete: Remove organization

    Example Implementation:
        >>> class InMemoryOrganizationRepository:
        ...     async def find_by_id(self, id):
        ...         ...
    """

    async def find_by_id(self, id: "str | UniqueId") -> Result[Organization, str]:
        """Find organization by id.

        Returns:
            Success(organization), or Failure("Organisationen hittades inte").
        """
        ...

    async def find_by_member(
        self, user_id: "str | UniqueId"
    ) -> Result[list[Organization], str]:
        """Find every organization where user_id is a member.

        Returns:
            Success(list), possibly empty.
        """
        ...

    async def save(self, organization: Organization) -> Result[None, str]:
        """Insert or update organization.

        The organization's version must match the stored version; on success
        the repository bumps it.

        Returns:
            Success(None), or Failure when the stored version moved on.
        """
        ...

    async def delete(self, id: "str | UniqueId") -> Result[None, str]:
        """Delete organization.

        Returns:
            Success(None), or Failure when it does not exist.
        """
        ...
