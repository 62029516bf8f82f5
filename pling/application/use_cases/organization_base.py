"""Shared plumbing for the organization use cases.

Loading, permission checks and the save-then-map tail are identical for
every organization mutation; concrete use cases only express their own
rule and aggregate call.
"""

from typing import TypeVar

from pling.application.dtos.organization_dtos import OrganizationDTO
from pling.application.events.domain_event_publisher import DomainEventPublisher
from pling.application.use_cases.base import UseCase
from pling.core.result import Failure, Result, Success
from pling.domain.entities.organization import Organization
from pling.domain.enums import OrganizationPermission
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.protocols.organization_repository import OrganizationRepository

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741


class OrganizationUseCaseError:
    """Organization use case errors."""

    NOT_FOUND = "Organisationen hittades inte"
    NOT_AUTHORIZED = "Du saknar behörighet för denna åtgärd"


class OrganizationUseCase(UseCase[I, O]):
    """Base for use cases operating on one Organization aggregate.

    Attributes:
        _repository: Organization repository (port).
    """

    def __init__(
        self,
        repository: OrganizationRepository,
        logger: LoggerProtocol,
        event_publisher: DomainEventPublisher | None = None,
    ) -> None:
        super().__init__(logger=logger, event_publisher=event_publisher)
        self._repository = repository

    async def _load(self, organization_id: str) -> Result[Organization, str]:
        return await self._repository.find_by_id(organization_id)

    @staticmethod
    def _authorize(
        organization: Organization,
        actor_id: str,
        permission: OrganizationPermission,
    ) -> Result[None, str]:
        if organization.has_member_permission(actor_id, permission):
            return Success(value=None)
        return Failure(error=OrganizationUseCaseError.NOT_AUTHORIZED)

    async def _commit(self, organization: Organization) -> Result[OrganizationDTO, str]:
        """Save, dispatch queued events and map to the read model."""
        saved = await self._save_and_dispatch(self._repository, organization)
        if isinstance(saved, Failure):
            return saved
        return Success(value=OrganizationDTO.from_entity(organization))
