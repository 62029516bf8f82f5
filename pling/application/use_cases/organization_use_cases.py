"""Organization lifecycle use cases.

Use cases:
    - CreateOrganizationUseCase: new organization with its owner
    - UpdateOrganizationUseCase: rename / change settings
    - GetOrganizationUseCase: read model by id (query)
    - ListUserOrganizationsUseCase: organizations a user belongs to (query)
"""

from typing import Any

from pling.application.commands.organization_commands import (
    CreateOrganization,
    GetOrganization,
    ListUserOrganizations,
    UpdateOrganization,
)
from pling.application.dtos.organization_dtos import OrganizationDTO
from pling.application.events.domain_event_publisher import DomainEventPublisher
from pling.application.use_cases.organization_base import OrganizationUseCase
from pling.core.result import Failure, Result, Success
from pling.domain.entities.organization import Organization
from pling.domain.enums import OrganizationPermission
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.protocols.organization_repository import OrganizationRepository
from pling.domain.value_objects import OrgSettings
from pling.domain.value_objects.org_settings import DEFAULT_MAX_MEMBERS, DEFAULT_MAX_TEAMS


class CreateOrganizationUseCase(OrganizationUseCase[CreateOrganization, OrganizationDTO]):
    """Create an organization; limits default to the configured plan.

    Flow:
        1. Require name and owner_id
        2. Build settings (command limits or configured defaults)
        3. Organization.create (queues OrganizationCreated)
        4. Save, dispatch, return OrganizationDTO
    """

    def __init__(
        self,
        repository: OrganizationRepository,
        event_publisher: DomainEventPublisher,
        logger: LoggerProtocol,
        default_max_members: int = DEFAULT_MAX_MEMBERS,
        default_max_teams: int = DEFAULT_MAX_TEAMS,
    ) -> None:
        super().__init__(repository, logger, event_publisher)
        self._default_max_members = default_max_members
        self._default_max_teams = default_max_teams

    async def _run(self, command: CreateOrganization) -> Result[OrganizationDTO, str]:
        required = self._require(name=command.name, owner_id=command.owner_id)
        if isinstance(required, Failure):
            return required

        settings = OrgSettings.create(
            max_members=(
                self._default_max_members
                if command.max_members is None
                else command.max_members
            ),
            max_teams=(
                self._default_max_teams if command.max_teams is None else command.max_teams
            ),
        )
        if isinstance(settings, Failure):
            return settings

        created = Organization.create(
            name=command.name, owner_id=command.owner_id, settings=settings.value
        )
        if isinstance(created, Failure):
            return created

        return await self._commit(created.value)


class UpdateOrganizationUseCase(OrganizationUseCase[UpdateOrganization, OrganizationDTO]):
    """Rename and/or change settings (requires EDIT_ORGANIZATION)."""

    async def _run(self, command: UpdateOrganization) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id, actor_id=command.actor_id
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        allowed = self._authorize(
            organization, command.actor_id, OrganizationPermission.EDIT_ORGANIZATION
        )
        if isinstance(allowed, Failure):
            return allowed

        settings_changes: dict[str, Any] = {
            key: value
            for key, value in (
                ("max_members", command.max_members),
                ("max_teams", command.max_teams),
                ("allow_member_invites", command.allow_member_invites),
            )
            if value is not None
        }
        updated = organization.update(name=command.name, settings=settings_changes or None)
        if isinstance(updated, Failure):
            return updated

        return await self._commit(organization)


class GetOrganizationUseCase(OrganizationUseCase[GetOrganization, OrganizationDTO]):
    """Load one organization's read model."""

    async def _run(self, query: GetOrganization) -> Result[OrganizationDTO, str]:
        required = self._require(organization_id=query.organization_id)
        if isinstance(required, Failure):
            return required

        return (await self._load(query.organization_id)).map(OrganizationDTO.from_entity)


class ListUserOrganizationsUseCase(
    OrganizationUseCase[ListUserOrganizations, list[OrganizationDTO]]
):
    """Every organization where the user is a member, in repository order."""

    async def _run(self, query: ListUserOrganizations) -> Result[list[OrganizationDTO], str]:
        required = self._require(user_id=query.user_id)
        if isinstance(required, Failure):
            return required

        found = await self._repository.find_by_member(query.user_id)
        if isinstance(found, Failure):
            return found
        return Success(value=[OrganizationDTO.from_entity(org) for org in found.value])
