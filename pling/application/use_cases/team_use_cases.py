"""Team attachment use cases (require MANAGE_TEAMS)."""

from pling.application.commands.organization_commands import (
    AddTeamToOrganization,
    RemoveTeamFromOrganization,
)
from pling.application.dtos.organization_dtos import OrganizationDTO
from pling.application.use_cases.organization_base import OrganizationUseCase
from pling.core.result import Failure, Result
from pling.domain.enums import OrganizationPermission


class AddTeamToOrganizationUseCase(
    OrganizationUseCase[AddTeamToOrganization, OrganizationDTO]
):
    async def _run(self, command: AddTeamToOrganization) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id,
            actor_id=command.actor_id,
            team_id=command.team_id,
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        allowed = self._authorize(
            organization, command.actor_id, OrganizationPermission.MANAGE_TEAMS
        )
        if isinstance(allowed, Failure):
            return allowed

        added = organization.add_team(command.team_id)
        if isinstance(added, Failure):
            return added

        return await self._commit(organization)


class RemoveTeamFromOrganizationUseCase(
    OrganizationUseCase[RemoveTeamFromOrganization, OrganizationDTO]
):
    async def _run(
        self, command: RemoveTeamFromOrganization
    ) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id,
            actor_id=command.actor_id,
            team_id=command.team_id,
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        allowed = self._authorize(
            organization, command.actor_id, OrganizationPermission.MANAGE_TEAMS
        )
        if isinstance(allowed, Failure):
            return allowed

        removed = organization.remove_team(command.team_id)
        if isinstance(removed, Failure):
            return removed

        return await self._commit(organization)
