"""Organization membership use cases.

Use cases:
    - AddOrganizationMemberUseCase (requires MANAGE_MEMBERS)
    - RemoveOrganizationMemberUseCase (REMOVE_MEMBERS, or the member leaving)
    - ChangeMemberRoleUseCase (requires MANAGE_ROLES)
"""

from pling.application.commands.organization_commands import (
    AddOrganizationMember,
    ChangeMemberRole,
    RemoveOrganizationMember,
)
from pling.application.dtos.organization_dtos import OrganizationDTO
from pling.application.use_cases.organization_base import OrganizationUseCase
from pling.core.result import Failure, Result
from pling.domain.enums import OrganizationPermission
from pling.domain.unique_id import UniqueId


class AddOrganizationMemberUseCase(
    OrganizationUseCase[AddOrganizationMember, OrganizationDTO]
):
    """Add a user directly, bypassing the invitation flow.

    Flow:
        1. Require organization_id, actor_id, user_id, role
        2. Load organization
        3. Check actor may manage members
        4. organization.add_member (queues MemberJoinedOrganization)
        5. Save, dispatch, return OrganizationDTO
    """

    async def _run(self, command: AddOrganizationMember) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id,
            actor_id=command.actor_id,
            user_id=command.user_id,
            role=command.role,
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        allowed = self._authorize(
            organization, command.actor_id, OrganizationPermission.MANAGE_MEMBERS
        )
        if isinstance(allowed, Failure):
            return allowed

        added = organization.add_member(command.user_id, command.role)
        if isinstance(added, Failure):
            return added

        return await self._commit(organization)


class RemoveOrganizationMemberUseCase(
    OrganizationUseCase[RemoveOrganizationMember, OrganizationDTO]
):
    async def _run(self, command: RemoveOrganizationMember) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id,
            actor_id=command.actor_id,
            user_id=command.user_id,
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        # Members may always leave on their own
        if UniqueId(command.actor_id) != UniqueId(command.user_id):
            allowed = self._authorize(
                organization, command.actor_id, OrganizationPermission.REMOVE_MEMBERS
            )
            if isinstance(allowed, Failure):
                return allowed

        removed = organization.remove_member(command.user_id)
        if isinstance(removed, Failure):
            return removed

        return await self._commit(organization)


class ChangeMemberRoleUseCase(OrganizationUseCase[ChangeMemberRole, OrganizationDTO]):
    async def _run(self, command: ChangeMemberRole) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id,
            actor_id=command.actor_id,
            user_id=command.user_id,
            role=command.role,
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        allowed = self._authorize(
            organization, command.actor_id, OrganizationPermission.MANAGE_ROLES
        )
        if isinstance(allowed, Failure):
            return allowed

        changed = organization.update_member_role(command.user_id, command.role)
        if isinstance(changed, Failure):
            return changed

        return await self._commit(organization)
