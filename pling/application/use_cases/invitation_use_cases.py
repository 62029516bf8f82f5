"""Organization invitation use cases.

Use cases:
    - InviteToOrganizationUseCase: send an invitation
    - RespondToInvitationUseCase: invitee accepts or declines

Invitations past their expiry are marked EXPIRED whenever the organization
is loaded by one of these use cases, so a stale invitation can neither be
accepted nor block a new one.
"""

from pling.application.commands.organization_commands import (
    InviteToOrganization,
    RespondToInvitation,
)
from pling.application.dtos.organization_dtos import OrganizationDTO
from pling.application.events.domain_event_publisher import DomainEventPublisher
from pling.application.use_cases.organization_base import (
    OrganizationUseCase,
    OrganizationUseCaseError,
)
from pling.core.result import Failure, Result
from pling.domain.entities.organization import Organization
from pling.domain.enums import OrganizationPermission
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.protocols.organization_repository import OrganizationRepository
from pling.domain.value_objects.organization_invitation import DEFAULT_EXPIRY_DAYS


def _may_invite(organization: Organization, actor_id: str) -> bool:
    if organization.has_member_permission(actor_id, OrganizationPermission.INVITE_MEMBERS):
        return True
    return organization.settings.allow_member_invites and organization.is_member(actor_id)


class InviteToOrganizationUseCase(
    OrganizationUseCase[InviteToOrganization, OrganizationDTO]
):
    """Send an invitation.

    Flow:
        1. Require organization_id, actor_id, user_id, email
        2. Load organization, expire stale invitations
        3. Check actor may invite (INVITE_MEMBERS, or any member when the
           organization allows member invites)
        4. organization.invite_user (queues MemberInvitedToOrganization)
        5. Save, dispatch, return OrganizationDTO
    """

    def __init__(
        self,
        repository: OrganizationRepository,
        event_publisher: DomainEventPublisher,
        logger: LoggerProtocol,
        invitation_expiry_days: int = DEFAULT_EXPIRY_DAYS,
    ) -> None:
        super().__init__(repository, logger, event_publisher)
        self._invitation_expiry_days = invitation_expiry_days

    async def _run(self, command: InviteToOrganization) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id,
            actor_id=command.actor_id,
            user_id=command.user_id,
            email=command.email,
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        if not _may_invite(organization, command.actor_id):
            return Failure(error=OrganizationUseCaseError.NOT_AUTHORIZED)

        expired = organization.expire_invitations()
        if isinstance(expired, Failure):
            return expired

        invited = organization.invite_user(
            command.user_id,
            command.email,
            invited_by=command.actor_id,
            role=command.role,
            expiry_days=self._invitation_expiry_days,
        )
        if isinstance(invited, Failure):
            return invited

        return await self._commit(organization)


class RespondToInvitationUseCase(
    OrganizationUseCase[RespondToInvitation, OrganizationDTO]
):
    """Accept or decline an invitation as the invited user.

    An invitation that expired before the answer is persisted as EXPIRED and
    the answer is rejected with "Inbjudan har löpt ut".
    """

    async def _run(self, command: RespondToInvitation) -> Result[OrganizationDTO, str]:
        required = self._require(
            organization_id=command.organization_id,
            invitation_id=command.invitation_id,
            user_id=command.user_id,
        )
        if isinstance(required, Failure):
            return required

        loaded = await self._load(command.organization_id)
        if isinstance(loaded, Failure):
            return loaded
        organization = loaded.value

        expired = organization.expire_invitations()
        if isinstance(expired, Failure):
            return expired

        if command.accept:
            answered = organization.accept_invitation(command.invitation_id, command.user_id)
        else:
            answered = organization.decline_invitation(command.invitation_id, command.user_id)

        if isinstance(answered, Failure):
            if organization.domain_events:
                # Persist the expiry even though the answer was rejected
                committed = await self._commit(organization)
                if isinstance(committed, Failure):
                    return committed
            return answered

        return await self._commit(organization)
