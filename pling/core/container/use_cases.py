"""Repository and use case factories for the organization context."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pling.core.config import Settings, get_settings
from pling.core.container.events import create_domain_event_publisher
from pling.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from pling.application.use_cases import (
        AddOrganizationMemberUseCase,
        AddTeamToOrganizationUseCase,
        ChangeMemberRoleUseCase,
        CreateOrganizationUseCase,
        GetOrganizationUseCase,
        InviteToOrganizationUseCase,
        ListUserOrganizationsUseCase,
        RemoveOrganizationMemberUseCase,
        RemoveTeamFromOrganizationUseCase,
        RespondToInvitationUseCase,
        UpdateOrganizationUseCase,
    )
    from pling.domain.protocols.event_bus_protocol import EventBusProtocol
    from pling.domain.protocols.logger_protocol import LoggerProtocol
    from pling.domain.protocols.organization_repository import OrganizationRepository


def create_organization_repository(
    logger: "LoggerProtocol | None" = None,
) -> "OrganizationRepository":
    """Build a new, empty in-memory organization repository."""
    from pling.infrastructure.persistence.in_memory_organization_repository import (
        InMemoryOrganizationRepository,
    )

    return InMemoryOrganizationRepository(logger=logger or get_logger())


@dataclass(frozen=True, kw_only=True)
class OrganizationUseCases:
    """Every organization use case, sharing one repository and publisher."""

    create_organization: "CreateOrganizationUseCase"
    update_organization: "UpdateOrganizationUseCase"
    add_member: "AddOrganizationMemberUseCase"
    remove_member: "RemoveOrganizationMemberUseCase"
    change_member_role: "ChangeMemberRoleUseCase"
    invite: "InviteToOrganizationUseCase"
    respond_to_invitation: "RespondToInvitationUseCase"
    add_team: "AddTeamToOrganizationUseCase"
    remove_team: "RemoveTeamFromOrganizationUseCase"
    get_organization: "GetOrganizationUseCase"
    list_user_organizations: "ListUserOrganizationsUseCase"


def build_organization_use_cases(
    repository: "OrganizationRepository",
    event_bus: "EventBusProtocol",
    *,
    settings: Settings | None = None,
    logger: "LoggerProtocol | None" = None,
) -> OrganizationUseCases:
    """Wire the organization use cases around repository and event_bus.

    Args:
        repository: Organization repository (port implementation).
        event_bus: Bus receiving dispatched events.
        settings: Plan defaults and invitation expiry (default: get_settings()).
        logger: Logger (default: container logger).

    Returns:
        OrganizationUseCases bundle.
    """
    from pling.application.use_cases import (
        AddOrganizationMemberUseCase,
        AddTeamToOrganizationUseCase,
        ChangeMemberRoleUseCase,
        CreateOrganizationUseCase,
        GetOrganizationUseCase,
        InviteToOrganizationUseCase,
        ListUserOrganizationsUseCase,
        RemoveOrganizationMemberUseCase,
        RemoveTeamFromOrganizationUseCase,
        RespondToInvitationUseCase,
        UpdateOrganizationUseCase,
    )

    settings = settings or get_settings()
    logger = logger or get_logger()
    publisher = create_domain_event_publisher(event_bus, logger)
    shared = {"repository": repository, "event_publisher": publisher, "logger": logger}

    return OrganizationUseCases(
        create_organization=CreateOrganizationUseCase(
            **shared,
            default_max_members=settings.default_max_members,
            default_max_teams=settings.default_max_teams,
        ),
        update_organization=UpdateOrganizationUseCase(**shared),
        add_member=AddOrganizationMemberUseCase(**shared),
        remove_member=RemoveOrganizationMemberUseCase(**shared),
        change_member_role=ChangeMemberRoleUseCase(**shared),
        invite=InviteToOrganizationUseCase(
            **shared, invitation_expiry_days=settings.invitation_expiry_days
        ),
        respond_to_invitation=RespondToInvitationUseCase(**shared),
        add_team=AddTeamToOrganizationUseCase(**shared),
        remove_team=RemoveTeamFromOrganizationUseCase(**shared),
        get_organization=GetOrganizationUseCase(**shared),
        list_user_organizations=ListUserOrganizationsUseCase(**shared),
    )
