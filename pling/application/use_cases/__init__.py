"""Application use cases.

Each use case exposes one ``execute(input) -> Result`` entry point.
"""

from pling.application.use_cases.base import UseCase, UseCaseError
from pling.application.use_cases.invitation_use_cases import (
    InviteToOrganizationUseCase,
    RespondToInvitationUseCase,
)
from pling.application.use_cases.member_use_cases import (
    AddOrganizationMemberUseCase,
    ChangeMemberRoleUseCase,
    RemoveOrganizationMemberUseCase,
)
from pling.application.use_cases.organization_base import (
    OrganizationUseCase,
    OrganizationUseCaseError,
)
from pling.application.use_cases.organization_use_cases import (
    CreateOrganizationUseCase,
    GetOrganizationUseCase,
    ListUserOrganizationsUseCase,
    UpdateOrganizationUseCase,
)
from pling.application.use_cases.team_use_cases import (
    AddTeamToOrganizationUseCase,
    RemoveTeamFromOrganizationUseCase,
)

__all__ = [
    "AddOrganizationMemberUseCase",
    "AddTeamToOrganizationUseCase",
    "ChangeMemberRoleUseCase",
    "CreateOrganizationUseCase",
    "GetOrganizationUseCase",
    "InviteToOrganizationUseCase",
    "ListUserOrganizationsUseCase",
    "OrganizationUseCase",
    "OrganizationUseCaseError",
    "RemoveOrganizationMemberUseCase",
    "RemoveTeamFromOrganizationUseCase",
    "RespondToInvitationUseCase",
    "UpdateOrganizationUseCase",
    "UseCase",
    "UseCaseError",
]
