"""Use case inputs (commands and queries)."""

from pling.application.commands.organization_commands import (
    AddOrganizationMember,
    AddTeamToOrganization,
    ChangeMemberRole,
    CreateOrganization,
    GetOrganization,
    InviteToOrganization,
    ListUserOrganizations,
    RemoveOrganizationMember,
    RemoveTeamFromOrganization,
    RespondToInvitation,
    UpdateOrganization,
)

__all__ = [
    "AddOrganizationMember",
    "AddTeamToOrganization",
    "ChangeMemberRole",
    "CreateOrganization",
    "GetOrganization",
    "InviteToOrganization",
    "ListUserOrganizations",
    "RemoveOrganizationMember",
    "RemoveTeamFromOrganization",
    "RespondToInvitation",
    "UpdateOrganization",
]
