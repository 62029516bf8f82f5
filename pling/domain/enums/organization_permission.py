"""Organization-level permissions and the role → permission table.

Usage:
    from pling.domain.enums import OrganizationPermission, OrganizationRoleType

    allowed = OrganizationPermission.INVITE_MEMBERS in permissions_for(
        OrganizationRoleType.ADMIN
    )
"""

from enum import Enum

from pling.domain.enums.organization_role_type import OrganizationRoleType


class OrganizationPermission(str, Enum):
    """Actions a member may perform on an organization."""

    MANAGE_ORGANIZATION = "manage_organization"
    MANAGE_MEMBERS = "manage_members"
    MANAGE_ROLES = "manage_roles"
    INVITE_MEMBERS = "invite_members"
    REMOVE_MEMBERS = "remove_members"
    EDIT_ORGANIZATION = "edit_organization"
    VIEW_ORGANIZATION = "view_organization"
    MANAGE_TEAMS = "manage_teams"
    JOIN_ORGANIZATION = "join_organization"


ROLE_PERMISSIONS: dict[OrganizationRoleType, frozenset[OrganizationPermission]] = {
    OrganizationRoleType.OWNER: frozenset(
        {
            OrganizationPermission.MANAGE_ORGANIZATION,
            OrganizationPermission.MANAGE_MEMBERS,
            OrganizationPermission.MANAGE_ROLES,
            OrganizationPermission.INVITE_MEMBERS,
            OrganizationPermission.REMOVE_MEMBERS,
            OrganizationPermission.EDIT_ORGANIZATION,
            OrganizationPermission.VIEW_ORGANIZATION,
            OrganizationPermission.MANAGE_TEAMS,
        }
    ),
    OrganizationRoleType.ADMIN: frozenset(
        {
            OrganizationPermission.MANAGE_MEMBERS,
            OrganizationPermission.INVITE_MEMBERS,
            OrganizationPermission.REMOVE_MEMBERS,
            OrganizationPermission.EDIT_ORGANIZATION,
            OrganizationPermission.VIEW_ORGANIZATION,
            OrganizationPermission.MANAGE_TEAMS,
        }
    ),
    OrganizationRoleType.MEMBER: frozenset({OrganizationPermission.VIEW_ORGANIZATION}),
    OrganizationRoleType.INVITED: frozenset({OrganizationPermission.JOIN_ORGANIZATION}),
}


def permissions_for(role: OrganizationRoleType) -> frozenset[OrganizationPermission]:
    """Permissions granted to a role (empty for unknown roles)."""
    return ROLE_PERMISSIONS.get(role, frozenset())
