"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - OrganizationRoleType: Membership roles (owner, admin, member, invited)
    - OrganizationPermission: Actions on an organization
    - InvitationStatus: Invitation lifecycle states
"""

from pling.domain.enums.invitation_status import InvitationStatus
from pling.domain.enums.organization_permission import (
    ROLE_PERMISSIONS,
    OrganizationPermission,
    permissions_for,
)
from pling.domain.enums.organization_role_type import OrganizationRoleType

__all__ = [
    "InvitationStatus",
    "OrganizationPermission",
    "OrganizationRoleType",
    "ROLE_PERMISSIONS",
    "permissions_for",
]
