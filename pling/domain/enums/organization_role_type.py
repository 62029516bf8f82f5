"""Organization membership role names.

Role Hierarchy:
    owner > admin > member > invited

    - owner: Full control, exactly one per organization, cannot be removed
    - admin: Manages members, invitations, settings and teams
    - member: Standard member, read access
    - invited: Invited but not yet joined

Usage:
    from pling.domain.enums import OrganizationRoleType

    if OrganizationRoleType.is_valid(raw):
        role_type = OrganizationRoleType(raw)
"""

from enum import Enum


class OrganizationRoleType(str, Enum):
    """Role names stored on OrganizationRole value objects.

    String Enum:
        Inherits from str for easy serialization. Values are lowercase to
        match persisted rows.
    """

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    INVITED = "invited"

    @property
    def level(self) -> int:
        """Permission level (higher value = more authority)."""
        return _LEVELS[self]

    @property
    def label(self) -> str:
        """Display label (Swedish UI)."""
        return _LABELS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['owner', 'admin', 'member', 'invited'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role name.

        Args:
            value: String to check (case-sensitive, already normalized).

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()


_LEVELS: dict[OrganizationRoleType, int] = {
    OrganizationRoleType.OWNER: 3,
    OrganizationRoleType.ADMIN: 2,
    OrganizationRoleType.MEMBER: 1,
    OrganizationRoleType.INVITED: 0,
}

_LABELS: dict[OrganizationRoleType, str] = {
    OrganizationRoleType.OWNER: "Ägare",
    OrganizationRoleType.ADMIN: "Administratör",
    OrganizationRoleType.MEMBER: "Medlem",
    OrganizationRoleType.INVITED: "Inbjuden",
}
