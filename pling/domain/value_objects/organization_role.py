"""OrganizationRole value object.

Wraps an OrganizationRoleType with comparison and permission helpers.
Predefined instances (OWNER, ADMIN, MEMBER, INVITED) are shared; create()
parses free-form input case-insensitively.

Usage:
    >>> OrganizationRole.create("Admin").map(str)
    Success(value='admin')
    >>> OrganizationRole.ADMIN.has_at_least_same_permission_as(OrganizationRole.MEMBER)
    True
"""

from dataclasses import dataclass
from typing import ClassVar, Self

from pling.core.result import Failure, Result, Success
from pling.domain.enums import (
    OrganizationPermission,
    OrganizationRoleType,
    permissions_for,
)
from pling.domain.value_object import ValueObject


@dataclass(frozen=True, slots=True)
class OrganizationRoleProps:
    value: OrganizationRoleType


class OrganizationRole(ValueObject[OrganizationRoleProps]):
    """A member's role within an organization."""

    OWNER: ClassVar["OrganizationRole"]
    ADMIN: ClassVar["OrganizationRole"]
    MEMBER: ClassVar["OrganizationRole"]
    INVITED: ClassVar["OrganizationRole"]

    @classmethod
    def create(cls, raw: "str | OrganizationRoleType | OrganizationRole") -> Result[Self, str]:
        """Parse a role from a name, an enum member or an existing role.

        Returns:
            Success(role) or Failure listing the valid role names.
        """
        if isinstance(raw, OrganizationRole):
            return Success(value=raw)  # type: ignore[arg-type]
        if isinstance(raw, OrganizationRoleType):
            return Success(value=cls.of(raw))
        normalized = raw.strip().lower() if isinstance(raw, str) else ""
        if not OrganizationRoleType.is_valid(normalized):
            return Failure(
                error=(
                    f'"{raw}" är inte en giltig organisationsroll. '
                    f"Giltiga värden är: {', '.join(OrganizationRoleType.values())}"
                )
            )
        return Success(value=cls.of(OrganizationRoleType(normalized)))

    @classmethod
    def of(cls, role_type: OrganizationRoleType) -> Self:
        """Role for a known enum member (always valid)."""
        return cls._from_props(OrganizationRoleProps(value=role_type))

    @property
    def value(self) -> OrganizationRoleType:
        return self._props.value

    @property
    def label(self) -> str:
        return self._props.value.label

    @property
    def is_owner(self) -> bool:
        return self._props.value is OrganizationRoleType.OWNER

    def has_at_least_same_permission_as(self, other: "OrganizationRole") -> bool:
        return self._props.value.level >= other.value.level

    def has_permission(self, permission: OrganizationPermission) -> bool:
        return permission in permissions_for(self._props.value)

    def __str__(self) -> str:
        return self._props.value.value


OrganizationRole.OWNER = OrganizationRole.of(OrganizationRoleType.OWNER)
OrganizationRole.ADMIN = OrganizationRole.of(OrganizationRoleType.ADMIN)
OrganizationRole.MEMBER = OrganizationRole.of(OrganizationRoleType.MEMBER)
OrganizationRole.INVITED = OrganizationRole.of(OrganizationRoleType.INVITED)
