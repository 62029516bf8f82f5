"""OrganizationMember value object: one user's membership in an organization."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self

from pling.core.result import Result
from pling.domain.enums import OrganizationPermission, OrganizationRoleType
from pling.domain.unique_id import UniqueId
from pling.domain.value_object import ValueObject
from pling.domain.value_objects.organization_role import OrganizationRole


@dataclass(frozen=True, slots=True)
class OrganizationMemberProps:
    user_id: UniqueId
    role: OrganizationRole
    joined_at: datetime


class OrganizationMember(ValueObject[OrganizationMemberProps]):
    """Membership record (user, role, join time).

    Rules:
        - joined_at must be timezone-aware
        - INVITED is not a membership role (use an invitation instead)
    """

    @classmethod
    def create(
        cls,
        user_id: "str | UniqueId",
        role: "str | OrganizationRoleType | OrganizationRole",
        joined_at: datetime | None = None,
    ) -> Result[Self, str]:
        joined = joined_at or datetime.now(UTC)

        def build(parsed_role: OrganizationRole) -> Result[Self, str]:
            return cls.validate(
                [
                    (joined.tzinfo is not None, "Medlemskapets datum måste ha tidszon"),
                    (
                        parsed_role.value is not OrganizationRoleType.INVITED,
                        "En inbjuden användare är inte medlem ännu",
                    ),
                ]
            ).map(
                lambda _: cls._from_props(
                    OrganizationMemberProps(
                        user_id=UniqueId(user_id),
                        role=parsed_role,
                        joined_at=joined,
                    )
                )
            )

        return OrganizationRole.create(role).and_then(build)

    @property
    def user_id(self) -> UniqueId:
        return self._props.user_id

    @property
    def role(self) -> OrganizationRole:
        return self._props.role

    @property
    def joined_at(self) -> datetime:
        return self._props.joined_at

    def has_permission(self, permission: OrganizationPermission) -> bool:
        return self._props.role.has_permission(permission)

    def with_role(self, role: OrganizationRole) -> Result[Self, str]:
        """Same membership with another role (re-validated)."""
        return type(self).create(self._props.user_id, role, self._props.joined_at)
