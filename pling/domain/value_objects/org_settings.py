"""OrgSettings value object: plan limits and membership policy."""

from dataclasses import dataclass
from typing import Any, Self

from pling.core.result import Result
from pling.domain.value_object import ValueObject

DEFAULT_MAX_MEMBERS = 3
DEFAULT_MAX_TEAMS = 1


@dataclass(frozen=True, slots=True)
class OrgSettingsProps:
    max_members: int | None = DEFAULT_MAX_MEMBERS
    max_teams: int | None = DEFAULT_MAX_TEAMS
    allow_member_invites: bool = False


class OrgSettings(ValueObject[OrgSettingsProps]):
    """Organization settings.

    Attributes:
        max_members: Member limit (owner included); None means unlimited.
        max_teams: Team limit; None means unlimited.
        allow_member_invites: Whether plain members may send invitations.
    """

    @classmethod
    def create(
        cls,
        max_members: int | None = DEFAULT_MAX_MEMBERS,
        max_teams: int | None = DEFAULT_MAX_TEAMS,
        allow_member_invites: bool = False,
    ) -> Result[Self, str]:
        props = OrgSettingsProps(
            max_members=max_members,
            max_teams=max_teams,
            allow_member_invites=allow_member_invites,
        )
        return cls.validate(
            [
                (
                    max_members is None or max_members >= 1,
                    "Medlemsgränsen måste vara minst 1",
                ),
                (max_teams is None or max_teams >= 0, "Teamgränsen kan inte vara negativ"),
            ]
        ).map(lambda _: cls._from_props(props))

    def update(self, **changes: Any) -> Result[Self, str]:
        """New settings with changes applied, re-validated."""
        merged = self.copy_with(**changes)
        return type(self).create(
            max_members=merged.max_members,
            max_teams=merged.max_teams,
            allow_member_invites=merged.allow_member_invites,
        )

    @property
    def max_members(self) -> int | None:
        return self._props.max_members

    @property
    def max_teams(self) -> int | None:
        return self._props.max_teams

    @property
    def allow_member_invites(self) -> bool:
        return self._props.allow_member_invites
