"""Organization commands and queries (use case inputs).

Commands represent user intent to change system state; queries ask for a
read model. All are immutable (frozen=True) and keyword-only (kw_only=True).

Pattern:
- Inputs are data containers (no logic)
- Identifiers arrive as raw strings from the presentation layer; blank
  values are rejected by the use case before any repository call
- ``actor_id`` is the user performing the operation (permission checks)
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateOrganization:
    """Create an organization owned by owner_id.

    Attributes:
        name: Display name (2-100 characters after trimming).
        owner_id: Owning user; becomes the first member.
        max_members: Member limit; defaults to the configured plan limit.
        max_teams: Team limit; defaults to the configured plan limit.
    """

    name: str
    owner_id: str
    max_members: int | None = None
    max_teams: int | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateOrganization:
    """Rename an organization and/or change its settings.

    Only the fields that are not None are changed.
    """

    organization_id: str
    actor_id: str
    name: str | None = None
    max_members: int | None = None
    max_teams: int | None = None
    allow_member_invites: bool | None = None


@dataclass(frozen=True, kw_only=True)
class AddOrganizationMember:
    organization_id: str
    actor_id: str
    user_id: str
    role: str = "member"


@dataclass(frozen=True, kw_only=True)
class RemoveOrganizationMember:
    """Remove user_id; a member may always remove themselves (leave)."""

    organization_id: str
    actor_id: str
    user_id: str


@dataclass(frozen=True, kw_only=True)
class ChangeMemberRole:
    organization_id: str
    actor_id: str
    user_id: str
    role: str


@dataclass(frozen=True, kw_only=True)
class InviteToOrganization:
    """Invite user_id (reachable at email) to join.

    Attributes:
        role: Role granted on acceptance (never "owner").
    """

    organization_id: str
    actor_id: str
    user_id: str
    email: str
    role: str = "member"


@dataclass(frozen=True, kw_only=True)
class RespondToInvitation:
    """Accept (accept=True) or decline an invitation as the invitee."""

    organization_id: str
    invitation_id: str
    user_id: str
    accept: bool


@dataclass(frozen=True, kw_only=True)
class AddTeamToOrganization:
    organization_id: str
    actor_id: str
    team_id: str


@dataclass(frozen=True, kw_only=True)
class RemoveTeamFromOrganization:
    organization_id: str
    actor_id: str
    team_id: str


@dataclass(frozen=True, kw_only=True)
class GetOrganization:
    organization_id: str


@dataclass(frozen=True, kw_only=True)
class ListUserOrganizations:
    user_id: str
