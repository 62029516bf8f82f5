"""Organization DTOs (Data Transfer Objects).

Response dataclasses returned by the organization use cases. They carry
plain data (strings, ints, datetimes) to the presentation layer, which never
sees aggregates or value objects.

DTOs:
    - MemberDTO: One membership
    - InvitationDTO: One invitation
    - OrganizationDTO: Organization read model
"""

from dataclasses import dataclass
from datetime import datetime

from pling.domain.entities.organization import Organization
from pling.domain.value_objects import OrganizationInvitation, OrganizationMember


@dataclass(frozen=True, kw_only=True)
class MemberDTO:
    """Membership of one user.

    Attributes:
        user_id: Member's user id.
        role: Role name ("owner", "admin", "member").
        role_label: Display label (Swedish).
        joined_at: When the membership started (UTC).
    """

    user_id: str
    role: str
    role_label: str
    joined_at: datetime

    @classmethod
    def from_member(cls, member: OrganizationMember) -> "MemberDTO":
        return cls(
            user_id=str(member.user_id),
            role=str(member.role),
            role_label=member.role.label,
            joined_at=member.joined_at,
        )


@dataclass(frozen=True, kw_only=True)
class InvitationDTO:
    """Invitation to an organization.

    Attributes:
        status: "pending", "accepted", "declined" or "expired".
        responded_at: Set once accepted or declined.
    """

    id: str
    organization_id: str
    user_id: str
    invited_by: str
    email: str
    role: str
    status: str
    created_at: datetime
    expires_at: datetime
    responded_at: datetime | None = None

    @classmethod
    def from_invitation(cls, invitation: OrganizationInvitation) -> "InvitationDTO":
        return cls(
            id=str(invitation.id),
            organization_id=str(invitation.organization_id),
            user_id=str(invitation.user_id),
            invited_by=str(invitation.invited_by),
            email=invitation.email,
            role=str(invitation.role),
            status=invitation.status.value,
            created_at=invitation.created_at,
            expires_at=invitation.expires_at,
            responded_at=invitation.responded_at,
        )


@dataclass(frozen=True, kw_only=True)
class OrganizationDTO:
    """Organization read model.

    Attributes:
        id: Organization id.
        name: Display name.
        owner_id: Owning user.
        members: Memberships in join order.
        pending_invitations: Invitations still awaiting an answer.
        team_ids: Attached teams.
        max_members: Member limit (None = unlimited).
        max_teams: Team limit (None = unlimited).
        allow_member_invites: Whether plain members may invite.
        version: Persistence version (optimistic concurrency).
        created_at: Creation time (UTC).
        updated_at: Last change (UTC).
    """

    id: str
    name: str
    owner_id: str
    members: tuple[MemberDTO, ...]
    pending_invitations: tuple[InvitationDTO, ...]
    team_ids: tuple[str, ...]
    max_members: int | None
    max_teams: int | None
    allow_member_invites: bool
    version: int
    created_at: datetime
    updated_at: datetime

    @property
    def member_count(self) -> int:
        return len(self.members)

    @classmethod
    def from_entity(cls, organization: Organization) -> "OrganizationDTO":
        """Map an Organization aggregate to its read model."""
        return cls(
            id=str(organization.id),
            name=organization.name,
            owner_id=str(organization.owner_id),
            members=tuple(MemberDTO.from_member(m) for m in organization.members),
            pending_invitations=tuple(
                InvitationDTO.from_invitation(i)
                for i in organization.pending_invitations()
            ),
            team_ids=tuple(str(t) for t in organization.team_ids),
            max_members=organization.settings.max_members,
            max_teams=organization.settings.max_teams,
            allow_member_invites=organization.settings.allow_member_invites,
            version=organization.version,
            created_at=organization.created_at,
            updated_at=organization.updated_at,
        )
