"""Organization aggregate root.

An organization owns a set of memberships, the invitations it has sent and
the ids of the teams attached to it. Every mutation goes through
``AggregateRoot._apply`` so a change that would break an invariant is
rolled back without queuing an event.

Invariants (checked after every mutation):
    - a valid name is present
    - an owner is present, is a member, and holds the OWNER role
    - exactly one member holds the OWNER role
    - one membership per user
    - member count within settings.max_members
    - team ids are unique
    - team count within settings.max_teams

Usage:
    >>> result = Organization.create(name="Acme", owner_id=owner_id)
    >>> match result:
    ...     case Success(value=org):
    ...         org.add_member(user_id, "member")
    ...     case Failure(error=reason):
    ...         ...
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Any, Self

from pling.core.result import Failure, Result, Success
from pling.domain.aggregate_root import AggregateRoot
from pling.domain.enums import OrganizationPermission, OrganizationRoleType
from pling.domain.events.organization_events import (
    MemberInvitedToOrganization,
    MemberJoinedOrganization,
    MemberLeftOrganization,
    OrganizationCreated,
    OrganizationInvitationAccepted,
    OrganizationInvitationDeclined,
    OrganizationInvitationsExpired,
    OrganizationMemberRoleChanged,
    OrganizationUpdated,
    TeamAddedToOrganization,
    TeamRemovedFromOrganization,
)
from pling.domain.unique_id import UniqueId
from pling.domain.value_object import ValueObject
from pling.domain.value_objects import (
    OrganizationInvitation,
    OrganizationMember,
    OrganizationName,
    OrganizationRole,
    OrgSettings,
)
from pling.domain.value_objects.organization_invitation import DEFAULT_EXPIRY_DAYS


class OrganizationError:
    """Organization business rule messages."""

    NAME_MISSING = "Organisationen måste ha ett namn"
    OWNER_MISSING = "Organisationen måste ha en ägare"
    OWNER_NOT_MEMBER = "Ägaren måste vara medlem med ägarrollen"
    SINGLE_OWNER = "Organisationen kan bara ha en ägare"
    DUPLICATE_MEMBERSHIP = "Varje användare får bara ha ett medlemskap"
    MEMBER_LIMIT_EXCEEDED = "Antalet medlemmar överskrider medlemsgränsen"
    DUPLICATE_TEAM = "Ett team får bara vara kopplat en gång"
    TEAM_LIMIT_EXCEEDED = "Antalet team överskrider teamgränsen"

    ALREADY_MEMBER = "Användaren är redan medlem i organisationen"
    NOT_MEMBER = "Användaren är inte medlem i organisationen"
    MEMBER_LIMIT_REACHED = "Organisationen har nått sin medlemsgräns"
    TEAM_LIMIT_REACHED = "Organisationen har nått sin teamgräns"
    OWNER_CANNOT_BE_REMOVED = "Ägaren kan inte tas bort från organisationen"
    OWNER_ROLE_LOCKED = "Ägarens roll kan inte ändras"
    ROLE_UNCHANGED = "Medlemmen har redan denna roll"
    INVITATION_EXISTS = "Det finns redan en aktiv inbjudan för denna användare"
    INVITATION_NOT_FOUND = "Inbjudan hittades inte"
    INVITATION_USER_MISMATCH = "Användaren matchar inte inbjudan"
    TEAM_ALREADY_ADDED = "Teamet är redan kopplat till organisationen"
    TEAM_NOT_FOUND = "Teamet är inte kopplat till organisationen"
    NOTHING_TO_UPDATE = "Inga ändringar angavs"


@dataclass(frozen=True, slots=True)
class OrganizationProps:
    name: OrganizationName
    owner_id: UniqueId
    settings: OrgSettings
    created_at: datetime
    updated_at: datetime
    members: tuple[OrganizationMember, ...] = ()
    invitations: tuple[OrganizationInvitation, ...] = ()
    team_ids: tuple[UniqueId, ...] = ()


def _now() -> datetime:
    return datetime.now(UTC)


class Organization(AggregateRoot[OrganizationProps]):
    """Organization aggregate (memberships, invitations, teams).

    Built through ``create`` (new) or by a repository through
    ``_reconstitute`` (persisted).
    """

    @classmethod
    def create(
        cls,
        name: str,
        owner_id: "str | UniqueId",
        settings: OrgSettings | None = None,
        id: "str | UniqueId | None" = None,
    ) -> Result[Self, str]:
        """Create an organization with its owner as the first member.

        Args:
            name: Display name (trimmed, 2-100 characters).
            owner_id: Owning user; becomes a member with the OWNER role.
            settings: Plan limits (defaults to the basic plan).
            id: Existing id (default generated).

        Returns:
            Success(organization) with OrganizationCreated queued, or
            Failure(reason).
        """
        name_result = OrganizationName.create(name)
        if isinstance(name_result, Failure):
            return name_result

        owner = UniqueId(owner_id)
        now = _now()
        owner_member = OrganizationMember.create(owner, OrganizationRole.OWNER, now)
        if isinstance(owner_member, Failure):
            return Failure(error=f"Kunde inte skapa ägarmedlemskap: {owner_member.error}")

        if settings is None:
            default_settings = OrgSettings.create()
            if isinstance(default_settings, Failure):
                return default_settings
            settings = default_settings.value

        organization = cls._new(
            OrganizationProps(
                name=name_result.value,
                owner_id=owner,
                settings=settings,
                created_at=now,
                updated_at=now,
                members=(owner_member.value,),
            ),
            UniqueId(id),
        )
        check = organization.validate_invariants()
        if isinstance(check, Failure):
            return check

        organization._record_event(
            OrganizationCreated(
                organization_id=organization.id,
                owner_id=owner,
                organization_name=name_result.value.value,
            )
        )
        return Success(value=organization)

    # -------------------------------------------------------------------------
    # Read model
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._props.name.value

    @property
    def owner_id(self) -> UniqueId:
        return self._props.owner_id

    @property
    def settings(self) -> OrgSettings:
        return self._props.settings

    @property
    def members(self) -> tuple[OrganizationMember, ...]:
        return self._props.members

    @property
    def invitations(self) -> tuple[OrganizationInvitation, ...]:
        return self._props.invitations

    @property
    def team_ids(self) -> tuple[UniqueId, ...]:
        return self._props.team_ids

    @property
    def created_at(self) -> datetime:
        return self._props.created_at

    @property
    def updated_at(self) -> datetime:
        return self._props.updated_at

    @property
    def member_count(self) -> int:
        return len(self._props.members)

    def get_member(self, user_id: "str | UniqueId") -> OrganizationMember | None:
        target = UniqueId(user_id)
        return next((m for m in self._props.members if m.user_id == target), None)

    def is_member(self, user_id: "str | UniqueId") -> bool:
        return self.get_member(user_id) is not None

    def has_member_permission(
        self, user_id: "str | UniqueId", permission: OrganizationPermission
    ) -> bool:
        member = self.get_member(user_id)
        return member is not None and member.has_permission(permission)

    def pending_invitations(self) -> tuple[OrganizationInvitation, ...]:
        return tuple(i for i in self._props.invitations if i.is_pending())

    # -------------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------------

    def validate_invariants(self) -> Result[None, str]:
        props = self._props
        user_ids = [m.user_id for m in props.members]
        owners = [m for m in props.members if m.role.is_owner]
        max_members = props.settings.max_members
        max_teams = props.settings.max_teams

        return ValueObject.validate(
            [
                (isinstance(props.name, OrganizationName), OrganizationError.NAME_MISSING),
                (isinstance(props.owner_id, UniqueId), OrganizationError.OWNER_MISSING),
                (
                    lambda: any(m.user_id == props.owner_id for m in owners),
                    OrganizationError.OWNER_NOT_MEMBER,
                ),
                (len(owners) == 1, OrganizationError.SINGLE_OWNER),
                (len(set(user_ids)) == len(user_ids), OrganizationError.DUPLICATE_MEMBERSHIP),
                (
                    max_members is None or len(props.members) <= max_members,
                    OrganizationError.MEMBER_LIMIT_EXCEEDED,
                ),
                (
                    len(set(props.team_ids)) == len(props.team_ids),
                    OrganizationError.DUPLICATE_TEAM,
                ),
                (
                    max_teams is None or len(props.team_ids) <= max_teams,
                    OrganizationError.TEAM_LIMIT_EXCEEDED,
                ),
            ]
        )

    # -------------------------------------------------------------------------
    # Organization details
    # -------------------------------------------------------------------------

    def update(
        self,
        name: str | None = None,
        settings: Mapping[str, Any] | None = None,
    ) -> Result[None, str]:
        """Rename and/or change settings.

        Args:
            name: New name (validated like create).
            settings: OrgSettings fields to change, e.g. ``{"max_members": 10}``.

        Returns:
            Success(None) with OrganizationUpdated queued, or Failure. Lowering
            a limit below current usage is rejected by the invariants.
        """
        if name is None and not settings:
            return Failure(error=OrganizationError.NOTHING_TO_UPDATE)

        new_name = self._props.name
        if name is not None:
            name_result = OrganizationName.create(name)
            if isinstance(name_result, Failure):
                return name_result
            new_name = name_result.value

        new_settings = self._props.settings
        if settings:
            settings_result = new_settings.update(**settings)
            if isinstance(settings_result, Failure):
                return Failure(
                    error=f"Kunde inte uppdatera inställningar: {settings_result.error}"
                )
            new_settings = settings_result.value

        changed = tuple(
            field
            for field, given in (("name", name is not None), ("settings", bool(settings)))
            if given
        )
        return self._apply(
            lambda p: replace(p, name=new_name, settings=new_settings, updated_at=_now()),
            lambda: OrganizationUpdated(
                organization_id=self.id, organization_name=self.name, changed_fields=changed
            ),
        )

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    def add_member(
        self,
        user_id: "str | UniqueId",
        role: "str | OrganizationRoleType | OrganizationRole" = OrganizationRole.MEMBER,
    ) -> Result[None, str]:
        """Add a user directly (no invitation).

        Returns:
            Success(None) with MemberJoinedOrganization queued, or Failure with
            state unchanged (duplicate user, limit reached, invalid role).
        """
        if self.is_member(user_id):
            return Failure(error=OrganizationError.ALREADY_MEMBER)
        max_members = self._props.settings.max_members
        if max_members is not None and self.member_count >= max_members:
            return Failure(error=OrganizationError.MEMBER_LIMIT_REACHED)

        member_result = OrganizationMember.create(user_id, role, _now())
        if isinstance(member_result, Failure):
            return member_result
        member = member_result.value

        return self._apply(
            lambda p: replace(p, members=(*p.members, member), updated_at=_now()),
            lambda: MemberJoinedOrganization(
                organization_id=self.id, user_id=member.user_id, role=member.role.value
            ),
        )

    def remove_member(self, user_id: "str | UniqueId") -> Result[None, str]:
        target = UniqueId(user_id)
        if target == self._props.owner_id:
            return Failure(error=OrganizationError.OWNER_CANNOT_BE_REMOVED)
        if not self.is_member(target):
            return Failure(error=OrganizationError.NOT_MEMBER)

        return self._apply(
            lambda p: replace(
                p,
                members=tuple(m for m in p.members if m.user_id != target),
                updated_at=_now(),
            ),
            lambda: MemberLeftOrganization(organization_id=self.id, user_id=target),
        )

    def update_member_role(
        self,
        user_id: "str | UniqueId",
        role: "str | OrganizationRoleType | OrganizationRole",
    ) -> Result[None, str]:
        """Change a member's role.

        The owner's role is locked and the OWNER role cannot be granted here
        (the single-owner invariant rejects it).
        """
        member = self.get_member(user_id)
        if member is None:
            return Failure(error=OrganizationError.NOT_MEMBER)
        if member.user_id == self._props.owner_id:
            return Failure(error=OrganizationError.OWNER_ROLE_LOCKED)

        updated_result = OrganizationRole.create(role).and_then(member.with_role)
        if isinstance(updated_result, Failure):
            return Failure(error=f"Kunde inte uppdatera medlemsroll: {updated_result.error}")
        updated = updated_result.value
        if updated.role == member.role:
            return Failure(error=OrganizationError.ROLE_UNCHANGED)

        return self._apply(
            lambda p: replace(
                p,
                members=tuple(updated if m.user_id == member.user_id else m for m in p.members),
                updated_at=_now(),
            ),
            lambda: OrganizationMemberRoleChanged(
                organization_id=self.id,
                user_id=member.user_id,
                old_role=member.role.value,
                new_role=updated.role.value,
            ),
        )

    # -------------------------------------------------------------------------
    # Invitations
    # -------------------------------------------------------------------------

    def invite_user(
        self,
        user_id: "str | UniqueId",
        email: str,
        invited_by: "str | UniqueId",
        role: "str | OrganizationRoleType | OrganizationRole" = OrganizationRole.MEMBER,
        expiry_days: int = DEFAULT_EXPIRY_DAYS,
    ) -> Result[None, str]:
        """Send an invitation.

        Pending invitations count towards the member limit.

        Returns:
            Success(None) with MemberInvitedToOrganization queued, or Failure.
        """
        target = UniqueId(user_id)
        if any(i.user_id == target for i in self.pending_invitations()):
            return Failure(error=OrganizationError.INVITATION_EXISTS)
        if self.is_member(target):
            return Failure(error=OrganizationError.ALREADY_MEMBER)
        max_members = self._props.settings.max_members
        if (
            max_members is not None
            and self.member_count + len(self.pending_invitations()) >= max_members
        ):
            return Failure(error=OrganizationError.MEMBER_LIMIT_REACHED)

        invitation_result = OrganizationRole.create(role).and_then(
            lambda parsed: OrganizationInvitation.create(
                organization_id=self.id,
                user_id=target,
                invited_by=invited_by,
                email=email,
                role=parsed,
                created_at=_now(),
                expiry_days=expiry_days,
            )
        )
        if isinstance(invitation_result, Failure):
            return Failure(error=f"Kunde inte skapa inbjudan: {invitation_result.error}")
        invitation = invitation_result.value

        return self._apply(
            lambda p: replace(
                p, invitations=(*p.invitations, invitation), updated_at=_now()
            ),
            lambda: MemberInvitedToOrganization(
                organization_id=self.id,
                invitation_id=invitation.id,
                user_id=invitation.user_id,
                invited_by=invitation.invited_by,
                email=invitation.email,
            ),
        )

    def _find_invitation_for(
        self, invitation_id: "str | UniqueId", user_id: "str | UniqueId"
    ) -> Result[OrganizationInvitation, str]:
        wanted = UniqueId(invitation_id)
        invitation = next((i for i in self._props.invitations if i.id == wanted), None)
        if invitation is None:
            return Failure(error=OrganizationError.INVITATION_NOT_FOUND)
        if invitation.user_id != UniqueId(user_id):
            return Failure(error=OrganizationError.INVITATION_USER_MISMATCH)
        return Success(value=invitation)

    def _replace_invitation(
        self, props: OrganizationProps, updated: OrganizationInvitation
    ) -> tuple[OrganizationInvitation, ...]:
        return tuple(updated if i.id == updated.id else i for i in props.invitations)

    def accept_invitation(
        self, invitation_id: "str | UniqueId", user_id: "str | UniqueId"
    ) -> Result[None, str]:
        """Accept an invitation; the invitee joins with the invited role.

        Queues OrganizationInvitationAccepted then MemberJoinedOrganization.
        """
        found = self._find_invitation_for(invitation_id, user_id)
        if isinstance(found, Failure):
            return found
        invitation = found.value

        accepted_result = invitation.accept()
        if isinstance(accepted_result, Failure):
            return accepted_result
        accepted = accepted_result.value

        if self.is_member(accepted.user_id):
            return Failure(error=OrganizationError.ALREADY_MEMBER)
        member_result = OrganizationMember.create(
            accepted.user_id, accepted.role, accepted.responded_at
        )
        if isinstance(member_result, Failure):
            return Failure(error=f"Kunde inte skapa medlem: {member_result.error}")
        member = member_result.value

        return self._apply(
            lambda p: replace(
                p,
                members=(*p.members, member),
                invitations=self._replace_invitation(p, accepted),
                updated_at=_now(),
            ),
            lambda: (
                OrganizationInvitationAccepted(
                    organization_id=self.id,
                    invitation_id=accepted.id,
                    user_id=accepted.user_id,
                ),
                MemberJoinedOrganization(
                    organization_id=self.id,
                    user_id=member.user_id,
                    role=member.role.value,
                ),
            ),
        )

    def decline_invitation(
        self, invitation_id: "str | UniqueId", user_id: "str | UniqueId"
    ) -> Result[None, str]:
        found = self._find_invitation_for(invitation_id, user_id)
        if isinstance(found, Failure):
            return found

        declined_result = found.value.decline()
        if isinstance(declined_result, Failure):
            return declined_result
        declined = declined_result.value

        return self._apply(
            lambda p: replace(
                p, invitations=self._replace_invitation(p, declined), updated_at=_now()
            ),
            lambda: OrganizationInvitationDeclined(
                organization_id=self.id,
                invitation_id=declined.id,
                user_id=declined.user_id,
            ),
        )

    def remove_invitation(self, invitation_id: "str | UniqueId") -> Result[None, str]:
        """Withdraw an invitation (no event)."""
        wanted = UniqueId(invitation_id)
        if not any(i.id == wanted for i in self._props.invitations):
            return Failure(error=OrganizationError.INVITATION_NOT_FOUND)

        return self._apply(
            lambda p: replace(
                p,
                invitations=tuple(i for i in p.invitations if i.id != wanted),
                updated_at=_now(),
            )
        )

    def expire_invitations(self, now: datetime | None = None) -> Result[None, str]:
        """Mark pending invitations past their expiry as EXPIRED.

        Queues one OrganizationInvitationsExpired listing the affected ids,
        or nothing when no invitation was due.
        """
        moment = now or _now()
        due = [i for i in self._props.invitations if i.is_pending() and i.is_expired(moment)]
        if not due:
            return Success(value=None)

        expired: dict[UniqueId, OrganizationInvitation] = {}
        for invitation in due:
            expired_result = invitation.expire()
            if isinstance(expired_result, Failure):
                return expired_result
            expired[invitation.id] = expired_result.value

        return self._apply(
            lambda p: replace(
                p,
                invitations=tuple(expired.get(i.id, i) for i in p.invitations),
                updated_at=_now(),
            ),
            lambda: OrganizationInvitationsExpired(
                organization_id=self.id, invitation_ids=tuple(expired)
            ),
        )

    # -------------------------------------------------------------------------
    # Teams
    # -------------------------------------------------------------------------

    def add_team(self, team_id: "str | UniqueId") -> Result[None, str]:
        team = UniqueId(team_id)
        if team in self._props.team_ids:
            return Failure(error=OrganizationError.TEAM_ALREADY_ADDED)
        max_teams = self._props.settings.max_teams
        if max_teams is not None and len(self._props.team_ids) >= max_teams:
            return Failure(error=OrganizationError.TEAM_LIMIT_REACHED)

        return self._apply(
            lambda p: replace(p, team_ids=(*p.team_ids, team), updated_at=_now()),
            lambda: TeamAddedToOrganization(organization_id=self.id, team_id=team),
        )

    def remove_team(self, team_id: "str | UniqueId") -> Result[None, str]:
        team = UniqueId(team_id)
        if team not in self._props.team_ids:
            return Failure(error=OrganizationError.TEAM_NOT_FOUND)

        return self._apply(
            lambda p: replace(
                p, team_ids=tuple(t for t in p.team_ids if t != team), updated_at=_now()
            ),
            lambda: TeamRemovedFromOrganization(organization_id=self.id, team_id=team),
        )
