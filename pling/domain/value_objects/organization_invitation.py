"""OrganizationInvitation value object.

An invitation for a user to join an organization. Invitations are immutable:
accept(), decline() and expire() return a new invitation in the target
state, re-validated through the same rules as create().

State machine:
    PENDING --accept--> ACCEPTED
    PENDING --decline--> DECLINED
    PENDING --expire/time--> EXPIRED

Email addresses are validated and normalized with email-validator (no
deliverability check).
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Self

from email_validator import EmailNotValidError, validate_email

from pling.core.result import Failure, Result
from pling.domain.enums import InvitationStatus, OrganizationRoleType
from pling.domain.unique_id import UniqueId
from pling.domain.value_object import ValueObject
from pling.domain.value_objects.organization_role import OrganizationRole

DEFAULT_EXPIRY_DAYS = 7

INVITATION_EXPIRED = "Inbjudan har löpt ut"
INVITATION_NOT_PENDING = "Inbjudan är inte längre giltig"


@dataclass(frozen=True, slots=True)
class OrganizationInvitationProps:
    id: UniqueId
    organization_id: UniqueId
    user_id: UniqueId
    invited_by: UniqueId
    email: str
    role: OrganizationRole
    status: InvitationStatus
    created_at: datetime
    expires_at: datetime
    responded_at: datetime | None = None


class OrganizationInvitation(ValueObject[OrganizationInvitationProps]):
    """Pending or answered invitation to an organization."""

    @classmethod
    def create(
        cls,
        *,
        organization_id: "str | UniqueId",
        user_id: "str | UniqueId",
        invited_by: "str | UniqueId",
        email: str,
        role: OrganizationRole | None = None,
        created_at: datetime | None = None,
        expires_at: datetime | None = None,
        expiry_days: int = DEFAULT_EXPIRY_DAYS,
        id: "str | UniqueId | None" = None,
    ) -> Result[Self, str]:
        """Create a new PENDING invitation.

        Args:
            organization_id: Inviting organization.
            user_id: Invited user.
            invited_by: Member who sent the invitation.
            email: Invitee address (validated, normalized).
            role: Role granted on acceptance (default MEMBER, never OWNER or
                INVITED).
            created_at: Creation time (default now, UTC).
            expires_at: Explicit expiry; defaults to created_at + expiry_days.
            expiry_days: Used when expires_at is not given.
            id: Existing invitation id (default generated).

        Returns:
            Success(invitation) or Failure(reason).
        """
        try:
            normalized_email = validate_email(
                email, check_deliverability=False
            ).normalized
        except (EmailNotValidError, TypeError) as e:
            return Failure(error=f"Ogiltig e-postadress: {e}")

        created = created_at or datetime.now(UTC)
        props = OrganizationInvitationProps(
            id=UniqueId(id),
            organization_id=UniqueId(organization_id),
            user_id=UniqueId(user_id),
            invited_by=UniqueId(invited_by),
            email=normalized_email,
            role=role or OrganizationRole.MEMBER,
            status=InvitationStatus.PENDING,
            created_at=created,
            expires_at=expires_at or created + timedelta(days=expiry_days),
        )
        return cls._checked(props)

    @classmethod
    def _checked(cls, props: OrganizationInvitationProps) -> Result[Self, str]:
        return cls.validate(
            [
                (
                    props.role.value is not OrganizationRoleType.OWNER,
                    "Ägarrollen kan inte tilldelas via inbjudan",
                ),
                (
                    props.role.value is not OrganizationRoleType.INVITED,
                    "En inbjudan måste ge en medlemsroll",
                ),
                (
                    props.created_at.tzinfo is not None
                    and props.expires_at.tzinfo is not None,
                    "Inbjudans tidpunkter måste ha tidszon",
                ),
                (
                    lambda: props.status
                    not in {InvitationStatus.ACCEPTED, InvitationStatus.DECLINED}
                    or props.responded_at is not None,
                    "En besvarad inbjudan måste ha svarstidpunkt",
                ),
            ]
        ).map(lambda _: cls._from_props(props))

    def _transition(self, **changes: Any) -> Result[Self, str]:
        return type(self)._checked(self.copy_with(**changes))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def id(self) -> UniqueId:
        return self._props.id

    @property
    def organization_id(self) -> UniqueId:
        return self._props.organization_id

    @property
    def user_id(self) -> UniqueId:
        return self._props.user_id

    @property
    def invited_by(self) -> UniqueId:
        return self._props.invited_by

    @property
    def email(self) -> str:
        return self._props.email

    @property
    def role(self) -> OrganizationRole:
        return self._props.role

    @property
    def status(self) -> InvitationStatus:
        return self._props.status

    @property
    def created_at(self) -> datetime:
        return self._props.created_at

    @property
    def expires_at(self) -> datetime:
        return self._props.expires_at

    @property
    def responded_at(self) -> datetime | None:
        return self._props.responded_at

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def is_pending(self) -> bool:
        return self._props.status is InvitationStatus.PENDING

    def is_accepted(self) -> bool:
        return self._props.status is InvitationStatus.ACCEPTED

    def is_declined(self) -> bool:
        return self._props.status is InvitationStatus.DECLINED

    def is_expired(self, now: datetime | None = None) -> bool:
        """Expired by status, or pending past its expiry time."""
        if self._props.status is InvitationStatus.EXPIRED:
            return True
        return self.is_pending() and self._props.expires_at <= (now or datetime.now(UTC))

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def accept(self) -> Result[Self, str]:
        return self._respond(InvitationStatus.ACCEPTED)

    def decline(self) -> Result[Self, str]:
        return self._respond(InvitationStatus.DECLINED)

    def expire(self) -> Result[Self, str]:
        if not self.is_pending():
            return Failure(error=INVITATION_NOT_PENDING)
        return self._transition(status=InvitationStatus.EXPIRED)

    def _respond(self, status: InvitationStatus) -> Result[Self, str]:
        now = datetime.now(UTC)
        if self.is_expired(now):
            return Failure(error=INVITATION_EXPIRED)
        if not self.is_pending():
            return Failure(error=INVITATION_NOT_PENDING)
        return self._transition(status=status, responded_at=now)

    def __str__(self) -> str:
        return f"{self._props.email} ({self._props.status.value})"

