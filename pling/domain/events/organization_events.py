"""Organization domain events.

One frozen dataclass per state transition of the Organization aggregate.
Every event carries the organization_id; subscribers ``match`` on the class
to reach the typed fields.

Events:
    - OrganizationCreated
    - OrganizationUpdated
    - MemberJoinedOrganization / MemberLeftOrganization
    - OrganizationMemberRoleChanged
    - MemberInvitedToOrganization
    - OrganizationInvitationAccepted / OrganizationInvitationDeclined
    - OrganizationInvitationsExpired
    - TeamAddedToOrganization / TeamRemovedFromOrganization
"""

from dataclasses import dataclass
from typing import ClassVar

from pling.domain.enums import OrganizationRoleType
from pling.domain.events.base_event import DomainEvent
from pling.domain.unique_id import UniqueId


@dataclass(frozen=True, kw_only=True, slots=True)
class OrganizationEvent(DomainEvent):
    """Common base for events raised by the Organization aggregate."""

    aggregate_type: ClassVar[str] = "organization"

    organization_id: UniqueId


@dataclass(frozen=True, kw_only=True, slots=True)
class OrganizationCreated(OrganizationEvent):
    """Organization created with its owner as first member."""

    owner_id: UniqueId
    organization_name: str


@dataclass(frozen=True, kw_only=True, slots=True)
class OrganizationUpdated(OrganizationEvent):
    """Name and/or settings changed.

    Attributes:
        organization_name: Name after the update.
        changed_fields: Names of the fields that were part of the update.
    """

    organization_name: str
    changed_fields: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True, slots=True)
class MemberJoinedOrganization(OrganizationEvent):
    user_id: UniqueId
    role: OrganizationRoleType


@dataclass(frozen=True, kw_only=True, slots=True)
class MemberLeftOrganization(OrganizationEvent):
    user_id: UniqueId


@dataclass(frozen=True, kw_only=True, slots=True)
class OrganizationMemberRoleChanged(OrganizationEvent):
    user_id: UniqueId
    old_role: OrganizationRoleType
    new_role: OrganizationRoleType


@dataclass(frozen=True, kw_only=True, slots=True)
class MemberInvitedToOrganization(OrganizationEvent):
    invitation_id: UniqueId
    user_id: UniqueId
    invited_by: UniqueId
    email: str


@dataclass(frozen=True, kw_only=True, slots=True)
class OrganizationInvitationAccepted(OrganizationEvent):
    invitation_id: UniqueId
    user_id: UniqueId


@dataclass(frozen=True, kw_only=True, slots=True)
class OrganizationInvitationDeclined(OrganizationEvent):
    invitation_id: UniqueId
    user_id: UniqueId


@dataclass(frozen=True, kw_only=True, slots=True)
class OrganizationInvitationsExpired(OrganizationEvent):
    invitation_ids: tuple[UniqueId, ...]


@dataclass(frozen=True, kw_only=True, slots=True)
class TeamAddedToOrganization(OrganizationEvent):
    team_id: UniqueId


@dataclass(frozen=True, kw_only=True, slots=True)
class TeamRemovedFromOrganization(OrganizationEvent):
    team_id: UniqueId
