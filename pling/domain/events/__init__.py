"""Domain events.

Frozen dataclasses describing state transitions, one class per event name.
"""

from pling.domain.events.base_event import DomainEvent
from pling.domain.events.organization_events import (
    MemberInvitedToOrganization,
    MemberJoinedOrganization,
    MemberLeftOrganization,
    OrganizationCreated,
    OrganizationEvent,
    OrganizationInvitationAccepted,
    OrganizationInvitationDeclined,
    OrganizationInvitationsExpired,
    OrganizationMemberRoleChanged,
    OrganizationUpdated,
    TeamAddedToOrganization,
    TeamRemovedFromOrganization,
)
from pling.domain.events.registry import EVENT_REGISTRY, event_class_for

__all__ = [
    "DomainEvent",
    "EVENT_REGISTRY",
    "MemberInvitedToOrganization",
    "MemberJoinedOrganization",
    "MemberLeftOrganization",
    "OrganizationCreated",
    "OrganizationEvent",
    "OrganizationInvitationAccepted",
    "OrganizationInvitationDeclined",
    "OrganizationInvitationsExpired",
    "OrganizationMemberRoleChanged",
    "OrganizationUpdated",
    "TeamAddedToOrganization",
    "TeamRemovedFromOrganization",
    "event_class_for",
]
