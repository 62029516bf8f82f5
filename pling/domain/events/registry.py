"""Event registry: every concrete domain event the system publishes.

Used by the composition root to wire subscribers that observe all events
(logging) and by tests to check that every event class is routable.

Adding a new event:
    1. Define the frozen dataclass in ``<context>_events.py``
    2. Append the class here
"""

from pling.domain.events.base_event import DomainEvent
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

EVENT_REGISTRY: tuple[type[DomainEvent], ...] = (
    OrganizationCreated,
    OrganizationUpdated,
    MemberJoinedOrganization,
    MemberLeftOrganization,
    OrganizationMemberRoleChanged,
    MemberInvitedToOrganization,
    OrganizationInvitationAccepted,
    OrganizationInvitationDeclined,
    OrganizationInvitationsExpired,
    TeamAddedToOrganization,
    TeamRemovedFromOrganization,
)


def event_class_for(name: str) -> type[DomainEvent] | None:
    """Look up a registered event class by its routing name."""
    return next((cls for cls in EVENT_REGISTRY if cls.event_name() == name), None)
