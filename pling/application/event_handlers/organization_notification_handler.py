"""Organization notification handler.

Turns organization events into user notifications through the injected
NotificationProtocol. Delivery failures are logged and never propagate to
the event bus.

Architecture:
    - Application layer (reacts to domain events, no domain mutation)
    - Subscribed at container startup to NOTIFIED_EVENTS
    - One ``handle`` entry point; routing by ``match`` on the event class

Notifications:
    - MemberInvitedToOrganization -> invitee
    - MemberJoinedOrganization -> new member
    - OrganizationMemberRoleChanged -> affected member
    - MemberLeftOrganization -> removed member
"""

from pling.core.result import Failure
from pling.domain.events.base_event import DomainEvent
from pling.domain.events.organization_events import (
    MemberInvitedToOrganization,
    MemberJoinedOrganization,
    MemberLeftOrganization,
    OrganizationMemberRoleChanged,
)
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.protocols.notification_protocol import NotificationProtocol
from pling.domain.unique_id import UniqueId

NOTIFIED_EVENTS: tuple[type[DomainEvent], ...] = (
    MemberInvitedToOrganization,
    MemberJoinedOrganization,
    OrganizationMemberRoleChanged,
    MemberLeftOrganization,
)


class OrganizationNotificationHandler:
    """Event handler sending organization notifications.

    Attributes:
        _notifications: Notification sender (port).
        _logger: For delivery failures.

    Example:
        >>> handler = OrganizationNotificationHandler(notifications, logger)
        >>> for event_class in NOTIFIED_EVENTS:
        ...     event_bus.subscribe(event_class, handler.handle)
    """

    def __init__(self, notifications: NotificationProtocol, logger: LoggerProtocol) -> None:
        self._notifications = notifications
        self._logger = logger

    async def handle(self, event: DomainEvent) -> None:
        """Send the notification matching event (other events are ignored)."""
        match event:
            case MemberInvitedToOrganization(user_id=user_id):
                await self._send(
                    event,
                    user_id,
                    "Ny inbjudan",
                    "Du har blivit inbjuden till en organisation",
                )
            case MemberJoinedOrganization(user_id=user_id, role=role):
                await self._send(
                    event,
                    user_id,
                    "Välkommen",
                    f"Du är nu med i organisationen som {role.label.lower()}",
                )
            case OrganizationMemberRoleChanged(user_id=user_id, new_role=new_role):
                await self._send(
                    event,
                    user_id,
                    "Ny roll",
                    f"Din roll i organisationen är nu {new_role.label.lower()}",
                )
            case MemberLeftOrganization(user_id=user_id):
                await self._send(
                    event,
                    user_id,
                    "Medlemskap avslutat",
                    "Du är inte längre medlem i organisationen",
                )
            case _:
                return

    async def _send(
        self, event: DomainEvent, recipient_id: UniqueId, title: str, body: str
    ) -> None:
        sent = await self._notifications.notify(recipient_id, title, body)
        if isinstance(sent, Failure):
            self._logger.warning(
                "notification_failed",
                event_name=event.name,
                event_id=str(event.event_id),
                recipient_id=str(recipient_id),
                reason=sent.error,
            )
