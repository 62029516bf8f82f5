"""Event bus factories and subscriptions.

The bus is NOT a singleton: every call to create_event_bus() returns a new,
empty InMemoryEventBus. The caller (application startup or a test) owns it
and passes it to use cases and subscribers explicitly.
"""

from typing import TYPE_CHECKING

from pling.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from pling.application.events.domain_event_publisher import DomainEventPublisher
    from pling.domain.protocols.event_bus_protocol import EventBusProtocol, Unsubscribe
    from pling.domain.protocols.logger_protocol import LoggerProtocol
    from pling.domain.protocols.notification_protocol import NotificationProtocol


def create_event_bus(logger: "LoggerProtocol | None" = None) -> "EventBusProtocol":
    """Build a new in-memory event bus.

    Args:
        logger: Logger for handler failures (default: container logger).

    Returns:
        Event bus implementing EventBusProtocol, with no subscriptions.
    """
    from pling.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    return InMemoryEventBus(logger=logger or get_logger())


def create_domain_event_publisher(
    event_bus: "EventBusProtocol",
    logger: "LoggerProtocol | None" = None,
) -> "DomainEventPublisher":
    from pling.application.events.domain_event_publisher import DomainEventPublisher

    return DomainEventPublisher(event_bus=event_bus, logger=logger or get_logger())


def register_event_handlers(
    event_bus: "EventBusProtocol",
    logger: "LoggerProtocol | None" = None,
    notifications: "NotificationProtocol | None" = None,
) -> list["Unsubscribe"]:
    """Wire the standard subscribers onto event_bus.

    Subscriptions:
        1. LoggingEventHandler for every event in EVENT_REGISTRY
        2. OrganizationNotificationHandler for NOTIFIED_EVENTS (only when a
           notification sender is given)

    Returns:
        Unsubscribe callables, in subscription order (teardown).
    """
    from pling.application.event_handlers.organization_notification_handler import (
        NOTIFIED_EVENTS,
        OrganizationNotificationHandler,
    )
    from pling.domain.events.registry import EVENT_REGISTRY
    from pling.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )

    logger = logger or get_logger()
    unsubscribers: list["Unsubscribe"] = []

    logging_handler = LoggingEventHandler(logger=logger)
    for event_class in EVENT_REGISTRY:
        unsubscribers.append(event_bus.subscribe(event_class, logging_handler.handle))

    if notifications is not None:
        notification_handler = OrganizationNotificationHandler(
            notifications=notifications, logger=logger
        )
        for event_class in NOTIFIED_EVENTS:
            unsubscribers.append(
                event_bus.subscribe(event_class, notification_handler.handle)
            )

    return unsubscribers
