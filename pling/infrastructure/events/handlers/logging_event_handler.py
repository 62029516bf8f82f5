"""Logging event handler for domain events.

Logs every registered domain event at INFO level with its routing name, id
and plain-data payload. Subscribed to each class in EVENT_REGISTRY by the
container.

Structured Fields:
    - event_name: Event class name (e.g., "MemberJoinedOrganization")
    - event_id: UUID for event correlation and deduplication
    - occurred_at: ISO 8601 timestamp (UTC)
    - aggregate_type: Aggregate the event belongs to
    - payload: Event-specific fields (identifiers as strings)

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> for event_class in EVENT_REGISTRY:
    ...     event_bus.subscribe(event_class, logging_handler.handle)
"""

from pling.domain.events.base_event import DomainEvent
from pling.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle(self, event: DomainEvent) -> None:
        """Log any domain event (INFO level).

        Args:
            event: Published domain event.
        """
        self._logger.info(
            "domain_event",
            event_name=event.name,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_type=event.aggregate_type,
            payload=event.payload,
        )
