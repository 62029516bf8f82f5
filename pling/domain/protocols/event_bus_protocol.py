"""Event bus protocol (port) for domain events.

This module defines the EventBusProtocol interface that all event bus
implementations must satisfy. The domain defines the port; infrastructure
provides the adapter.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters (in-memory today)
    - Container (pling/core/container/) builds a NEW bus per call; the bus
      is injected into use cases and subscribers, never imported as a global

Implementations:
    - InMemoryEventBus: pling/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> from pling.core.container import create_event_bus
    >>> from pling.domain.events import MemberJoinedOrganization
    >>>
    >>> event_bus = create_event_bus()
    >>>
    >>> async def welcome(event: MemberJoinedOrganization) -> None:
    ...     print(f"Welcome {event.user_id}")
    >>>
    >>> unsubscribe = event_bus.subscribe(MemberJoinedOrganization, welcome)
    >>> await event_bus.publish(event)
    >>> unsubscribe()
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from pling.domain.events.base_event import DomainEvent

# Type alias for event handler functions (async or plain callables)
EventHandler = Callable[[Any], Awaitable[None] | None]
"""Type alias for event handler functions.

Event handlers must:
    - Accept a single DomainEvent parameter (or a specific event subclass)
    - Return None (side-effects only)
    - Be either ``async def`` or a plain function

Example:
    >>> async def log_event(event: DomainEvent) -> None:
    ...     logger.info("event_received", event_name=event.name)
    >>>
    >>> def count(event: DomainEvent) -> None:
    ...     counter[event.name] += 1
"""

# Returned by subscribe(); calling it again is a no-op
Unsubscribe = Callable[[], None]

# Event class or its routing name
EventKey = type[DomainEvent] | str


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing. Log errors but continue processing.
        2. **Name routing**: Handlers are registered per event name; a class
           key is normalized to its name.
        3. **FIFO, sequential**: Handlers run one after another in
           registration order.
        4. **Snapshot**: publish() iterates over the handler list as it was
           when publish() started; (un)subscribing mid-dispatch only affects
           later publishes.
        5. **Thread-safe registry**: subscribe/unsubscribe/publish may be
           called from several threads.

    Methods:
        subscribe: Register handler, get an unsubscribe callable back
        publish: Deliver event to the handlers registered for its name
        handler_count: Number of handlers for an event
        clear: Drop every subscription
    """

    def subscribe(self, event: EventKey, handler: EventHandler) -> Unsubscribe:
        """Register event handler for an event class or name.

        Multiple handlers may subscribe to the same event; the same handler
        registered twice is invoked twice.

        Args:
            event: Event class (e.g. MemberJoinedOrganization) or its name.
            handler: Callable receiving the event.

        Returns:
            Callable that removes this registration (idempotent).
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Flow:
            1. Snapshot handlers registered for event.name
            2. Invoke each in registration order (await async handlers)
            3. Log any handler exception (fail-open) and continue
            4. Return (never raise exceptions to publisher)

        Notes:
            - No handlers = no-op (not an error)
            - No retries; delivery is at most once per publish call
        """
        ...

    def handler_count(self, event: EventKey) -> int:
        """Number of handlers currently registered for event."""
        ...

    def clear(self) -> None:
        """Remove every subscription (teardown, tests)."""
        ...
