"""In-memory event bus implementation.

This module implements the EventBusProtocol using an in-memory dictionary-based
registry keyed by event name. One instance is built per composition root (or
per test) and injected where needed; there is no process-wide bus.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event name -> list of registrations)
    - Registry guarded by a threading.Lock
    - Sequential FIFO handler execution over a snapshot of the registry
    - Fail-open behavior (one handler failure doesn't break others)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> unsubscribe = bus.subscribe(OrganizationCreated, log_created)
    >>> await bus.publish(OrganizationCreated(organization_id=..., ...))
    >>> unsubscribe()
"""

import inspect
import threading
from collections import defaultdict
from dataclasses import dataclass

from pling.domain.events.base_event import DomainEvent
from pling.domain.protocols.event_bus_protocol import (
    EventHandler,
    EventKey,
    Unsubscribe,
)
from pling.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(eq=False, slots=True)
class _Registration:
    """One subscribe() call (identity distinguishes duplicate handlers)."""

    handler: EventHandler


def _event_name(event: EventKey) -> str:
    return event if isinstance(event, str) else event.event_name()


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        - subscribe, unsubscribe, publish, handler_count and clear take the
          registry lock; handlers run outside it
        - publish() copies the handler list under the lock, so a handler that
          (un)subscribes during dispatch only affects later publishes

    Attributes:
        _handlers: Event name -> registrations in subscription order.
        _lock: Guards _handlers.
        _logger: Logger for handler failures and event publishing.

    Example:
        >>> bus = InMemoryEventBus(logger=logger)
        >>> bus.subscribe(MemberJoinedOrganization, send_welcome)
        >>> bus.subscribe("MemberJoinedOrganization", audit_join)
        >>> await bus.publish(event)  # send_welcome, then audit_join
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
        """
        self._handlers: dict[str, list[_Registration]] = defaultdict(list)
        self._lock = threading.Lock()
        self._logger = logger

    def subscribe(self, event: EventKey, handler: EventHandler) -> Unsubscribe:
        """Register handler for an event class or name.

        Args:
            event: Event class or its routing name.
            handler: Async or plain callable taking the event.

        Returns:
            Callable removing exactly this registration. Calling it more than
            once is a no-op.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        name = _event_name(event)
        registration = _Registration(handler=handler)
        with self._lock:
            self._handlers[name].append(registration)

        def unsubscribe() -> None:
            with self._lock:
                registrations = self._handlers.get(name)
                if registrations is None:
                    return
                for idx, candidate in enumerate(registrations):
                    if candidate is registration:
                        del registrations[idx]
                        break
                if not registrations:
                    del self._handlers[name]

        return unsubscribe

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all handlers registered for event.name.

        Flow:
            1. Snapshot handlers for event.name under the lock
            2. If none, return immediately (no-op)
            3. Invoke each handler in registration order, awaiting async ones
            4. Log any handler exception (warning level) and continue
            5. Return (never raise exceptions)
        """
        with self._lock:
            snapshot = [r.handler for r in self._handlers.get(event.name, ())]

        if not snapshot:
            # No handlers registered (not an error for optional workflows)
            return

        self._logger.debug(
            "event_publishing",
            event_name=event.name,
            event_id=str(event.event_id),
            handler_count=len(snapshot),
        )

        for handler in snapshot:
            try:
                outcome = handler(event)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as e:
                self._logger.warning(
                    "event_handler_failed",
                    event_name=event.name,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(handler),
                    error_type=type(e).__name__,
                    error_message=str(e),
                    exc_info=e,
                )

    def handler_count(self, event: EventKey) -> int:
        with self._lock:
            return len(self._handlers.get(_event_name(event), ()))

    def clear(self) -> None:
        """Remove every subscription."""
        with self._lock:
            self._handlers.clear()
