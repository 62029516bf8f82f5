"""DomainEventPublisher: deferred dispatch of aggregate events.

Aggregates queue their events while mutating. A use case marks the aggregate
before saving it and, once the repository confirmed the write, dispatches
the queued events through the injected event bus. When the save fails the
queue is discarded instead, so no subscriber ever sees an event for a
transition that was not persisted.

Flow:
    1. mark_aggregate_for_dispatch(aggregate)
    2. repository.save(aggregate)
    3a. Success: await dispatch_events_for_aggregate(aggregate)
    3b. Failure or exception: discard_events_for_aggregate(aggregate)

Usage:
    >>> publisher = DomainEventPublisher(event_bus=bus, logger=logger)
    >>> publisher.mark_aggregate_for_dispatch(organization)
    >>> saved = await repository.save(organization)
    >>> if saved.is_ok():
    ...     await publisher.dispatch_events_for_aggregate(organization)
"""

from typing import Any

from pling.domain.aggregate_root import AggregateRoot
from pling.domain.protocols.event_bus_protocol import EventBusProtocol
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.unique_id import UniqueId

type AggregateTarget = AggregateRoot[Any] | UniqueId | str


class DomainEventPublisher:
    """Buffers aggregates until their events may be published.

    Several copies of one aggregate may be in flight at once (two use cases
    editing the same organization). Each marked copy is tracked on its own,
    so dispatching one copy never drains another copy's queue.

    Attributes:
        _event_bus: Bus the drained events are published to.
        _logger: Logger for dispatch bookkeeping.
        _marked: Aggregate instances awaiting dispatch, grouped by id.
    """

    def __init__(self, event_bus: EventBusProtocol, logger: LoggerProtocol) -> None:
        self._event_bus = event_bus
        self._logger = logger
        self._marked: dict[UniqueId, list[AggregateRoot[Any]]] = {}

    def mark_aggregate_for_dispatch(self, aggregate: AggregateRoot[Any]) -> None:
        """Remember aggregate until its save outcome is known.

        Marking the same instance twice keeps a single entry.
        """
        marked = self._marked.setdefault(aggregate.id, [])
        if not any(entry is aggregate for entry in marked):
            marked.append(aggregate)

    def _take(self, target: AggregateTarget) -> list[AggregateRoot[Any]]:
        """Unmark target: that instance only, or every instance for an id."""
        if isinstance(target, AggregateRoot):
            key = target.id
            marked = self._marked.get(key, [])
            taken = [entry for entry in marked if entry is target]
            remaining = [entry for entry in marked if entry is not target]
        else:
            key = UniqueId(target)
            taken = self._marked.get(key, [])
            remaining = []

        if remaining:
            self._marked[key] = remaining
        else:
            self._marked.pop(key, None)
        return taken

    async def dispatch_events_for_aggregate(self, aggregate: AggregateTarget) -> int:
        """Drain the aggregate's queue and publish each event once.

        Args:
            aggregate: The saved instance, or an id to dispatch every marked
                instance with that id.

        Returns:
            Number of events published (0 when nothing was marked).
        """
        published = 0
        for entry in self._take(aggregate):
            events = entry.pull_domain_events()
            for event in events:
                await self._event_bus.publish(event)

            if events:
                self._logger.debug(
                    "domain_events_dispatched",
                    aggregate_id=str(entry.id),
                    event_count=len(events),
                )
            published += len(events)
        return published

    def discard_events_for_aggregate(self, aggregate: AggregateTarget) -> int:
        """Drop the aggregate's queued events without publishing them.

        Args:
            aggregate: The instance whose save failed, or an id.

        Returns:
            Number of events discarded.
        """
        discarded_count = 0
        for entry in self._take(aggregate):
            discarded = entry.pull_domain_events()
            if discarded:
                self._logger.info(
                    "domain_events_discarded",
                    aggregate_id=str(entry.id),
                    event_names=[event.name for event in discarded],
                )
            discarded_count += len(discarded)
        return discarded_count

    def clear_marked_aggregates(self) -> None:
        """Forget every marked aggregate (events stay on the aggregates)."""
        self._marked.clear()

    @property
    def marked_count(self) -> int:
        return sum(len(marked) for marked in self._marked.values())
