"""Application-level event dispatch."""

from pling.application.events.domain_event_publisher import DomainEventPublisher

__all__ = ["DomainEventPublisher"]
