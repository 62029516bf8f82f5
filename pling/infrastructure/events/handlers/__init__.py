"""Infrastructure event handlers (subscribers)."""

from pling.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
