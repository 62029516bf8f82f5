"""Application event handlers (subscribers with business reactions)."""

from pling.application.event_handlers.organization_notification_handler import (
    NOTIFIED_EVENTS,
    OrganizationNotificationHandler,
)

__all__ = ["NOTIFIED_EVENTS", "OrganizationNotificationHandler"]
