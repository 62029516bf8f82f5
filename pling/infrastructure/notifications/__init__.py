"""Notification adapters implementing NotificationProtocol."""

from pling.infrastructure.notifications.logging_notification_adapter import (
    LoggingNotificationAdapter,
)

__all__ = ["LoggingNotificationAdapter"]
