"""Notification adapter that writes notifications to the log.

Stands in for push delivery until a real provider is wired; implements
NotificationProtocol (structural typing).
"""

from pling.core.result import Result, Success
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.unique_id import UniqueId


class LoggingNotificationAdapter:
    """Logs each notification at INFO level and reports success."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def notify(
        self, recipient_id: UniqueId, title: str, body: str
    ) -> Result[None, str]:
        self._logger.info(
            "notification_sent",
            recipient_id=str(recipient_id),
            title=title,
            body=body,
        )
        return Success(value=None)
