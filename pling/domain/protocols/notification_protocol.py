"""NotificationProtocol: outbound user notifications (push, in-app).

Delivery is an external collaborator reached only from event handlers.
Implementations report delivery problems as Failure and never raise.
"""

from typing import Protocol

from pling.core.result import Result
from pling.domain.unique_id import UniqueId


class NotificationProtocol(Protocol):
    """Protocol for notification senders."""

    async def notify(
        self, recipient_id: UniqueId, title: str, body: str
    ) -> Result[None, str]:
        """Send a notification to one user.

        Args:
            recipient_id: Receiving user.
            title: Short headline.
            body: Message text.

        Returns:
            Success(None) or Failure(reason).
        """
        ...
