"""Unit tests for infrastructure event subscribers and adapters.

Tests cover:
- LoggingEventHandler logs every event with its payload
- LoggingNotificationAdapter logs and reports success
"""

from unittest.mock import MagicMock

import pytest

from pling.domain.events import OrganizationCreated
from pling.domain.unique_id import UniqueId
from pling.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler
from pling.infrastructure.notifications.logging_notification_adapter import (
    LoggingNotificationAdapter,
)


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured event logging."""

    @pytest.mark.asyncio
    async def test_logs_event_at_info(self):
        # Arrange
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)
        event = OrganizationCreated(
            organization_id=UniqueId("org-1"),
            owner_id=UniqueId("owner-1"),
            organization_name="Acme",
        )

        # Act
        await handler.handle(event)

        # Assert
        mock_logger.info.assert_called_once_with(
            "domain_event",
            event_name="OrganizationCreated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_type="organization",
            payload={
                "organization_id": "org-1",
                "owner_id": "owner-1",
                "organization_name": "Acme",
            },
        )


@pytest.mark.unit
class TestLoggingNotificationAdapter:
    @pytest.mark.asyncio
    async def test_notify_logs_and_succeeds(self):
        mock_logger = MagicMock()
        adapter = LoggingNotificationAdapter(logger=mock_logger)

        result = await adapter.notify(UniqueId("user-2"), "Ny roll", "Du är nu admin")

        assert result.is_ok()
        mock_logger.info.assert_called_once_with(
            "notification_sent",
            recipient_id="user-2",
            title="Ny roll",
            body="Du är nu admin",
        )
