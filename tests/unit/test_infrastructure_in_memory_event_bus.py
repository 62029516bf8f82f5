"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe/publish basic flow
- Handlers run sequentially in subscription order
- Handler failure doesn't break others (fail-open) and is logged
- No handlers registered (no-op)
- Sync handlers and string routing keys
- Unsubscribe (idempotent, removes only its own registration)
- Publish uses a snapshot of the registry

Architecture:
- Unit tests with mocked logger
- Every test builds its own bus (no shared global bus)
"""

from unittest.mock import MagicMock

import pytest

from pling.domain.enums import OrganizationRoleType
from pling.domain.events import (
    MemberJoinedOrganization,
    MemberLeftOrganization,
)
from pling.domain.unique_id import UniqueId
from pling.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from tests.utils.event_helper import RecordingHandler


def joined_event() -> MemberJoinedOrganization:
    return MemberJoinedOrganization(
        organization_id=UniqueId("org-1"),
        user_id=UniqueId("user-2"),
        role=OrganizationRoleType.MEMBER,
    )


def left_event() -> MemberLeftOrganization:
    return MemberLeftOrganization(organization_id=UniqueId("org-1"), user_id=UniqueId("user-2"))


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    @pytest.mark.asyncio
    async def test_subscribe_and_publish_single_handler(self):
        """Test subscribing single handler and publishing event."""
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        recorder = RecordingHandler()
        event = joined_event()

        # Act
        event_bus.subscribe(MemberJoinedOrganization, recorder)
        await event_bus.publish(event)

        # Assert
        assert recorder.events == [event]

    @pytest.mark.asyncio
    async def test_handlers_run_in_subscription_order(self):
        """Test multiple handlers run one after another, FIFO."""
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        call_order = []

        async def handler_1(event):
            call_order.append("handler_1")

        async def handler_2(event):
            call_order.append("handler_2")

        def handler_3(event):
            call_order.append("handler_3")

        # Act
        event_bus.subscribe(MemberJoinedOrganization, handler_1)
        event_bus.subscribe(MemberJoinedOrganization, handler_2)
        event_bus.subscribe(MemberJoinedOrganization, handler_3)
        await event_bus.publish(joined_event())

        # Assert
        assert call_order == ["handler_1", "handler_2", "handler_3"]

    @pytest.mark.asyncio
    async def test_publish_with_no_handlers_registered(self):
        """Test publishing event with no handlers is no-op (not an error)."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(joined_event())

        mock_logger.debug.assert_not_called()

    @pytest.mark.asyncio
    async def test_publish_logs_debug(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        event_bus.subscribe(MemberJoinedOrganization, RecordingHandler())

        await event_bus.publish(joined_event())

        mock_logger.debug.assert_called_once()
        assert mock_logger.debug.call_args[0][0] == "event_publishing"
        assert mock_logger.debug.call_args[1]["handler_count"] == 1

    @pytest.mark.asyncio
    async def test_events_routed_by_name(self):
        """Test different event types reach only their own handlers."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        joined, left = RecordingHandler(), RecordingHandler()
        event_bus.subscribe(MemberJoinedOrganization, joined)
        event_bus.subscribe(MemberLeftOrganization, left)

        await event_bus.publish(joined_event())
        await event_bus.publish(left_event())

        assert joined.names == ["MemberJoinedOrganization"]
        assert left.names == ["MemberLeftOrganization"]

    @pytest.mark.asyncio
    async def test_string_key_is_equivalent_to_class(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        by_class, by_name = RecordingHandler(), RecordingHandler()
        event_bus.subscribe(MemberJoinedOrganization, by_class)
        event_bus.subscribe("MemberJoinedOrganization", by_name)

        await event_bus.publish(joined_event())

        assert event_bus.handler_count(MemberJoinedOrganization) == 2
        assert len(by_class.events) == len(by_name.events) == 1


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior (critical requirement)."""

    @pytest.mark.asyncio
    async def test_handler_failure_does_not_break_other_handlers(self):
        """Test one handler failure doesn't prevent other handlers from executing."""
        # Arrange
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        successful_handlers = []

        async def failing_handler(event):
            raise ValueError("Handler intentionally failed")

        async def successful_handler_1(event):
            successful_handlers.append("handler_1")

        def successful_handler_2(event):
            successful_handlers.append("handler_2")

        # Act
        event_bus.subscribe(MemberJoinedOrganization, successful_handler_1)
        event_bus.subscribe(MemberJoinedOrganization, failing_handler)
        event_bus.subscribe(MemberJoinedOrganization, successful_handler_2)
        await event_bus.publish(joined_event())

        # Assert - Both successful handlers executed
        assert successful_handlers == ["handler_1", "handler_2"]

        # Assert - Failure was logged
        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "event_handler_failed"
        assert call_args[1]["event_name"] == "MemberJoinedOrganization"
        assert call_args[1]["error_type"] == "ValueError"
        assert call_args[1]["error_message"] == "Handler intentionally failed"
        assert "failing_handler" in call_args[1]["handler_name"]

    @pytest.mark.asyncio
    async def test_sync_handler_failure_is_logged(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        def failing_handler(event):
            raise RuntimeError("boom")

        event_bus.subscribe(MemberJoinedOrganization, failing_handler)

        await event_bus.publish(joined_event())

        assert mock_logger.warning.call_args[1]["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_multiple_handler_failures_all_logged(self):
        """Test multiple handler failures all logged separately."""
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        async def failing_handler_1(event):
            raise ValueError("Handler 1 failed")

        async def failing_handler_2(event):
            raise RuntimeError("Handler 2 failed")

        event_bus.subscribe(MemberJoinedOrganization, failing_handler_1)
        event_bus.subscribe(MemberJoinedOrganization, failing_handler_2)
        await event_bus.publish(joined_event())

        error_messages = [call[1]["error_message"] for call in mock_logger.warning.call_args_list]
        assert error_messages == ["Handler 1 failed", "Handler 2 failed"]


@pytest.mark.unit
class TestInMemoryEventBusSubscriptions:
    """Test unsubscribe, clear and registry snapshots."""

    @pytest.mark.asyncio
    async def test_unsubscribe_stops_delivery(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        recorder = RecordingHandler()
        unsubscribe = event_bus.subscribe(MemberJoinedOrganization, recorder)

        unsubscribe()
        await event_bus.publish(joined_event())

        assert recorder.events == []
        assert event_bus.handler_count(MemberJoinedOrganization) == 0

    def test_unsubscribe_is_idempotent(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        unsubscribe = event_bus.subscribe(MemberJoinedOrganization, RecordingHandler())

        unsubscribe()
        unsubscribe()

        assert event_bus.handler_count(MemberJoinedOrganization) == 0

    @pytest.mark.asyncio
    async def test_unsubscribe_removes_only_its_own_registration(self):
        """Test the same handler registered twice is removed once per call."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        recorder = RecordingHandler()
        first = event_bus.subscribe(MemberJoinedOrganization, recorder)
        event_bus.subscribe(MemberJoinedOrganization, recorder)

        first()
        first()
        await event_bus.publish(joined_event())

        assert len(recorder.events) == 1

    @pytest.mark.asyncio
    async def test_handler_subscribed_during_publish_waits_for_next_event(self):
        """Test publish iterates over a snapshot of the registry."""
        event_bus = InMemoryEventBus(logger=MagicMock())
        late = RecordingHandler()

        def subscribe_late(event):
            event_bus.subscribe(MemberJoinedOrganization, late)

        unsubscribe = event_bus.subscribe(MemberJoinedOrganization, subscribe_late)

        await event_bus.publish(joined_event())
        assert late.events == []

        unsubscribe()
        await event_bus.publish(joined_event())
        assert len(late.events) == 1

    @pytest.mark.asyncio
    async def test_handler_unsubscribed_during_publish_still_runs_once(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        second = RecordingHandler()
        unsubscribe_second = None

        def first(event):
            unsubscribe_second()

        event_bus.subscribe(MemberJoinedOrganization, first)
        unsubscribe_second = event_bus.subscribe(MemberJoinedOrganization, second)

        await event_bus.publish(joined_event())
        await event_bus.publish(joined_event())

        assert len(second.events) == 1

    @pytest.mark.asyncio
    async def test_clear_removes_everything(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        recorder = RecordingHandler()
        unsubscribe = event_bus.subscribe(MemberJoinedOrganization, recorder)
        event_bus.subscribe(MemberLeftOrganization, recorder)

        event_bus.clear()
        unsubscribe()
        await event_bus.publish(joined_event())

        assert recorder.events == []
        assert event_bus.handler_count("MemberLeftOrganization") == 0
