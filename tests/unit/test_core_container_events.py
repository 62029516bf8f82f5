"""Unit tests for the event container functions.

Tests cover:
- create_event_bus() returns a new, empty bus per call (no global bus)
- register_event_handlers() wiring and teardown
- build_organization_use_cases() shares one repository and bus
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pling.application.commands import CreateOrganization, GetOrganization
from pling.application.event_handlers.organization_notification_handler import (
    NOTIFIED_EVENTS,
)
from pling.core.config import Settings
from pling.core.container import (
    OrganizationUseCases,
    build_organization_use_cases,
    create_domain_event_publisher,
    create_event_bus,
    create_organization_repository,
    register_event_handlers,
)
from pling.core.result import Success
from pling.domain.events import EVENT_REGISTRY, MemberLeftOrganization, OrganizationCreated
from pling.domain.unique_id import UniqueId
from pling.infrastructure.events.in_memory_event_bus import InMemoryEventBus


@pytest.mark.unit
class TestCreateEventBus:
    """Test bus factory."""

    def test_new_instance_per_call(self, mock_logger):
        first = create_event_bus(mock_logger)
        second = create_event_bus(mock_logger)

        assert isinstance(first, InMemoryEventBus)
        assert first is not second

    def test_subscriptions_do_not_leak_between_buses(self, mock_logger):
        first = create_event_bus(mock_logger)
        second = create_event_bus(mock_logger)

        first.subscribe(OrganizationCreated, MagicMock())

        assert second.handler_count(OrganizationCreated) == 0

    def test_publisher_uses_given_bus(self, mock_logger):
        bus = create_event_bus(mock_logger)

        publisher = create_domain_event_publisher(bus, mock_logger)

        assert publisher.marked_count == 0
        assert publisher._event_bus is bus


@pytest.mark.unit
class TestRegisterEventHandlers:
    """Test standard subscriptions."""

    def test_logging_handler_for_every_event(self, event_bus, mock_logger):
        unsubscribers = register_event_handlers(event_bus, mock_logger)

        assert len(unsubscribers) == len(EVENT_REGISTRY)
        for event_class in EVENT_REGISTRY:
            assert event_bus.handler_count(event_class) == 1

    def test_notification_handler_when_sender_given(self, event_bus, mock_logger):
        unsubscribers = register_event_handlers(
            event_bus, mock_logger, notifications=MagicMock()
        )

        assert len(unsubscribers) == len(EVENT_REGISTRY) + len(NOTIFIED_EVENTS)
        assert event_bus.handler_count(MemberLeftOrganization) == 2
        assert event_bus.handler_count(OrganizationCreated) == 1

    def test_teardown(self, event_bus, mock_logger):
        for unsubscribe in register_event_handlers(
            event_bus, mock_logger, notifications=MagicMock()
        ):
            unsubscribe()

        assert all(event_bus.handler_count(cls) == 0 for cls in EVENT_REGISTRY)

    @pytest.mark.asyncio
    async def test_published_event_is_logged_and_notified(self, event_bus, mock_logger):
        notifications = MagicMock()
        notifications.notify = AsyncMock(return_value=Success(value=None))
        register_event_handlers(event_bus, mock_logger, notifications=notifications)

        await event_bus.publish(
            MemberLeftOrganization(organization_id=UniqueId("org-1"), user_id=UniqueId("u-1"))
        )

        assert mock_logger.info.call_args[0][0] == "domain_event"
        notifications.notify.assert_awaited_once()


@pytest.mark.unit
class TestBuildOrganizationUseCases:
    """Test use case wiring."""

    def test_bundle_contains_every_use_case(self, mock_logger):
        use_cases = build_organization_use_cases(
            create_organization_repository(mock_logger),
            create_event_bus(mock_logger),
            logger=mock_logger,
        )

        assert isinstance(use_cases, OrganizationUseCases)
        assert use_cases.invite._invitation_expiry_days == 7

    @pytest.mark.asyncio
    async def test_settings_drive_plan_defaults(self, mock_logger):
        settings = Settings(default_max_members=12, default_max_teams=3)
        use_cases = build_organization_use_cases(
            create_organization_repository(mock_logger),
            create_event_bus(mock_logger),
            settings=settings,
            logger=mock_logger,
        )

        result = await use_cases.create_organization.execute(
            CreateOrganization(name="Acme", owner_id="owner-1")
        )

        assert (result.value.max_members, result.value.max_teams) == (12, 3)

    @pytest.mark.asyncio
    async def test_use_cases_share_repository_and_bus(self, mock_logger):
        repository = create_organization_repository(mock_logger)
        bus = create_event_bus(mock_logger)
        received = []
        bus.subscribe(OrganizationCreated, received.append)
        use_cases = build_organization_use_cases(repository, bus, logger=mock_logger)

        created = await use_cases.create_organization.execute(
            CreateOrganization(name="Acme", owner_id="owner-1")
        )
        fetched = await use_cases.get_organization.execute(
            GetOrganization(organization_id=created.value.id)
        )

        assert fetched.value.id == created.value.id
        assert len(received) == 1
