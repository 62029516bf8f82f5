"""Pytest configuration shared by unit and integration tests.

This configuration ensures:
1. Coroutine tests run under pytest-asyncio (asyncio_mode = "auto")
2. Cached settings and logger never leak between tests
3. Each test gets its own event bus and repository (no global bus)
"""

from unittest.mock import MagicMock

import pytest

from pling.application.events.domain_event_publisher import DomainEventPublisher
from pling.core.config import get_settings
from pling.core.container import get_logger
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.unique_id import UniqueId
from pling.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from pling.infrastructure.persistence.in_memory_organization_repository import (
    InMemoryOrganizationRepository,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset cached settings/logger around each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    logger = MagicMock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def event_bus(mock_logger):
    """Fresh bus per test."""
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def publisher(event_bus, mock_logger):
    return DomainEventPublisher(event_bus=event_bus, logger=mock_logger)


@pytest.fixture
def repository(mock_logger):
    return InMemoryOrganizationRepository(logger=mock_logger)


@pytest.fixture
def owner_id():
    return UniqueId("owner-1")

