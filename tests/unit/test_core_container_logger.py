"""Unit tests for get_logger() container function.

Tests cover:
- Renderer selection based on environment
- Log level taken from settings
- Singleton pattern (same instance returned)
"""

from unittest.mock import MagicMock, patch

import pytest

from pling.core.config import Settings
from pling.core.container import get_logger
from pling.core.enums import Environment
from pling.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.PRODUCTION, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
        ],
    )
    def test_renderer_follows_environment(self, environment, use_json):
        """Test JSON output in testing/CI, console output elsewhere."""
        settings = Settings(environment=environment, log_level="debug")

        with (
            patch("pling.core.container.infrastructure.get_settings", return_value=settings),
            patch(
                "pling.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console,
        ):
            mock_adapter = MagicMock()
            mock_console.return_value = mock_adapter

            logger = get_logger()

            mock_console.assert_called_once_with(use_json=use_json, log_level="DEBUG")
            assert logger is mock_adapter

    def test_get_logger_returns_singleton(self):
        """Test get_logger() caches the adapter."""
        first = get_logger()
        second = get_logger()

        assert first is second
        assert isinstance(first, ConsoleAdapter)

    def test_cache_clear_builds_new_logger(self):
        first = get_logger()
        get_logger.cache_clear()

        assert get_logger() is not first
