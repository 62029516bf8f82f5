"""Infrastructure service factories (settings, logging)."""

from functools import lru_cache
from typing import TYPE_CHECKING

from pling.core.config import get_settings

if TYPE_CHECKING:
    from pling.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from pling.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.is_testing, log_level=settings.log_level)


__all__ = ["get_logger", "get_settings"]
