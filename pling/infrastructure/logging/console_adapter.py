"""Structured stdout logging for the domain core, built on structlog.

Two renderings share one processor chain:
    - human-readable, colored console lines (development, production)
    - one JSON object per line (testing, CI)

Identifiers and enums passed as log context are rendered as plain strings
before output, so ``organization_id=org.id`` logs the same as
``organization_id=str(org.id)``.

ConsoleAdapter does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping); the container hands it out typed as the protocol.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any
from uuid import UUID

import structlog

from pling.domain.unique_id import UniqueId

DEFAULT_LEVEL = logging.INFO


def render_domain_values(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor: UniqueId/UUID to str, Enum members to their value."""
    for key, value in event_dict.items():
        if isinstance(value, UniqueId | UUID):
            event_dict[key] = str(value)
        elif isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def resolve_level(log_level: str) -> int:
    """Numeric level for a level name; unknown names fall back to INFO."""
    return logging.getLevelNamesMapping().get(log_level.strip().upper(), DEFAULT_LEVEL)


def _exception_context(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Logger writing structured events to stdout.

    Args:
        use_json (bool): One JSON object per line when True (testing/CI),
            colored console output when False.
        log_level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR,
            CRITICAL).

    Example:
        >>> logger = ConsoleAdapter(use_json=True, log_level="DEBUG")
        >>> logger.info("organization_created", organization_id=org.id)
    """

    def __init__(self, *, use_json: bool = False, log_level: str = "INFO") -> None:
        processors: list[Any] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            render_domain_values,
        ]
        if use_json:
            processors += [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(resolve_level(log_level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR level.

        Args:
            message (str): snake_case event name.
            error (Exception | None): Flattened into error_type and
                error_message.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_exception_context(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at CRITICAL level (same error handling as error())."""
        self._logger.critical(message, **_exception_context(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter carrying context on every subsequent log.

        The original adapter is unchanged.
        """
        return self._wrapping(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)
