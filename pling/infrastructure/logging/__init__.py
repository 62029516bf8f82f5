"""Logging adapters implementing LoggerProtocol."""

from pling.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
