"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Programmer-error exceptions
- Settings and the composition root (container)

The core module has NO dependencies on other application layers, except the
container which wires them together.
"""

from pling.core.errors import (
    ProgrammerError,
    ResultAccessError,
    ValueObjectConstructionError,
)
from pling.core.result import Failure, Result, Success, combine, err, ok

__all__ = [
    "Failure",
    "ProgrammerError",
    "Result",
    "ResultAccessError",
    "Success",
    "ValueObjectConstructionError",
    "combine",
    "err",
    "ok",
]
