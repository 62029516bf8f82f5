"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Business failures travel as ``Failure`` values;
exceptions are reserved for programmer errors (see ``pling.core.errors``).

Vocabulary:
    - ``is_ok()`` / ``is_err()``: branch predicates
    - ``value`` / ``error``: branch accessors (wrong branch raises
      ResultAccessError, never returns placeholder data)
    - ``map`` / ``map_error`` / ``and_then`` / ``unwrap_or``: composition

Usage:
    def parse_limit(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Failure(error="Gränsen måste vara ett heltal")
        return Success(value=int(raw))

    result = parse_limit("5").map(lambda n: n * 2)
    match result:
        case Success(value=limit):
            print(f"Limit: {limit}")
        case Failure(error=reason):
            print(f"Error: {reason}")

    # Extracting without branching is only allowed with an explicit default
    limit = parse_limit("x").unwrap_or(3)
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from pling.core.errors import ResultAccessError

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    @property
    def error(self) -> NoReturn:
        """Reading the error of a Success is a programmer error.

        Raises:
            ResultAccessError: Always.
        """
        raise ResultAccessError("Cannot read 'error' from a Success result")

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Apply fn to the success value."""
        return Success(value=fn(self.value))

    def map_error(self, fn: Callable[[Any], Any]) -> "Success[T]":
        """Success passes through unchanged."""
        return self

    def and_then(self, fn: "Callable[[T], Result[U, F]]") -> "Result[U, F]":
        """Chain a further Result-returning operation."""
        return fn(self.value)

    def unwrap_or(self, default: object) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], Any]) -> T:
        return self.value


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    @property
    def value(self) -> NoReturn:
        """Reading the value of a Failure is a programmer error.

        Raises:
            ResultAccessError: Always, with the carried error in the message.
        """
        raise ResultAccessError(
            f"Cannot read 'value' from a Failure result (error: {self.error})"
        )

    def map(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        """Failure passes through unchanged."""
        return self

    def map_error(self, fn: Callable[[E], F]) -> "Failure[F]":
        """Apply fn to the error."""
        return Failure(error=fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> "Failure[E]":
        """Short-circuit: fn is never called."""
        return self

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_else(self, fn: Callable[[E], U]) -> U:
        return fn(self.error)


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


def ok(value: T) -> Success[T]:
    """Build a success result."""
    return Success(value=value)


def err(error: E) -> Failure[E]:
    """Build a failure result."""
    return Failure(error=error)


def combine(results: Iterable["Result[T, E]"]) -> "Result[list[T], E]":
    """Collapse results into one, returning the first failure encountered.

    Args:
        results: Results to combine, evaluated in order.

    Returns:
        Success with all values in order, or the first Failure.

    Example:
        >>> combine([ok(1), ok(2)])
        Success(value=[1, 2])
        >>> combine([ok(1), err("a"), err("b")])
        Failure(error='a')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(value=values)
