"""Generic repository protocol (port).

Every aggregate repository offers at least lookup by id and save. All
storage faults are translated into ``Failure(str)``; nothing raises past
this boundary, and a failed save leaves storage untouched.
"""

from typing import Protocol, TypeVar

from pling.core.result import Result
from pling.domain.unique_id import UniqueId

T = TypeVar("T")


class Repository(Protocol[T]):
    """Repository protocol (port) for one aggregate type.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Load an aggregate, Failure when missing
        save: Persist an aggregate (insert or update)
    """

    async def find_by_id(self, id: "str | UniqueId") -> Result[T, str]:
        """Load aggregate by id.

        Returns:
            Success(aggregate) or Failure(not-found / storage reason).
        """
        ...

    async def save(self, entity: T) -> Result[None, str]:
        """Persist aggregate.

        Returns:
            Success(None), or Failure(reason) when the write was rejected
            (e.g. a concurrent update was detected) or failed.
        """
        ...
