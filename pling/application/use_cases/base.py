"""UseCase base class: the single entry point of an application operation.

Every use case follows the same sequence:
    validate input -> load aggregate -> mutate -> save -> dispatch events

``execute`` never raises. Business failures come back as ``Failure`` from
``_run``; any exception escaping ``_run`` (infrastructure fault, programmer
error) is logged and converted into a generic ``Failure`` so presentation
code only ever branches on ``is_ok()`` / ``is_err()``.

Usage:
    >>> class RenameOrganization(UseCase[RenameCommand, OrganizationDTO]):
    ...     async def _run(self, command):
    ...         missing = self._require(organization_id=command.organization_id)
    ...         if isinstance(missing, Failure):
    ...             return missing
    ...         ...
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar, final

from pling.application.events.domain_event_publisher import DomainEventPublisher
from pling.core.errors import ProgrammerError
from pling.core.result import Failure, Result, Success
from pling.domain.aggregate_root import AggregateRoot
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.protocols.repository import Repository

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741


class UseCaseError:
    """Messages shared by every use case."""

    UNEXPECTED = "Ett oväntat fel inträffade"
    MISSING_FIELD = "Obligatoriskt fält saknas"


class UseCase(ABC, Generic[I, O]):
    """Base class for application operations.

    Attributes:
        _logger: Logger for unexpected faults and rejected saves.
        _event_publisher: Publisher used by _save_and_dispatch (None for
            read-only use cases).
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        event_publisher: DomainEventPublisher | None = None,
    ) -> None:
        self._logger = logger
        self._event_publisher = event_publisher

    @final
    async def execute(self, input: I) -> Result[O, str]:
        """Run the use case.

        Args:
            input: Command or query dataclass.

        Returns:
            Success(output), or Failure(reason). Unexpected exceptions become
            Failure("Ett oväntat fel inträffade: <detail>").
        """
        try:
            return await self._run(input)
        except Exception as e:
            self._logger.error(
                "use_case_unexpected_error", error=e, use_case=type(self).__name__
            )
            return Failure(error=f"{UseCaseError.UNEXPECTED}: {e}")

    @abstractmethod
    async def _run(self, input: I) -> Result[O, str]:
        """Use-case body; may return Failure, should not need to raise."""

    @staticmethod
    def _require(**fields: Any) -> Result[None, str]:
        """Check required fields before touching any collaborator.

        A field is missing when it is None or a blank string.

        Returns:
            Success(None), or Failure("Obligatoriskt fält saknas: <name>") for
            the first missing field in argument order.
        """
        for name, value in fields.items():
            if value is None or (isinstance(value, str) and not value.strip()):
                return Failure(error=f"{UseCaseError.MISSING_FIELD}: {name}")
        return Success(value=None)

    async def _save_and_dispatch(
        self,
        repository: Repository[Any],
        aggregate: AggregateRoot[Any],
    ) -> Result[None, str]:
        """Persist aggregate, then publish its queued events.

        On save failure the queued events are discarded and the repository
        error is forwarded unchanged. A save that raises also discards them
        before the exception reaches execute().
        """
        if self._event_publisher is None:
            raise ProgrammerError(f"{type(self).__name__} has no event publisher")

        self._event_publisher.mark_aggregate_for_dispatch(aggregate)
        try:
            saved = await repository.save(aggregate)
        except BaseException:
            self._event_publisher.discard_events_for_aggregate(aggregate)
            raise
        if isinstance(saved, Failure):
            self._event_publisher.discard_events_for_aggregate(aggregate)
            self._logger.warning(
                "aggregate_save_failed",
                use_case=type(self).__name__,
                aggregate_id=str(aggregate.id),
                reason=saved.error,
            )
            return saved

        await self._event_publisher.dispatch_events_for_aggregate(aggregate)
        return saved
