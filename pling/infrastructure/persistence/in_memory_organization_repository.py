"""In-memory OrganizationRepository with optimistic concurrency.

Stores each organization as its frozen props plus a version number. Loads
always rebuild a fresh aggregate, so callers never share instances and an
unsaved mutation can never leak into storage.

Concurrency:
    save() compares the aggregate's version with the stored version. A
    mismatch means someone else saved in between; the write is rejected
    with a Failure and storage is left untouched. On success the stored
    version is bumped and written back onto the aggregate.
"""

from dataclasses import dataclass

from pling.core.result import Failure, Result, Success
from pling.domain.entities.organization import Organization, OrganizationProps
from pling.domain.protocols.logger_protocol import LoggerProtocol
from pling.domain.unique_id import UniqueId


class RepositoryError:
    """Repository-level errors."""

    NOT_FOUND = "Organisationen hittades inte"
    CONCURRENT_UPDATE = (
        "Samtidig uppdatering upptäcktes, läs in organisationen igen och försök på nytt"
    )


@dataclass(frozen=True, slots=True)
class _Record:
    props: OrganizationProps
    version: int


class InMemoryOrganizationRepository:
    """Organization storage in a process-local dict.

    Implements OrganizationRepository (structural typing).

    Attributes:
        _records: Organization id -> stored record, in insertion order.
        _logger: Optional logger for rejected writes.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self._records: dict[UniqueId, _Record] = {}
        self._logger = logger

    async def find_by_id(self, id: "str | UniqueId") -> Result[Organization, str]:
        key = UniqueId(id)
        record = self._records.get(key)
        if record is None:
            return Failure(error=RepositoryError.NOT_FOUND)
        return Success(value=Organization._reconstitute(key, record.props, record.version))

    async def find_by_member(
        self, user_id: "str | UniqueId"
    ) -> Result[list[Organization], str]:
        member = UniqueId(user_id)
        return Success(
            value=[
                Organization._reconstitute(key, record.props, record.version)
                for key, record in self._records.items()
                if any(m.user_id == member for m in record.props.members)
            ]
        )

    async def save(self, organization: Organization) -> Result[None, str]:
        stored = self._records.get(organization.id)
        expected = stored.version if stored is not None else 0
        if organization.version != expected:
            if self._logger is not None:
                self._logger.warning(
                    "organization_save_conflict",
                    organization_id=str(organization.id),
                    expected_version=expected,
                    actual_version=organization.version,
                )
            return Failure(error=RepositoryError.CONCURRENT_UPDATE)

        new_version = expected + 1
        self._records[organization.id] = _Record(
            props=organization._snapshot(), version=new_version
        )
        organization._mark_persisted(new_version)
        return Success(value=None)

    async def delete(self, id: "str | UniqueId") -> Result[None, str]:
        key = UniqueId(id)
        if self._records.pop(key, None) is None:
            return Failure(error=RepositoryError.NOT_FOUND)
        return Success(value=None)

    def __len__(self) -> int:
        return len(self._records)
