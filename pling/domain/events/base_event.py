"""Base domain event class.

This module defines the foundational DomainEvent base class used by all domain
events in the system. Domain events represent "things that happened" to an
aggregate and are always named in past tense (e.g., OrganizationCreated,
MemberJoinedOrganization).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - One concrete class per event name (handlers match on the class, never
      dig through a loosely-typed payload)
    - ``name`` and ``payload`` are derived views used for bus routing and
      logging

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class TeamRenamed(DomainEvent):
    ...     team_id: UniqueId
    ...     name_after: str
    >>>
    >>> event = TeamRenamed(team_id=UniqueId(), name_after="Säljteamet")
    >>> event.name
    'TeamRenamed'
    >>> event.payload["name_after"]
    'Säljteamet'
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar
from uuid import UUID

from uuid_extensions import uuid7

from pling.domain.unique_id import UniqueId

_BASE_FIELDS = frozenset({"event_id", "occurred_at"})


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (MemberJoinedOrganization, NOT JoinMember)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Include all data the subscribers need as typed fields

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUIDv7 if not provided.
        occurred_at: Timestamp when the state transition happened (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # Aggregate type the event belongs to (used in logs only)
    aggregate_type: ClassVar[str] = "unknown"

    @classmethod
    def event_name(cls) -> str:
        """Routing key for the event bus (the class name)."""
        return cls.__name__

    @property
    def name(self) -> str:
        return type(self).event_name()

    @property
    def payload(self) -> dict[str, Any]:
        """Event-specific fields as plain data.

        Identifiers and value objects are rendered as strings, enums as their
        values. Base fields (event_id, occurred_at) are excluded.
        """
        return {
            f.name: _to_plain(getattr(self, f.name))
            for f in fields(self)
            if f.name not in _BASE_FIELDS
        }


def _to_plain(value: Any) -> Any:
    if isinstance(value, UniqueId | UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, tuple | list):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, str | int | float | bool) or value is None:
        return value
    return str(value)
