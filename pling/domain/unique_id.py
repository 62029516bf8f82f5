"""UniqueId value wrapper for entity identity.

Every aggregate and entity carries a UniqueId. Identifiers are normally
supplied by the persistence layer; new ones are generated as UUIDv7 strings
(time-ordered, index friendly).

Usage:
    >>> org_id = UniqueId()                  # generated
    >>> same = UniqueId(str(org_id))         # from raw string
    >>> UniqueId(org_id) == org_id           # idempotent wrap
    True
"""

from dataclasses import dataclass

from uuid_extensions import uuid7


@dataclass(frozen=True, slots=True, init=False)
class UniqueId:
    """Immutable identifier compared by its underlying string.

    Preconditions:
        The source must be a non-empty string (or another UniqueId). An empty
        or non-string source is a caller defect and raises ValueError; it is
        not reported through Result because identity is assumed valid once it
        leaves the persistence layer.

    Attributes:
        value: The raw identifier string.
    """

    value: str

    def __init__(self, source: "str | UniqueId | None" = None) -> None:
        if source is None:
            raw = str(uuid7())
        elif isinstance(source, UniqueId):
            raw = source.value
        elif isinstance(source, str) and source.strip():
            raw = source.strip()
        else:
            raise ValueError(f"UniqueId requires a non-empty string, got {source!r}")
        object.__setattr__(self, "value", raw)

    def equals(self, other: object) -> bool:
        return isinstance(other, UniqueId) and other.value == self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UniqueId('{self.value}')"
