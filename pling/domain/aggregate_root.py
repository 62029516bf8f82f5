"""AggregateRoot base class: identity, invariants, pending domain events.

An aggregate is a consistency boundary. Its state lives in a frozen props
dataclass that is swapped wholesale on every committed mutation, so a
rejected mutation can always restore the previous props untouched.

Mutation protocol (all-or-nothing):
    1. The public method checks its preconditions (Failure, nothing changed)
    2. ``_apply`` swaps in the tentative props
    3. ``validate_invariants()`` runs against the tentative state
    4. Violation: previous props restored, no event queued, Failure returned
    5. Success: tentative props kept, event(s) queued, Success returned

Events stay queued on the aggregate until the use case has persisted it and
drains them with ``pull_domain_events()`` (via DomainEventPublisher), so a
transition that failed to persist never reaches subscribers.

Lifecycle:
    create() -> Valid -> (mutation -> Valid' | rejected, unchanged)* -> saved
    -> events dispatched -> instance discarded or reloaded by the repository.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any, Generic, Self, TypeVar

from pling.core.errors import ValueObjectConstructionError
from pling.core.result import Failure, Result, Success
from pling.domain.events.base_event import DomainEvent
from pling.domain.unique_id import UniqueId
from pling.domain.value_object import ensure_frozen_props

P = TypeVar("P")

type EventFactory = Callable[[], DomainEvent | Sequence[DomainEvent]]

_FACTORY_TOKEN = object()


class AggregateRoot(ABC, Generic[P]):
    """Identity-bearing, invariant-protected aggregate.

    Subclasses provide a ``create`` classmethod, mutation methods built on
    ``_apply``, and ``validate_invariants``.

    Attributes:
        _id: Aggregate identity.
        _props: Current frozen props (replaced, never mutated in place).
        _version: Persistence version, bumped by the repository on save.
    """

    def __init__(
        self,
        props: P,
        id: UniqueId | None = None,
        *,
        version: int = 0,
        _token: object = None,
    ) -> None:
        if _token is not _FACTORY_TOKEN:
            raise ValueObjectConstructionError(
                f"{type(self).__name__} must be built through create() or a repository"
            )
        ensure_frozen_props(props, owner=type(self).__name__)
        self._id = UniqueId(id)
        self._props = props
        self._version = version
        self._domain_events: list[DomainEvent] = []

    @classmethod
    def _new(cls, props: P, id: UniqueId | None = None) -> Self:
        """Build a brand-new aggregate (called by create() after validation)."""
        return cls(props, id, _token=_FACTORY_TOKEN)

    @classmethod
    def _reconstitute(cls, id: UniqueId, props: P, version: int) -> Self:
        """Rebuild a persisted aggregate. Repository hook: no events, no checks."""
        return cls(props, id, version=version, _token=_FACTORY_TOKEN)

    @property
    def id(self) -> UniqueId:
        return self._id

    @property
    def version(self) -> int:
        return self._version

    @abstractmethod
    def validate_invariants(self) -> Result[None, str]:
        """Check every invariant against the current props.

        Returns:
            Success(None) when consistent, else Failure(reason) for the first
            violated invariant.
        """

    # -------------------------------------------------------------------------
    # Mutation protocol
    # -------------------------------------------------------------------------

    def _apply(
        self,
        change: Callable[[P], P],
        events: EventFactory | None = None,
    ) -> Result[None, str]:
        """Tentatively apply change, keep it only if invariants still hold.

        Args:
            change: Builds the new props from the current props.
            events: Called only after the change is committed; its event(s)
                are queued in order.

        Returns:
            Success(None) if committed, else the invariant Failure (props
            restored, nothing queued).
        """
        previous = self._props
        tentative = change(previous)
        ensure_frozen_props(tentative, owner=type(self).__name__)

        self._props = tentative
        try:
            check = self.validate_invariants()
        except BaseException:
            self._props = previous
            raise
        if isinstance(check, Failure):
            self._props = previous
            return check

        if events is not None:
            produced = events()
            if isinstance(produced, DomainEvent):
                self._record_event(produced)
            else:
                for event in produced:
                    self._record_event(event)
        return Success(value=None)

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    # -------------------------------------------------------------------------
    # Pending events
    # -------------------------------------------------------------------------

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Read-only view of queued events."""
        return tuple(self._domain_events)

    def pull_domain_events(self) -> list[DomainEvent]:
        """Drain the queue. A second call without a mutation returns []."""
        drained = self._domain_events
        self._domain_events = []
        return drained

    def clear_events(self) -> None:
        self._domain_events.clear()

    # -------------------------------------------------------------------------
    # Repository and test hooks
    # -------------------------------------------------------------------------

    def _snapshot(self) -> P:
        """Repository hook: current props (frozen, safe to store as-is)."""
        return self._props

    def _mark_persisted(self, version: int) -> None:
        """Repository hook: record the version assigned by a successful save."""
        self._version = version

    def _override_props_for_testing(self, **changes: Any) -> P:
        """Replace props fields without any invariant check.

        Test-only hook used to corrupt state in invariant tests. Returns the
        previous props so the caller can restore them with
        ``_restore_props_for_testing``.
        """
        previous = self._props
        self._props = replace(previous, **changes)  # type: ignore[type-var]
        return previous

    def _restore_props_for_testing(self, props: P) -> None:
        self._props = props

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        return type(other) is type(self) and self._id == other._id  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id.value!r}, version={self._version})"
