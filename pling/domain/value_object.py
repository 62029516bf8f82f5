"""ValueObject base class with factory-only construction.

Value objects are immutable and defined entirely by their data. Each subclass
holds a frozen dataclass of props and is built exclusively through its own
``create`` classmethod, which validates input and returns a Result. Calling
the class directly bypasses validation and is rejected as a programmer error.

Architecture:
    - Props are frozen dataclasses (use tuples, not lists, for collections)
    - Structural equality on the serialized props (dataclasses.asdict)
    - "Updates" build new props via copy_with() and re-run create()
    - validate(): ordered (condition, message) rules, first failure wins

Usage:
    >>> @dataclass(frozen=True, slots=True)
    ... class TeamNameProps:
    ...     value: str
    >>>
    >>> class TeamName(ValueObject[TeamNameProps]):
    ...     @classmethod
    ...     def create(cls, raw: str) -> Result["TeamName", str]:
    ...         trimmed = raw.strip()
    ...         checked = cls.validate([
    ...             (len(trimmed) >= 2, "Teamnamn måste vara minst 2 tecken"),
    ...         ])
    ...         return checked.map(lambda _: cls._from_props(TeamNameProps(trimmed)))
"""

from collections.abc import Callable, Iterable
from dataclasses import asdict, fields, is_dataclass, replace
from typing import Any, Generic, Self, TypeVar

from pling.core.errors import ValueObjectConstructionError
from pling.core.result import Failure, Result, Success

P = TypeVar("P")

# Condition is either an eager bool or a zero-arg callable evaluated lazily
type Rule = tuple[bool | Callable[[], bool], str]

_FACTORY_TOKEN = object()


class ValueObject(Generic[P]):
    """Immutable, structurally-equal holder of a frozen props record.

    Attributes:
        _props: Frozen dataclass instance (never exposed publicly).
    """

    __slots__ = ("_props",)

    def __init__(self, props: P, *, _token: object = None) -> None:
        if _token is not _FACTORY_TOKEN:
            raise ValueObjectConstructionError(
                f"{type(self).__name__} must be built through {type(self).__name__}.create()"
            )
        ensure_frozen_props(props, owner=type(self).__name__)
        object.__setattr__(self, "_props", props)

    @classmethod
    def _from_props(cls, props: P) -> Self:
        """Build an instance from already-validated props.

        Only a subclass's create() (or another validated factory) may call
        this.
        """
        return cls(props, _token=_FACTORY_TOKEN)

    @staticmethod
    def validate(rules: Iterable[Rule]) -> Result[None, str]:
        """Evaluate rules in order and report the first violated one.

        Args:
            rules: (condition, message) pairs. Callable conditions are only
                evaluated when every earlier rule passed, so later rules may
                assume earlier ones hold.

        Returns:
            Success(None) if every rule holds, else Failure(message) of the
            first failing rule.
        """
        for condition, message in rules:
            holds = condition() if callable(condition) else condition
            if not holds:
                return Failure(error=message)
        return Success(value=None)

    def copy_with(self, **changes: Any) -> P:
        """Return new props with changes merged in.

        The result is only props; subclasses turn it into a new instance via
        their validated factory so invariants are re-checked.
        """
        return replace(self._props, **changes)  # type: ignore[type-var]

    def to_dict(self) -> dict[str, Any]:
        """Serialized props (used for equality and logging)."""
        return asdict(self._props)  # type: ignore[call-overload]

    def equals(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return False
        return self.to_dict() == other.to_dict()  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._props))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Immutable: copies are the same object (asdict deep-copies nested values)
    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __repr__(self) -> str:
        rendered = ", ".join(
            f"{f.name}={getattr(self._props, f.name)!r}" for f in fields(self._props)  # type: ignore[arg-type]
        )
        return f"{type(self).__name__}({rendered})"


def ensure_frozen_props(props: object, *, owner: str) -> None:
    """Reject props that are not a frozen dataclass instance.

    Raises:
        ValueObjectConstructionError: If props could be mutated in place.
    """
    params = getattr(type(props), "__dataclass_params__", None)
    if not is_dataclass(props) or isinstance(props, type) or not params.frozen:
        raise ValueObjectConstructionError(
            f"{owner} props must be a frozen dataclass instance"
        )
