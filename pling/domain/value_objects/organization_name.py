"""OrganizationName value object.

Trimmed display name of an organization.

Rules (first failing rule wins):
    1. Must be a string
    2. At least 2 characters after trimming
    3. At most 100 characters after trimming
"""

from dataclasses import dataclass
from typing import Self

from pling.core.result import Result
from pling.domain.value_object import ValueObject

MIN_LENGTH = 2
MAX_LENGTH = 100

NAME_TOO_SHORT = f"Organisationsnamn måste vara minst {MIN_LENGTH} tecken"
NAME_TOO_LONG = f"Organisationsnamn får vara högst {MAX_LENGTH} tecken"
NAME_NOT_TEXT = "Organisationsnamn måste vara en text"


@dataclass(frozen=True, slots=True)
class OrganizationNameProps:
    value: str


class OrganizationName(ValueObject[OrganizationNameProps]):
    """Validated, whitespace-trimmed organization name.

    Example:
        >>> OrganizationName.create("  Acme  ").map(str)
        Success(value='Acme')
        >>> OrganizationName.create("A")
        Failure(error='Organisationsnamn måste vara minst 2 tecken')
    """

    @classmethod
    def create(cls, raw: object) -> Result[Self, str]:
        trimmed = raw.strip() if isinstance(raw, str) else ""
        return cls.validate(
            [
                (isinstance(raw, str), NAME_NOT_TEXT),
                (len(trimmed) >= MIN_LENGTH, NAME_TOO_SHORT),
                (len(trimmed) <= MAX_LENGTH, NAME_TOO_LONG),
            ]
        ).map(lambda _: cls._from_props(OrganizationNameProps(value=trimmed)))

    @property
    def value(self) -> str:
        return self._props.value

    def __str__(self) -> str:
        return self._props.value
