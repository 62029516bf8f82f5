"""Programmer-error exceptions.

Business failures never raise: they flow through the system as ``Failure``
values carrying a human-readable message. The exceptions in this module are
for defects in the calling code (wrong-branch Result access, bypassing a
value object factory). They are expected to crash loudly in development and
to be caught only at the outermost application boundary.

Usage:
    from pling.core.errors import ResultAccessError

    try:
        Failure(error="nope").value
    except ResultAccessError:
        ...  # defect in caller, not a business condition
"""


class ProgrammerError(RuntimeError):
    """Base class for misuse of the domain core by calling code."""


class ResultAccessError(ProgrammerError):
    """Raised when a Result is read on the wrong branch."""


class ValueObjectConstructionError(ProgrammerError):
    """Raised when a value object is built without going through create()."""
