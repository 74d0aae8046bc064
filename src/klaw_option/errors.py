"""Diagnostic and fault types for Option.

Diagnostics (OptionError subclasses) are stored on Nothing and returned as
values. UnwrapError is the only exception the package raises, and only when
a caller unwraps a Nothing.
"""

from __future__ import annotations

__all__ = [
    "NIL_VALUE",
    "NilValueError",
    "OptionError",
    "PredicateError",
    "UnwrapError",
]


class OptionError(Exception):
    """Base class for diagnostics synthesized by klaw-option."""


class NilValueError(OptionError):
    """A nil value was passed where a present value was expected."""

    def __init__(self, message: str = "option: value cannot be nil") -> None:
        super().__init__(message)


class PredicateError(OptionError):
    """A Some value was rejected by filter()."""

    def __init__(self, message: str = "option: value did not satisfy predicate") -> None:
        super().__init__(message)


class UnwrapError(RuntimeError):
    """Raised when unwrap() or expect() is called on Nothing.

    This signals a caller bug: the option should have been checked with
    is_some()/is_none() first. The Nothing's diagnostic, when present, is
    chained as ``__cause__``.
    """

    def __init__(self, message: str = "Called unwrap on Nothing") -> None:
        super().__init__(message)


NIL_VALUE: NilValueError = NilValueError()
"""Shared diagnostic carried by every Nothing produced from a nil value."""
