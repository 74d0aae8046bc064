"""Option type: Some[T] | Nothing for optional values with a diagnostic."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

from klaw_option.errors import NIL_VALUE, PredicateError, UnwrapError
from klaw_option.types.nil import is_nil

__all__ = ["Nothing", "Option", "Some", "from_nullable", "nothing", "some"]

_log = logging.getLogger(__name__)


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It never carries a diagnostic.

    ``Some(value)`` wraps whatever it is given. Use ``some(value)`` when
    the value may be nil and should become Nothing instead.

    Examples:
        >>> opt = Some(42)
        >>> opt.unwrap()
        42
        >>> opt.map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[Nothing]:
        """Return False since this is Some."""
        return False

    def diagnostic(self) -> None:
        """Return None: a Some never exposes a diagnostic."""
        return None

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply a function to the contained value.

        The result goes back through ``some()``, so a function returning
        a nil value produces ``Nothing(NIL_VALUE)``.

        Args:
            f: Function to apply to the Some value.

        Returns:
            some(f(value)).
        """
        return some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as bind. The returned Option is passed through as is;
        no nil check is applied.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias for flat_map()."""
        return f(self.value)

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            self if predicate(value) is True, else Nothing carrying a
            PredicateError.
        """
        if predicate(self.value):
            return self
        _log.debug(
            "Option value rejected by predicate",
            extra={"value_type": type(self.value).__name__},
        )
        return Nothing(PredicateError())


class Nothing(msgspec.Struct, frozen=True):
    """Nothing variant of Option representing absence of a value.

    Nothing carries an optional diagnostic (any exception instance) that
    explains why the value is missing. The diagnostic is stored verbatim
    and may be None.

    Examples:
        >>> opt = Nothing(ValueError("not found"))
        >>> opt.is_none()
        True
        >>> opt.unwrap_or(0)
        0
        >>> opt.diagnostic()
        ValueError('not found')
    """

    error: BaseException | None = None

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[Nothing]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def diagnostic(self) -> BaseException | None:
        """Return the diagnostic explaining the absence, or None."""
        return self.error

    def unwrap(self) -> NoReturn:
        """Raise since this is Nothing.

        Unwrapping Nothing is a caller bug, not a recoverable condition.

        Raises:
            UnwrapError: Always. The diagnostic is chained as __cause__.
        """
        _log.debug("unwrap called on Nothing", extra={"diagnostic": repr(self.error)})
        raise UnwrapError() from self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        _log.debug("expect called on Nothing", extra={"diagnostic": repr(self.error)})
        raise UnwrapError(msg) from self.error

    def map[T, U](self, _f: Callable[[T], U]) -> Nothing:
        """Return self: the diagnostic is carried over untouched."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Option[U]]) -> Nothing:
        """Return self without calling the function."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Option[U]]) -> Nothing:
        """Alias for flat_map()."""
        return self

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> Nothing:
        """Return self since there's no value to filter."""
        return self


type Option[T] = Some[T] | Nothing


def some[T](value: T) -> Option[T]:
    """Create an Option from a value that is expected to be present.

    A nil value (see ``is_nil``) produces ``Nothing(NIL_VALUE)`` instead of
    ``Some``. Values that have no nil form, such as numbers, strings and
    booleans, always produce Some.

    Examples:
        >>> some(42)
        Some(value=42)
        >>> some(None).diagnostic()
        NilValueError('option: value cannot be nil')
    """
    if is_nil(value):
        _log.debug(
            "Nil value reclassified as Nothing",
            extra={"value_type": type(value).__name__},
        )
        return Nothing(NIL_VALUE)
    return Some(value)


def nothing(error: BaseException | None = None) -> Nothing:
    """Create a Nothing carrying error as its diagnostic.

    The error is stored as given, None included.
    """
    return Nothing(error)


def from_nullable[T](value: T | None, error: BaseException | None = None) -> Option[T]:
    """Create an Option from a value that may be None.

    Use this where None is an expected outcome and the caller wants to
    choose the diagnostic.

    Args:
        value: The possibly-None value.
        error: Diagnostic stored on the Nothing when value is None.

    Returns:
        Nothing(error) if value is None, else some(value).

    Examples:
        >>> from_nullable({"a": 1}.get("b"), KeyError("b"))
        Nothing(error=KeyError('b'))
    """
    if value is None:
        return Nothing(error)
    return some(value)
