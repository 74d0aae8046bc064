"""Free functions over Option.

These mirror the Option methods for call sites that prefer a function
style (passing options through ``map``/``functools.partial`` pipelines).

Example:
    ```python
    from klaw_option import some, nothing, map_opt, flat_map_opt

    map_opt(some(42), lambda n: f"value: {n}")
    # Some(value='value: 42')

    map_opt(nothing(ValueError("original error")), str)
    # Nothing(error=ValueError('original error'))
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeIs

from klaw_option.types.option import Nothing, Option, Some

__all__ = [
    "filter_opt",
    "flat_map_opt",
    "is_nothing",
    "is_some",
    "map_opt",
]


def is_some[T](m: Option[T]) -> TypeIs[Some[T]]:
    """Check if an Option is Some.

    Args:
        m: The Option to check.

    Returns:
        bool: True if the Option is Some, False if Nothing.
    """
    return isinstance(m, Some)


def is_nothing[T](m: Option[T]) -> TypeIs[Nothing]:
    """Check if an Option is Nothing.

    Args:
        m: The Option to check.

    Returns:
        bool: True if the Option is Nothing, False if Some.
    """
    return isinstance(m, Nothing)


def map_opt[T, U](m: Option[T], f: Callable[[T], U]) -> Option[U]:
    """Transform the value of an Option if Some.

    A Nothing is returned as is, keeping its diagnostic. For a Some, the
    result of f goes back through ``some()``: if f returns a nil value the
    output is ``Nothing(NIL_VALUE)``. ``flat_map_opt`` does not do this.

    Args:
        m: The Option to transform.
        f: Function to apply to the value if Some.

    Returns:
        Option[U]: some(f(value)) if Some, otherwise the original Nothing.
    """
    return m.map(f)


def flat_map_opt[T, U](m: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Chain an Option-returning function onto an Option.

    f is only called for a Some, and whatever it returns is passed through
    unchanged, diagnostic included.

    Args:
        m: The Option to bind.
        f: Function that takes T and returns Option[U].

    Returns:
        Option[U]: f(value) if Some, otherwise the original Nothing.
    """
    return m.flat_map(f)


def filter_opt[T](m: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep a Some only if its value satisfies predicate.

    Args:
        m: The Option to filter.
        predicate: Function that returns True to keep the value.

    Returns:
        Option[T]: m unchanged, or Nothing carrying a PredicateError.
    """
    return m.filter(predicate)
