"""Nil classification for values handed to the checked Some constructor."""

from __future__ import annotations

import weakref

import msgspec

__all__ = ["is_nil"]

_PROXY_TYPES = (weakref.ProxyType, weakref.CallableProxyType)


def _is_dead_proxy(value: object) -> bool:
    # Any attribute access on a dead proxy raises ReferenceError.
    try:
        value.__class__  # noqa: B018
    except ReferenceError:
        return True
    return False


def is_nil(value: object) -> bool:
    """Return True if value is the "no referent" form of a nil-capable value.

    Nil forms:
        - ``None``
        - ``msgspec.UNSET``, msgspec's marker for a field that was never set
        - a weak reference (``weakref.ref``, ``WeakMethod``) whose referent
          has been garbage collected
        - a weak proxy (``weakref.proxy``) whose referent has been garbage
          collected

    Everything else is never nil, including falsy values such as ``0``,
    ``""``, ``False`` and empty containers, and live weak references or
    proxies.

    Examples:
        >>> is_nil(None)
        True
        >>> is_nil(0)
        False
        >>> is_nil([])
        False
    """
    if value is None or value is msgspec.UNSET:
        return True
    # type() rather than isinstance(): isinstance reads __class__, which a
    # dead proxy cannot answer.
    if type(value) in _PROXY_TYPES:
        return _is_dead_proxy(value)
    if isinstance(value, weakref.ref):
        return value() is None
    return False
