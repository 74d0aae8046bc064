"""Structured logging for klaw-option.

Everything klaw-option logs goes through the ``klaw_option`` stdlib logger
hierarchy. configure_logging() attaches a structlog ProcessorFormatter
handler to that logger only and stops propagation, so the host
application's root logger, its handlers and any global structlog
configuration are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'PACKAGE_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

PACKAGE_LOGGER = 'klaw_option'


class _PackageHandler(logging.StreamHandler):
    """Marker type for the handler installed by configure_logging()."""


def _get_shared_processors() -> list[Any]:
    """Processors applied to both structlog events and plain stdlib records."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_log_hooks,
    ]


def _get_structlog_processors() -> list[Any]:
    """Processor chain for loggers returned by get_logger()."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _qualify(name: str | None) -> str:
    if not name:
        return PACKAGE_LOGGER
    if name == PACKAGE_LOGGER or name.startswith(f'{PACKAGE_LOGGER}.'):
        return name
    return f'{PACKAGE_LOGGER}.{name}'


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send klaw-option's log records to stderr as structured output.

    Calling this again replaces the handler installed by the previous call.
    The root logger is never modified.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = _PackageHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in package_logger.handlers if isinstance(h, _PackageHandler)]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger inside the klaw_option hierarchy.

    Args:
        name: Logger name. Names outside the hierarchy are prefixed with
            "klaw_option."; None gives the package logger itself.

    Returns:
        A structlog BoundLogger wrapping the stdlib logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(_qualify(name)),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called with a copy of each log entry.

    Args:
        hook: Callable that receives log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook, if present."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:
            pass  # a failing hook must not break logging
    return event_dict
