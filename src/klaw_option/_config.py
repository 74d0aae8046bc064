"""Package configuration: OptionConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_option._logging import configure_logging

__all__ = [
    'OptionConfig',
    'get_config',
    'init',
]

_LOG_LEVEL_ENV = 'KLAW_OPTION_LOG_LEVEL'
_LOG_FORMAT_ENV = 'KLAW_OPTION_LOG_FORMAT'

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs if True, console logs otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: OptionConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_OPTION_LOG_LEVEL, if set."""
    env_level = os.environ.get(_LOG_LEVEL_ENV, '').strip()
    return env_level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from KLAW_OPTION_LOG_FORMAT.

    "console" selects console output. "json", unset, or anything else
    (with a warning) selects JSON.
    """
    env_format = os.environ.get(_LOG_FORMAT_ENV, '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        _log.warning("Unknown %s value '%s', defaulting to json", _LOG_FORMAT_ENV, env_format)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> OptionConfig:
    """Initialize klaw-option with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_OPTION_LOG_LEVEL if None; None there as well = silent.
        json_output: JSON or console log output. Read from
            KLAW_OPTION_LOG_FORMAT if None.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from klaw_option import init

        # Environment-driven
        init()

        # Explicit configuration
        init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = OptionConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-option not initialized. Call klaw_option.init() first.'
        raise RuntimeError(msg)
    return _config
