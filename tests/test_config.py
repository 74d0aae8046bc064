"""Tests for package configuration."""

from __future__ import annotations

import logging

import klaw_option._config as config_module
import pytest
from klaw_option import OptionConfig, get_config, init, some


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True)
def reset_config(monkeypatch, restore_logging):
    """Start every test uninitialized with a clean environment."""
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.delenv('KLAW_OPTION_LOG_LEVEL', raising=False)
    monkeypatch.delenv('KLAW_OPTION_LOG_FORMAT', raising=False)


def _package_logger() -> logging.Logger:
    return logging.getLogger('klaw_option')


class TestOptionConfig:
    """Tests for the OptionConfig dataclass."""

    def test_defaults(self):
        """Defaults are silent with JSON output."""
        config = OptionConfig()
        assert config.log_level is None
        assert config.json_output is True

    def test_frozen(self):
        """OptionConfig is immutable."""
        config = OptionConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init(self):
        """get_config() raises before init()."""
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_defaults(self):
        """init() with no arguments and no environment stays silent."""
        package_handlers = _package_logger().handlers[:]
        config = init()
        assert config == OptionConfig(log_level=None, json_output=True)
        assert get_config() is config
        assert _package_logger().handlers == package_handlers

    def test_init_explicit(self):
        """Explicit arguments are stored and configure the package logger."""
        config = init(log_level='DEBUG', json_output=False)
        assert config.log_level == 'DEBUG'
        assert config.json_output is False
        assert _package_logger().level == logging.DEBUG

    def test_init_keeps_application_logging(self):
        """init() leaves the application's root handler and level in place."""
        root_logger = logging.getLogger()
        app_handler = _ListHandler()
        root_logger.addHandler(app_handler)
        root_logger.setLevel(logging.INFO)

        init(log_level='DEBUG')
        some(None)
        logging.getLogger('app').info('application event')

        assert app_handler in root_logger.handlers
        assert root_logger.level == logging.INFO
        assert [r.getMessage() for r in app_handler.records] == ['application event']

    def test_init_from_environment(self, monkeypatch):
        """Missing arguments are read from the environment."""
        monkeypatch.setenv('KLAW_OPTION_LOG_LEVEL', 'warning')
        monkeypatch.setenv('KLAW_OPTION_LOG_FORMAT', 'console')
        config = init()
        assert config.log_level == 'WARNING'
        assert config.json_output is False
        assert _package_logger().level == logging.WARNING

    def test_explicit_overrides_environment(self, monkeypatch):
        """Explicit arguments win over the environment."""
        monkeypatch.setenv('KLAW_OPTION_LOG_LEVEL', 'warning')
        config = init(log_level='ERROR')
        assert config.log_level == 'ERROR'

    def test_unknown_format_warns(self, monkeypatch, caplog):
        """An unknown log format warns and falls back to JSON."""
        monkeypatch.setenv('KLAW_OPTION_LOG_FORMAT', 'xml')
        with caplog.at_level(logging.WARNING, logger='klaw_option'):
            config = init()
        assert config.json_output is True
        assert "Unknown KLAW_OPTION_LOG_FORMAT value 'xml'" in caplog.text
