"""Pytest configuration and shared fixtures for klaw-option tests."""

import logging

import pytest


@pytest.fixture
def restore_logging():
    """Restore the root and klaw_option loggers after a test."""
    saved = []
    for name in (None, 'klaw_option'):
        logger = logging.getLogger(name)
        saved.append((logger, logger.handlers[:], logger.level, logger.propagate))
    yield
    for logger, handlers, level, propagate in saved:
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
