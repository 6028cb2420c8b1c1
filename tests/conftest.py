"""Pytest configuration and fixtures."""

import logging

import pytest

from atomictest import trace
from atomictest.config import reset_config


@pytest.fixture(autouse=True)
def fresh_kit():
    """Start every test with an empty trace log and default settings."""
    trace.clear()
    reset_config()
    yield
    trace.clear()
    reset_config()


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from atomictest loggers so setup_logger can run again."""
    yield

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("atomictest") and isinstance(logger, logging.Logger):
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
