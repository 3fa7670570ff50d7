"""Pytest configuration and fixtures."""

import logging

import pytest

from tinytest.config import HarnessConfig
from tinytest.console import Console


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up tinytest loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("tinytest")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def console():
    """Plain-text console writing to stdout (captured by capsys)."""
    return Console(HarnessConfig(color=False))


@pytest.fixture
def quiet_console():
    """Console that omits call-site locations from check diagnostics."""
    return Console(HarnessConfig(color=False, capture_locations=False))
