"""Pytest configuration and fixtures."""

import logging

import pytest

from assertkit import Assert, ResultCollector


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up assertkit loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("assertkit")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def collector() -> ResultCollector:
    return ResultCollector()


@pytest.fixture
def assert_(collector) -> Assert:
    return Assert(collector)
