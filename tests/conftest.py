"""Pytest configuration and fixtures."""

import logging

import pytest

from errxpect.engine import configure


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Close handlers added to errxpect loggers so log files don't leak between tests."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("errxpect"):
            continue
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_engine_settings():
    """Restore engine formatting defaults after tests that change them."""
    yield
    configure()


@pytest.fixture
def failures():
    """Collect reported failures instead of raising them."""
    from errxpect.engine import Failure, collect_failures, use_fail_handler

    collected: list[Failure] = []
    with use_fail_handler(collect_failures(collected)):
        yield collected
