"""pytest integration: config loading and soft failure aggregation."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from errxpect.config import ErrxpectConfig, FailureMode, apply_config, load_config
from errxpect.engine import Failure, collect_failures, use_fail_handler

logger = logging.getLogger(__name__)

_CONFIG_KEY = pytest.StashKey[ErrxpectConfig]()


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        "errxpect_config",
        help="Path to an errxpect YAML config, relative to the rootdir",
        default=None,
    )


def pytest_configure(config: pytest.Config) -> None:
    ini_value = config.getini("errxpect_config")
    if ini_value:
        path = Path(ini_value)
        if not path.is_absolute():
            path = config.rootpath / path
        errxpect_config = load_config(path)
        logger.debug(f"Loaded errxpect config from {path}")
    else:
        errxpect_config = ErrxpectConfig()
    apply_config(errxpect_config)
    config.stash[_CONFIG_KEY] = errxpect_config


def _fail_collected(failures: list[Failure]) -> None:
    if not failures:
        return
    details = "\n\n".join(str(failure) for failure in failures)
    pytest.fail(f"{len(failures)} assertion failure(s):\n\n{details}", pytrace=False)


@pytest.fixture
def soft_failures():
    """Collect assertion failures during the test and fail at teardown."""
    failures: list[Failure] = []
    with use_fail_handler(collect_failures(failures)):
        yield failures
    _fail_collected(failures)


@pytest.fixture(autouse=True)
def _errxpect_failure_mode(request: pytest.FixtureRequest):
    """Apply soft failure collection to every test in ``collect`` mode."""
    errxpect_config = request.config.stash.get(_CONFIG_KEY, None)
    if errxpect_config is None or errxpect_config.failure_mode != FailureMode.COLLECT:
        yield
        return
    failures: list[Failure] = []
    with use_fail_handler(collect_failures(failures)):
        yield
    _fail_collected(failures)
