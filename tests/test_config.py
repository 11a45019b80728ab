"""Tests for config loading and validation."""

import logging
import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from errxpect.config import (
    ConfigError,
    ErrxpectConfig,
    FailureMode,
    apply_config,
    load_config,
)
from errxpect.engine import equal, expect, intercept_failures


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "errxpect.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = ErrxpectConfig()
    assert cfg.failure_mode == FailureMode.RAISE
    assert cfg.show_location is True
    assert cfg.description_separator == "\n"
    assert cfg.debug_log is None
    assert cfg.verbose is False


def test_load_full_config(tmp_yaml):
    path = tmp_yaml("""\
        failure_mode: collect
        show_location: false
        description_separator: " - "
        verbose: true
    """)
    cfg = load_config(path)
    assert cfg.failure_mode == FailureMode.COLLECT
    assert cfg.show_location is False
    assert cfg.description_separator == " - "
    assert cfg.verbose is True


def test_empty_file_uses_defaults(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == ErrxpectConfig()


def test_relative_debug_log_resolved_against_config_dir(tmp_yaml, tmp_path):
    cfg = load_config(tmp_yaml("debug_log: logs/debug.log\n"))
    assert cfg.debug_log == str((tmp_path / "logs" / "debug.log").resolve())


def test_absolute_debug_log_kept(tmp_yaml, tmp_path):
    target = tmp_path / "elsewhere" / "debug.log"
    cfg = load_config(tmp_yaml(f"debug_log: {target}\n"))
    assert cfg.debug_log == str(target)


def test_unknown_key_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("fail_fast: true\n"))


def test_invalid_failure_mode_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("failure_mode: explode\n"))


def test_empty_separator_rejected():
    with pytest.raises(ValidationError, match="description_separator"):
        ErrxpectConfig(description_separator="")


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_non_mapping_rejected(tmp_yaml):
    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_yaml("- just\n- a list\n"))


def test_malformed_yaml_rejected(tmp_yaml):
    with pytest.raises(ConfigError, match="not valid YAML"):
        load_config(tmp_yaml("failure_mode: [unclosed\n"))


def test_apply_config_sets_engine_defaults():
    apply_config(ErrxpectConfig(show_location=False, description_separator=": "))
    messages = intercept_failures(lambda: expect(1).to(equal(2), "ctx"))
    assert messages[0].startswith("ctx: Expected")


def test_apply_config_without_debug_log_returns_none():
    assert apply_config(ErrxpectConfig()) is None


def test_apply_config_sets_up_debug_log(tmp_path):
    log_file = tmp_path / "debug.log"
    logger = apply_config(ErrxpectConfig(debug_log=str(log_file)))
    assert isinstance(logger, logging.Logger)
    assert logger.name == "errxpect"
    assert log_file.exists()
