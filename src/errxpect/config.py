from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from errxpect import engine
from errxpect.verbose import setup_logger


class ConfigError(ValueError):
    """Raised when a config file is missing or not a YAML mapping."""


class FailureMode(str, Enum):
    RAISE = "raise"
    COLLECT = "collect"


class ErrxpectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    failure_mode: FailureMode = FailureMode.RAISE
    show_location: bool = True
    description_separator: str = "\n"
    debug_log: str | None = None
    verbose: bool = False

    @field_validator("description_separator")
    @classmethod
    def separator_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("description_separator must not be empty")
        return v


def load_config(path: Path) -> ErrxpectConfig:
    """Load and validate an errxpect config from a YAML file."""
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")

    config_dir = path.parent.resolve()

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path} is not valid YAML: {exc}") from exc

    # An empty file means all defaults
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a YAML mapping")

    config = ErrxpectConfig(**raw)

    # Resolve a relative debug log path relative to the config file location
    if config.debug_log is not None:
        log_path = Path(config.debug_log)
        if not log_path.is_absolute():
            config.debug_log = str((config_dir / log_path).resolve())

    return config


def apply_config(config: ErrxpectConfig) -> logging.Logger | None:
    """Install *config* as the engine defaults and set up debug logging.

    Returns the configured logger, or None when no debug log was requested.
    """
    engine.configure(
        show_location=config.show_location,
        description_separator=config.description_separator,
    )
    if config.debug_log is None:
        return None
    return setup_logger(Path(config.debug_log), verbose=config.verbose)
