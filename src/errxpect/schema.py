"""Generate JSON Schema for the errxpect YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from errxpect.config import ErrxpectConfig


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    schema = ErrxpectConfig.model_json_schema()
    schema["title"] = "errxpect config"
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
