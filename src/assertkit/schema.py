"""Generate JSON Schema for the assertkit YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from assertkit.config import AssertkitConfig


def generate_json_schema() -> dict:
    return AssertkitConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
