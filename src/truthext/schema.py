"""Generate the JSON Schema for truthext config files."""

from __future__ import annotations

import json
from pathlib import Path

from truthext.config import ConfigFile


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    schema = ConfigFile.model_json_schema()
    schema["title"] = "truthext config"
    return schema


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
