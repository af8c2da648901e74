"""Load and validate JSON instances against the bundled schemas.

Usage::

    from cssexpr.contracts.load import validate_instance, validate_file

    validate_instance(payload, "evaluation.schema.json")
    validate_file(Path("out/commit.json"), "commit_result.schema.json")
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/cssexpr/data/schemas/`` relative to this file
    2. pip-installed package data via importlib.resources
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(resources.files("cssexpr") / SCHEMA_DIR / name) as p:
        if p.exists():
            return p
    raise FileNotFoundError(f"unknown schema: {name}")


def available_schemas() -> list[str]:
    schema_dir = Path(__file__).resolve().parents[1] / SCHEMA_DIR
    return sorted(p.name for p in schema_dir.glob("*.schema.json"))


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    path = _schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on mismatch.
    """
    jsonschema.validate(instance=instance, schema=load_schema(schema_name))


def validate_file(path: Path, schema_name: str) -> None:
    """Read JSON from *path* and validate it against *schema_name*."""
    instance = json.loads(Path(path).read_text(encoding="utf-8"))
    validate_instance(instance, schema_name)
