"""Load and validate preset documents against the bundled JSON schemas.

Usage::

    from code_presenter.contracts.load import validate_instance, read_document

    data = read_document(Path("StylePresets/ocean.yaml"))
    validate_instance(data, PRESET_SCHEMA)
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
import yaml

SCHEMA_DIR = "data/schemas"
PRESET_SCHEMA = "style_preset.schema.json"

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``data/schemas`` relative to the package root (source checkout)
    2. package data via importlib.resources (wheel install)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical
    with resources.as_file(resources.files("code_presenter") / SCHEMA_DIR / name) as p:
        return p


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    path = _schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str = PRESET_SCHEMA) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)


def read_document(path: Path) -> Any:
    """Parse a JSON or YAML document, chosen by file suffix.

    Raises ``json.JSONDecodeError`` / ``yaml.YAMLError`` on malformed input,
    ``UnicodeDecodeError`` for non-UTF-8 bytes and ``OSError`` when the file
    cannot be read.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def validate_file(path: Path, schema_name: str = PRESET_SCHEMA) -> Any:
    """Parse *path* and validate it; returns the parsed document."""
    instance = read_document(path)
    validate_instance(instance, schema_name)
    return instance
