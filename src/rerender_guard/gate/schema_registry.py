"""Utility to surface the scan report JSON schemas and examples."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft7Validator, ValidationError

SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"
EXAMPLE_DIR = SCHEMA_DIR / "examples"

SchemaValidationError = ValidationError
"""Alias for jsonschema.ValidationError.
Keeps callers unaware of the implementation.
"""

SCHEMA_FILES = {
    "scan_report_v0.1": "scan_report_schema_v0.1.json",
    "gate_error_v0.1": "gate_error_schema_v0.1.json",
}

EXAMPLE_FILES = {
    "scan_report_example_clean": "scan_report_example_clean.json",
    "scan_report_example_blocked": "scan_report_example_blocked.json",
    "gate_error_example_root_missing": "gate_error_example_root_missing.json",
}

_SCHEMAS: dict[str, Mapping[str, Any]] = {}
_EXAMPLES: dict[str, Mapping[str, Any]] = {}


def _load_json_file(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def get_schema(name: str) -> Mapping[str, Any]:
    """Return the JSON schema with the given registry name."""

    if name not in _SCHEMAS:
        _SCHEMAS[name] = _load_json_file(SCHEMA_DIR / SCHEMA_FILES[name])
    return _SCHEMAS[name]


def get_example(name: str) -> Mapping[str, Any]:
    """Return a representative example payload by name."""

    if name not in _EXAMPLES:
        _EXAMPLES[name] = _load_json_file(EXAMPLE_DIR / EXAMPLE_FILES[name])
    return _EXAMPLES[name]


def validate(name: str, instance: Any) -> None:
    """Validate an instance against a named schema."""

    Draft7Validator(get_schema(name)).validate(instance)
