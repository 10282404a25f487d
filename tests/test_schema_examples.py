"""Ensure each JSON schema is exercised by its published example."""

import pytest

from rerender_guard.gate import schema_registry
from rerender_guard.gate.schema_registry import SchemaValidationError

SCHEMA_EXAMPLE_MAP = {
    "scan_report_example_clean": "scan_report_v0.1",
    "scan_report_example_blocked": "scan_report_v0.1",
    "gate_error_example_root_missing": "gate_error_v0.1",
}


def test_all_examples_validate_against_their_schemas() -> None:
    """Every example file should match its declared schema contract."""

    for example_name, schema_name in SCHEMA_EXAMPLE_MAP.items():
        example = schema_registry.get_example(example_name)
        schema_registry.validate(schema_name, example)


def test_warning_entries_cannot_hide_in_critical_list() -> None:
    report = dict(schema_registry.get_example("scan_report_example_blocked"))
    entry = dict(report["critical"][0], level="WARNING")
    report["critical"] = [entry]

    with pytest.raises(SchemaValidationError):
        schema_registry.validate("scan_report_v0.1", report)
