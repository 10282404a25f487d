"""Reason codes used in machine-readable gate errors."""

from __future__ import annotations

ROOT_NOT_FOUND = "root_not_found"
"""The scan root does not exist or is not a directory."""

RESPONSE_VALIDATION_FAILED = "response_validation_failed"
"""The scanner produced a report that violated the published schema."""
