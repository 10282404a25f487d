"""Rendering of scan results for humans and CI tooling."""

from __future__ import annotations

import io

from rerender_guard.domain.models import Finding, Level, ScanResult
from rerender_guard.gate import schema_registry
from rerender_guard.services.reporter import render_json, render_text, write_lines


def _finding(level: Level, path: str = "components/Counter.tsx") -> Finding:
    return Finding(
        level=level,
        file_path=path,
        start_line=4,
        end_line=6,
        message=(
            "Potential infinite loop: setCount modifies state "
            "that's in dependency array"
        ),
        suggestion="Remove the state from dependencies",
    )


def test_clean_report_announces_safe_deploy() -> None:
    lines = render_text(ScanResult(root="src", findings=(), files_scanned=7))

    assert "Scan complete: 7 files scanned" in lines
    assert "No infinite re-render patterns detected!" in lines
    assert "   Critical issues: 0" in lines
    assert lines[-1].startswith("Safe to deploy")


def test_critical_findings_are_numbered_and_block() -> None:
    result = ScanResult(
        root="src",
        findings=(_finding(Level.CRITICAL), _finding(Level.CRITICAL, "b.tsx")),
        files_scanned=2,
    )
    lines = render_text(result)

    assert "CRITICAL ISSUES FOUND: 2" in lines
    assert "1. components/Counter.tsx:4-6" in lines
    assert "2. b.tsx:4-6" in lines
    assert "   Suggestion: Remove the state from dependencies" in lines
    assert lines[-1].startswith("DEPLOYMENT BLOCKED")


def test_warnings_are_listed_but_do_not_block() -> None:
    result = ScanResult(
        root="src", findings=(_finding(Level.WARNING),), files_scanned=1
    )
    lines = render_text(result)

    assert "WARNINGS: 1" in lines
    assert "CRITICAL ISSUES FOUND: 1" not in lines
    assert "   Warnings: 1" in lines
    assert result.safe_to_deploy
    assert lines[-1].startswith("Safe to deploy")


def test_verbose_report_lists_root_and_skipped_files() -> None:
    result = ScanResult(
        root="web/src",
        findings=(),
        files_scanned=1,
        skipped_files=("Broken.tsx",),
    )

    quiet = render_text(result)
    verbose = render_text(result, verbose=True)

    assert "   Files skipped: 1" in quiet
    assert "     - Broken.tsx" not in quiet
    assert verbose[0] == "Scanned directory: web/src"
    assert "     - Broken.tsx" in verbose


def test_json_report_matches_schema() -> None:
    result = ScanResult(
        root="src",
        findings=(_finding(Level.CRITICAL), _finding(Level.WARNING)),
        files_scanned=3,
        skipped_files=("x.ts",),
    )
    report = render_json(result)

    schema_registry.validate("scan_report_v0.1", report)
    assert report["safe_to_deploy"] is False
    assert report["summary"] == {"critical": 1, "warnings": 1, "skipped": 1}
    assert report["critical"][0]["level"] == "CRITICAL"
    assert report["warnings"][0]["level"] == "WARNING"


def test_write_lines_terminates_each_line() -> None:
    stream = io.StringIO()
    write_lines(stream, ["a", "", "b"])

    assert stream.getvalue() == "a\n\nb\n"
