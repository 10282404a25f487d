"""Human and machine readable renderings of a :class:`ScanResult`."""

from __future__ import annotations

from typing import Sequence, TextIO

from ..domain.models import Finding, ScanResult

RULE = "=" * 60
REPORT_OPERATION = "rerender_scan"


def _render_findings(findings: Sequence[Finding], marker: str) -> list[str]:
    lines: list[str] = []
    for index, finding in enumerate(findings, start=1):
        lines.append(f"{index}. {finding.location}")
        lines.append(f"   {marker} {finding.message}")
        lines.append(f"   Suggestion: {finding.suggestion}")
        lines.append("")
    return lines


def render_text(result: ScanResult, verbose: bool = False) -> list[str]:
    """Return the text report, one entry per output line."""

    critical = result.critical
    warnings = result.warnings
    lines: list[str] = []
    if verbose:
        lines.append(f"Scanned directory: {result.root}")
    lines.append(f"Scan complete: {result.files_scanned} files scanned")
    lines.append(RULE)

    if not critical and not warnings:
        lines.append("No infinite re-render patterns detected!")

    if critical:
        lines.append(f"CRITICAL ISSUES FOUND: {len(critical)}")
        lines.append("These patterns are likely to cause infinite re-render loops:")
        lines.append("")
        lines.extend(_render_findings(critical, "[CRITICAL]"))

    if warnings:
        lines.append(f"WARNINGS: {len(warnings)}")
        lines.append("These patterns might cause performance issues:")
        lines.append("")
        lines.extend(_render_findings(warnings, "[WARNING]"))

    lines.append(RULE)
    lines.append("SUMMARY:")
    lines.append(f"   Files scanned: {result.files_scanned}")
    lines.append(f"   Critical issues: {len(critical)}")
    lines.append(f"   Warnings: {len(warnings)}")
    if result.skipped_files:
        lines.append(f"   Files skipped: {len(result.skipped_files)}")
        if verbose:
            lines.extend(f"     - {path}" for path in result.skipped_files)
    lines.append("")

    if result.safe_to_deploy:
        lines.append("Safe to deploy: No critical infinite loop patterns found")
    else:
        lines.append(
            "DEPLOYMENT BLOCKED: Critical infinite loop patterns detected! "
            "Fix these issues before deploying to prevent blank screens."
        )
    return lines


def render_json(result: ScanResult) -> dict[str, object]:
    """Return the ``scan_report_v0.1`` payload for ``result``."""

    return {
        "operation": REPORT_OPERATION,
        "root": result.root,
        "files_scanned": result.files_scanned,
        "safe_to_deploy": result.safe_to_deploy,
        "summary": {
            "critical": len(result.critical),
            "warnings": len(result.warnings),
            "skipped": len(result.skipped_files),
        },
        "critical": [finding.to_mapping() for finding in result.critical],
        "warnings": [finding.to_mapping() for finding in result.warnings],
        "skipped_files": list(result.skipped_files),
    }


def write_lines(stream: TextIO, lines: Sequence[str]) -> None:
    """Write ``lines`` to ``stream`` without using ``print``."""

    for line in lines:
        stream.write(f"{line}\n")
