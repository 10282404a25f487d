"""Deployment gate CLI: scan a source tree and exit non-zero on CRITICAL findings."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from ..services.reporter import render_json, render_text, write_lines
from ..services.scan_config import ScanConfig
from ..services.tree_walker import ScanRootNotFoundError, scan_tree
from . import reason_codes, schema_registry
from .schema_registry import SchemaValidationError

REPORT_SCHEMA = "scan_report_v0.1"
ERROR_SCHEMA = "gate_error_v0.1"

EXIT_SAFE = 0
EXIT_BLOCKED = 1

_LOG = logging.getLogger(__name__)


def build_parser(config: ScanConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rerender-guard",
        description=(
            "Scan UI sources for effect patterns that cause infinite re-render loops."
        ),
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=config.default_root,
        help=f"Directory to scan (default: {config.default_root}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every scanned file and effect block to stderr.",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format written to stdout.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _error_payload(reason: str, detail: str) -> dict[str, str]:
    payload = {"status": "error", "reason": reason, "detail": detail}
    schema_registry.validate(ERROR_SCHEMA, payload)
    return payload


def _emit_json(payload: object) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the gate; returns the process exit code."""

    config = ScanConfig.from_env()
    args = build_parser(config).parse_args(argv)
    configure_logging(args.verbose)

    try:
        result = scan_tree(args.root, config)
    except ScanRootNotFoundError as exc:
        _LOG.error("%s", exc)
        if args.format == "json":
            _emit_json(_error_payload(reason_codes.ROOT_NOT_FOUND, str(exc)))
        else:
            write_lines(sys.stdout, [str(exc)])
        return EXIT_BLOCKED

    if args.format == "json":
        report = render_json(result)
        try:
            schema_registry.validate(REPORT_SCHEMA, report)
        except SchemaValidationError:
            _emit_json(
                _error_payload(
                    reason_codes.RESPONSE_VALIDATION_FAILED,
                    "Scan report did not meet the published contract.",
                )
            )
            return EXIT_BLOCKED
        _emit_json(report)
    else:
        write_lines(sys.stdout, render_text(result, verbose=args.verbose))

    return EXIT_SAFE if result.safe_to_deploy else EXIT_BLOCKED


if __name__ == "__main__":
    raise SystemExit(main())
