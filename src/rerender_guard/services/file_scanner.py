"""Per-file scanning: locate effect declarations and classify each block."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..domain.models import Finding, SourceFile
from .block_extractor import extract_block
from .effect_classifier import classify_block
from .scan_config import DEFAULT_SCAN_CONFIG, ScanConfig

_LOG = logging.getLogger(__name__)


def declaration_pattern(hooks: Iterable[str]) -> re.Pattern[str]:
    """Compile a pattern matching a call to any of ``hooks``; group 1 is the name."""

    ordered = sorted(set(hooks), key=len, reverse=True)
    names = "|".join(re.escape(hook) for hook in ordered)
    return re.compile(rf"\b({names})\s*\(")


def load_source(path: Path, root: Path) -> SourceFile:
    """Read ``path`` fresh from disk and address it relative to ``root``.

    Raises :class:`OSError` when the file cannot be read; undecodable bytes
    are replaced rather than rejected.
    """

    text = path.read_text(encoding="utf-8", errors="replace")
    return SourceFile.from_text(path.relative_to(root).as_posix(), text)


def scan_source(
    source: SourceFile, config: ScanConfig = DEFAULT_SCAN_CONFIG
) -> tuple[Finding, ...]:
    """Return the findings for every effect declaration in ``source``.

    Each declaration line is processed independently; overlapping blocks are
    not deduplicated.
    """

    pattern = declaration_pattern(config.effect_hooks)
    findings: list[Finding] = []
    for index, line in enumerate(source.lines):
        match = pattern.search(line)
        if match is None:
            continue
        block = extract_block(source.lines, index, hook=match.group(1))
        _LOG.debug(
            "%s: %s block at lines %d-%d",
            source.path,
            block.hook,
            block.start_line,
            block.end_line,
        )
        findings.extend(
            finding.with_file(source.path) for finding in classify_block(block)
        )
    return tuple(findings)
