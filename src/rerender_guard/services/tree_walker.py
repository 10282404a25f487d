"""Walk a source tree, scan every eligible file and aggregate the findings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from ..domain.models import Finding, ScanResult
from .file_scanner import load_source, scan_source
from .scan_config import ScanConfig

_LOG = logging.getLogger(__name__)


class ScanRootNotFoundError(FileNotFoundError):
    """Raised when the scan root is missing or is not a directory."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Directory does not exist: {root}")
        self.root = root


def _log_walk_error(exc: OSError) -> None:
    _LOG.warning("Could not list directory %s: %s", exc.filename, exc)


def iter_source_files(root: Path, config: ScanConfig) -> Iterable[Path]:
    """Yield eligible files under ``root`` in a stable, sorted order.

    Excluded directories are pruned before descent, so their contents are
    never listed.
    """

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames[:] = [name for name in dirnames if name not in config.exclude_dirs]
        base = Path(dirpath)
        for name in filenames:
            path = base / name
            if path.suffix.lower() in config.extensions and path.is_file():
                found.append(path)
    yield from sorted(found)


def scan_tree(root: str | Path, config: ScanConfig | None = None) -> ScanResult:
    """Scan every eligible file under ``root`` and return the merged result.

    Files that cannot be read are logged, listed in ``skipped_files`` and do
    not count towards ``files_scanned``.
    """

    config = config or ScanConfig.from_env()
    root_path = Path(root)
    if not root_path.is_dir():
        raise ScanRootNotFoundError(root_path)

    findings: list[Finding] = []
    skipped: list[str] = []
    files_scanned = 0
    for path in iter_source_files(root_path, config):
        try:
            source = load_source(path, root_path)
        except OSError as exc:
            _LOG.warning("Could not read file %s: %s", path, exc)
            skipped.append(path.relative_to(root_path).as_posix())
            continue
        files_scanned += 1
        file_findings = scan_source(source, config)
        _LOG.debug("Scanned %s: %d finding(s)", source.path, len(file_findings))
        findings.extend(file_findings)

    return ScanResult(
        root=str(root_path),
        findings=tuple(findings),
        files_scanned=files_scanned,
        skipped_files=tuple(skipped),
    )
