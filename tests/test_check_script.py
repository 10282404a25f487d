"""Smoke test for the local gate wrapper script."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "scripts/check_infinite_loops.py", *args],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
    )


def test_script_blocks_on_critical_pattern(tmp_path: Path) -> None:
    (tmp_path / "Loop.jsx").write_text(
        "useEffect(() => {\n  setCount(count + 1);\n}, [count]);\n",
        encoding="utf-8",
    )

    result = _run(str(tmp_path))

    assert result.returncode == 1
    assert "Loop.jsx:1-3" in result.stdout
    assert "DEPLOYMENT BLOCKED" in result.stdout


def test_script_passes_clean_tree(tmp_path: Path) -> None:
    (tmp_path / "Clean.tsx").write_text(
        "useEffect(() => { setCount(0); }, []);\n", encoding="utf-8"
    )

    result = _run(str(tmp_path))

    assert result.returncode == 0
    assert "Safe to deploy" in result.stdout


def test_script_rejects_missing_root(tmp_path: Path) -> None:
    result = _run(str(tmp_path / "missing"))

    assert result.returncode == 1
    assert "Directory does not exist" in result.stdout
