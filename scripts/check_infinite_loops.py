"""LOCAL-only wrapper to run the re-render loop gate from a checkout."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT.parent / "src"))


def main() -> int:
    from rerender_guard.gate.cli import main as gate_main

    return gate_main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
