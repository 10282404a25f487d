"""Configurable scan settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SCAN_ROOT = "src"
"""Directory scanned when the CLI receives no root argument."""

DEFAULT_EXTENSIONS = (".tsx", ".jsx", ".ts", ".js")
"""File suffixes treated as UI component sources."""

DEFAULT_EXCLUDE_DIRS = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".next",
        "__tests__",
        "test-results",
        "coverage",
    }
)
"""Directory names whose contents are never scanned."""

DEFAULT_EFFECT_HOOKS = ("useEffect",)
"""Names of the reactive side-effect constructs to inspect."""


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Return a comma separated list from the environment, or ``default``."""

    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    return items or default


def _normalize_suffix(suffix: str) -> str:
    suffix = suffix.lower()
    return suffix if suffix.startswith(".") else f".{suffix}"


@dataclass(frozen=True)
class ScanConfig:
    """Container describing what the tree walker scans and skips."""

    default_root: str
    extensions: tuple[str, ...]
    exclude_dirs: frozenset[str]
    effect_hooks: tuple[str, ...]

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """Return a config using the configured environment variables."""

        exclude_dirs = set(
            _env_list(
                "RERENDER_GUARD_EXCLUDE_DIRS", tuple(sorted(DEFAULT_EXCLUDE_DIRS))
            )
        )
        exclude_dirs.update(_env_list("RERENDER_GUARD_EXTRA_EXCLUDE_DIRS", ()))
        extensions = _env_list("RERENDER_GUARD_EXTENSIONS", DEFAULT_EXTENSIONS)
        return cls(
            default_root=os.getenv("RERENDER_GUARD_ROOT", "").strip()
            or DEFAULT_SCAN_ROOT,
            extensions=tuple(_normalize_suffix(ext) for ext in extensions),
            exclude_dirs=frozenset(exclude_dirs),
            effect_hooks=_env_list("RERENDER_GUARD_EFFECT_HOOKS", DEFAULT_EFFECT_HOOKS),
        )


DEFAULT_SCAN_CONFIG = ScanConfig(
    DEFAULT_SCAN_ROOT,
    DEFAULT_EXTENSIONS,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EFFECT_HOOKS,
)
