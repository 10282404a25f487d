"""Heuristic rules that classify one effect block into findings.

Two rules run unconditionally on every block:

1. ``missing_dependency_guard``: setters are called but the effect call is
   not closed by a dependency array, so it re-runs after every render it
   causes.
2. ``self_referential_dependency``: a setter updates state that is listed
   in the dependency array, so each update re-triggers the effect.

Only CRITICAL findings are produced; the WARNING level is reserved for
future heuristics.
"""

from __future__ import annotations

import re
from typing import Iterable

from ..domain.models import EffectBlock, Finding, Level

STATE_SETTER_PATTERN = re.compile(r"\bset[A-Z]\w*(?=\()")
"""A state-setter invocation such as ``setCount(``."""

DEPENDENCY_ARRAY_PATTERN = re.compile(
    r"\}\s*,\s*\[((?:[^\[\]]|\[[^\[\]]*\])*)\]\s*\)\s*;?\s*(?://[^\n]*)?$"
)
"""Trailing ``}, [deps])`` closing the effect call; group 1 holds the entries."""

OPEN_DEPENDENCY_PATTERN = re.compile(r"\}\s*,\s*\[[^\]]*$")
"""Dependency array opened on the block's last line and continued below it."""

MISSING_GUARD_SUGGESTION = (
    "Add empty dependency array [] if this should run only once, "
    "or include proper dependencies"
)
SELF_REFERENCE_SUGGESTION = (
    "Remove the state from dependencies or use empty array [] for one-time effects"
)


def find_state_setters(text: str) -> tuple[str, ...]:
    """Return every setter call in ``text`` in source order, repeats included."""

    return tuple(STATE_SETTER_PATTERN.findall(text))


def parse_dependencies(text: str) -> tuple[str, ...] | None:
    """Return the trimmed dependency entries, or None when no array closes the call."""

    match = DEPENDENCY_ARRAY_PATTERN.search(text)
    if match is None:
        return None
    return tuple(entry.strip() for entry in match.group(1).split(",") if entry.strip())


def has_dependency_guard(text: str) -> bool:
    """True when the effect call carries a second-argument dependency array."""

    return bool(
        DEPENDENCY_ARRAY_PATTERN.search(text) or OPEN_DEPENDENCY_PATTERN.search(text)
    )


def state_name_for_setter(setter: str) -> str:
    """``setUserName`` -> ``username``."""

    return setter[len("set") :].lower()


def _critical(block: EffectBlock, message: str, suggestion: str) -> Finding:
    return Finding(
        level=Level.CRITICAL,
        file_path="",
        start_line=block.start_line,
        end_line=block.end_line,
        message=message,
        suggestion=suggestion,
    )


def missing_dependency_guard(block: EffectBlock) -> Iterable[Finding]:
    if has_dependency_guard(block.text):
        return ()
    if not STATE_SETTER_PATTERN.search(block.text):
        return ()
    return (
        _critical(
            block,
            f"{block.hook} with state setters missing dependency array",
            MISSING_GUARD_SUGGESTION,
        ),
    )


def self_referential_dependency(block: EffectBlock) -> Iterable[Finding]:
    dependencies = parse_dependencies(block.text)
    if not dependencies:
        return ()

    lowered = [dep.lower() for dep in dependencies]
    findings = []
    for setter in find_state_setters(block.text):
        state_name = state_name_for_setter(setter)
        if any(state_name in dep for dep in lowered):
            findings.append(
                _critical(
                    block,
                    f"Potential infinite loop: {setter} modifies state "
                    "that's in dependency array",
                    SELF_REFERENCE_SUGGESTION,
                )
            )
    return findings


RULES = (missing_dependency_guard, self_referential_dependency)
"""Rules applied, in order, to every extracted block."""


def classify_block(block: EffectBlock) -> tuple[Finding, ...]:
    """Return every finding the rule set derives from ``block``."""

    findings: list[Finding] = []
    for rule in RULES:
        findings.extend(rule(block))
    return tuple(findings)
