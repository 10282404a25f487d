"""Balanced-brace block extraction for effect declarations.

Every ``{`` and ``}`` counts as structural, including those inside string
literals, template interpolations, regex literals and comments. Callers
accept the resulting false positives/negatives in exchange for not
tokenizing the source.
"""

from __future__ import annotations

from typing import Sequence

from ..domain.models import EffectBlock


def find_block_end(lines: Sequence[str], start_index: int) -> int:
    """Return the 0-based index of the line closing the block at ``start_index``.

    The terminal line is the first line at or after ``start_index`` where the
    running brace balance is back to zero and the line holds a ``}``. Without
    such a line the block runs to the end of the file.
    """

    if not 0 <= start_index < len(lines):
        raise IndexError("start_index is outside the line sequence.")

    balance = 0
    for index in range(start_index, len(lines)):
        line = lines[index]
        balance += line.count("{")
        balance -= line.count("}")
        if balance == 0 and "}" in line:
            return index
    return len(lines) - 1


def extract_block(
    lines: Sequence[str], start_index: int, hook: str = "useEffect"
) -> EffectBlock:
    """Extract the effect block that starts on ``lines[start_index]``."""

    end_index = find_block_end(lines, start_index)
    return EffectBlock(
        hook=hook,
        text="\n".join(lines[start_index : end_index + 1]),
        start_line=start_index + 1,
        end_line=end_index + 1,
    )
