# topmark:header:start
#
#   project      : GsiPatch
#   file         : substitute.py
#   file_relpath : src/gsipatch/transform/substitute.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Literal find-and-replace over script lines.

Used for the Android 11+ bind-mount fix, which rewrites
``/system/system_ext/apex/`` to ``/apex/`` so that
``libstagefright_foundation.so`` is bound from the right location. Every
occurrence on every line is replaced; a document without a match comes back
unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def replace_literal(lines: Sequence[str], old: str, new: str) -> list[str]:
    """Replace every occurrence of ``old`` with ``new`` on each line.

    Args:
        lines (Sequence[str]): Source lines.
        old (str): Literal text to look for (not a regular expression).
        new (str): Replacement text.

    Returns:
        list[str]: The rewritten lines, same length as ``lines``.

    Raises:
        ValueError: If ``old`` is empty.
    """
    if not old:
        raise ValueError("old must not be empty")
    return [line.replace(old, new) for line in lines]


def count_occurrences(lines: Sequence[str], old: str) -> int:
    """Return the number of times ``old`` occurs across ``lines``."""
    if not old:
        return 0
    return sum(line.count(old) for line in lines)
