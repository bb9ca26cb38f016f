# topmark:header:start
#
#   file         : diff.py
#   file_relpath : src/gsipatch/utils/diff.py
#   project      : GsiPatch
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Unified diff helpers for logging what a step changed."""

import difflib
from typing import Sequence

from yachalk import chalk


def unified_diff(original: Sequence[str], updated: Sequence[str], path: str) -> str:
    """Return a unified diff between two line sequences (empty when equal)."""
    return "".join(
        difflib.unified_diff(
            list(original),
            list(updated),
            fromfile=f"{path} (original)",
            tofile=f"{path} (patched)",
            n=1,
        )
    )


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        # Show control characters explicitly
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return "".join(f"{process_line(line)}\n" for line in lines)
