# topmark:header:start
#
#   project      : GsiPatch
#   file         : region.py
#   file_relpath : src/gsipatch/transform/region.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Comment out a bounded region of a shell script.

The region starts at the first line containing the start marker and ends at the
first line at or after it containing the end marker, both inclusive. Lines in
the region get the comment prefix unless they already start with the prefix's
leading character, so applying the transform twice gives the same result as
applying it once.

The traversal is a two-state machine:

```mermaid
stateDiagram-v2
  [*] --> OUTSIDE
  OUTSIDE --> INSIDE: line contains start marker
  INSIDE --> OUTSIDE: line contains end marker (after emitting it)
```

Every branch emits exactly one output line per input line. Markers are literal
substrings matched anywhere in the line; they are not regular expressions.

If the end marker never follows the start marker, the region stays open and
every remaining line is commented. This matches the behavior of the original
maintenance script and is kept on purpose.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.constants import COMMENT_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from gsipatch.config.logging import GsiPatchLogger

logger: GsiPatchLogger = get_logger(__name__)


class RegionState(Enum):
    """Traversal state of the region commenter."""

    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(frozen=True, slots=True)
class RegionCommenter:
    """Comment out the region delimited by two literal markers.

    Attributes:
        start_marker (str): Substring identifying the first line of the region.
        end_marker (str): Substring identifying the last line of the region.
        comment_prefix (str): Text prepended to each uncommented line of the region.
            Its first character doubles as the "already commented" test.
    """

    start_marker: str
    end_marker: str
    comment_prefix: str = COMMENT_PREFIX

    def __post_init__(self) -> None:
        if not self.start_marker:
            raise ValueError("start_marker must not be empty")
        if not self.end_marker:
            raise ValueError("end_marker must not be empty")
        if not self.comment_prefix:
            raise ValueError("comment_prefix must not be empty")

    # --- transition predicates ---

    def enters(self, state: RegionState, line: str) -> bool:
        """Return True if ``line`` opens the region while outside of it."""
        return state is RegionState.OUTSIDE and self.start_marker in line

    def leaves(self, state: RegionState, line: str) -> bool:
        """Return True if ``line`` closes the region while inside of it."""
        return state is RegionState.INSIDE and self.end_marker in line

    def is_commented(self, line: str) -> bool:
        """Return True if ``line`` already starts with the comment character."""
        return line[:1] == self.comment_prefix[:1]

    # --- traversal ---

    def step(self, state: RegionState, line: str) -> tuple[RegionState, str]:
        """Advance the state machine by one line.

        Args:
            state (RegionState): State before ``line``.
            line (str): The current input line.

        Returns:
            tuple[RegionState, str]: The state after ``line`` and the line to emit.
        """
        if self.enters(state, line):
            state = RegionState.INSIDE

        if state is RegionState.OUTSIDE:
            return state, line

        out: str = line if self.is_commented(line) else f"{self.comment_prefix}{line}"
        if self.leaves(state, line):
            state = RegionState.OUTSIDE
        return state, out

    def iter_apply(self, lines: Iterable[str]) -> Iterable[str]:
        """Yield the transformed lines one at a time."""
        state: RegionState = RegionState.OUTSIDE
        for line in lines:
            state, out = self.step(state, line)
            yield out
        if state is RegionState.INSIDE:
            logger.debug(
                "Region opened by %r was never closed by %r", self.start_marker, self.end_marker
            )

    def apply(self, lines: Sequence[str]) -> list[str]:
        """Return a new list with the region commented out.

        Args:
            lines (Sequence[str]): Source lines, with or without line terminators.

        Returns:
            list[str]: Output lines, same length as ``lines``.
        """
        return list(self.iter_apply(lines))

    def count_commented(self, lines: Sequence[str]) -> int:
        """Return how many lines ``apply`` would change."""
        return sum(1 for old, new in zip(lines, self.iter_apply(lines)) if old != new)


def comment_region(
    lines: Sequence[str],
    start_marker: str,
    end_marker: str,
    comment_prefix: str = COMMENT_PREFIX,
) -> list[str]:
    """Comment out the lines from ``start_marker`` through ``end_marker``.

    Convenience wrapper around `RegionCommenter.apply`.

    Args:
        lines (Sequence[str]): Source lines.
        start_marker (str): Substring identifying the first line of the region.
        end_marker (str): Substring identifying the last line of the region.
        comment_prefix (str): Prefix for lines in the region (default ``"# "``).

    Returns:
        list[str]: The transformed lines.

    Raises:
        ValueError: If a marker or the prefix is empty.
    """
    commenter = RegionCommenter(
        start_marker=start_marker,
        end_marker=end_marker,
        comment_prefix=comment_prefix,
    )
    return commenter.apply(lines)
