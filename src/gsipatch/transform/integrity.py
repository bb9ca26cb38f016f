# topmark:header:start
#
#   project      : GsiPatch
#   file         : integrity.py
#   file_relpath : src/gsipatch/transform/integrity.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Line-count postcondition checked before the script is overwritten."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.core.errors import IntegrityError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gsipatch.config.logging import GsiPatchLogger

logger: GsiPatchLogger = get_logger(__name__)


def verify_line_count(original: Sequence[str], updated: Sequence[str], *, path: str) -> None:
    """Raise `IntegrityError` unless both documents have the same number of lines.

    Args:
        original (Sequence[str]): Lines read from ``path``.
        updated (Sequence[str]): Lines about to replace them.
        path (str): The file being patched, for the error message.

    Raises:
        IntegrityError: If the line counts differ.
    """
    expected: int = len(original)
    actual: int = len(updated)
    logger.trace("verify_line_count(%s): %d -> %d", path, expected, actual)
    if expected != actual:
        raise IntegrityError(path, expected, actual)
