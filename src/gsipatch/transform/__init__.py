# topmark:header:start
#
#   project      : GsiPatch
#   file         : __init__.py
#   file_relpath : src/gsipatch/transform/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Pure, in-memory line transforms applied to ``rw-system.sh``.

Nothing in this package performs I/O; reading, backing up and writing the
script belong to `gsipatch.io.script` and the driver pipeline.
"""

from __future__ import annotations

from gsipatch.transform.integrity import verify_line_count
from gsipatch.transform.region import RegionCommenter, RegionState, comment_region
from gsipatch.transform.substitute import count_occurrences, replace_literal

__all__ = [
    "RegionCommenter",
    "RegionState",
    "comment_region",
    "count_occurrences",
    "replace_literal",
    "verify_line_count",
]
