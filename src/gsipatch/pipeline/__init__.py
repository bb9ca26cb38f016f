# topmark:header:start
#
#   project      : GsiPatch
#   file         : __init__.py
#   file_relpath : src/gsipatch/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Driver pipeline: the linear maintenance checklist as typed steps."""

from __future__ import annotations

from gsipatch.pipeline.context import FlowControl, PatchContext, PatchReport
from gsipatch.pipeline.runner import run_patch

__all__ = [
    "FlowControl",
    "PatchContext",
    "PatchReport",
    "run_patch",
]
