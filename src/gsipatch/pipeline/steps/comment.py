# topmark:header:start
#
#   project      : GsiPatch
#   file         : comment.py
#   file_relpath : src/gsipatch/pipeline/steps/comment.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Comment step: comment out the read-write remount block of ``rw-system.sh``.

Reads the script, runs the region transform in memory and checks the line-count
postcondition. Nothing is written here; the writer step persists
``ctx.commented`` only after this step succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.io.script import read_lines
from gsipatch.pipeline.context import PatchContext
from gsipatch.pipeline.steps.base import BaseStep
from gsipatch.transform.integrity import verify_line_count
from gsipatch.transform.region import RegionCommenter
from gsipatch.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from gsipatch.config.logging import GsiPatchLogger

logger: GsiPatchLogger = get_logger(__name__)


@dataclass
class CommentStep(BaseStep):
    """Build the commented-out version of the script in memory."""

    name: str = "comment"

    def run(self, ctx: PatchContext) -> None:
        """Read, transform and verify.

        Raises:
            IntegrityError: If the transformed script lost or gained lines.
        """
        cfg = ctx.config
        ctx.progress(f"Modifying {Path(cfg.script).name}...")

        commenter = RegionCommenter(
            start_marker=cfg.start_marker,
            end_marker=cfg.end_marker,
            comment_prefix=cfg.comment_prefix,
        )
        original: list[str] = read_lines(cfg.script)
        updated: list[str] = commenter.apply(original)
        verify_line_count(original, updated, path=cfg.script)

        ctx.original = original
        ctx.commented = updated
        ctx.report.lines_commented = commenter.count_commented(original)

        if ctx.report.lines_commented == 0:
            logger.info("No lines to comment out in %s (already patched?)", cfg.script)
        else:
            logger.debug(
                "Region patch:\n%s", render_patch(unified_diff(original, updated, cfg.script))
            )
