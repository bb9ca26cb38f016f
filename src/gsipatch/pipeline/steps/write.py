# topmark:header:start
#
#   project      : GsiPatch
#   file         : write.py
#   file_relpath : src/gsipatch/pipeline/steps/write.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Write step: back up the original script and replace it atomically.

The backup is taken once (an existing ``rw-system.bak`` is never overwritten).
The replacement goes through a temporary sibling file and `os.replace`, and
the permission bits and SELinux label are restored afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from gsipatch.config.logging import get_logger
from gsipatch.io.script import atomic_write_lines, backup_once
from gsipatch.pipeline.context import PatchContext
from gsipatch.pipeline.steps.base import BaseStep
from gsipatch.system.metadata import restore_metadata

logger = get_logger(__name__)


@dataclass
class WriteStep(BaseStep):
    """Persist ``ctx.commented`` over the target script."""

    name: str = "write"

    def may_proceed(self, ctx: PatchContext) -> bool:
        """Only run once the comment step produced a verified document."""
        return ctx.commented is not None

    def run(self, ctx: PatchContext) -> None:
        """Back up, replace, restore metadata."""
        assert ctx.commented is not None
        cfg = ctx.config

        ctx.report.backup_created = backup_once(cfg.script, cfg.backup)
        if ctx.commented != ctx.original:
            atomic_write_lines(cfg.script, ctx.commented)
        else:
            logger.info("%s unchanged - nothing to write", cfg.script)
        restore_metadata(ctx.runner, cfg.script, mode=cfg.mode, label=cfg.label)
