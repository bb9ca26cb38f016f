# topmark:header:start
#
#   project      : GsiPatch
#   file         : filesystem.py
#   file_relpath : src/gsipatch/pipeline/steps/filesystem.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Filesystem step: check and resize the system partition while unmounted."""

from __future__ import annotations

from dataclasses import dataclass

from gsipatch.pipeline.context import PatchContext
from gsipatch.pipeline.steps.base import BaseStep
from gsipatch.system.filesystem import check_filesystem, resize_filesystem, unmount_quietly


@dataclass
class FilesystemStep(BaseStep):
    """Unmount ``/system``, then run ``e2fsck`` and ``resize2fs`` on its block device."""

    name: str = "filesystem"

    def run(self, ctx: PatchContext) -> None:
        """Run the integrity check and the resize.

        Raises:
            ExternalToolError: If either tool exits non-zero.
        """
        cfg = ctx.config
        unmount_quietly(ctx.runner, cfg.system_mount)
        unmount_quietly(ctx.runner, cfg.system_root)

        ctx.progress("Running e2fsck...")
        check_filesystem(ctx.runner, cfg.block_device)

        ctx.progress("Running resize2fs...")
        resize_filesystem(ctx.runner, cfg.block_device)
