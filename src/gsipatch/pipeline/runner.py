# topmark:header:start
#
#   project      : GsiPatch
#   file         : runner.py
#   file_relpath : src/gsipatch/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Run the maintenance checklist.

`run_patch` executes the ``PREPARE`` steps, mounts ``/system`` read-write,
executes the ``MOUNTED`` steps and releases the mount on every exit path. The
first failing step halts the run; its error is available as ``ctx.error``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.core.errors import GsiPatchError
from gsipatch.pipeline.pipelines import MOUNTED_PIPELINE, PREPARE_PIPELINE
from gsipatch.system.mount import SystemMount

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gsipatch.config.logging import GsiPatchLogger
    from gsipatch.pipeline.context import PatchContext
    from gsipatch.pipeline.steps.base import BaseStep

logger: GsiPatchLogger = get_logger(__name__)

MOUNT_STEP: str = "mount"


def run(ctx: PatchContext, steps: Sequence[BaseStep]) -> PatchContext:
    """Execute ``steps`` sequentially.

    Args:
        ctx (PatchContext): Shared context.
        steps (Sequence[BaseStep]): Ordered steps; each takes and returns the context.

    Returns:
        PatchContext: The final context.
    """
    for step in steps:
        ctx = step(ctx)
    return ctx


def run_patch(ctx: PatchContext) -> PatchContext:
    """Run the whole maintenance routine against ``ctx``.

    Args:
        ctx (PatchContext): A fresh context holding config, runner and progress sink.

    Returns:
        PatchContext: The final context; ``ctx.ok`` tells whether it succeeded.
    """
    ctx = run(ctx, PREPARE_PIPELINE)
    if ctx.flow.halt:
        return ctx

    system_as_root: bool = ctx.device.system_as_root if ctx.device else False
    try:
        with SystemMount(ctx.runner, ctx.config, system_as_root=system_as_root):
            ctx.steps.append(MOUNT_STEP)
            ctx = run(ctx, MOUNTED_PIPELINE)
    except GsiPatchError as exc:
        # Raised by the mount itself; step errors are already on ctx
        ctx.fail(exc, MOUNT_STEP)

    logger.info("Run finished: ok=%s report=%s", ctx.ok, ctx.report.to_dict())
    return ctx
