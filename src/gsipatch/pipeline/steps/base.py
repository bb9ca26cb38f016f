# topmark:header:start
#
#   project      : GsiPatch
#   file         : base.py
#   file_relpath : src/gsipatch/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Base class for class-based driver steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: halted? → may_proceed → run

A step signals failure by raising a `GsiPatchError` from ``run()``; the base
class records it on the context and halts the flow, so no error escapes into
the runner and every later step is skipped. An `OSError` (unreadable script,
read-only filesystem) is wrapped the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.core.errors import GsiPatchError

if TYPE_CHECKING:
    from gsipatch.config.logging import GsiPatchLogger
    from gsipatch.pipeline.context import PatchContext

logger: GsiPatchLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for driver steps.

    Subclass this and override ``run()`` (and ``may_proceed()`` if the step
    depends on an earlier one having produced something).

    Attributes:
        name (str): Stable step identifier for logs and ``ctx.steps``.
    """

    name: str

    def __call__(self, ctx: PatchContext) -> PatchContext:
        """Invoke the step lifecycle: halted? → gate → run.

        Args:
            ctx (PatchContext): The shared context.

        Returns:
            PatchContext: The same context instance after mutation.
        """
        if ctx.flow.halt:
            logger.debug("Step %s skipped: flow halted at %s", self.name, ctx.flow.at_step)
            return ctx

        if not self.may_proceed(ctx):
            logger.info("Step %s may not proceed", self.name)
            return ctx

        ctx.steps.append(self.name)
        logger.info("Step %s - running", self.name)
        try:
            self.run(ctx)
        except GsiPatchError as exc:
            ctx.fail(exc, self.name)
        except OSError as exc:
            ctx.fail(GsiPatchError(f"{self.name}: {exc}"), self.name)
        return ctx

    def may_proceed(self, ctx: PatchContext) -> bool:
        """Return whether the step should run given the current context.

        Default: ``True``.
        """
        return True

    def run(self, ctx: PatchContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place."""
        pass
