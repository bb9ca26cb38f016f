# topmark:header:start
#
#   project      : GsiPatch
#   file         : context.py
#   file_relpath : src/gsipatch/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Processing context threaded through the driver steps.

The context is the single mutable object the steps share. A step that fails
stores its `GsiPatchError` in ``ctx.error`` and halts the flow; the remaining
steps see the halt and do nothing. The runner hands the context back so the
caller decides how to report the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from gsipatch.config.logging import get_logger

if TYPE_CHECKING:
    from gsipatch.config import Config
    from gsipatch.config.logging import GsiPatchLogger
    from gsipatch.core.errors import GsiPatchError
    from gsipatch.system.commands import CommandRunner
    from gsipatch.system.device import DeviceState

logger: GsiPatchLogger = get_logger(__name__)


def _log_progress(message: str) -> None:
    logger.info("%s", message)


@dataclass
class FlowControl:
    """Execution flow control for the current run."""

    halt: bool = False
    reason: str = ""  # error message that stopped the run
    at_step: str = ""  # step name that requested the halt


@dataclass
class PatchReport:
    """Summary of what the run changed.

    Attributes:
        system_as_root (bool): The system-as-root mount layout was used.
        backup_created (bool): A new backup of the original script was written.
        lines_commented (int): Lines that received the comment prefix.
        bindings_replaced (int): Occurrences of the old apex path rewritten.
    """

    system_as_root: bool = False
    backup_created: bool = False
    lines_commented: int = 0
    bindings_replaced: int = 0

    @property
    def already_patched(self) -> bool:
        """True when the run found nothing left to change."""
        return self.lines_commented == 0 and self.bindings_replaced == 0

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict for logging."""
        return {
            "system_as_root": self.system_as_root,
            "backup_created": self.backup_created,
            "lines_commented": self.lines_commented,
            "bindings_replaced": self.bindings_replaced,
        }


@dataclass
class PatchContext:
    """Mutable state shared by the driver steps.

    Attributes:
        config (Config): Frozen runtime configuration.
        runner (CommandRunner): Executes external utilities.
        progress (Callable[[str], None]): Receives user-facing progress lines.
        device (DeviceState | None): Set by the preflight step.
        original (list[str] | None): Script lines as read before commenting.
        commented (list[str] | None): Script lines after the region transform.
        report (PatchReport): What the run changed so far.
        error (GsiPatchError | None): The error that halted the run, if any.
        flow (FlowControl): Halt flag and reason.
        steps (list[str]): Names of the steps that ran, in order.
    """

    config: Config
    runner: CommandRunner
    progress: Callable[[str], None] = _log_progress
    device: DeviceState | None = None
    original: list[str] | None = None
    commented: list[str] | None = None
    report: PatchReport = field(default_factory=PatchReport)
    error: GsiPatchError | None = None
    flow: FlowControl = field(default_factory=FlowControl)
    steps: list[str] = field(default_factory=lambda: [])

    @property
    def ok(self) -> bool:
        """True while no step has failed."""
        return self.error is None

    def fail(self, error: GsiPatchError, at_step: str) -> None:
        """Record ``error`` and halt the remaining steps."""
        logger.info("Flow halted in %s: %s", at_step, error)
        self.error = error
        self.flow = FlowControl(halt=True, reason=str(error), at_step=at_step)
