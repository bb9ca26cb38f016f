# topmark:header:start
#
#   project      : GsiPatch
#   file         : preflight.py
#   file_relpath : src/gsipatch/pipeline/steps/preflight.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Preflight step: privilege, recovery-mode and mount-layout checks."""

from __future__ import annotations

from dataclasses import dataclass

from gsipatch.config.logging import get_logger
from gsipatch.core.errors import PreconditionError
from gsipatch.pipeline.context import PatchContext
from gsipatch.pipeline.steps.base import BaseStep
from gsipatch.system.device import DeviceState, is_root, probe_device

logger = get_logger(__name__)


@dataclass
class PreflightStep(BaseStep):
    """Refuse to run unless root and in TWRP; detect system-as-root."""

    name: str = "preflight"

    def run(self, ctx: PatchContext) -> None:
        """Check the user and device state.

        Raises:
            PreconditionError: When not root or not running from recovery.
        """
        if not is_root():
            raise PreconditionError("not root user.  You must be root to run this script.")

        device: DeviceState = probe_device(ctx.runner, ctx.config)
        ctx.device = device
        if not device.in_recovery:
            raise PreconditionError(
                "not in recovery mode.  You must be in recovery (twrp) to run this script."
            )

        ctx.report.system_as_root = device.system_as_root
        if device.system_as_root:
            ctx.progress("System As Root detected")
        logger.debug("Device state: %s", device)
