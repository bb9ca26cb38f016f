# topmark:header:start
#
#   project      : GsiPatch
#   file         : locate.py
#   file_relpath : src/gsipatch/pipeline/steps/locate.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Locate step: make sure the mounted image carries the script to patch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gsipatch.core.errors import ResourceMissingError
from gsipatch.pipeline.context import PatchContext
from gsipatch.pipeline.steps.base import BaseStep


@dataclass
class LocateStep(BaseStep):
    """Fail early when ``rw-system.sh`` is missing (not a phh-based GSI)."""

    name: str = "locate"

    def run(self, ctx: PatchContext) -> None:
        """Check that the target script exists.

        Raises:
            ResourceMissingError: If the script is not a regular file.
        """
        script: str = ctx.config.script
        if not Path(script).is_file():
            raise ResourceMissingError(
                f"{script} does not exist.  Is this a phhusson-based GSI ROM?"
            )
        ctx.progress("System mounted and all initial checks passed...")
