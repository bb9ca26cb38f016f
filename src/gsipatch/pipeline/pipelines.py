# topmark:header:start
#
#   project      : GsiPatch
#   file         : pipelines.py
#   file_relpath : src/gsipatch/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Immutable step sequences for the maintenance run.

Overview
--------
- ``PREPARE``: preflight → filesystem (``/system`` unmounted)
- ``MOUNTED``: locate → comment → write → binding (``/system`` mounted rw)

The runner enters the mount scope between the two sequences, so ``MOUNTED``
always runs with ``/system`` mounted and is always followed by an unmount.
"""

from __future__ import annotations

from typing import Final

from gsipatch.pipeline.steps.base import BaseStep
from gsipatch.pipeline.steps.binding import BindingStep
from gsipatch.pipeline.steps.comment import CommentStep
from gsipatch.pipeline.steps.filesystem import FilesystemStep
from gsipatch.pipeline.steps.locate import LocateStep
from gsipatch.pipeline.steps.preflight import PreflightStep
from gsipatch.pipeline.steps.write import WriteStep

PREPARE_PIPELINE: Final[tuple[BaseStep, ...]] = (
    PreflightStep(),  # Root, recovery mode, system-as-root detection
    FilesystemStep(),  # e2fsck + resize2fs on the unmounted partition
)

MOUNTED_PIPELINE: Final[tuple[BaseStep, ...]] = (
    LocateStep(),  # rw-system.sh must exist
    CommentStep(),  # Comment out the remount block (in memory, verified)
    WriteStep(),  # Backup once, atomic replace, mode + label
    BindingStep(),  # /system/system_ext/apex/ -> /apex/
)
