# topmark:header:start
#
#   project      : GsiPatch
#   file         : metadata.py
#   file_relpath : src/gsipatch/system/metadata.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Restore permission bits and SELinux label on a replaced file."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.system.commands import run_checked

if TYPE_CHECKING:
    from gsipatch.config.logging import GsiPatchLogger
    from gsipatch.system.commands import CommandRunner

logger: GsiPatchLogger = get_logger(__name__)


def restore_metadata(runner: CommandRunner, path: str, *, mode: int, label: str) -> None:
    """Apply ``mode`` and the security ``label`` to ``path``.

    Args:
        runner (CommandRunner): Runner used for ``chcon``.
        path (str): File to fix up.
        mode (int): Permission bits, e.g. ``0o755``.
        label (str): SELinux context, e.g. ``u:object_r:phhsu_exec:s0``.

    Raises:
        OSError: If the permission bits cannot be changed.
        ExternalToolError: If ``chcon`` exits non-zero.
    """
    os.chmod(path, mode)
    run_checked(runner, ["chcon", label, path], action=f"failed to set security label on {path}")
    logger.debug("Restored mode %o and label %s on %s", mode, label, path)
