# topmark:header:start
#
#   project      : GsiPatch
#   file         : filesystem.py
#   file_relpath : src/gsipatch/system/filesystem.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Filesystem integrity check and resize of the system partition.

``rw-system.sh`` would run ``resize2fs`` at boot after remounting ``/system``
read-write. Once that block is commented out, the resize has to happen here,
from recovery, while the partition is unmounted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.system.commands import run_checked

if TYPE_CHECKING:
    from gsipatch.config.logging import GsiPatchLogger
    from gsipatch.system.commands import CommandResult, CommandRunner

logger: GsiPatchLogger = get_logger(__name__)


def unmount_quietly(runner: CommandRunner, mount_point: str) -> bool:
    """Unmount ``mount_point``, ignoring failures (it may not be mounted).

    Returns:
        bool: True if ``umount`` succeeded.
    """
    result: CommandResult = runner.run(["umount", mount_point])
    if not result.ok:
        logger.debug("umount %s: rc=%d (ignored)", mount_point, result.returncode)
    return result.ok


def check_filesystem(runner: CommandRunner, device: str) -> None:
    """Run a forced, non-interactive ``e2fsck`` on ``device``.

    Some devices refuse to resize before an integrity check.

    Raises:
        ExternalToolError: If ``e2fsck`` exits non-zero.
    """
    run_checked(
        runner,
        ["e2fsck", "-fp", device],
        action="failed to check integrity of system filesystem",
    )


def resize_filesystem(runner: CommandRunner, device: str) -> None:
    """Grow the filesystem on ``device`` to the size of its partition.

    Raises:
        ExternalToolError: If ``resize2fs`` exits non-zero.
    """
    run_checked(
        runner,
        ["resize2fs", device],
        action="failed to resize system filesystem to partition size",
    )
