# topmark:header:start
#
#   project      : GsiPatch
#   file         : mount.py
#   file_relpath : src/gsipatch/system/mount.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Scoped read-write mount of the system partition.

`SystemMount` mounts ``/system`` read-write on entry and unmounts it (and
``/system_root`` on system-as-root layouts) on exit, whatever happened in the
body. On a stock layout ``/system`` is mounted through its fstab entry; on a
system-as-root layout the block device is mounted on ``/system_root`` and
``/system_root/system`` is bind-mounted on ``/system``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger
from gsipatch.core.errors import ExternalToolError
from gsipatch.system.filesystem import unmount_quietly

if TYPE_CHECKING:
    from types import TracebackType

    from gsipatch.config import Config
    from gsipatch.config.logging import GsiPatchLogger
    from gsipatch.system.commands import CommandResult, CommandRunner

logger: GsiPatchLogger = get_logger(__name__)

MOUNT_FAILED: str = "failed to mount /system read-write"


class SystemMount:
    """Context manager for mounting and unmounting the system partition."""

    def __init__(self, runner: CommandRunner, config: Config, *, system_as_root: bool) -> None:
        self.runner = runner
        self.config = config
        self.system_as_root = system_as_root
        self.mounted: bool = False

    def _mount_commands(self) -> list[list[str]]:
        cfg = self.config
        if not self.system_as_root:
            return [["mount", "-o", "rw", cfg.system_mount]]
        root: str = cfg.system_root.rstrip("/")
        return [
            ["mount", "-o", "rw", cfg.block_device, f"{root}/"],
            ["mount", "-o", "bind", f"{root}/system", cfg.system_mount],
        ]

    def release(self) -> None:
        """Unmount ``/system`` and, on system-as-root layouts, ``/system_root``."""
        unmount_quietly(self.runner, self.config.system_mount)
        if self.system_as_root:
            unmount_quietly(self.runner, self.config.system_root)
        self.mounted = False
        logger.info("Released %s", self.config.system_mount)

    def __enter__(self) -> SystemMount:
        for argv in self._mount_commands():
            result: CommandResult = self.runner.run(argv)
            if not result.ok:
                # Undo whatever part of the sequence succeeded
                self.release()
                raise ExternalToolError(MOUNT_FAILED, result.argv, result.returncode)
        self.mounted = True
        logger.info(
            "Mounted %s read-write (system-as-root: %s)",
            self.config.system_mount,
            self.system_as_root,
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.release()
