# topmark:header:start
#
#   project      : GsiPatch
#   file         : device.py
#   file_relpath : src/gsipatch/system/device.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Device probes: privilege level and TWRP properties."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger

if TYPE_CHECKING:
    from gsipatch.config import Config
    from gsipatch.config.logging import GsiPatchLogger
    from gsipatch.system.commands import CommandRunner

logger: GsiPatchLogger = get_logger(__name__)


def is_root() -> bool:
    """Return True when running with an effective uid of 0."""
    return os.geteuid() == 0


def get_prop(runner: CommandRunner, name: str) -> str:
    """Return the value of an Android system property.

    A failing ``getprop`` yields an empty string, same as an unset property.
    """
    result = runner.run(["getprop", name])
    if not result.ok:
        logger.debug("getprop %s failed with rc=%d", name, result.returncode)
        return ""
    value: str = result.stdout.strip()
    logger.debug("getprop %s = %r", name, value)
    return value


@dataclass(frozen=True)
class DeviceState:
    """What the routine needs to know about the running device.

    Attributes:
        in_recovery (bool): Running from TWRP (maintenance mode).
        system_as_root (bool): The device was converted to a system-as-root layout
            (MakeMeSAR or similar), so ``/system`` lives inside ``/system_root``.
    """

    in_recovery: bool
    system_as_root: bool


def probe_device(runner: CommandRunner, config: Config) -> DeviceState:
    """Read the recovery and system-as-root properties."""
    return DeviceState(
        in_recovery="1" in get_prop(runner, config.recovery_prop),
        system_as_root=get_prop(runner, config.sar_prop) == "true",
    )
