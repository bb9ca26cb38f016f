# topmark:header:start
#
#   project      : GsiPatch
#   file         : constants.py
#   file_relpath : src/gsipatch/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""GsiPatch Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    GSIPATCH_VERSION: str = get_version("gsipatch")
except PackageNotFoundError:  # running from a source checkout
    GSIPATCH_VERSION = "0.0.0"

# Environment variables
ENV_LOG_LEVEL: Final[str] = "GSIPATCH_LOG_LEVEL"
ENV_CONFIG_PATH: Final[str] = "GSIPATCH_CONFIG"

# Config file picked up from the recovery ramdisk when no env override is set
DEFAULT_CONFIG_PATH: Final[str] = "/tmp/gsipatch.toml"

# Target boot script on a phh-based GSI
RW_SYSTEM_SCRIPT: Final[str] = "/system/bin/rw-system.sh"
RW_SYSTEM_BACKUP: Final[str] = "/system/bin/rw-system.bak"
RW_SYSTEM_MODE: Final[int] = 0o755
RW_SYSTEM_LABEL: Final[str] = "u:object_r:phhsu_exec:s0"

# First and last lines of the remount block to comment out (inclusive)
REGION_START_MARKER: Final[str] = "if mount -o remount,rw /system; then"
REGION_END_MARKER: Final[str] = "mount -o remount,ro / || true"
COMMENT_PREFIX: Final[str] = "# "

# libstagefright_foundation.so bind-mount fix for Android 11+ GSIs
APEX_BINDING_OLD: Final[str] = "/system/system_ext/apex/"
APEX_BINDING_NEW: Final[str] = "/apex/"

# Device layout
SYSTEM_BLOCK_DEVICE: Final[str] = "/dev/block/bootdevice/by-name/system"
SYSTEM_MOUNT_POINT: Final[str] = "/system"
SYSTEM_ROOT_MOUNT_POINT: Final[str] = "/system_root"

# TWRP properties
RECOVERY_PROP: Final[str] = "ro.twrp.boot"
SAR_PROP: Final[str] = "ro.twrp.sar"
