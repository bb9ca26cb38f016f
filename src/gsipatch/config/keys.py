# topmark:header:start
#
#   project      : GsiPatch
#   file         : keys.py
#   file_relpath : src/gsipatch/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Canonical TOML section and key names for GsiPatch configuration.

Values must match the user-facing TOML keys exactly; renaming one is a breaking
change for existing ``gsipatch.toml`` files.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by GsiPatch configuration."""

    # [target]
    SECTION_TARGET: Final[str] = "target"

    KEY_SCRIPT: Final[str] = "script"
    KEY_BACKUP: Final[str] = "backup"
    KEY_MODE: Final[str] = "mode"
    KEY_LABEL: Final[str] = "label"

    # [region]
    SECTION_REGION: Final[str] = "region"

    KEY_START_MARKER: Final[str] = "start_marker"
    KEY_END_MARKER: Final[str] = "end_marker"
    KEY_COMMENT_PREFIX: Final[str] = "comment_prefix"

    # [binding]
    SECTION_BINDING: Final[str] = "binding"

    KEY_OLD: Final[str] = "old"
    KEY_NEW: Final[str] = "new"

    # [device]
    SECTION_DEVICE: Final[str] = "device"

    KEY_BLOCK_DEVICE: Final[str] = "block_device"
    KEY_SYSTEM_MOUNT: Final[str] = "system_mount"
    KEY_SYSTEM_ROOT: Final[str] = "system_root"
    KEY_RECOVERY_PROP: Final[str] = "recovery_prop"
    KEY_SAR_PROP: Final[str] = "sar_prop"
