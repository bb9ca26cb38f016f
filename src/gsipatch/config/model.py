# topmark:header:start
#
#   project      : GsiPatch
#   file         : model.py
#   file_relpath : src/gsipatch/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the driver steps.
    - `MutableConfig`: a mutable builder used while merging defaults and an
      optional TOML file; it can be frozen into `Config` and thawed back.

Layering (lowest to highest precedence):
    1. Built-in defaults (`load_defaults_dict`).
    2. The file named by ``GSIPATCH_CONFIG``, or ``/tmp/gsipatch.toml`` if it exists.

The routine accepts no command-line arguments, so there is no CLI layer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING

from gsipatch.config.io import (
    get_mode_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from gsipatch.config.keys import Toml
from gsipatch.config.logging import get_logger
from gsipatch.constants import DEFAULT_CONFIG_PATH, ENV_CONFIG_PATH

if TYPE_CHECKING:
    from gsipatch.config.io import TomlTable
    from gsipatch.config.logging import GsiPatchLogger

logger: GsiPatchLogger = get_logger(__name__)

# Known keys per section; anything else is reported and ignored.
_STRING_KEYS: dict[str, tuple[tuple[str, str], ...]] = {
    Toml.SECTION_TARGET: (
        (Toml.KEY_SCRIPT, "script"),
        (Toml.KEY_BACKUP, "backup"),
        (Toml.KEY_LABEL, "label"),
    ),
    Toml.SECTION_REGION: (
        (Toml.KEY_START_MARKER, "start_marker"),
        (Toml.KEY_END_MARKER, "end_marker"),
        (Toml.KEY_COMMENT_PREFIX, "comment_prefix"),
    ),
    Toml.SECTION_BINDING: (
        (Toml.KEY_OLD, "binding_old"),
        (Toml.KEY_NEW, "binding_new"),
    ),
    Toml.SECTION_DEVICE: (
        (Toml.KEY_BLOCK_DEVICE, "block_device"),
        (Toml.KEY_SYSTEM_MOUNT, "system_mount"),
        (Toml.KEY_SYSTEM_ROOT, "system_root"),
        (Toml.KEY_RECOVERY_PROP, "recovery_prop"),
        (Toml.KEY_SAR_PROP, "sar_prop"),
    ),
}

_INT_KEYS: dict[str, tuple[tuple[str, str], ...]] = {
    Toml.SECTION_TARGET: ((Toml.KEY_MODE, "mode"),),
}

# Values that must never be empty (markers are matched by substring containment)
_NON_EMPTY: tuple[str, ...] = (
    "script",
    "backup",
    "start_marker",
    "end_marker",
    "comment_prefix",
    "binding_old",
    "block_device",
    "system_mount",
    "system_root",
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for GsiPatch.

    Attributes:
        script (str): Path of the boot script to patch.
        backup (str): Path of the one-time backup copy of the original script.
        mode (int): Permission bits restored on the patched script.
        label (str): SELinux context restored on the patched script.
        start_marker (str): First line of the region to comment out.
        end_marker (str): Last line of the region to comment out.
        comment_prefix (str): Prefix used to comment lines out.
        binding_old (str): Bind-mount path to replace.
        binding_new (str): Replacement bind-mount path.
        block_device (str): Block device holding the system partition.
        system_mount (str): Mount point for ``/system``.
        system_root (str): Mount point used on system-as-root layouts.
        recovery_prop (str): Property set by TWRP when running in recovery.
        sar_prop (str): Property set when the device was converted to system-as-root.
        config_files (tuple[str, ...]): Config files merged into this snapshot.
    """

    script: str
    backup: str
    mode: int
    label: str
    start_marker: str
    end_marker: str
    comment_prefix: str
    binding_old: str
    binding_new: str
    block_device: str
    system_mount: str
    system_root: str
    recovery_prop: str
    sar_prop: str
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["config_files"] = list(self.config_files)
        return MutableConfig(**values)


@dataclass
class MutableConfig:
    """Mutable configuration builder, frozen into `Config` for runtime use."""

    script: str = ""
    backup: str = ""
    mode: int = 0
    label: str = ""
    start_marker: str = ""
    end_marker: str = ""
    comment_prefix: str = ""
    binding_old: str = ""
    binding_new: str = ""
    block_device: str = ""
    system_mount: str = ""
    system_root: str = ""
    recovery_prop: str = ""
    sar_prop: str = ""
    config_files: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        m = cls()
        m.merge_toml(load_defaults_dict(), source=None)
        return m

    def merge_toml(self, data: TomlTable, *, source: str | None) -> MutableConfig:
        """Overlay the values found in a parsed TOML table.

        Unknown sections or keys and values of the wrong type are logged and
        ignored; the current value is kept.

        Args:
            data (TomlTable): Parsed TOML document.
            source (str | None): Where ``data`` came from (``None`` for defaults).

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        known_sections = set(_STRING_KEYS) | set(_INT_KEYS)
        for section in data:
            if section not in known_sections:
                logger.warning("Unknown config section [%s] in %s", section, source)

        for section in known_sections:
            table: TomlTable = get_table_value(data, section)
            known_keys = {k for k, _ in _STRING_KEYS.get(section, ())}
            known_keys |= {k for k, _ in _INT_KEYS.get(section, ())}
            for key in table:
                if key not in known_keys:
                    logger.warning("Unknown config key %s.%s in %s", section, key, source)

            for key, attr in _STRING_KEYS.get(section, ()):
                s = get_string_value_or_none(table, key, where=section)
                if s is not None:
                    setattr(self, attr, s)
            for key, attr in _INT_KEYS.get(section, ()):
                i = get_mode_value_or_none(table, key, where=section)
                if i is not None:
                    setattr(self, attr, i)

        if source is not None:
            self.config_files.append(source)
        return self

    def merge_file(self, path: Path) -> MutableConfig:
        """Overlay the TOML file at ``path``."""
        logger.info("Loading config from %s", path)
        return self.merge_toml(load_toml_dict(path), source=str(path))

    def sanitize(self) -> None:
        """Restore defaults for values that must not be empty."""
        defaults: MutableConfig | None = None
        for attr in _NON_EMPTY:
            if getattr(self, attr):
                continue
            if defaults is None:
                defaults = MutableConfig.from_defaults()
            logger.warning("Config value %r must not be empty; using default", attr)
            setattr(self, attr, getattr(defaults, attr))

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        self.sanitize()
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["config_files"] = tuple(self.config_files)
        return Config(**values)


def resolve_config_path() -> Path | None:
    """Return the config file to overlay, if any.

    ``GSIPATCH_CONFIG`` wins when set (a missing file is reported); otherwise
    ``/tmp/gsipatch.toml`` is used when it exists.
    """
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        p = Path(env_path)
        if not p.is_file():
            logger.warning("%s points to %s, which is not a file", ENV_CONFIG_PATH, p)
            return None
        return p
    default = Path(DEFAULT_CONFIG_PATH)
    return default if default.is_file() else None


def load_config() -> Config:
    """Build the runtime `Config` from defaults and the optional config file."""
    m: MutableConfig = MutableConfig.from_defaults()
    path: Path | None = resolve_config_path()
    if path is not None:
        m.merge_file(path)
    return m.freeze()
