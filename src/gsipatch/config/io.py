# topmark:header:start
#
#   project      : GsiPatch
#   file         : io.py
#   file_relpath : src/gsipatch/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Load TOML configuration sources.

Runtime defaults are defined in code (`load_defaults_dict`) so the routine works
on a bare recovery ramdisk. An optional ``gsipatch.toml`` overlays them; it is
parsed with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from gsipatch.config.keys import Toml
from gsipatch.config.logging import get_logger
from gsipatch.constants import (
    APEX_BINDING_NEW,
    APEX_BINDING_OLD,
    COMMENT_PREFIX,
    RECOVERY_PROP,
    REGION_END_MARKER,
    REGION_START_MARKER,
    RW_SYSTEM_BACKUP,
    RW_SYSTEM_LABEL,
    RW_SYSTEM_MODE,
    RW_SYSTEM_SCRIPT,
    SAR_PROP,
    SYSTEM_BLOCK_DEVICE,
    SYSTEM_MOUNT_POINT,
    SYSTEM_ROOT_MOUNT_POINT,
)

if TYPE_CHECKING:
    from pathlib import Path

    from gsipatch.config.logging import GsiPatchLogger

TomlTable = dict[str, Any]

logger: GsiPatchLogger = get_logger(__name__)

MAX_MODE: int = 0o7777
OCTAL_DIGITS: frozenset[str] = frozenset("01234567")


def load_defaults_dict() -> TomlTable:
    """Return GsiPatch's runtime defaults as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_TARGET: {
            Toml.KEY_SCRIPT: RW_SYSTEM_SCRIPT,
            Toml.KEY_BACKUP: RW_SYSTEM_BACKUP,
            Toml.KEY_MODE: RW_SYSTEM_MODE,
            Toml.KEY_LABEL: RW_SYSTEM_LABEL,
        },
        Toml.SECTION_REGION: {
            Toml.KEY_START_MARKER: REGION_START_MARKER,
            Toml.KEY_END_MARKER: REGION_END_MARKER,
            Toml.KEY_COMMENT_PREFIX: COMMENT_PREFIX,
        },
        Toml.SECTION_BINDING: {
            Toml.KEY_OLD: APEX_BINDING_OLD,
            Toml.KEY_NEW: APEX_BINDING_NEW,
        },
        Toml.SECTION_DEVICE: {
            Toml.KEY_BLOCK_DEVICE: SYSTEM_BLOCK_DEVICE,
            Toml.KEY_SYSTEM_MOUNT: SYSTEM_MOUNT_POINT,
            Toml.KEY_SYSTEM_ROOT: SYSTEM_ROOT_MOUNT_POINT,
            Toml.KEY_RECOVERY_PROP: RECOVERY_PROP,
            Toml.KEY_SAR_PROP: SAR_PROP,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` or an empty dict when absent or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str, *, where: str) -> str | None:
    """Return a string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected string in %s.%s, got %s: %r", where, key, type(value).__name__, value)
    return None


def get_mode_value_or_none(table: TomlTable, key: str, *, where: str) -> int | None:
    """Return a file mode value, warning when present but not usable.

    Strings holding an octal literal (``"0o755"`` or ``"755"``) are accepted so
    that file modes read naturally in TOML. Integers must lie within
    ``0..0o7777``. An integer above ``0o777`` written with octal digits only
    (``mode = 755``) is refused, since TOML reads it as decimal.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning("Expected int in %s.%s, got bool: %r", where, key, value)
        return None
    if isinstance(value, int):
        if value > 0o777 and set(str(value)) <= OCTAL_DIGITS:
            logger.warning(
                "Ambiguous mode in %s.%s: %d is decimal in TOML; write 0o%d or \"%d\"",
                where,
                key,
                value,
                value,
                value,
            )
            return None
        if not 0 <= value <= MAX_MODE:
            logger.warning("Mode out of range in %s.%s: %r", where, key, value)
            return None
        return value
    if isinstance(value, str):
        try:
            mode = int(value.removeprefix("0o"), 8)
        except ValueError:
            pass
        else:
            if 0 <= mode <= MAX_MODE:
                return mode
            logger.warning("Mode out of range in %s.%s: %r", where, key, value)
            return None
    logger.warning("Expected int in %s.%s, got %s: %r", where, key, type(value).__name__, value)
    return None
