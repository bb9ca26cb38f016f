# topmark:header:start
#
#   project      : GsiPatch
#   file         : script.py
#   file_relpath : src/gsipatch/io/script.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Read, back up and atomically replace the target script.

Lines are kept with their terminators and written back verbatim, so CRLF files and a missing final newline survive a round trip.
Undecodable bytes are carried through with ``surrogateescape``.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from gsipatch.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gsipatch.config.logging import GsiPatchLogger

logger: GsiPatchLogger = get_logger(__name__)

ENCODING: str = "utf-8"
ERRORS: str = "surrogateescape"


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of ``path`` with their line terminators.

    Only LF, CRLF and CR end a line. Form feeds, NEL and the Unicode line
    separators stay inside the line that holds them.
    """
    with open(path, encoding=ENCODING, errors=ERRORS, newline="") as fh:
        lines: list[str] = list(fh)
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def backup_once(path: str | Path, backup_path: str | Path) -> bool:
    """Copy ``path`` to ``backup_path`` unless the backup already exists.

    An existing backup holds the pristine script from the first run and is
    never overwritten.

    Returns:
        bool: True if a new backup was written.
    """
    backup = Path(backup_path)
    if backup.exists():
        logger.info("Backup %s already exists; keeping it", backup)
        return False
    shutil.copy2(path, backup)
    logger.info("Backed up %s to %s", path, backup)
    return True


def atomic_write_lines(path: str | Path, lines: Sequence[str]) -> int:
    """Replace ``path`` with ``lines`` through a temporary sibling file.

    The temporary file lives in the target's directory so that the final
    `os.replace` is a same-filesystem rename. It is removed on every failure
    path; the target is either fully old or fully new.

    Returns:
        int: Number of bytes written.
    """
    target = Path(path)
    data: bytes = "".join(lines).encode(ENCODING, ERRORS)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        _discard_temp(tmp_name)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), target)
    return len(data)


def _discard_temp(path: str) -> None:
    """Remove a leftover temporary file, logging (not raising) on failure."""
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove temporary file %s: %s", path, exc)
