# topmark:header:start
#
#   project      : GsiPatch
#   file         : errors.py
#   file_relpath : src/gsipatch/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Exceptions raised by the GsiPatch driver.

Every check is local and fatal: the driver stops at the first error and the
CLI reports its message together with the error's exit code. The region
transform itself never raises for well-formed input; only the line-count
postcondition around it can surface an `IntegrityError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gsipatch.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


class GsiPatchError(Exception):
    """Base class for all GsiPatch errors."""

    exit_code: ExitCode = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class UsageError(GsiPatchError):
    """The command was invoked with arguments; it accepts none."""


class PreconditionError(GsiPatchError):
    """Wrong privilege level or wrong device mode."""


class ResourceMissingError(GsiPatchError):
    """A file the routine operates on does not exist."""


class ExternalToolError(GsiPatchError):
    """An external OS utility returned a non-zero exit status.

    Attributes:
        argv (tuple[str, ...]): The command that failed.
        returncode (int): Its exit status.
    """

    def __init__(self, action: str, argv: Sequence[str], returncode: int) -> None:
        super().__init__(f"{action} with rc={returncode}")
        self.action: str = action
        self.argv: tuple[str, ...] = tuple(argv)
        self.returncode: int = returncode


class IntegrityError(GsiPatchError):
    """The transformed document does not have the same number of lines as the source."""

    def __init__(self, path: str, expected: int, actual: int) -> None:
        super().__init__(
            f"unexpected. Not all lines in {path} would be copied "
            f"(expected {expected}, got {actual}). Aborting..."
        )
        self.path: str = path
        self.expected: int = expected
        self.actual: int = actual
