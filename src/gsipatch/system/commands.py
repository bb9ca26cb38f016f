# topmark:header:start
#
#   project      : GsiPatch
#   file         : commands.py
#   file_relpath : src/gsipatch/system/commands.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Run external OS utilities (mount, e2fsck, resize2fs, getprop, chcon).

Commands are passed as argv lists and never through a shell. The driver talks
to a `CommandRunner` so that tests can substitute a recording fake for the real
`SubprocessRunner`.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from gsipatch.config.logging import get_logger
from gsipatch.core.errors import ExternalToolError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gsipatch.config.logging import GsiPatchLogger

logger: GsiPatchLogger = get_logger(__name__)

# Shell convention for "command not found"
RC_NOT_FOUND: int = 127


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True when the command exited with status 0."""
        return self.returncode == 0


class CommandRunner(Protocol):
    """Protocol for objects able to run an external command."""

    def run(self, argv: Sequence[str]) -> CommandResult:
        """Run ``argv`` to completion and return its result.

        Implementations must not raise for a non-zero exit status; callers
        decide whether a failure is fatal.
        """
        ...


class SubprocessRunner:
    """`CommandRunner` backed by `subprocess.run`."""

    def run(self, argv: Sequence[str]) -> CommandResult:
        """Run ``argv`` and capture its text output."""
        args: tuple[str, ...] = tuple(argv)
        logger.info("Running command: %s", " ".join(args))
        try:
            proc = subprocess.run(args, check=False, capture_output=True, text=True)
        except FileNotFoundError as exc:
            logger.error("Command not found: %s (%s)", args[0], exc)
            return CommandResult(argv=args, returncode=RC_NOT_FOUND, stderr=str(exc))

        result = CommandResult(
            argv=args,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
        if result.ok:
            logger.debug("Command '%s' executed successfully.", " ".join(args))
        else:
            logger.debug(
                "Command '%s' exited with %d: %s", " ".join(args), result.returncode, result.stderr
            )
        return result


def run_checked(runner: CommandRunner, argv: Sequence[str], *, action: str) -> CommandResult:
    """Run ``argv`` and raise `ExternalToolError` if it fails.

    Args:
        runner (CommandRunner): Runner used to execute the command.
        argv (Sequence[str]): The command line.
        action (str): What failed, phrased for the error message
            (e.g. ``"failed to resize system filesystem to partition size"``).

    Returns:
        CommandResult: The successful result.

    Raises:
        ExternalToolError: If the command exited with a non-zero status.
    """
    result: CommandResult = runner.run(argv)
    if not result.ok:
        raise ExternalToolError(action, result.argv, result.returncode)
    return result
