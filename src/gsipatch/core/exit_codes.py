# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/gsipatch/core/exit_codes.py
#   project      : GsiPatch
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Defines the exit codes returned by the GsiPatch CLI.

The routine is a linear checklist: either every step succeeded, or it stopped
at the first failing step. Wrong invocation, missing privileges, a failing
external tool and an integrity violation all map to the same failure code so
that recovery scripts only need to test for non-zero.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for GsiPatch.

    Attributes:
        SUCCESS (int): The script was patched (or was already patched) and
            ``/system`` was released again.
        FAILURE (int): A precondition, external tool, integrity check or usage
            check failed; nothing after the failing step was executed.
    """

    SUCCESS = 0
    FAILURE = 1
