# topmark:header:start
#
#   project      : GsiPatch
#   file         : test_console_errors.py
#   file_relpath : tests/cli/test_console_errors.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Console output streams and the Click error wrapper."""

from __future__ import annotations

import io

import click

from gsipatch.cli.console import ClickConsole
from gsipatch.cli.errors import GsiPatchCliError
from gsipatch.core.errors import PreconditionError
from gsipatch.core.exit_codes import ExitCode


def test_console_separates_streams() -> None:
    """Progress goes to ``out``, errors to ``err``."""
    out, err = io.StringIO(), io.StringIO()
    console = ClickConsole(enable_color=False, out=out, err=err)

    console.print("Running e2fsck...")
    console.error("ERROR: boom")

    assert out.getvalue() == "Running e2fsck...\n"
    assert err.getvalue() == "ERROR: boom\n"


def test_styled_is_plain_without_color() -> None:
    """Styling is a no-op when color is disabled."""
    assert ClickConsole(enable_color=False).styled("x", fg="red") == "x"
    assert ClickConsole(enable_color=True).styled("x", fg="red") == click.style("x", fg="red")


def test_cli_error_carries_message_and_exit_code() -> None:
    """The wrapper formats like the original tool and keeps the exit code."""
    exc = GsiPatchCliError(PreconditionError("not root user."))

    assert exc.format_message() == "ERROR: not root user."
    assert exc.exit_code == ExitCode.FAILURE


def test_cli_error_without_console_falls_back_to_click() -> None:
    """Outside a Click context the message still reaches the given stream."""
    buf = io.StringIO()
    GsiPatchCliError(PreconditionError("not in recovery mode.")).show(file=buf)
    assert buf.getvalue() == "ERROR: not in recovery mode.\n"
