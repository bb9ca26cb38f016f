# topmark:header:start
#
#   project      : GsiPatch
#   file         : errors.py
#   file_relpath : src/gsipatch/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Click-facing wrapper for GsiPatch errors.

The driver reports failures as `GsiPatchError` instances. The CLI wraps them in
`GsiPatchCliError` so Click prints them and exits with the error's exit code.

Styling:
    The error prefers the project console if available (see `show()`); if no
    console is present in the Click context, it falls back to Click's default.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from gsipatch.core.errors import GsiPatchError


class GsiPatchCliError(click.ClickException):
    """A `GsiPatchError` surfaced on the command line as ``ERROR: <message>``."""

    def __init__(self, error: GsiPatchError) -> None:
        super().__init__(error.message)
        self.error: GsiPatchError = error
        self.exit_code = int(error.exit_code)

    def format_message(self) -> str:
        """Return the message in the ``ERROR: ...`` form of the original tool."""
        return f"ERROR: {self.message}"

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            click.echo(self.format_message(), file=file, err=True)
            return
        console.error(self.format_message())
