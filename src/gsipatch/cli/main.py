# topmark:header:start
#
#   project      : GsiPatch
#   file         : main.py
#   file_relpath : src/gsipatch/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""GsiPatch command-line entry point.

The command takes no arguments. Anything on the command line, ``--help``
included, prints the usage text and exits with a failure code, so a mistyped
invocation in a recovery shell never touches the system partition.

Configuration comes from the built-in defaults and an optional TOML file
(``GSIPATCH_CONFIG`` or ``/tmp/gsipatch.toml``); internal logging is enabled
through ``GSIPATCH_LOG_LEVEL``.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import click

from gsipatch.cli.console import ClickConsole
from gsipatch.cli.errors import GsiPatchCliError
from gsipatch.config import load_config
from gsipatch.config.logging import get_logger, resolve_env_log_level, setup_logging
from gsipatch.constants import GSIPATCH_VERSION
from gsipatch.core.errors import UsageError
from gsipatch.pipeline import PatchContext, run_patch
from gsipatch.system.commands import SubprocessRunner

if TYPE_CHECKING:
    from gsipatch.cli.console import ConsoleLike
    from gsipatch.config import Config
    from gsipatch.system.commands import CommandRunner

logger = get_logger(__name__)

USAGE_TEXT: str = """\

usage:  gsipatch

        modifies the /system/bin/rw-system.sh file on a phh-based
        GSI system image to comment out the attempt to remount
        /system as rw and the attempt to run resize2fs at boottime.
        It also corrects the mount binding for the library
        stagefright-foundation.so in Android 11 GSIs.

On the Lenovo TB-X605F/L and TB-X705F/L, the tablet does not allow
the system partition to be remounted as read-write during boot.
When the GSI ROM does this, the tablet aborts the init process and
freezes on the Lenovo logo before the boot animation.

This command does three things:
 1. runs the resize2fs command that rw-system.sh is trying to run.
 2. modifies the rw-system.sh file on the GSI ROM to stop it from
    remounting /system rw during boot.
 3. corrects binding of libstagefright_foundation.so

This command is only required if you are loading a phhusson-based
GSI ROM over the Lenovo stock Pie ROM.  It is not required when
loading over the Lenovo stock Oreo ROM.

Run this command from recovery (TWRP).  It is assumed that you have
flashed a phhusson-based GSI ROM to the /system partition already.

This command is only supported for Lenovo TB-X605F/L and TB-X705F/L.
 """


def init_common_state(ctx: click.Context) -> None:
    """Initialize shared state (logging & console) on the Click context.

    Tests may pre-seed ``ctx.obj`` (e.g. with a ``"runner"``); existing keys are kept.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
    """
    ctx.obj = ctx.obj or {}

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = sys.stdout.isatty() and "NO_COLOR" not in os.environ
    ctx.color = enable_color
    ctx.obj.setdefault("console", ClickConsole(enable_color=enable_color))


@click.command(
    name="gsipatch",
    add_help_option=False,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Patch rw-system.sh on a phh-based GSI so the tablet can boot."""
    init_common_state(ctx)
    console: ConsoleLike = ctx.obj["console"]
    logger.info("GsiPatch %s", GSIPATCH_VERSION)

    if ctx.args:
        console.print(USAGE_TEXT)
        raise GsiPatchCliError(UsageError(f"unexpected arguments: {' '.join(ctx.args)}"))

    config: Config = load_config()
    runner: CommandRunner = ctx.obj.get("runner") or SubprocessRunner()
    logger.debug("Effective config: %s", config)

    patch_ctx = PatchContext(config=config, runner=runner, progress=console.print)
    patch_ctx = run_patch(patch_ctx)
    if patch_ctx.error is not None:
        raise GsiPatchCliError(patch_ctx.error)

    if patch_ctx.report.already_patched:
        console.print(
            console.styled("Nothing to change: rw-system.sh was already patched.", fg="yellow")
        )
    console.print(" ")
    console.print(console.styled("...finished.", fg="bright_green"))


if __name__ == "__main__":
    cli()
