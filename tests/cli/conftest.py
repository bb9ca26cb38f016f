# topmark:header:start
#
#   project      : GsiPatch
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""CLI test helpers.

`run_cli()` invokes the Click command with a `FakeRunner` injected through
Click's context object, so no real ``mount`` or ``resize2fs`` is ever called.
`point_config_at()` writes a ``gsipatch.toml`` that relocates every device
path under a temporary directory and exports it through ``GSIPATCH_CONFIG``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import tomlkit
from click.testing import CliRunner, Result

from gsipatch.cli.main import cli
from gsipatch.config.keys import Toml
from gsipatch.constants import ENV_CONFIG_PATH
from gsipatch.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

    from tests.conftest import FakeRunner


def run_cli(argv: Sequence[str] | None, runner: FakeRunner) -> Result:
    """Invoke the CLI with ``runner`` standing in for the OS utilities.

    Args:
        argv (Sequence[str] | None): CLI argument vector; the command accepts none.
        runner (FakeRunner): Recording runner injected via ``obj``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    return CliRunner().invoke(cli, argv, obj={"runner": runner})


def point_config_at(root: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a config file relocating the target paths under ``root``.

    Returns:
        Path: The config file, also exported as ``GSIPATCH_CONFIG``.
    """
    doc = tomlkit.document()
    target = tomlkit.table()
    target.add(Toml.KEY_SCRIPT, str(root / "system" / "bin" / "rw-system.sh"))
    target.add(Toml.KEY_BACKUP, str(root / "system" / "bin" / "rw-system.bak"))
    doc.add(Toml.SECTION_TARGET, target)
    device = tomlkit.table()
    device.add(Toml.KEY_SYSTEM_MOUNT, str(root / "system"))
    device.add(Toml.KEY_SYSTEM_ROOT, str(root / "system_root"))
    doc.add(Toml.SECTION_DEVICE, device)

    path = root / "gsipatch.toml"
    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    monkeypatch.setenv(ENV_CONFIG_PATH, str(path))
    return path


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command exited successfully."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:  # noqa: N802
    """Assert that the command exited with the failure code."""
    assert result.exit_code == ExitCode.FAILURE, result.output
