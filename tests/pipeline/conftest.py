# topmark:header:start
#
#   project      : GsiPatch
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Helpers for driver tests.

`run_in_tree()` builds a `PatchContext` over a temporary device tree, runs the
whole checklist and returns the context together with the progress lines the
user would have seen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gsipatch.pipeline import PatchContext, run_patch
from tests.conftest import FakeRunner, make_config

if TYPE_CHECKING:
    from pathlib import Path

    from gsipatch.config import Config


def new_context(
    config: Config, runner: FakeRunner | None = None
) -> tuple[PatchContext, list[str]]:
    """Return a fresh context wired to a list collecting progress lines."""
    messages: list[str] = []
    ctx = PatchContext(config=config, runner=runner or FakeRunner(), progress=messages.append)
    return ctx, messages


def run_in_tree(
    root: Path, runner: FakeRunner | None = None, **overrides: Any
) -> tuple[PatchContext, list[str]]:
    """Run the full routine with paths under ``root``.

    Args:
        root (Path): Directory standing in for the device root.
        runner (FakeRunner | None): Runner to use; a default `FakeRunner` if None.
        **overrides (Any): Config overrides passed to `make_config`.

    Returns:
        tuple[PatchContext, list[str]]: The final context and the progress lines.
    """
    ctx, messages = new_context(make_config(root, **overrides), runner)
    return run_patch(ctx), messages
