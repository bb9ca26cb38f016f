# topmark:header:start
#
#   project      : GsiPatch
#   file         : binding.py
#   file_relpath : src/gsipatch/pipeline/steps/binding.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Binding step: fix the ``libstagefright_foundation.so`` bind mount.

Android 11+ GSIs bind the library from ``/system/system_ext/apex/``, which does
not resolve on these tablets; the path must be ``/apex/``. Android 10 GSIs do
not contain the old path, so the step is a no-op there.
See https://github.com/phhusson/treble_experimentations/issues/1917
"""

from __future__ import annotations

from dataclasses import dataclass

from gsipatch.config.logging import get_logger
from gsipatch.io.script import atomic_write_lines, read_lines
from gsipatch.pipeline.context import PatchContext
from gsipatch.pipeline.steps.base import BaseStep
from gsipatch.system.metadata import restore_metadata
from gsipatch.transform.integrity import verify_line_count
from gsipatch.transform.substitute import count_occurrences, replace_literal
from gsipatch.utils.diff import render_patch, unified_diff

logger = get_logger(__name__)


@dataclass
class BindingStep(BaseStep):
    """Rewrite the apex bind-mount path in the patched script."""

    name: str = "binding"

    def run(self, ctx: PatchContext) -> None:
        """Replace every occurrence of the old path, then restore metadata."""
        cfg = ctx.config
        ctx.progress("Correcting mount bindings for Android 11+ GSIs...")

        lines: list[str] = read_lines(cfg.script)
        found: int = count_occurrences(lines, cfg.binding_old)
        ctx.report.bindings_replaced = found
        if found:
            updated: list[str] = replace_literal(lines, cfg.binding_old, cfg.binding_new)
            verify_line_count(lines, updated, path=cfg.script)
            logger.debug(
                "Binding patch:\n%s", render_patch(unified_diff(lines, updated, cfg.script))
            )
            atomic_write_lines(cfg.script, updated)
        else:
            logger.info("No %s bindings in %s", cfg.binding_old, cfg.script)
        restore_metadata(ctx.runner, cfg.script, mode=cfg.mode, label=cfg.label)
