# topmark:header:start
#
#   project      : GsiPatch
#   file         : __init__.py
#   file_relpath : src/gsipatch/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Public configuration API for GsiPatch.

Re-exports the configuration model so callers can write
``from gsipatch.config import Config, MutableConfig, load_config``.
"""

from __future__ import annotations

from gsipatch.config.model import Config, MutableConfig, load_config, resolve_config_path

__all__ = [
    "Config",
    "MutableConfig",
    "load_config",
    "resolve_config_path",
]
