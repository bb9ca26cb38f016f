# topmark:header:start
#
#   project      : GsiPatch
#   file         : __init__.py
#   file_relpath : src/gsipatch/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Click-based command-line interface for GsiPatch."""

from __future__ import annotations
