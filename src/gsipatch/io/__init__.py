# topmark:header:start
#
#   project      : GsiPatch
#   file         : __init__.py
#   file_relpath : src/gsipatch/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""File I/O for the patched script: read, back up, atomically replace."""

from __future__ import annotations
