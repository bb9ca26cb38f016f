# topmark:header:start
#
#   project      : GsiPatch
#   file         : __init__.py
#   file_relpath : src/gsipatch/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Framework-agnostic core types: exit codes and the error taxonomy."""

from __future__ import annotations
