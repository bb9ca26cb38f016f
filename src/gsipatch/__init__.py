# topmark:header:start
#
#   project      : GsiPatch
#   file         : __init__.py
#   file_relpath : src/gsipatch/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""GsiPatch package.

GsiPatch is a one-shot maintenance routine for phh-based GSI system images on
Lenovo TB-X605F/L and TB-X705F/L tablets. Run from recovery, it comments out the
read-write remount block in ``/system/bin/rw-system.sh`` and corrects the apex
bind-mount path used by Android 11+ GSIs.
"""

from __future__ import annotations
