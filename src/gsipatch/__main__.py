# topmark:header:start
#
#   project      : GsiPatch
#   file         : __main__.py
#   file_relpath : src/gsipatch/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The GsiPatch Authors
#
# topmark:header:end

"""Allow ``python -m gsipatch``."""

from __future__ import annotations

from gsipatch.cli.main import cli

if __name__ == "__main__":
    cli()
