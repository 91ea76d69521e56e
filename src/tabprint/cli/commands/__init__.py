# topmark:header:start
#
#   project      : TabPrint
#   file         : __init__.py
#   file_relpath : src/tabprint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TabPrint CLI subcommands."""

from __future__ import annotations
