# topmark:header:start
#
#   project      : TabPrint
#   file         : __init__.py
#   file_relpath : src/tabprint/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends."""

from __future__ import annotations
