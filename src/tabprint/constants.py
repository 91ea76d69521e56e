# topmark:header:start
#
#   project      : TabPrint
#   file         : constants.py
#   file_relpath : src/tabprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TabPrint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TABPRINT_VERSION: str = get_version("tabprint")

# Read-side defaults for `tabprint show`
DEFAULT_ENCODING: str = "utf-8"
STDIN_SENTINEL: str = "-"
