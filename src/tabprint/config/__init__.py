# topmark:header:start
#
#   project      : TabPrint
#   file         : __init__.py
#   file_relpath : src/tabprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for TabPrint.

TabPrint has no configuration files. Runtime switches come from the
environment (``TABPRINT_LOG_LEVEL``) and from CLI flags; this package holds
the logging layer that honors them.

Public modules:
    - tabprint.config.logging
"""

from __future__ import annotations
