# topmark:header:start
#
#   project      : TabPrint
#   file         : __init__.py
#   file_relpath : src/tabprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for TabPrint.

Public modules:
    - tabprint.cli.main: the ``tabprint`` command group
    - tabprint.cli.commands: subcommands (``show``, ``version``)
"""

from __future__ import annotations
