# topmark:header:start
#
#   project      : TabPrint
#   file         : __main__.py
#   file_relpath : src/tabprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TabPrint via ``python -m tabprint``.

Delegates to :func:`tabprint.cli.main.cli`, the same entry point as the
``tabprint`` console script.

Examples:
    Render newline-delimited JSON records from a file::

        python -m tabprint show rows.ndjson
"""

from __future__ import annotations

from tabprint.cli.main import cli

if __name__ == "__main__":
    cli()
