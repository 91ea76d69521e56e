# topmark:header:start
#
#   project      : TabPrint
#   file         : __init__.py
#   file_relpath : src/tabprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TabPrint package.

TabPrint renders query-like result sets as column-aligned text tables for
interactive consoles. Rows can be printed incrementally in batches; cells may
span several lines and carry ANSI styling. The library entry point is
[`tabprint.table.TablePrinter`][tabprint.table.TablePrinter]; a small Click
CLI (``tabprint show``) renders JSON, NDJSON or CSV records.
"""

from __future__ import annotations
