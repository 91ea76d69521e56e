# topmark:header:start
#
#   project      : TabPrint
#   file         : __init__.py
#   file_relpath : src/tabprint/table/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Aligned table rendering for console output.

Public modules:
    - tabprint.table.columns
    - tabprint.table.printer
    - tabprint.table.rows
    - tabprint.table.text
"""

from __future__ import annotations

from tabprint.table.columns import ColumnDescriptor
from tabprint.table.printer import TablePrinter, TextSink
from tabprint.table.rows import MISSING, AttributeRow, KeyedRow, MappingRow, RowLike, as_row

__all__ = [
    "MISSING",
    "AttributeRow",
    "ColumnDescriptor",
    "KeyedRow",
    "MappingRow",
    "RowLike",
    "TablePrinter",
    "TextSink",
    "as_row",
]
