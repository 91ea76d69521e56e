# topmark:header:start
#
#   project      : TabPrint
#   file         : printer.py
#   file_relpath : src/tabprint/table/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Streaming, column-aligned table printer.

A [`TablePrinter`][tabprint.table.printer.TablePrinter] is bound to a fixed
list of columns and a text sink. Rows are printed in batches; each batch
computes its own column widths from the header labels and the batch's cells,
so two batches may render with different widths. The header is emitted once,
sized by the first batch.

Output layout (rendering widths of 2 and 5)::

     id | name
    ----+-------
      1 | alice
      2 | multi+
        | line
    (2 rows)

Cells whose value parses as a finite number are right-aligned, everything
else is left-aligned. A cell spanning several physical lines gets a trailing
``+`` on every line but its last, except in a single-row final batch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tabprint.config.logging import TabprintLogger, get_logger
from tabprint.core.errors import InvalidArgumentError
from tabprint.table.columns import freeze_columns
from tabprint.table.rows import MISSING, as_row
from tabprint.table.text import (
    align,
    center,
    is_numeric,
    max_line_length,
    split_lines,
    visible_length,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tabprint.table.columns import ColumnDescriptor, ColumnSpec
    from tabprint.table.rows import RowLike

logger: TabprintLogger = get_logger(__name__)

NULL_TEXT = "NULL"
COLUMN_SEPARATOR = "|"
HEADER_JUNCTION = "+"
CONTINUATION_MARKER = "+"
PADDING = 1


class TextSink(Protocol):
    """Append-only, flushable text target (``io.TextIOBase`` satisfies it)."""

    def write(self, s: str, /) -> object:
        """Append ``s`` to the sink."""
        ...

    def flush(self) -> object:
        """Push buffered output to its destination."""
        ...


def format_value(value: object) -> str:
    """Return the display text of a field value: ``NULL`` for None, else ``str(value)``."""
    return NULL_TEXT if value is None else str(value)


def footer_text(row_count: int) -> str:
    """Return the summary line for ``row_count`` rows, e.g. ``(1 row)`` or ``(3 rows)``."""
    return f"({row_count} row{'' if row_count == 1 else 's'})"


class TablePrinter:
    """Print rows as an aligned text table, one batch at a time.

    Instances are not thread-safe; a single owner must serialize calls.

    Args:
        columns (Iterable[ColumnSpec]): Ordered column descriptors, or
            ``(name, description)`` pairs. Copied on construction.
        sink (TextSink): Destination for the rendered text. Not closed by the printer.

    Raises:
        InvalidArgumentError: If ``columns`` or ``sink`` is missing, ``sink``
            cannot be written to, or a column label spans several lines.
    """

    def __init__(self, columns: Iterable[ColumnSpec] | None, sink: TextSink | None) -> None:
        if columns is None:
            raise InvalidArgumentError("columns is None")
        if sink is None:
            raise InvalidArgumentError("sink is None")
        if not callable(getattr(sink, "write", None)):
            raise InvalidArgumentError(f"sink is not writable: {sink!r}")
        try:
            self._columns: tuple[ColumnDescriptor, ...] = freeze_columns(columns)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(str(exc)) from exc
        self._sink: TextSink = sink
        self._header_emitted: bool = False
        self._row_count: int = 0

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        """The frozen column descriptors."""
        return self._columns

    @property
    def header_emitted(self) -> bool:
        """Whether the header and separator lines have been written."""
        return self._header_emitted

    @property
    def row_count(self) -> int:
        """Cumulative number of rows passed to ``print_rows``."""
        return self._row_count

    def cell_text(self, row: RowLike, column: ColumnDescriptor) -> str:
        """Return the formatted text of ``column`` in ``row``.

        A field the row cannot provide, or whose value cannot be converted to
        text, renders as an empty string; a null value renders as ``NULL``.
        """
        value = row.lookup(column.name)
        if value is MISSING:
            return ""
        try:
            return format_value(value)
        except Exception as exc:
            logger.trace(
                "Field %r (%s) has no text form: %s", column.name, type(value).__name__, exc
            )
            return ""

    def print_rows(self, rows: Iterable[object], final_batch: bool = False) -> None:
        """Render a batch of rows and flush the sink.

        The first call also writes the header and separator lines, sized by
        this batch. Multi-line cells carry a continuation marker on each line
        but their last when the batch is not final or the cumulative row
        count (including this batch) exceeds one.

        Args:
            rows (Iterable[object]): Row objects; anything
                [`as_row`][tabprint.table.rows.as_row] accepts.
            final_batch (bool): True if no further rows will follow.

        Raises:
            InvariantViolationError: If a cell does not fit its computed width.
            OSError: Propagated from the sink.
        """
        batch: list[list[str]] = []
        for obj in rows:
            row = as_row(obj)
            batch.append([self.cell_text(row, column) for column in self._columns])
        self._row_count += len(batch)

        widths: list[int] = [max(1, visible_length(c.description)) for c in self._columns]
        for cells in batch:
            for i, text in enumerate(cells):
                widths[i] = max(widths[i], max_line_length(text))
        logger.trace("Batch of %d row(s), column widths %s", len(batch), widths)

        if not self._header_emitted:
            self._header_emitted = True
            self._write_header(widths)

        mark_continuations = not final_batch or self._row_count > 1
        for cells in batch:
            self._write_row(cells, widths, mark_continuations)

        self._flush()

    def finish(self) -> None:
        """Write the header if nothing was printed yet, then the row count footer.

        Calling ``finish`` again repeats the footer with the same count.

        Raises:
            OSError: Propagated from the sink.
        """
        self.print_rows([], final_batch=True)
        logger.debug("Table finished after %d row(s)", self._row_count)
        self._sink.write(footer_text(self._row_count) + "\n")
        self._flush()

    def _write_header(self, widths: list[int]) -> None:
        logger.debug("Writing header for %d column(s)", len(self._columns))
        labels = (
            center(column.description, width, PADDING)
            for column, width in zip(self._columns, widths)
        )
        self._sink.write(COLUMN_SEPARATOR.join(labels) + "\n")
        self._sink.write(
            HEADER_JUNCTION.join("-" * (width + 2 * PADDING) for width in widths) + "\n"
        )

    def _write_row(self, cells: list[str], widths: list[int], mark_continuations: bool) -> None:
        column_lines = [split_lines(text) for text in cells]
        numeric = [is_numeric(text) for text in cells]
        line_count = max((len(lines) for lines in column_lines), default=1)

        for line in range(line_count):
            segments: list[str] = []
            for lines, width, right in zip(column_lines, widths, numeric):
                text = lines[line] if line < len(lines) else ""
                out = align(text, width, PADDING, right=right)
                if mark_continuations and line + 1 < len(lines):
                    out = out[:-1] + CONTINUATION_MARKER
                segments.append(out)
            self._sink.write(COLUMN_SEPARATOR.join(segments) + "\n")

    def _flush(self) -> None:
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()
