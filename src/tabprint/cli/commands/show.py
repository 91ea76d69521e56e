# topmark:header:start
#
#   project      : TabPrint
#   file         : show.py
#   file_relpath : src/tabprint/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TabPrint `show` command.

Reads records from a file or STDIN and renders them as an aligned table on
stdout, followed by a row count footer.

Columns come from repeated ``--column name[:Label]`` options, or default to
the keys of the first record. With ``--batch-size N`` the records are printed
``N`` at a time; every batch computes its own column widths, the header is
sized by the first one.

Examples:
    ```console
    $ printf '{"id": 1, "name": "alice"}\\n{"id": 2, "name": null}\\n' | tabprint show
     id | name
    ----+-------
      1 | alice
      2 | NULL
    (2 rows)
    ```
"""

from __future__ import annotations

from itertools import chain

import click

from tabprint.cli.cmd_common import get_console
from tabprint.cli.console import ConsoleSink
from tabprint.cli.errors import (
    TabprintInputError,
    TabprintIOError,
    TabprintRenderError,
    TabprintUsageError,
)
from tabprint.cli.io import InputFormat, batched, iter_records, mark_last, open_input
from tabprint.config.logging import TabprintLogger, get_logger
from tabprint.constants import DEFAULT_ENCODING, STDIN_SENTINEL
from tabprint.core.errors import InvariantViolationError
from tabprint.table.columns import ColumnDescriptor
from tabprint.table.printer import TablePrinter, footer_text

logger: TabprintLogger = get_logger(__name__)


def parse_column_options(specs: tuple[str, ...]) -> list[ColumnDescriptor]:
    """Parse ``--column`` values into descriptors.

    Raises:
        TabprintUsageError: If a specification has an empty field name or a
            multi-line label.
    """
    try:
        return [ColumnDescriptor.parse(spec) for spec in specs]
    except ValueError as exc:
        raise TabprintUsageError(str(exc)) from exc


@click.command(
    name="show",
    help="Render records from FILE (or STDIN when FILE is '-' or omitted) as a table.",
)
@click.argument(
    "input_path",
    metavar="FILE",
    required=False,
    default=STDIN_SENTINEL,
    type=click.Path(dir_okay=False, allow_dash=True),
)
@click.option(
    "-f",
    "--input-format",
    "input_format",
    type=click.Choice([f.value for f in InputFormat], case_sensitive=False),
    default=InputFormat.NDJSON.value,
    show_default=True,
    help="Record format of the input.",
)
@click.option(
    "-c",
    "--column",
    "column_specs",
    multiple=True,
    metavar="NAME[:LABEL]",
    help="Column to display (repeatable). Defaults to the keys of the first record.",
)
@click.option(
    "--batch-size",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Print records N at a time (0 prints all records as one batch).",
)
@click.option(
    "--encoding",
    default=DEFAULT_ENCODING,
    show_default=True,
    help="Text encoding of the input.",
)
def show_command(
    *,
    input_path: str,
    input_format: str,
    column_specs: tuple[str, ...],
    batch_size: int,
    encoding: str,
) -> None:
    """Render records as an aligned table.

    Args:
        input_path (str): Path to read, or ``-`` for STDIN.
        input_format (str): One of the `InputFormat` values.
        column_specs (tuple[str, ...]): Raw ``--column`` values.
        batch_size (int): Records per printed batch; 0 for a single batch.
        encoding (str): Input text encoding.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    columns = parse_column_options(column_specs)

    with open_input(input_path, encoding=encoding) as stream:
        records = iter_records(stream, InputFormat(input_format.lower()))

        if not columns:
            first = next(records, None)
            if first is None:
                console.warn("No records and no --column given; nothing to display.")
                console.print(footer_text(0))
                return
            try:
                columns = [ColumnDescriptor(name=key, description=key) for key in first]
            except ValueError as exc:
                raise TabprintInputError(f"Cannot use record keys as columns: {exc}") from exc
            records = chain([first], records)

        if console.enable_color:
            columns = [
                ColumnDescriptor(name=c.name, description=console.styled(c.description, bold=True))
                for c in columns
            ]

        printer = TablePrinter(columns, ConsoleSink(console))
        batches = 0
        try:
            for batch, last in mark_last(batched(records, batch_size)):
                printer.print_rows(batch, final_batch=last)
                batches += 1
            printer.finish()
        except InvariantViolationError as exc:
            raise TabprintRenderError(str(exc)) from exc
        except OSError as exc:
            raise TabprintIOError(f"I/O error while rendering: {exc}") from exc

    logger.info("Rendered %d row(s) in %d batch(es)", printer.row_count, batches)
