# topmark:header:start
#
#   project      : TabPrint
#   file         : io.py
#   file_relpath : src/tabprint/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for Click commands.

This module turns a path (or ``-`` for STDIN) into a lazy stream of records,
and groups records into batches for incremental table output:

- NDJSON: one JSON object per line; blank lines are skipped. Streams.
- JSON: a single object or an array of objects. Loaded at once.
- CSV: first line holds the field names. Streams.

Records are plain mappings; missing CSV fields are left out so that the table
renders them as empty cells rather than ``NULL``.
"""

from __future__ import annotations

import csv
import json
import sys
from contextlib import contextmanager
from enum import Enum
from itertools import islice
from typing import TYPE_CHECKING, TextIO, TypeVar

from tabprint.cli.errors import TabprintFileNotFoundError, TabprintInputError, TabprintIOError
from tabprint.config.logging import TabprintLogger, get_logger
from tabprint.constants import DEFAULT_ENCODING, STDIN_SENTINEL

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")

Record = dict[str, object]

logger: TabprintLogger = get_logger(__name__)


class InputFormat(str, Enum):
    """Supported record formats for `tabprint show`."""

    NDJSON = "ndjson"
    JSON = "json"
    CSV = "csv"


@contextmanager
def open_input(path: str, *, encoding: str = DEFAULT_ENCODING) -> Iterator[TextIO]:
    """Open ``path`` for reading, or yield STDIN for ``-``.

    STDIN is never closed.

    Raises:
        TabprintFileNotFoundError: If ``path`` does not exist.
        TabprintIOError: If ``path`` cannot be opened.
    """
    if path == STDIN_SENTINEL:
        yield sys.stdin
        return
    try:
        fh = open(path, encoding=encoding, newline="")  # noqa: SIM115
    except FileNotFoundError as exc:
        raise TabprintFileNotFoundError(f"No such file: {path}") from exc
    except OSError as exc:
        raise TabprintIOError(f"Cannot open {path}: {exc.strerror or exc}") from exc
    logger.debug("Reading records from %s (%s)", path, encoding)
    with fh:
        yield fh


def _json_cell(value: object) -> object:
    # Keep JSON spelling for booleans and containers; None stays None (NULL).
    if isinstance(value, (bool, dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return value


def _as_record(obj: object, where: str) -> Record:
    if not isinstance(obj, dict):
        raise TabprintInputError(f"{where}: expected a JSON object, got {type(obj).__name__}")
    return {str(k): _json_cell(v) for k, v in obj.items()}


def _iter_ndjson(stream: TextIO) -> Iterator[Record]:
    for lineno, line in enumerate(stream, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TabprintInputError(f"line {lineno}: invalid JSON: {exc.msg}") from exc
        yield _as_record(obj, f"line {lineno}")


def _iter_json(stream: TextIO) -> Iterator[Record]:
    try:
        data = json.load(stream)
    except json.JSONDecodeError as exc:
        raise TabprintInputError(
            f"invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        ) from exc
    items = data if isinstance(data, list) else [data]
    for index, obj in enumerate(items):
        yield _as_record(obj, f"item {index}")


def _iter_csv(stream: TextIO) -> Iterator[Record]:
    try:
        for row in csv.DictReader(stream):
            # restkey (None) holds surplus fields; restval (None) marks absent ones
            yield {k: v for k, v in row.items() if k is not None and v is not None}
    except csv.Error as exc:
        raise TabprintInputError(f"invalid CSV: {exc}") from exc


def iter_records(stream: TextIO, input_format: InputFormat) -> Iterator[Record]:
    """Yield records parsed from ``stream``.

    Args:
        stream (TextIO): Open text stream.
        input_format (InputFormat): Record format of the stream.

    Yields:
        Record: One mapping per record, in input order.

    Raises:
        TabprintInputError: If the input is malformed or cannot be decoded.
    """
    readers = {
        InputFormat.NDJSON: _iter_ndjson,
        InputFormat.JSON: _iter_json,
        InputFormat.CSV: _iter_csv,
    }
    try:
        yield from readers[input_format](stream)
    except UnicodeDecodeError as exc:
        raise TabprintInputError(f"cannot decode input: {exc.reason}") from exc


def batched(items: Iterable[T], size: int) -> Iterator[list[T]]:
    """Group ``items`` into lists of ``size``; ``size <= 0`` yields a single list.

    An empty input yields nothing.
    """
    it = iter(items)
    if size <= 0:
        everything = list(it)
        if everything:
            yield everything
        return
    while chunk := list(islice(it, size)):
        yield chunk


def mark_last(items: Iterable[T]) -> Iterator[tuple[T, bool]]:
    """Yield ``(item, is_last)`` pairs, looking one item ahead."""
    it = iter(items)
    try:
        current = next(it)
    except StopIteration:
        return
    for following in it:
        yield current, False
        current = following
    yield current, True
