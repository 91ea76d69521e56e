# topmark:header:start
#
#   project      : TabPrint
#   file         : rows.py
#   file_relpath : src/tabprint/table/rows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Row access for the table printer.

The printer treats rows as opaque objects and only ever asks them for one
thing: the value of a named field. That capability is modeled by the
[`RowLike`][tabprint.table.rows.RowLike] protocol.

Contract for ``RowLike.lookup(name)``:
    - Never raises.
    - Returns [`MISSING`][tabprint.table.rows.MISSING] when the field cannot be
      retrieved (unknown name, failing accessor, ...). The printer renders
      this as an empty cell.
    - Returns ``None`` for a null value. The printer renders this as ``NULL``.
    - Returns any other object otherwise; the printer renders ``str(value)``.

Adapters are provided for the common row shapes: mappings, records indexed
by field name (``sqlite3.Row``) and plain objects (dataclasses, namedtuples,
ORM-style records). Use [`as_row`][tabprint.table.rows.as_row] to pick one
automatically.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Final, Protocol, runtime_checkable

from tabprint.config.logging import TabprintLogger, get_logger

logger: TabprintLogger = get_logger(__name__)


class _Missing(Enum):
    MISSING = "missing"

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing.MISSING


@runtime_checkable
class RowLike(Protocol):
    """Minimal interface a row must offer to the table printer."""

    def lookup(self, name: str) -> object:
        """Return the value of field ``name``, ``None`` for null, or ``MISSING``."""
        ...


class MappingRow:
    """Row adapter over a mapping (e.g. a decoded JSON object or a CSV record)."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, object]) -> None:
        self._data = data

    def lookup(self, name: str) -> object:
        """Return ``data[name]``, or ``MISSING`` when the key is absent."""
        return self._data.get(name, MISSING)

    def __repr__(self) -> str:
        return f"MappingRow({self._data!r})"


class AttributeRow:
    """Row adapter that reads fields as attributes of an arbitrary object.

    Methods are not fields: a callable attribute resolves to ``MISSING``, as
    does an attribute whose property getter raises.
    """

    __slots__ = ("_obj",)

    def __init__(self, obj: object) -> None:
        self._obj = obj

    def lookup(self, name: str) -> object:
        """Return ``getattr(obj, name)``, or ``MISSING`` if it cannot be read."""
        try:
            value = getattr(self._obj, name, MISSING)
        except Exception as exc:
            logger.trace("Field %r of %r is not readable: %s", name, type(self._obj).__name__, exc)
            return MISSING
        if callable(value):
            return MISSING
        return value

    def __repr__(self) -> str:
        return f"AttributeRow({self._obj!r})"


class KeyedRow:
    """Row adapter for record types indexed by field name but not mappings.

    Covers objects that offer ``keys()`` and ``obj[name]`` without being a
    ``collections.abc.Mapping``, such as ``sqlite3.Row``.
    """

    __slots__ = ("_obj",)

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def lookup(self, name: str) -> object:
        """Return ``obj[name]``, or ``MISSING`` if there is no such field."""
        try:
            if name not in self._obj.keys():
                return MISSING
            return self._obj[name]
        except Exception as exc:
            logger.trace("Field %r of %r is not readable: %s", name, type(self._obj).__name__, exc)
            return MISSING

    def __repr__(self) -> str:
        return f"KeyedRow({self._obj!r})"


def as_row(obj: object) -> RowLike:
    """Adapt ``obj`` to the [`RowLike`][tabprint.table.rows.RowLike] protocol.

    Args:
        obj (object): A ``RowLike`` (returned as is), a mapping, a record with
            ``keys()`` and item access (``sqlite3.Row``), or any other object,
            whose attributes are then used as fields. Plain sequences such as
            tuples have no field names and render every cell empty.

    Returns:
        RowLike: An object whose ``lookup`` never raises.
    """
    if isinstance(obj, RowLike):
        return obj
    if isinstance(obj, Mapping):
        return MappingRow(obj)
    if callable(getattr(obj, "keys", None)) and hasattr(obj, "__getitem__"):
        return KeyedRow(obj)
    return AttributeRow(obj)
