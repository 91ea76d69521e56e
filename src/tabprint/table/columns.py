# topmark:header:start
#
#   project      : TabPrint
#   file         : columns.py
#   file_relpath : src/tabprint/table/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column descriptors for aligned tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable

ColumnSpec = Union["ColumnDescriptor", tuple[str, str]]


@dataclass(frozen=True)
class ColumnDescriptor:
    """A table column: the row field to read and the label shown in the header.

    Attributes:
        name (str): Field identifier used to look up the cell value in a row.
        description (str): Human-readable header label, on a single line.
    """

    name: str
    description: str

    def __post_init__(self) -> None:
        if "\n" in self.description:
            raise ValueError(f"Column label {self.description!r} spans several lines")

    @classmethod
    def parse(cls, spec: str) -> ColumnDescriptor:
        """Build a descriptor from ``"name"`` or ``"name:Label"``.

        Without an explicit label, the field name doubles as the header.

        Args:
            spec (str): Column specification as typed on the command line.

        Returns:
            ColumnDescriptor: The parsed descriptor.

        Raises:
            ValueError: If the field name part is empty, or the label spans
                several lines.
        """
        name, sep, label = spec.partition(":")
        name = name.strip()
        if not name:
            raise ValueError(f"Column specification {spec!r} has an empty field name")
        return cls(name=name, description=label if sep else name)


def freeze_columns(columns: Iterable[ColumnSpec]) -> tuple[ColumnDescriptor, ...]:
    """Return an immutable copy of ``columns``, coercing ``(name, label)`` pairs.

    Raises:
        TypeError: If an item is neither a ``ColumnDescriptor`` nor a pair of strings.
        ValueError: If a coerced label spans several lines.
    """
    frozen: list[ColumnDescriptor] = []
    for col in columns:
        if isinstance(col, ColumnDescriptor):
            frozen.append(col)
        elif isinstance(col, tuple) and len(col) == 2:
            name, description = col
            frozen.append(ColumnDescriptor(name=str(name), description=str(description)))
        else:
            raise TypeError(f"Unsupported column descriptor: {col!r}")
    return tuple(frozen)
