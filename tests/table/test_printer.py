# topmark:header:start
#
#   project      : TabPrint
#   file         : test_printer.py
#   file_relpath : tests/table/test_printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Table printer: exact output for headers, alignment, multi-line cells and footers."""

from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from tabprint.core.errors import InvalidArgumentError, InvariantViolationError
from tabprint.table.columns import ColumnDescriptor
from tabprint.table.printer import TablePrinter, footer_text, format_value
from tabprint.table.rows import MISSING
from tests.conftest import parametrize, render_table

ID_NAME = [("id", "ID"), ("name", "Name")]


class RecordingSink(io.StringIO):
    """StringIO that counts flushes."""

    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class FailingSink:
    """Sink whose writes always fail."""

    def write(self, s: str, /) -> int:
        raise OSError("disk full")

    def flush(self) -> None:
        pass


@dataclass
class Event:
    id: int
    name: str | None


def test_single_batch_layout() -> None:
    out = render_table(
        ID_NAME,
        ([{"id": 1, "name": "alice"}, {"id": 22, "name": "bob"}], True),
    )
    assert out == (
        " ID | Name  \n"
        "----+-------\n"
        "  1 | alice \n"
        " 22 | bob   \n"
        "(2 rows)\n"
    )


def test_header_centering_puts_odd_remainder_right() -> None:
    out = render_table([("x", "ab")], ([{"x": "abcde"}], True), finish=False)
    # width 5, label 2: 1 space left, 2 right, plus one padding on each side
    assert out.splitlines()[0] == "  ab   "


@parametrize(
    ("value", "expected"),
    [
        ("1", "     1 "),
        ("-3.5", "  -3.5 "),
        ("1e3", "   1e3 "),
        ("abc", " abc   "),
        ("1,5", " 1,5   "),
        ("nan", " nan   "),
        ("inf", " inf   "),
        ("", "       "),
    ],
)
def test_numeric_values_are_right_aligned(value: str, expected: str) -> None:
    out = render_table([("v", "Value")], ([{"v": value}], True), finish=False)
    assert out.splitlines()[2] == expected


def test_multiline_cell_in_single_row_final_batch_has_no_marker() -> None:
    out = render_table(ID_NAME, ([{"id": 1, "name": "a\nbcd"}], True))
    assert out == (
        " ID | Name \n"
        "----+------\n"
        "  1 | a    \n"
        "    | bcd  \n"
        "(1 row)\n"
    )


def test_multiline_cell_in_non_final_batch_gets_marker() -> None:
    out = render_table(ID_NAME, ([{"id": 1, "name": "a\nbcd"}], False))
    assert out.splitlines()[2:4] == ["  1 | a   +", "    | bcd  "]


def test_multiline_cells_in_multi_row_batch_get_markers() -> None:
    rows: list[object] = [{"id": 1, "name": "x"}, {"id": 2, "name": "p\nq\nr"}]
    out = render_table(ID_NAME, (rows, True))
    assert out.splitlines()[2:6] == [
        "  1 | x    ",
        "  2 | p   +",
        "    | q   +",
        "    | r    ",
    ]


def test_marker_uses_cumulative_row_count_including_current_batch() -> None:
    out = render_table(
        ID_NAME,
        ([{"id": 1, "name": "x"}], False),
        ([{"id": 2, "name": "p\nq"}], True),
    )
    # second call sees row_count == 2, so the final single-row batch is marked
    assert out.splitlines()[3:5] == ["  2 | p   +", "    | q    "]


def test_shorter_columns_pad_extra_physical_lines() -> None:
    out = render_table(
        [("a", "A"), ("b", "B")],
        ([{"a": "1\n2\n3", "b": "x\ny"}], True),
        finish=False,
    )
    lines = out.splitlines()[2:]
    assert len(lines) == 3
    assert lines[2] == " 3 |   "


def test_each_cell_marks_only_its_own_non_final_lines() -> None:
    out = render_table(
        [("a", "A"), ("b", "B")],
        ([{"a": "1\n2\n3", "b": "x\ny"}], False),
        finish=False,
    )
    assert out.splitlines()[2:] == [
        " 1+| x+",
        " 2+| y ",
        " 3 |   ",
    ]


def test_trailing_newline_adds_an_empty_physical_line() -> None:
    out = render_table([("a", "A")], ([{"a": "x\n"}], True), finish=False)
    assert out.splitlines()[2:] == [" x ", "   "]


def test_null_and_missing_fields() -> None:
    out = render_table(
        [("a", "A"), ("b", "B")],
        ([{"a": None}], True),
        finish=False,
    )
    assert out.splitlines()[2] == " NULL |   "


def test_attribute_rows_are_supported() -> None:
    out = render_table(ID_NAME, ([Event(7, None), Event(8, "bo")], True))
    assert out.splitlines()[2:] == ["  7 | NULL ", "  8 | bo   ", "(2 rows)"]


def test_styled_text_pads_by_visible_length() -> None:
    red = "\x1b[31mred\x1b[0m"
    out = render_table([("c", "Color")], ([{"c": red}], True), finish=False)
    line = out.splitlines()[2]
    assert line == f" {red}   "
    # width 5, visible length 3: 5 - 3 + 2 padding spaces
    assert line.count(" ") == 4


def test_styled_header_is_centered_by_visible_length() -> None:
    bold = "\x1b[1mID\x1b[0m"
    out = render_table([ColumnDescriptor("id", bold)], ([{"id": 1234}], True), finish=False)
    assert out.splitlines()[:2] == [f"  {bold}  ", "------"]


def test_header_emitted_once_across_batches() -> None:
    out = render_table(
        [("v", "V")],
        ([{"v": "a"}], False),
        ([{"v": "b"}], True),
    )
    assert out == " V \n---\n a \n b \n(2 rows)\n"


def test_widths_are_recomputed_per_batch() -> None:
    out = render_table(
        [("v", "V")],
        ([], False),
        ([{"v": "long"}], True),
    )
    assert out == " V \n---\n long \n(1 row)\n"


def test_empty_table_prints_header_and_zero_footer() -> None:
    assert render_table([("a", "A")]) == " A \n---\n(0 rows)\n"


def test_empty_label_has_width_of_one() -> None:
    assert render_table([("a", "")]) == "   \n---\n(0 rows)\n"


def test_finish_twice_repeats_footer_only() -> None:
    sink = io.StringIO()
    printer = TablePrinter([("a", "A")], sink)
    printer.print_rows([{"a": 1}], final_batch=True)
    printer.finish()
    printer.finish()
    assert sink.getvalue() == " A \n---\n 1 \n(1 row)\n(1 row)\n"


def test_state_transitions() -> None:
    printer = TablePrinter([("a", "A")], io.StringIO())
    assert not printer.header_emitted
    assert printer.row_count == 0
    printer.print_rows([])
    assert printer.header_emitted
    printer.print_rows([{"a": 1}, {"a": 2}])
    printer.print_rows(iter([{"a": 3}]), final_batch=True)
    assert printer.row_count == 3


def test_sink_is_flushed_after_each_call() -> None:
    sink = RecordingSink()
    printer = TablePrinter([("a", "A")], sink)
    printer.print_rows([{"a": 1}])
    assert sink.flushes == 1
    printer.finish()
    assert sink.flushes == 3


def test_columns_are_copied_on_construction() -> None:
    columns = [ColumnDescriptor("a", "A")]
    sink = io.StringIO()
    printer = TablePrinter(columns, sink)
    columns.append(ColumnDescriptor("b", "B"))
    printer.finish()
    assert printer.columns == (ColumnDescriptor("a", "A"),)
    assert sink.getvalue().splitlines()[0] == " A "


def test_missing_columns_raise_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError, match="columns"):
        TablePrinter(None, io.StringIO())


def test_missing_sink_raises_invalid_argument() -> None:
    with pytest.raises(ValueError, match="sink"):
        TablePrinter([("a", "A")], None)


def test_unwritable_sink_raises_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError):
        TablePrinter([("a", "A")], object())  # type: ignore[arg-type]


def test_bad_column_item_raises_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError):
        TablePrinter(["a"], io.StringIO())  # type: ignore[list-item]


class Unprintable:
    """Field value whose text conversion fails."""

    def __str__(self) -> str:
        raise RuntimeError("no text form")


def test_value_without_text_form_renders_empty() -> None:
    out = render_table(
        [("a", "A"), ("b", "B")],
        ([{"a": Unprintable(), "b": "ok"}], True),
        finish=False,
    )
    assert out.splitlines()[2] == "   | ok "


def test_multiline_label_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="several lines"):
        TablePrinter([("a", "x\nyy")], io.StringIO())


def test_header_width_uses_whole_label_length() -> None:
    red = "\x1b[31mName\x1b[0m"
    out = render_table([("n", red)], ([{"n": "ab"}], True), finish=False)
    assert out.splitlines()[:2] == [f" {red} ", "------"]


def test_sink_errors_propagate() -> None:
    printer = TablePrinter([("a", "A")], FailingSink())
    with pytest.raises(OSError, match="disk full"):
        printer.print_rows([{"a": 1}])


def test_cell_text_fallbacks() -> None:
    class Row:
        def lookup(self, name: str) -> object:
            return {"null": None, "n": 3}.get(name, MISSING)

    printer = TablePrinter([("n", "N")], io.StringIO())
    column = ColumnDescriptor("x", "X")
    assert printer.cell_text(Row(), column) == ""
    assert printer.cell_text(Row(), ColumnDescriptor("null", "Null")) == "NULL"
    assert printer.cell_text(Row(), ColumnDescriptor("n", "N")) == "3"


def test_format_value() -> None:
    assert format_value(None) == "NULL"
    assert format_value(0) == "0"
    assert format_value("") == ""


@parametrize(("count", "text"), [(0, "(0 rows)"), (1, "(1 row)"), (2, "(2 rows)")])
def test_footer_wording(count: int, text: str) -> None:
    assert footer_text(count) == text


def test_width_overflow_is_an_invariant_violation(monkeypatch: pytest.MonkeyPatch) -> None:
    import tabprint.table.printer as printer_module

    monkeypatch.setattr(printer_module, "max_line_length", lambda _text: 1)
    printer = TablePrinter([("a", "A")], io.StringIO())
    with pytest.raises(InvariantViolationError):
        printer.print_rows([{"a": "toolong"}])
