# topmark:header:start
#
#   project      : TabPrint
#   file         : text.py
#   file_relpath : src/tabprint/table/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Visible-width text helpers for aligned table output.

All measurements operate on the *visible* length of a string: ANSI CSI
sequences (such as the SGR color codes produced by ``click.style`` or
``yachalk``) are stripped with ``click.unstyle`` before counting, while the
padded output keeps them verbatim.

Physical lines are separated by ``\\n`` only; ``"a\\n"`` is two physical lines
(``"a"`` and ``""``).
"""

from __future__ import annotations

import math

import click

from tabprint.core.errors import InvariantViolationError

LINE_SEPARATOR = "\n"


def visible_length(text: str) -> int:
    """Return the number of visible characters in ``text``.

    Args:
        text (str): Text that may contain ANSI escape sequences.

    Returns:
        int: Length of ``text`` once escape sequences are removed.
    """
    return len(click.unstyle(text))


def split_lines(text: str) -> list[str]:
    """Split ``text`` into physical lines on ``\\n``, keeping empty segments."""
    return text.split(LINE_SEPARATOR)


def max_line_length(text: str) -> int:
    """Return the visible length of the longest physical line in ``text``."""
    return max(visible_length(line) for line in split_lines(text))


def is_numeric(text: str) -> bool:
    """Return True if ``text`` parses as a finite floating-point number.

    Parsing is locale independent (period as decimal separator). ``nan`` and
    ``inf`` spellings parse but are not finite, so they count as text. Digit
    group underscores (``1_000``) and non-ASCII digits are not accepted;
    surrounding whitespace is.
    """
    if "_" in text or not text.isascii():
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value)


def _check_fits(text: str, width: int) -> int:
    length = visible_length(text)
    if length > width:
        raise InvariantViolationError(
            f"string length is greater than max width ({length} > {width}): {text!r}"
        )
    return length


def center(text: str, width: int, padding: int = 1) -> str:
    """Center ``text`` within ``width`` visible columns plus ``padding`` on each side.

    An odd remainder goes to the right-hand side.

    Args:
        text (str): Cell text, possibly styled.
        width (int): Rendering width of the column.
        padding (int): Spaces added on both sides beyond ``width``.

    Returns:
        str: The padded text; its visible length is ``width + 2 * padding``.

    Raises:
        InvariantViolationError: If the visible length of ``text`` exceeds ``width``.
    """
    length = _check_fits(text, width)
    left = (width - length) // 2
    right = width - (left + length)
    return " " * (left + padding) + text + " " * (right + padding)


def align(text: str, width: int, padding: int = 1, *, right: bool = False) -> str:
    """Left- or right-align ``text`` within ``width`` visible columns.

    Args:
        text (str): Cell text, possibly styled.
        width (int): Rendering width of the column.
        padding (int): Spaces added on both sides beyond ``width``.
        right (bool): Right-align when True, left-align otherwise.

    Returns:
        str: The padded text; its visible length is ``width + 2 * padding``.

    Raises:
        InvariantViolationError: If the visible length of ``text`` exceeds ``width``.
    """
    length = _check_fits(text, width)
    large = " " * (width - length + padding)
    small = " " * padding
    return large + text + small if right else small + text + large
