# topmark:header:start
#
#   project      : TabPrint
#   file         : errors.py
#   file_relpath : src/tabprint/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TabPrint core.

The core is Click-free; CLI-facing errors with exit codes live in
[`tabprint.cli.errors`][tabprint.cli.errors].

Sink failures are not wrapped: an ``OSError`` raised by a sink's ``write`` or
``flush`` propagates to the caller unchanged.
"""

from __future__ import annotations


class TabprintError(Exception):
    """Base class for all TabPrint core errors."""


class InvalidArgumentError(TabprintError, ValueError):
    """Raised when a table printer is constructed with missing or unusable input."""


class InvariantViolationError(TabprintError, RuntimeError):
    """Raised when text does not fit the width computed for its column.

    This signals a logic error in width computation, not bad user data.
    """
