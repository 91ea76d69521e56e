# topmark:header:start
#
#   project      : TabPrint
#   file         : errors.py
#   file_relpath : src/tabprint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for TabPrint CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tabprint.cli_shared.exit_codes import ExitCode


class TabprintCliError(click.ClickException):
    """Base class for all TabPrint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click’s default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class TabprintUsageError(TabprintCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TabprintInputError(TabprintCliError):
    """Error for malformed input records (invalid JSON/CSV, undecodable text)."""

    exit_code = ExitCode.INPUT_ERROR


class TabprintFileNotFoundError(TabprintCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TabprintRenderError(TabprintCliError):
    """Error for internal rendering failures (column width invariant violated)."""

    exit_code = ExitCode.RENDER_ERROR


class TabprintIOError(TabprintCliError):
    """Error for I/O errors reading input or writing the table."""

    exit_code = ExitCode.IO_ERROR
