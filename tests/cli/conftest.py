# topmark:header:start
#
#   project      : TabPrint
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking the TabPrint command group."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from tabprint.cli.main import cli
from tabprint.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with an optional STDIN payload.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--no-color", "show"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code`` through a Click exception.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output
