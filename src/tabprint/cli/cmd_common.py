# topmark:header:start
#
#   project      : TabPrint
#   file         : cmd_common.py
#   file_relpath : src/tabprint/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by several commands: reading the shared state
placed on the Click context by the command group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click

    from tabprint.cli_shared.console_api import ConsoleLike


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``verbose - quiet`` count) for this command."""
    return int((ctx.obj or {}).get("verbosity", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console created by the command group.

    Falls back to a plain `ClickConsole` when a command is invoked on its own
    (e.g. from tests calling the subcommand directly).
    """
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        from tabprint.cli.console import ClickConsole

        console = ClickConsole(enable_color=bool(ctx.color))
        ctx.obj["console"] = console
    return console
