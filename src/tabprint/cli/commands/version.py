# topmark:header:start
#
#   project      : TabPrint
#   file         : version.py
#   file_relpath : src/tabprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TabPrint `version` command.

Prints the current TabPrint version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from tabprint.cli.cmd_common import get_console, get_effective_verbosity
from tabprint.constants import TABPRINT_VERSION


@click.command(
    name="version",
    help="Show the current version of TabPrint.",
)
def version_command() -> None:
    """Show the current version of TabPrint."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("TabPrint version:", bold=True, underline=True))
        console.print(f"    {console.styled(TABPRINT_VERSION, bold=True)}")
    else:
        console.print(console.styled(TABPRINT_VERSION, bold=True))
