# topmark:header:start
#
#   project      : TabPrint
#   file         : main.py
#   file_relpath : src/tabprint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TabPrint command group.

Group-level options are initialized once and placed into ``ctx.obj``
(``console``, ``verbosity``, ``log_level``, ``color_enabled``); subcommands
read them back through [`tabprint.cli.cmd_common`][tabprint.cli.cmd_common].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tabprint.cli.commands.show import show_command
from tabprint.cli.commands.version import version_command
from tabprint.cli.console import ClickConsole
from tabprint.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from tabprint.cli_shared.color import ColorMode, resolve_color_mode
from tabprint.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from tabprint.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    ``TABPRINT_LOG_LEVEL`` takes precedence over ``-v``/``-q`` for the log level.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose - quiet

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%d color=%s", ctx.obj["verbosity"], enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render records as column-aligned text tables.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the TabPrint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tabprint show [FILE]' to render NDJSON records.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(show_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
