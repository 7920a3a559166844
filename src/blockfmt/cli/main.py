# topmark:header:start
#
#   project      : blockfmt
#   file         : main.py
#   file_relpath : src/blockfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity (-1 quiet, 0 default, 1..2 verbose);
- ``log_level``: internal log level taken from ``BLOCKFMT_LOG_LEVEL``;
- ``color_enabled`` and ``console``: the shared `ClickConsole`.
"""

from __future__ import annotations

import click

from blockfmt.cli.commands.blocks import blocks_command
from blockfmt.cli.commands.diff import diff_command
from blockfmt.cli.commands.fmt import fmt_command
from blockfmt.cli.commands.version import version_command
from blockfmt.cli.console import ClickConsole
from blockfmt.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from blockfmt.cli_shared.utils import ColorMode, resolve_color_mode
from blockfmt.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(color_enabled=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Format HCL blocks embedded in Go acceptance tests and Markdown docs.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the blockfmt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    logger.trace("verbosity=%d color=%s", ctx.obj["verbosity_level"], ctx.obj["color_enabled"])

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'blockfmt fmt [PATHS...]' to format embedded blocks.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(fmt_command)

cli.add_command(diff_command)

cli.add_command(blocks_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
