# topmark:header:start
#
#   project      : blockfmt
#   file         : version.py
#   file_relpath : src/blockfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt `version` command.

Prints the current blockfmt version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from blockfmt.cli.cmd_common import get_console, get_effective_verbosity
from blockfmt.cli.options import format_option
from blockfmt.cli_shared.utils import OutputFormat
from blockfmt.constants import BLOCKFMT_VERSION


@click.command(
    name="version",
    help="Show the current version of blockfmt.",
)
@format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the current version of blockfmt.

    Args:
        output_format (OutputFormat): Plain text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": BLOCKFMT_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("blockfmt version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(BLOCKFMT_VERSION, bold=True)}")
    else:
        console.print(console.styled(BLOCKFMT_VERSION, bold=True))
