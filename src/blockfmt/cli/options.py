# topmark:header:start
#
#   project      : blockfmt
#   file         : options.py
#   file_relpath : src/blockfmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Common CLI options for blockfmt commands.

Centralizes reusable options (verbosity, color, configuration, formatter) and
their resolution logic so commands stay thin.
"""

from typing import Callable, ParamSpec, TypeVar

import click

from blockfmt.cli.errors import BlockfmtUsageError
from blockfmt.cli_shared.utils import ColorMode, OutputFormat

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags
        (capped at 2).

    Raises:
        BlockfmtUsageError: If both ``-v`` and ``-q`` are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BlockfmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Additional config file to merge (may be repeated).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Skip discovery of blockfmt.toml / pyproject.toml.",
    )(f)
    return f


def common_formatter_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options controlling how blocks are found and formatted."""
    f = click.option(
        "--formatter",
        "formatter",
        default=None,
        metavar="COMMAND",
        help="Formatter command reading stdin and writing stdout (default: 'terraform fmt -').",
    )(f)
    f = click.option(
        "--fmtcompat/--no-fmtcompat",
        "fmtcompat",
        default=None,
        help="Escape Go format verbs (%s, %d, ...) around the formatter call.",
    )(f)
    f = click.option(
        "--fence-language",
        "fence_languages",
        multiple=True,
        metavar="LANG",
        help="Language tag opening a fenced block (default: hcl; may be repeated).",
    )(f)
    return f


def format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` output format option."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([v.value for v in OutputFormat]),
        default=OutputFormat.DEFAULT.value,
        callback=lambda _ctx, _param, value: OutputFormat(value),
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
