# topmark:header:start
#
#   project      : blockfmt
#   file         : fmt.py
#   file_relpath : src/blockfmt/cli/commands/fmt.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt ``fmt`` command.

Formats every embedded block and rewrites the host files in place. Blocks the
formatter rejects, and blocks without an end marker, are kept verbatim and
reported as warnings.

Input modes supported:
  * **Paths mode**: one or more files or directories.
  * **STDIN mode**: no path, or a single ``-``; the result is written to STDOUT.

Examples:
  Format all Go tests and Markdown docs below the working directory:

    $ blockfmt fmt .

  Format a single file read from STDIN:

    $ cat website/docs/r/foo.html.markdown | blockfmt fmt -
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from blockfmt.blocks.diagnostics import AnomalyLog, LoggingAnomalySink
from blockfmt.blocks.handlers import FormatHandler
from blockfmt.blocks.reader import BlockReader
from blockfmt.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    make_formatter,
    maybe_exit_on_error,
    report_anomalies,
    resolve_targets,
    run_for_targets,
)
from blockfmt.cli.options import CONTEXT_SETTINGS, common_config_options, common_formatter_options
from blockfmt.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


@click.command(
    name="fmt",
    help="Format embedded blocks and rewrite files in place.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Format all blocks in Go tests and Markdown docs
  blockfmt fmt .

  # Format content read from STDIN and print it
  blockfmt fmt - < main_test.go
""",
)
@click.argument("paths", nargs=-1, type=click.Path())
@common_config_options
@common_formatter_options
def fmt_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    formatter: str | None,
    fmtcompat: bool | None,
    fence_languages: tuple[str, ...],
) -> None:
    """Format embedded blocks in place.

    Args:
        paths (tuple[str, ...]): Files and directories to process; none or ``-`` for STDIN.
        no_config (bool): Skip config file discovery.
        config_paths (tuple[str, ...]): Extra config files to merge.
        formatter (str | None): Formatter command override.
        fmtcompat (bool | None): Format-verb escaping override.
        fence_languages (tuple[str, ...]): Fence language override.

    Exit Status:
        SUCCESS (0): All files were rewritten (possibly with some blocks left verbatim).
        USAGE_ERROR (64): ``-`` combined with other paths.
        FILE_NOT_FOUND (66): A path does not exist.
        ENCODING_ERROR (65): A file is not valid UTF-8.
        PIPELINE_ERROR (70): A line could not be written.
        IO_ERROR (74): A read, the temporary file or the final copy failed.
        CONFIG_ERROR (78): Invalid configuration or formatter not found.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    config = build_config(
        no_config=no_config,
        config_paths=config_paths,
        formatter=formatter,
        fmtcompat=fmtcompat,
        fence_languages=fence_languages,
    )
    block_formatter = make_formatter(config)
    targets = resolve_targets(paths, config)
    stdin_mode = targets == [None]

    anomalies = AnomalyLog(forward=LoggingAnomalySink())
    totals = {"lines": 0, "blocks": 0, "changed": 0}

    def _process(target: Path | None) -> None:
        handler = FormatHandler(formatter=block_formatter, fmtcompat=config.fmtcompat)
        reader = BlockReader(handler, sink=anomalies, fence_languages=config.fence_languages)
        reader.process(target)
        totals["lines"] += reader.line_count
        totals["blocks"] += reader.block_count
        totals["changed"] += handler.changed
        if vlevel > 1 and not stdin_mode:
            console.print(
                f"{target}: {reader.line_count} lines, {reader.block_count} blocks, "
                f"{handler.changed} reformatted"
            )

    code = run_for_targets(targets, _process, console=console)
    if vlevel >= 0:
        report_anomalies(console, anomalies)

    if vlevel > 0 and not stdin_mode:
        console.print(
            console.styled(
                f"\nFinished processing {totals['lines']} lines {totals['blocks']} blocks "
                f"({totals['changed']} reformatted, {len(anomalies)} left as-is)!",
                fg="green",
                bold=True,
            )
        )

    maybe_exit_on_error(code)
