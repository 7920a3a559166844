# topmark:header:start
#
#   project      : blockfmt
#   file         : diff.py
#   file_relpath : src/blockfmt/cli/commands/diff.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt ``diff`` command.

Shows what ``fmt`` would change, as a unified diff, without writing anything.
With ``--check`` the command exits with ``WOULD_CHANGE`` (2) when at least one
file would be reformatted, which makes it suitable for CI.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import click

from blockfmt.blocks.diagnostics import AnomalyLog, LoggingAnomalySink
from blockfmt.blocks.handlers import FormatHandler
from blockfmt.blocks.reader import BlockReader, iter_lines, open_stdin
from blockfmt.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    make_formatter,
    maybe_exit_on_error,
    report_anomalies,
    resolve_targets,
    run_for_targets,
    source_name,
)
from blockfmt.cli.options import CONTEXT_SETTINGS, common_config_options, common_formatter_options
from blockfmt.cli_shared.exit_codes import ExitCode
from blockfmt.config.logging import get_logger
from blockfmt.utils.diff import unified_patch

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


@click.command(
    name="diff",
    help="Show the changes fmt would make (read-only).",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--check",
    "check",
    is_flag=True,
    help=f"Exit with status {int(ExitCode.WOULD_CHANGE)} if any file would change.",
)
@common_config_options
@common_formatter_options
def diff_command(
    *,
    paths: tuple[str, ...],
    check: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
    formatter: str | None,
    fmtcompat: bool | None,
    fence_languages: tuple[str, ...],
) -> None:
    """Print unified diffs of the blocks ``fmt`` would reformat.

    Args:
        paths (tuple[str, ...]): Files and directories to process; none or ``-`` for STDIN.
        check (bool): Exit with WOULD_CHANGE when any file would change.
        no_config (bool): Skip config file discovery.
        config_paths (tuple[str, ...]): Extra config files to merge.
        formatter (str | None): Formatter command override.
        fmtcompat (bool | None): Format-verb escaping override.
        fence_languages (tuple[str, ...]): Fence language override.
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

    anomalies = AnomalyLog(forward=LoggingAnomalySink())
    changed: list[str] = []

    def _process(target: Path | None) -> None:
        if target is None:
            with open_stdin() as stdin:
                original = "".join(iter_lines(stdin))
        else:
            with target.open("r", encoding="utf-8", newline="\n") as fh:
                original = "".join(iter_lines(fh))

        handler = FormatHandler(formatter=block_formatter, fmtcompat=config.fmtcompat)
        output = io.StringIO()
        reader = BlockReader(
            handler,
            sink=anomalies,
            read_only=True,
            fence_languages=config.fence_languages,
            in_stream=io.StringIO(original),
            out_stream=output,
        )
        # Already in memory: scan it as a stream under the file's name
        reader.process(None, name=source_name(target))

        patch = unified_patch(original, output.getvalue(), source_name(target))
        if not patch:
            return
        changed.append(source_name(target))
        console.patch(patch)

    code = run_for_targets(targets, _process, console=console)
    if vlevel >= 0:
        report_anomalies(console, anomalies)
    if vlevel > 0:
        console.print(
            console.styled(f"\n{len(changed)} file(s) would be reformatted.", fg="blue", bold=True)
        )

    maybe_exit_on_error(code)
    if check and changed:
        ctx.exit(ExitCode.WOULD_CHANGE)
