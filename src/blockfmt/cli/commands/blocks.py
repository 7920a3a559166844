# topmark:header:start
#
#   project      : blockfmt
#   file         : blocks.py
#   file_relpath : src/blockfmt/cli/commands/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt ``blocks`` command.

Lists the embedded blocks found in host files without formatting or writing
anything. Useful to check which regions ``fmt`` would hand to the formatter.
"""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

import click

from blockfmt.blocks.diagnostics import AnomalyLog
from blockfmt.blocks.handlers import BlockCollector
from blockfmt.blocks.reader import BlockReader
from blockfmt.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    maybe_exit_on_error,
    report_anomalies,
    resolve_targets,
    run_for_targets,
    source_name,
)
from blockfmt.cli.options import CONTEXT_SETTINGS, common_config_options, format_option
from blockfmt.cli_shared.utils import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from blockfmt.blocks.handlers import CollectedBlock


@click.command(
    name="blocks",
    help="List the embedded blocks found in files (read-only).",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--fence-language",
    "fence_languages",
    multiple=True,
    metavar="LANG",
    help="Language tag opening a fenced block (default: hcl; may be repeated).",
)
@common_config_options
@format_option
def blocks_command(
    *,
    paths: tuple[str, ...],
    fence_languages: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat,
) -> None:
    """List blocks, one header line followed by the block content.

    Args:
        paths (tuple[str, ...]): Files and directories to scan; none or ``-`` for STDIN.
        fence_languages (tuple[str, ...]): Fence language override.
        no_config (bool): Skip config file discovery.
        config_paths (tuple[str, ...]): Extra config files to merge.
        output_format (OutputFormat): ``default`` for text, ``json`` for a JSON document.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    config = build_config(
        no_config=no_config,
        config_paths=config_paths,
        fence_languages=fence_languages,
    )
    targets = resolve_targets(paths, config)

    collected: list[CollectedBlock] = []
    anomalies = AnomalyLog()

    def _process(target: Path | None) -> None:
        collector = BlockCollector()
        reader = BlockReader(
            collector,
            sink=anomalies,
            read_only=True,
            fence_languages=config.fence_languages,
            out_stream=io.StringIO(),
        )
        reader.process(target)
        collected.extend(collector.blocks)

    code = run_for_targets(targets, _process, console=console)

    if output_format == OutputFormat.JSON:
        payload = {
            "blocks": [b.to_dict() for b in collected],
            "anomalies": [a.to_dict() for a in anomalies],
        }
        console.print(json.dumps(payload, indent=2))
    else:
        for block in collected:
            header = f"######## block {block.number} @ {block.source}#{block.start_line}-{block.end_line}"
            console.print(console.styled(header, fg="cyan", bold=True))
            console.print(block.text, nl=False)
        if vlevel >= 0:
            report_anomalies(console, anomalies)
        if vlevel > 0:
            sources = {source_name(t) for t in targets}
            console.print(
                console.styled(
                    f"\n{len(collected)} block(s) in {len(sources)} file(s)", fg="blue", bold=True
                )
            )

    maybe_exit_on_error(code)
