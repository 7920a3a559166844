# topmark:header:start
#
#   project      : blockfmt
#   file         : cmd_common.py
#   file_relpath : src/blockfmt/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers used by several commands. They encapsulate plumbing (config
building, input resolution, per-file error mapping) and leave output policy to
the commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from blockfmt.blocks.errors import LineCallbackError
from blockfmt.cli.errors import (
    BlockfmtConfigError,
    BlockfmtFileNotFoundError,
    BlockfmtUsageError,
)
from blockfmt.cli_shared.exit_codes import ExitCode
from blockfmt.config import Config, ConfigError, MutableConfig
from blockfmt.config.logging import get_logger
from blockfmt.constants import STDIN_SOURCE_NAME
from blockfmt.file_resolver import resolve_file_list
from blockfmt.formatters.external import ExternalFormatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from blockfmt.blocks.diagnostics import AnomalyLog
    from blockfmt.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)

STDIN_ARG: str = "-"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback."""
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (-1 quiet, 0 terse, 1+ verbose)."""
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    *,
    no_config: bool,
    config_paths: Sequence[str],
    formatter: str | None = None,
    fmtcompat: bool | None = None,
    fence_languages: Sequence[str] = (),
) -> Config:
    """Merge config files with command-line overrides and freeze the result.

    Raises:
        BlockfmtConfigError: If a config file is malformed or the result is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft.apply_overrides(
            formatter=formatter,
            fmtcompat=fmtcompat,
            fence_languages=fence_languages,
        )
        config = draft.freeze()
    except (ConfigError, ValueError) as e:
        raise BlockfmtConfigError(f"Invalid configuration: {e}") from e
    logger.debug("Effective config: %s", config)
    return config


def make_formatter(config: Config) -> ExternalFormatter:
    """Return the configured formatter, failing early if its program is missing.

    Raises:
        BlockfmtConfigError: If the formatter program cannot be found on ``PATH``.
    """
    formatter = ExternalFormatter(command=config.formatter)
    if not formatter.is_available():
        raise BlockfmtConfigError(f"Formatter command not found: {formatter.program}")
    return formatter


def resolve_targets(paths: Sequence[str], config: Config) -> list[Path | None]:
    """Return the host files to process; ``None`` stands for stdin.

    No paths, or a single ``-``, selects stdin.

    Raises:
        BlockfmtUsageError: If ``-`` is mixed with other paths.
        BlockfmtFileNotFoundError: If a path does not exist.
    """
    if not paths or list(paths) == [STDIN_ARG]:
        return [None]
    if STDIN_ARG in paths:
        raise BlockfmtUsageError("'-' (stdin) cannot be combined with other paths.")
    try:
        files: list[Path | None] = list(resolve_file_list(paths, config))
    except FileNotFoundError as e:
        raise BlockfmtFileNotFoundError(str(e)) from e
    return files


def source_name(target: Path | None) -> str:
    """Return the display name of a target."""
    return STDIN_SOURCE_NAME if target is None else str(target)


def run_for_targets(
    targets: Iterable[Path | None],
    process: Callable[[Path | None], None],
    *,
    console: ConsoleLike,
) -> ExitCode | None:
    """Run ``process`` for each target and return the first error code met, if any.

    A fatal error on one file is reported and processing moves on to the next
    file; each file has its own independent reader.

    Exit code mapping:
        PIPELINE_ERROR → LineCallbackError
        ENCODING_ERROR → UnicodeDecodeError
        FILE_NOT_FOUND → FileNotFoundError / IsADirectoryError
        PERMISSION_DENIED → PermissionError
        IO_ERROR → any other OSError
    """
    code: ExitCode | None = None
    for target in targets:
        name = source_name(target)
        try:
            process(target)
        except LineCallbackError as e:
            logger.error("%s", e)
            console.error(f"❌ {e}")
            code = code or ExitCode.PIPELINE_ERROR
        except UnicodeDecodeError as e:
            logger.error("Encoding error while reading %s: %s", name, e)
            console.error(f"🧵 Encoding error in {name}: {e}")
            code = code or ExitCode.ENCODING_ERROR
        except (FileNotFoundError, IsADirectoryError) as e:
            logger.error("%s: %s", e, name)
            console.error(f"❌ Filesystem error processing {name}: {e}")
            code = code or ExitCode.FILE_NOT_FOUND
        except PermissionError as e:
            logger.error("%s: %s", e, name)
            console.error(f"❌ Permission denied processing {name}: {e}")
            code = code or ExitCode.PERMISSION_DENIED
        except OSError as e:
            logger.error("I/O error while processing %s: %s", name, e)
            console.error(f"❌ I/O error processing {name}: {e}")
            code = code or ExitCode.IO_ERROR
    return code


def report_anomalies(console: ConsoleLike, anomalies: AnomalyLog) -> None:
    """Print one warning per recorded anomaly."""
    for anomaly in anomalies:
        console.anomaly(anomaly)


def maybe_exit_on_error(code: ExitCode | None) -> None:
    """Exit with ``code`` if an error code was encountered."""
    if code is not None:
        click.get_current_context().exit(code)
