# topmark:header:start
#
#   project      : blockfmt
#   file         : errors.py
#   file_relpath : src/blockfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Exceptions for the blockfmt CLI.

Raise these in commands to exit with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from blockfmt.cli_shared.exit_codes import ExitCode


class BlockfmtError(click.ClickException):
    """Base class for all blockfmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class BlockfmtUsageError(BlockfmtError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BlockfmtConfigError(BlockfmtError):
    """Error for configuration errors (malformed config, missing formatter)."""

    exit_code = ExitCode.CONFIG_ERROR


class BlockfmtFileNotFoundError(BlockfmtError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
