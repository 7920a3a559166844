# topmark:header:start
#
#   project      : blockfmt
#   file         : console.py
#   file_relpath : src/blockfmt/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Click-backed console.

Logging stays for diagnostics; this is what users read.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

from blockfmt.utils.diff import render_patch

if TYPE_CHECKING:
    from collections.abc import Sequence

    from blockfmt.blocks.diagnostics import Anomaly


class ClickConsole:
    """Console writing through `click.echo`.

    Args:
        color_enabled (bool): Emit ANSI colors.
        out (TextIO | None): Content stream (defaults to `sys.stdout`).
        err (TextIO | None): Diagnostics stream (defaults to `sys.stderr`).
    """

    def __init__(
        self,
        *,
        color_enabled: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.color_enabled = color_enabled
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.color_enabled)

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.color_enabled, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        if not self.color_enabled:
            return text
        return click.style(text, **style_kwargs)

    def anomaly(self, anomaly: Anomaly) -> None:
        """Write ``anomaly`` to stderr in its kind's color."""
        text = f"⚠️  {anomaly.message}"
        if self.color_enabled:
            text = anomaly.kind.color(text)
        click.echo(text, file=self.err, color=self.color_enabled)

    def patch(self, lines: Sequence[str]) -> None:
        if self.color_enabled:
            self.print(render_patch(lines), nl=False)
        else:
            self.print("".join(lines), nl=False)
