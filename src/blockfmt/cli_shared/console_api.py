# topmark:header:start
#
#   project      : blockfmt
#   file         : console_api.py
#   file_relpath : src/blockfmt/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Console interface used by the commands.

Content (formatted stdin, patches, block listings) goes to stdout. Anomalies
and errors go to stderr so that ``blockfmt fmt < in > out`` stays clean.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from blockfmt.blocks.diagnostics import Anomaly


class ConsoleLike(Protocol):
    """What a command needs from the terminal."""

    color_enabled: bool

    def print(self, text: str = "", *, nl: bool = True) -> None: ...

    def error(self, text: str, *, nl: bool = True) -> None: ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` styled, or unchanged when color is off."""
        ...

    def anomaly(self, anomaly: Anomaly) -> None:
        """Report one block that was left as-is."""
        ...

    def patch(self, lines: Sequence[str]) -> None:
        """Print a unified diff, colorized when color is on."""
        ...
