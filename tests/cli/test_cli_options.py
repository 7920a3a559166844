# topmark:header:start
#
#   project      : blockfmt
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Unit tests for verbosity and color resolution."""

from __future__ import annotations

import pytest

from blockfmt.cli.errors import BlockfmtUsageError
from blockfmt.cli.options import resolve_verbosity
from blockfmt.cli_shared.utils import ColorMode, resolve_color_mode


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [(0, 0, 0), (1, 0, 1), (2, 0, 2), (5, 0, 2), (0, 1, -1), (0, 3, -1)],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """``-v`` counts up to two; any ``-q`` means quiet."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_conflict() -> None:
    """Combining ``-v`` and ``-q`` is a usage error."""
    with pytest.raises(BlockfmtUsageError):
        resolve_verbosity(1, 1)


def test_color_mode_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """JSON output, explicit modes, then environment, then TTY detection."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    assert not resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format="json")
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=None)
    assert not resolve_color_mode(cli_mode=ColorMode.NEVER, output_format=None, stdout_isatty=True)
    assert resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=True)
    assert not resolve_color_mode(cli_mode=ColorMode.AUTO, output_format=None, stdout_isatty=False)

    monkeypatch.setenv("NO_COLOR", "1")
    assert not resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=True)

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=False)
