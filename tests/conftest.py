# topmark:header:start
#
#   project      : blockfmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Pytest configuration for the blockfmt test suite.

This file sets up global fixtures, shared test doubles and the logging
configuration for test runs.

Notes:
    Tests never depend on ``terraform`` being installed. Formatting is either
    done in-process with the small `Formatter` doubles below, or by a Python
    script passed as ``--formatter`` (see `formatter_script`).
"""

from __future__ import annotations

import shlex
import sys
import textwrap
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from blockfmt.config import logging
from blockfmt.formatters.base import FormatError

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_blockfmt_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure blockfmt's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``BLOCKFMT_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so that every code path logs during tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --------------------------------------------------------------------------
# Formatter doubles
# --------------------------------------------------------------------------


class UpperFormatter:
    """Upper-cases its input; idempotent."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def format(self, text: str) -> str:
        self.calls.append(text)
        return text.upper()


class FailingFormatter:
    """Rejects every block."""

    def format(self, text: str) -> str:
        raise FormatError("Error: Invalid block definition")


class SelectiveFormatter:
    """Rejects blocks containing ``marker``, upper-cases the rest."""

    def __init__(self, marker: str = "broken") -> None:
        self.marker = marker

    def format(self, text: str) -> str:
        if self.marker in text:
            raise FormatError(f"cannot parse {self.marker!r}")
        return text.upper()


# --------------------------------------------------------------------------
# External formatter scripts
# --------------------------------------------------------------------------

# Normalizes spacing around '=' and rejects blocks containing 'INVALID'.
EQUALS_FORMATTER_SOURCE = textwrap.dedent(
    """\
    import re
    import sys

    text = sys.stdin.read()
    if "INVALID" in text:
        sys.stderr.write("Error: Invalid expression\\n")
        sys.exit(1)
    sys.stdout.write("".join(re.sub(r"[ ]*=[ ]*", " = ", line, count=1) for line in text.splitlines(True)))
    """
)


def formatter_script(tmp_path: Path, source: str = EQUALS_FORMATTER_SOURCE) -> str:
    """Write a Python formatter script and return a shell-quoted command line for it.

    Args:
        tmp_path (Path): Directory where the script is written.
        source (str): Script body; reads stdin, writes stdout.

    Returns:
        str: A command usable as ``--formatter`` or with ``shlex.split``.
    """
    script = tmp_path / "fake_formatter.py"
    script.write_text(source, encoding="utf-8")
    return shlex.join([sys.executable, str(script)])


@pytest.fixture
def upper_formatter() -> UpperFormatter:
    """Return a fresh `UpperFormatter`."""
    return UpperFormatter()
