# topmark:header:start
#
#   project      : blockfmt
#   file         : test_external_formatter.py
#   file_relpath : tests/formatters/test_external_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Tests for `ExternalFormatter`, driving small Python scripts as formatters."""

from __future__ import annotations

import shlex
import sys
from typing import TYPE_CHECKING

import pytest

from blockfmt.formatters import ExternalFormatter, FormatError
from tests.conftest import formatter_script

if TYPE_CHECKING:
    from pathlib import Path


def _command(tmp_path: Path, source: str | None = None) -> tuple[str, ...]:
    cmd = formatter_script(tmp_path) if source is None else formatter_script(tmp_path, source)
    return tuple(shlex.split(cmd))


def test_stdout_is_the_formatted_block(tmp_path: Path) -> None:
    """The command's stdout replaces the block."""
    formatter = ExternalFormatter(command=_command(tmp_path))

    assert formatter.format("a=1\nlong_name   =  2\n") == "a = 1\nlong_name = 2\n"


def test_non_zero_exit_raises_with_stderr(tmp_path: Path) -> None:
    """A non-zero exit status is a formatting failure carrying stderr."""
    formatter = ExternalFormatter(command=_command(tmp_path))

    with pytest.raises(FormatError, match="Error: Invalid expression"):
        formatter.format("x = INVALID\n")


def test_non_zero_exit_without_stderr(tmp_path: Path) -> None:
    """Without stderr output, the exit status is reported."""
    formatter = ExternalFormatter(command=_command(tmp_path, "import sys\nsys.exit(3)\n"))

    with pytest.raises(FormatError, match="exit status 3"):
        formatter.format("x = 1\n")


def test_missing_program(tmp_path: Path) -> None:
    """A program that cannot be found is unavailable and fails to format."""
    formatter = ExternalFormatter(command=(str(tmp_path / "no-such-formatter"), "fmt", "-"))

    assert not formatter.is_available()
    assert formatter.program.endswith("no-such-formatter")
    with pytest.raises(FormatError, match="formatter not found"):
        formatter.format("x = 1\n")


def test_timeout(tmp_path: Path) -> None:
    """A command running past its timeout is a formatting failure."""
    formatter = ExternalFormatter(
        command=_command(tmp_path, "import time\ntime.sleep(10)\n"),
        timeout=0.2,
    )

    with pytest.raises(FormatError, match="timed out"):
        formatter.format("x = 1\n")


def test_python_interpreter_is_available() -> None:
    """An existing program is found on disk or on ``PATH``."""
    assert ExternalFormatter(command=(sys.executable,)).is_available()


def test_default_command_is_terraform_fmt() -> None:
    """The default formatter reads stdin and writes stdout via ``terraform fmt -``."""
    assert ExternalFormatter().command == ("terraform", "fmt", "-")
