# topmark:header:start
#
#   project      : blockfmt
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""CLI test: `version` command output and group help."""

from __future__ import annotations

import json

import pytest
from packaging.version import InvalidVersion, Version

from blockfmt.constants import BLOCKFMT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 project version exactly."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    out: str = result.output.strip()
    assert out == BLOCKFMT_VERSION
    try:
        Version(out)
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": BLOCKFMT_VERSION}


def test_version_verbose_has_title() -> None:
    """With ``-v`` the version is preceded by a title."""
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "blockfmt version:" in result.output
    assert BLOCKFMT_VERSION in result.output


def test_group_without_command_shows_help() -> None:
    """Invoking the group alone prints a hint and the command list."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    for name in ("fmt", "diff", "blocks", "version"):
        assert name in result.output
    assert "Hint: use 'blockfmt fmt" in result.output
