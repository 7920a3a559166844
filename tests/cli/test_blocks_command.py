# topmark:header:start
#
#   project      : blockfmt
#   file         : test_blocks_command.py
#   file_relpath : tests/cli/test_blocks_command.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""CLI tests for ``blockfmt blocks``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, isolate_config, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

SOURCE = (
    "func testAcc() string {\n"
    "\treturn fmt.Sprintf(`\n"
    'resource "a" "b" {}\n'
    "`)\n"
    "}\n"
    "```hcl\n"
    "orphan = 1\n"
)


@mark_cli
def test_blocks_text_listing(tmp_path: Path) -> None:
    """Each block is printed after a header naming file and line range."""
    isolate_config(tmp_path)
    (tmp_path / "a_test.go").write_text(SOURCE, encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "blocks", "a_test.go"])

    assert_SUCCESS(result)
    assert result.stdout == '######## block 1 @ a_test.go#2-4\nresource "a" "b" {}\n'
    assert "block 2 @ a_test.go#6 failed to find end of block" in result.stderr
    assert (tmp_path / "a_test.go").read_text(encoding="utf-8") == SOURCE


@mark_cli
def test_blocks_json_listing(tmp_path: Path) -> None:
    """``--format json`` emits blocks and anomalies as one JSON document."""
    isolate_config(tmp_path)
    (tmp_path / "a_test.go").write_text(SOURCE, encoding="utf-8")

    result = run_cli_in(tmp_path, ["blocks", "--format", "json", "a_test.go"])

    assert_SUCCESS(result)
    payload = json.loads(result.stdout)
    assert payload["blocks"] == [
        {
            "number": 1,
            "source": "a_test.go",
            "start_line": 2,
            "end_line": 4,
            "text": 'resource "a" "b" {}\n',
        }
    ]
    assert [a["kind"] for a in payload["anomalies"]] == ["unterminated"]


@mark_cli
def test_blocks_from_stdin_does_not_echo_input(tmp_path: Path) -> None:
    """In stdin mode only the listing is printed, even for unterminated blocks."""
    isolate_config(tmp_path)

    result = run_cli_in(tmp_path, ["--no-color", "blocks"], input_text=SOURCE)

    assert_SUCCESS(result)
    assert result.stdout == '######## block 1 @ stdin#2-4\nresource "a" "b" {}\n'


@mark_cli
def test_blocks_does_not_need_a_formatter(tmp_path: Path) -> None:
    """Listing works without any formatter installed."""
    (tmp_path / "blockfmt.toml").write_text(
        'root = true\nformatter = "definitely-not-installed fmt -"\n', encoding="utf-8"
    )
    (tmp_path / "doc.md").write_text("```hcl\nx = 1\n```\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "blocks", "--fence-language", "hcl", "."])

    assert_SUCCESS(result)
    assert "######## block 1 @ doc.md#1-3" in result.stdout
