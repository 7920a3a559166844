# topmark:header:start
#
#   project      : blockfmt
#   file         : test_diff_command.py
#   file_relpath : tests/cli/test_diff_command.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""CLI tests for ``blockfmt diff`` (read-only preview and ``--check``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_WOULD_CHANGE, isolate_config, run_cli_in
from tests.conftest import formatter_script, mark_cli

if TYPE_CHECKING:
    from pathlib import Path

SOURCE = "# Example\n\n```hcl\nname=\"web\"\n```\n"
CLEAN = "# Example\n\n```hcl\nname = \"web\"\n```\n"


def _setup(tmp_path: Path) -> str:
    isolate_config(tmp_path)
    return formatter_script(tmp_path)


@mark_cli
def test_diff_prints_patch_without_writing(tmp_path: Path) -> None:
    """The unified diff is printed and the file is left unchanged."""
    cmd = _setup(tmp_path)
    doc = tmp_path / "index.md"
    doc.write_text(SOURCE, encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "diff", "--formatter", cmd, "index.md"])

    assert_SUCCESS(result)
    assert doc.read_text(encoding="utf-8") == SOURCE
    assert "--- a/index.md\n+++ b/index.md\n" in result.stdout
    assert '-name="web"\n' in result.stdout
    assert '+name = "web"\n' in result.stdout


@mark_cli
def test_diff_check_exits_would_change(tmp_path: Path) -> None:
    """``--check`` exits with WOULD_CHANGE when a file would be reformatted."""
    cmd = _setup(tmp_path)
    (tmp_path / "index.md").write_text(SOURCE, encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "diff", "--check", "--formatter", cmd, "."])

    assert_WOULD_CHANGE(result)


@mark_cli
def test_diff_check_clean_tree(tmp_path: Path) -> None:
    """A tree that is already formatted passes ``--check`` with no output."""
    cmd = _setup(tmp_path)
    (tmp_path / "index.md").write_text(CLEAN, encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "diff", "--check", "--formatter", cmd, "."])

    assert_SUCCESS(result)
    assert result.stdout == ""


@mark_cli
def test_diff_from_stdin(tmp_path: Path) -> None:
    """Stdin content is compared under the ``stdin`` name."""
    cmd = _setup(tmp_path)

    result = run_cli_in(
        tmp_path, ["--no-color", "diff", "--formatter", cmd], input_text=SOURCE
    )

    assert_SUCCESS(result)
    assert "--- a/stdin\n" in result.stdout


@mark_cli
def test_diff_reports_anomalies_under_file_name(tmp_path: Path) -> None:
    """Anomalies found while diffing name the file, not the stream."""
    cmd = _setup(tmp_path)
    (tmp_path / "broken.md").write_text("```hcl\nx=1\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "diff", "--formatter", cmd, "broken.md"])

    assert_SUCCESS(result)
    assert result.stdout == ""
    assert "block 1 @ broken.md#1 failed to find end of block" in result.stderr


@mark_cli
def test_diff_verbose_counts_files(tmp_path: Path) -> None:
    """``-v`` adds the number of files that would change."""
    cmd = _setup(tmp_path)
    (tmp_path / "a.md").write_text(SOURCE, encoding="utf-8")
    (tmp_path / "b.md").write_text(CLEAN, encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "-v", "diff", "--formatter", cmd, "."])

    assert_SUCCESS(result)
    assert "1 file(s) would be reformatted." in result.stdout
