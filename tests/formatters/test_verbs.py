# topmark:header:start
#
#   project      : blockfmt
#   file         : test_verbs.py
#   file_relpath : tests/formatters/test_verbs.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Tests for Go format verb escaping."""

from __future__ import annotations

import pytest

from blockfmt.formatters.verbs import PLACEHOLDER_PREFIX, escape_verbs, unescape_verbs


@pytest.mark.parametrize(
    ("line", "verbs"),
    [
        ("  bucket = %q\n", ["%q"]),
        ('  name = "%s-web"\n', ["%s"]),
        ('  name = "%[1]s-%[2]d"\n', ["%[1]s", "%[2]d"]),
        ("  count = %d\n", ["%d"]),
        ("  ratio = %5.2f\n", ["%5.2f"]),
        ("  pct = \"%d%%\"\n", ["%d", "%%"]),
        ("  width = %-8v\n", ["%-8v"]),
    ],
)
def test_inline_verbs_are_replaced(line: str, verbs: list[str]) -> None:
    """Every verb is swapped for an identifier placeholder, in order."""
    escaped = escape_verbs(line)

    assert escaped.verbs == verbs
    assert "%" not in escaped.text
    assert escaped.text.count(PLACEHOLDER_PREFIX) == len(verbs)
    assert unescape_verbs(escaped.text, escaped.verbs) == line


def test_verb_only_line_becomes_comment() -> None:
    """A line holding only a verb keeps its indentation as a comment placeholder."""
    block = 'resource "a" "b" {\n\t%s\n    %[2]s  \n}\n'

    escaped = escape_verbs(block)

    assert escaped.text == (
        f'resource "a" "b" {{\n\t# {PLACEHOLDER_PREFIX}0_\n    # {PLACEHOLDER_PREFIX}1_\n}}\n'
    )
    assert escaped.verbs == ["%s", "%[2]s"]


def test_comment_placeholder_survives_reindent() -> None:
    """A formatter may move the comment; the verb follows the new indentation."""
    escaped = escape_verbs("x {\n%s\n}\n")
    reformatted = escaped.text.replace(f"# {PLACEHOLDER_PREFIX}0_", f"  # {PLACEHOLDER_PREFIX}0_")

    assert unescape_verbs(reformatted, escaped.verbs) == "x {\n  %s\n}\n"


def test_text_without_verbs_is_unchanged() -> None:
    """Blocks without verbs pass through untouched."""
    block = 'resource "a" "b" {\n  tags = { Name = "web" }\n}\n'

    escaped = escape_verbs(block)

    assert escaped.text == block
    assert escaped.verbs == []


def test_unknown_placeholder_is_rejected() -> None:
    """A placeholder with no recorded verb is an error."""
    with pytest.raises(ValueError, match="BLOCKFMT_VERB_4_"):
        unescape_verbs(f"x = {PLACEHOLDER_PREFIX}4_\n", ["%s"])


def test_double_digit_placeholders() -> None:
    """Placeholder 10 is not mistaken for placeholder 1."""
    line = " ".join(f"%{c}" for c in "abcdefghijkl") + "\n"

    escaped = escape_verbs(line)

    assert len(escaped.verbs) == 12
    assert unescape_verbs(escaped.text, escaped.verbs) == line
