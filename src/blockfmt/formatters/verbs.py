# topmark:header:start
#
#   project      : blockfmt
#   file         : verbs.py
#   file_relpath : src/blockfmt/formatters/verbs.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Escape Go format verbs so that ``fmt.Sprintf`` templates survive formatting.

Acceptance-test blocks are format strings: ``name = %s``, ``"%[1]s-web"``,
``%d%%``. An HCL formatter rejects most of those, so before formatting every
verb is swapped for a placeholder and swapped back afterwards:

* a line that holds nothing but a verb becomes a comment placeholder
  (``# BLOCKFMT_VERB_0_``), keeping its indentation;
* any other verb becomes an identifier placeholder (``BLOCKFMT_VERB_0_``),
  valid both as a bare expression and inside a quoted string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

PLACEHOLDER_PREFIX: str = "BLOCKFMT_VERB_"

_VERB_RE = re.compile(
    r"%(?:%|(?:\[\d+\])?[-+# 0]*(?:\d+|\*)?(?:\.(?:\d+|\*))?(?:\[\d+\])?[a-zA-Z])"
)
_PLACEHOLDER_RE = re.compile(re.escape(PLACEHOLDER_PREFIX) + r"(\d+)_")
_COMMENT_PLACEHOLDER_RE = re.compile(
    r"^([ \t]*)# " + re.escape(PLACEHOLDER_PREFIX) + r"(\d+)_[ \t]*$", re.MULTILINE
)


@dataclass
class EscapedBlock:
    """Block text with verbs replaced, plus the verbs in placeholder order."""

    text: str
    verbs: list[str] = field(default_factory=lambda: [])


def _placeholder(index: int) -> str:
    return f"{PLACEHOLDER_PREFIX}{index}_"


def escape_verbs(text: str) -> EscapedBlock:
    """Replace every format verb in ``text`` with a placeholder.

    Args:
        text (str): Block content.

    Returns:
        EscapedBlock: The escaped text and the original verbs.
    """
    escaped = EscapedBlock(text="")
    out: list[str] = []

    def _swap(match: re.Match[str]) -> str:
        escaped.verbs.append(match.group(0))
        return _placeholder(len(escaped.verbs) - 1)

    for line in text.splitlines(keepends=True):
        body = line.rstrip("\n")
        nl = line[len(body) :]
        stripped = body.strip()
        if stripped and _VERB_RE.fullmatch(stripped):
            indent = body[: len(body) - len(body.lstrip())]
            escaped.verbs.append(stripped)
            out.append(f"{indent}# {_placeholder(len(escaped.verbs) - 1)}{nl}")
        else:
            out.append(_VERB_RE.sub(_swap, body) + nl)

    escaped.text = "".join(out)
    return escaped


def unescape_verbs(text: str, verbs: list[str]) -> str:
    """Restore the verbs replaced by `escape_verbs`.

    Args:
        text (str): Formatted, still escaped, block content.
        verbs (list[str]): The verbs recorded by `escape_verbs`.

    Returns:
        str: ``text`` with every placeholder replaced by its verb.

    Raises:
        ValueError: If ``text`` holds a placeholder with no recorded verb.
    """

    def _verb(index: str) -> str:
        i = int(index)
        if i >= len(verbs):
            raise ValueError(f"unknown format verb placeholder {_placeholder(i)}")
        return verbs[i]

    text = _COMMENT_PLACEHOLDER_RE.sub(lambda m: m.group(1) + _verb(m.group(2)), text)
    return _PLACEHOLDER_RE.sub(lambda m: _verb(m.group(1)), text)
