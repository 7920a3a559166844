# topmark:header:start
#
#   project      : blockfmt
#   file         : detector.py
#   file_relpath : src/blockfmt/blocks/detector.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Block boundary detection.

Two stateless predicates classify a single line (terminator included) as the
start or the end of an embedded block. Two embedding styles are recognized:

* acceptance tests: HCL inside a Go raw string literal, opened by a line ending
  in ``return fmt.Sprintf(`` plus a backtick, and closed by a line that is a
  backtick and a parenthesis, or a backtick followed by ``, args...)``;
* documentation: fenced Markdown blocks opened by `` ```hcl `` and closed by
  `` ``` ``.

Only prefix, suffix and equality comparisons are performed. There is no
lookahead and no nesting awareness.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from blockfmt.constants import (
    ACCTEST_BLOCK_END,
    ACCTEST_BLOCK_END_WITH_ARGS,
    ACCTEST_BLOCK_START,
    DEFAULT_FENCE_LANGUAGES,
    FENCE_MARKER,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


def is_block_start(
    line: str,
    *,
    fence_languages: Iterable[str] = DEFAULT_FENCE_LANGUAGES,
) -> bool:
    """Return True if ``line`` opens an embedded block.

    The acceptance-test opener is checked first, the fenced opener second.

    Args:
        line (str): A single line including its trailing newline.
        fence_languages (Iterable[str]): Language tags accepted after the fence marker.

    Returns:
        bool: True if the line starts a block.
    """
    if line.endswith(ACCTEST_BLOCK_START):
        return True
    return any(line.startswith(FENCE_MARKER + lang) for lang in fence_languages)


def is_block_finished(line: str) -> bool:
    """Return True if ``line`` closes an embedded block.

    Args:
        line (str): A single line including its trailing newline.

    Returns:
        bool: True if the line ends a block.
    """
    if line.rstrip("\r\n") == ACCTEST_BLOCK_END:
        return True
    if line.startswith(ACCTEST_BLOCK_END_WITH_ARGS):
        return True
    return line.startswith(FENCE_MARKER)
