# topmark:header:start
#
#   project      : blockfmt
#   file         : diff.py
#   file_relpath : src/blockfmt/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Unified diff helpers for the ``diff`` command.

`unified_patch` compares original and rewritten content; `render_patch`
formats a colorized preview for terminal display.
"""

from __future__ import annotations

import difflib
import io
from typing import Sequence

from yachalk import chalk

from blockfmt.config.logging import get_logger

logger = get_logger(__name__)


def unified_patch(original: str, updated: str, name: str) -> list[str]:
    """Return the unified diff between two versions of a file.

    Args:
        original: Content before formatting.
        updated: Content after formatting.
        name: File name used in the ``---``/``+++`` headers.

    Returns:
        The diff lines (each ending in a newline); empty when nothing changed.
    """
    patch = list(
        difflib.unified_diff(
            io.StringIO(original).readlines(),
            io.StringIO(updated).readlines(),
            fromfile=f"a/{name}",
            tofile=f"b/{name}",
        )
    )
    logger.trace("diff for %s: %d line(s)", name, len(patch))
    return patch


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        if line.startswith(("+++", "---")):
            return chalk.bold.white(line)
        match line[:1]:
            case "-":
                return chalk.bold.red(line)
            case "+":
                return chalk.bold.green(line)
            case "@":
                return chalk.cyan(line)
            case _:
                return line

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
