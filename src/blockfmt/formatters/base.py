# topmark:header:start
#
#   project      : blockfmt
#   file         : base.py
#   file_relpath : src/blockfmt/formatters/base.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Formatter protocol and errors."""

from __future__ import annotations

from typing import Protocol


class FormatError(Exception):
    """A block could not be formatted.

    The block reader treats this (like any exception raised from a block
    callback) as recoverable: the block is emitted unformatted.
    """


class Formatter(Protocol):
    """Formats the content of one block."""

    def format(self, text: str) -> str:
        """Return the formatted form of ``text``.

        Raises:
            FormatError: If ``text`` cannot be formatted.
        """
        ...
