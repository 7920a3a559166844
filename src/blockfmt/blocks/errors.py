# topmark:header:start
#
#   project      : blockfmt
#   file         : errors.py
#   file_relpath : src/blockfmt/blocks/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Fatal errors raised by the block reader.

Recoverable conditions (a block that fails to format, a block without an end
marker) are never raised; they are recorded as anomalies instead. See
`blockfmt.blocks.diagnostics`.
"""

from __future__ import annotations


class BlockReaderError(Exception):
    """Base class for fatal block reader errors."""


class LineCallbackError(BlockReaderError):
    """The line callback failed, so ordinary text can no longer be written safely.

    Attributes:
        source (str): File name, or ``stdin``.
        line_number (int): 1-based number of the offending line.
        line (str): The offending line, terminator included.
        cause (BaseException): The exception raised by the callback.
    """

    def __init__(self, source: str, line_number: int, line: str, cause: BaseException) -> None:
        self.source = source
        self.line_number = line_number
        self.line = line
        self.cause = cause
        super().__init__(f"line callback failed @ {source}#{line_number} for {line!r}: {cause}")
