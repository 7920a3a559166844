# topmark:header:start
#
#   project      : blockfmt
#   file         : __init__.py
#   file_relpath : src/blockfmt/blocks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Block detection and the single-pass block reader."""

from __future__ import annotations

from blockfmt.blocks.detector import is_block_finished, is_block_start
from blockfmt.blocks.diagnostics import (
    Anomaly,
    AnomalyKind,
    AnomalyLog,
    AnomalySink,
    LoggingAnomalySink,
)
from blockfmt.blocks.errors import BlockReaderError, LineCallbackError
from blockfmt.blocks.reader import (
    BlockHandler,
    BlockReader,
    CallbackHandler,
    ignore,
    iter_lines,
    passthrough,
)

__all__ = [
    "Anomaly",
    "AnomalyKind",
    "AnomalyLog",
    "AnomalySink",
    "BlockHandler",
    "BlockReader",
    "BlockReaderError",
    "CallbackHandler",
    "LineCallbackError",
    "LoggingAnomalySink",
    "ignore",
    "is_block_finished",
    "is_block_start",
    "iter_lines",
    "passthrough",
]
