# topmark:header:start
#
#   project      : blockfmt
#   file         : diagnostics.py
#   file_relpath : src/blockfmt/blocks/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Anomaly records and sinks for the block reader.

The reader never logs recoverable conditions directly. It hands an `Anomaly`
to the `AnomalySink` it was constructed with, so callers decide whether
anomalies are logged, collected, or both.

Sections:
    * AnomalyKind: the two recoverable conditions.
    * Anomaly: immutable record (kind, block number, source, starting line).
    * AnomalySink: protocol with a single ``record`` operation.
    * LoggingAnomalySink: logs each anomaly at ERROR level.
    * AnomalyLog: collects anomalies, optionally forwarding to another sink.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol, cast

from yachalk import chalk

from blockfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from blockfmt.config.logging import BlockfmtLogger


logger: BlockfmtLogger = get_logger(__name__)


class AnomalyKind(Enum):
    """Recoverable conditions met while scanning a host file."""

    UNTERMINATED = "unterminated"
    FORMAT_FAILED = "format_failed"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function used for human-readable output."""
        return cast(
            "Callable[[str], str]",
            {
                AnomalyKind.UNTERMINATED: chalk.yellow,
                AnomalyKind.FORMAT_FAILED: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Anomaly:
    """A block that was emitted verbatim instead of being dispatched normally.

    Attributes:
        kind (AnomalyKind): What went wrong.
        block_number (int): 1-based block counter value at the time of the anomaly.
        source (str): File name, or ``stdin``.
        start_line (int): Line number of the block's start marker.
        reason (str): Extra detail (e.g. the formatter error), may be empty.
    """

    kind: AnomalyKind
    block_number: int
    source: str
    start_line: int
    reason: str = ""

    @property
    def message(self) -> str:
        """Return a one-line description identifying the block."""
        where = f"block {self.block_number} @ {self.source}#{self.start_line}"
        if self.kind is AnomalyKind.UNTERMINATED:
            return f"{where} failed to find end of block"
        return f"{where} failed to process with: {self.reason}"

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {
            "kind": self.kind.value,
            "block_number": self.block_number,
            "source": self.source,
            "start_line": self.start_line,
            "reason": self.reason,
        }


class AnomalySink(Protocol):
    """Receiver of recoverable anomalies."""

    def record(self, anomaly: Anomaly) -> None:
        """Record one anomaly."""
        ...


class LoggingAnomalySink:
    """Sink that logs anomalies at ERROR level."""

    def record(self, anomaly: Anomaly) -> None:
        """Log ``anomaly``."""
        logger.error("%s", anomaly.message)


@dataclass
class AnomalyLog:
    """Collecting sink.

    Anomalies are appended in the order they are recorded and, when ``forward``
    is set, also passed on to that sink.
    """

    items: list[Anomaly] = field(default_factory=lambda: [])
    forward: AnomalySink | None = None

    def record(self, anomaly: Anomaly) -> None:
        """Append ``anomaly`` and forward it if a downstream sink is configured."""
        self.items.append(anomaly)
        if self.forward is not None:
            self.forward.record(anomaly)

    def __iter__(self) -> Iterator[Anomaly]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def of_kind(self, kind: AnomalyKind) -> list[Anomaly]:
        """Return the recorded anomalies of a given kind."""
        return [a for a in self.items if a.kind is kind]
