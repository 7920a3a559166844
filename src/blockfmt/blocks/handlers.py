# topmark:header:start
#
#   project      : blockfmt
#   file         : handlers.py
#   file_relpath : src/blockfmt/blocks/handlers.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Block handlers used by the CLI commands.

* `FormatHandler`: copy lines through, replace each block by its formatted form
  (``fmt`` and ``diff``).
* `BlockCollector`: drop lines, record each block (``blocks``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from blockfmt.blocks.reader import passthrough
from blockfmt.config.logging import get_logger
from blockfmt.formatters.verbs import escape_verbs, unescape_verbs

if TYPE_CHECKING:
    from blockfmt.blocks.reader import BlockReader
    from blockfmt.config.logging import BlockfmtLogger
    from blockfmt.formatters.base import Formatter

logger: BlockfmtLogger = get_logger(__name__)


def format_block(formatter: Formatter, block: str, *, fmtcompat: bool = False) -> str:
    """Return the formatted form of ``block``.

    Blank blocks are returned unchanged without invoking the formatter. A
    non-empty result always ends with a newline so the end marker stays on its
    own line.

    Args:
        formatter (Formatter): Formatter to apply.
        block (str): Block content, markers excluded.
        fmtcompat (bool): Escape Go format verbs around the formatter call.

    Returns:
        str: Formatted block content.
    """
    if not block.strip():
        return block
    if fmtcompat:
        escaped = escape_verbs(block)
        result = unescape_verbs(formatter.format(escaped.text), escaped.verbs)
    else:
        result = formatter.format(block)
    if result and not result.endswith("\n"):
        result += "\n"
    return result


@dataclass
class FormatHandler:
    """Pass lines through and write formatted blocks.

    Attributes:
        formatter (Formatter): Formatter applied to each block.
        fmtcompat (bool): Escape Go format verbs around the formatter call.
        formatted (int): Blocks formatted successfully.
        changed (int): Blocks whose formatted form differs from the original.
    """

    formatter: Formatter
    fmtcompat: bool = False
    formatted: int = 0
    changed: int = 0

    def on_line(self, reader: BlockReader, number: int, line: str) -> None:
        passthrough(reader, number, line)

    def on_block(self, reader: BlockReader, number: int, block: str) -> None:
        result = format_block(self.formatter, block, fmtcompat=self.fmtcompat)
        reader.write(result)
        self.formatted += 1
        if result != block:
            self.changed += 1
            logger.debug(
                "block %d @ %s#%d reformatted",
                reader.block_count,
                reader.file_name,
                reader.block_start_line,
            )


@dataclass(frozen=True)
class CollectedBlock:
    """A block recorded by `BlockCollector`.

    Attributes:
        number (int): 1-based block number within the file.
        source (str): File name, or ``stdin``.
        start_line (int): Line number of the start marker.
        end_line (int): Line number of the end marker.
        text (str): Block content, markers excluded.
    """

    number: int
    source: str
    start_line: int
    end_line: int
    text: str

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {
            "number": self.number,
            "source": self.source,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "text": self.text,
        }


@dataclass
class BlockCollector:
    """Ignore lines and record every properly terminated block."""

    blocks: list[CollectedBlock] = field(default_factory=lambda: [])

    def on_line(self, reader: BlockReader, number: int, line: str) -> None:
        return None

    def on_block(self, reader: BlockReader, number: int, block: str) -> None:
        self.blocks.append(
            CollectedBlock(
                number=reader.block_count,
                source=reader.file_name,
                start_line=reader.block_start_line,
                end_line=number,
                text=block,
            )
        )
