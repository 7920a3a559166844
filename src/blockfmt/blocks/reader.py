# topmark:header:start
#
#   project      : blockfmt
#   file         : reader.py
#   file_relpath : src/blockfmt/blocks/reader.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Single-pass block reader.

`BlockReader` reads a host file one line at a time. Lines outside a block go
to the handler's ``on_line``; lines inside a block are buffered until the end
marker and then go to ``on_block``. Malformed regions are never dropped:

* a block whose ``on_block`` raises is emitted verbatim;
* a block interrupted by another start marker, or by end of file, is emitted
  verbatim.

Both conditions are recorded on the injected `AnomalySink`. A failing
``on_line`` is fatal and raises `LineCallbackError`.

In file mode the rewrite goes to a temporary file first. The original file is
only truncated and overwritten once the whole scan has succeeded.

Handlers must not write anything from ``on_block`` before the point where
they can no longer fail, otherwise the verbatim fallback would follow a
partial write.
"""

from __future__ import annotations

import io
import shutil
import sys
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol, TextIO

from blockfmt.blocks.detector import is_block_finished, is_block_start
from blockfmt.blocks.diagnostics import Anomaly, AnomalyKind, AnomalySink, LoggingAnomalySink
from blockfmt.blocks.errors import LineCallbackError
from blockfmt.config.logging import get_logger
from blockfmt.constants import DEFAULT_FENCE_LANGUAGES, STDIN_SOURCE_NAME, TEMP_FILE_PREFIX

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable, Iterator

    from blockfmt.config.logging import BlockfmtLogger

logger: BlockfmtLogger = get_logger(__name__)

Callback = Callable[["BlockReader", int, str], None]


class BlockHandler(Protocol):
    """Line and block callbacks driven by `BlockReader`.

    Both operations signal failure by raising.
    """

    def on_line(self, reader: BlockReader, number: int, line: str) -> None:
        """Handle a line outside any block (markers included)."""
        ...

    def on_block(self, reader: BlockReader, number: int, block: str) -> None:
        """Handle the buffered content of a block, markers excluded."""
        ...


def passthrough(reader: BlockReader, number: int, text: str) -> None:
    """Write ``text`` verbatim to the reader's output."""
    reader.write(text)


def ignore(reader: BlockReader, number: int, text: str) -> None:
    """Discard ``text``."""


@dataclass
class CallbackHandler:
    """`BlockHandler` built from two plain callbacks.

    Both default to `passthrough`, which reproduces the input unchanged.
    """

    line: Callback = passthrough
    block: Callback = passthrough

    def on_line(self, reader: BlockReader, number: int, line: str) -> None:
        self.line(reader, number, line)

    def on_block(self, reader: BlockReader, number: int, block: str) -> None:
        self.block(reader, number, block)


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines from ``stream``, each ending in exactly one ``\\n``.

    Streams must split on ``\\n`` only (``newline="\\n"``), so that a lone
    ``\\r`` inside a line stays part of that line.
    """
    for raw in stream:
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        yield raw + "\n"


@contextmanager
def open_stdin() -> Iterator[TextIO]:
    """Yield standard input as UTF-8 text split on ``\\n`` only."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        yield sys.stdin
        return
    stream = io.TextIOWrapper(buffer, encoding="utf-8", newline="\n")
    try:
        yield stream
    finally:
        # Leave sys.stdin usable
        stream.detach()


class BlockReader:
    """State of one pass over a host file.

    Args:
        handler (BlockHandler | None): Line and block callbacks; defaults to
            passthrough for both.
        sink (AnomalySink | None): Receiver of recoverable anomalies; defaults to
            `LoggingAnomalySink`.
        read_only (bool): In file mode, do not rewrite the file. Output goes to
            ``out_stream`` (an in-memory buffer when not supplied).
        fence_languages (Iterable[str]): Language tags that open a fenced block.
        in_stream (TextIO | None): Input used when no file name is given
            (defaults to ``sys.stdin``).
        out_stream (TextIO | None): Output used when no file name is given, or in
            read-only file mode (defaults to ``sys.stdout``).

    Attributes:
        file_name (str): Name of the source being scanned (``stdin`` for streams).
        line_count (int): Lines read so far.
        block_count (int): Block start markers recognized so far.
        block_line_count (int): Lines read since the current block's start marker.
    """

    def __init__(
        self,
        handler: BlockHandler | None = None,
        *,
        sink: AnomalySink | None = None,
        read_only: bool = False,
        fence_languages: Iterable[str] = DEFAULT_FENCE_LANGUAGES,
        in_stream: TextIO | None = None,
        out_stream: TextIO | None = None,
    ) -> None:
        self.handler: BlockHandler = handler if handler is not None else CallbackHandler()
        self.sink: AnomalySink = sink if sink is not None else LoggingAnomalySink()
        self.read_only = read_only
        self.fence_languages: tuple[str, ...] = tuple(fence_languages)
        self.in_stream = in_stream
        self.out_stream = out_stream

        self.file_name: str = ""
        self.line_count: int = 0
        self.block_count: int = 0
        self.block_line_count: int = 0

    @property
    def block_start_line(self) -> int:
        """Line number of the current block's start marker."""
        return self.line_count - self.block_line_count

    def write(self, text: str) -> None:
        """Write ``text`` to the current output stream."""
        if self.out_stream is None:
            raise RuntimeError("BlockReader has no output stream (process() not running)")
        self.out_stream.write(text)

    def is_block_start(self, line: str) -> bool:
        """Return True if ``line`` opens a block for this reader's fence languages."""
        return is_block_start(line, fence_languages=self.fence_languages)

    def process(
        self,
        filename: str | os.PathLike[str] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        """Scan ``filename`` (or the input stream) and emit the rewritten content.

        Args:
            filename (str | os.PathLike[str] | None): Host file to rewrite in place.
                When None, read ``in_stream`` (stdin) and write ``out_stream`` (stdout).
            name (str | None): Display name of the input stream in anomalies and
                errors (defaults to ``stdin``). Ignored in file mode.

        Raises:
            LineCallbackError: If the line callback fails; the file is left untouched.
            OSError: If the source, the temporary file or the destination cannot be
                opened, read or written.
        """
        if filename is None:
            self.file_name = name or STDIN_SOURCE_NAME
            if self.out_stream is None:
                self.out_stream = sys.stdout
            if self.in_stream is not None:
                self._scan(self.in_stream)
            else:
                with open_stdin() as stdin:
                    self._scan(stdin)
            return

        path = Path(filename)
        self.file_name = str(filename)

        if self.read_only:
            if self.out_stream is None:
                self.out_stream = io.StringIO()
            logger.debug("opening src file %s (read-only)", path)
            with path.open("r", encoding="utf-8", newline="\n") as src:
                self._scan(src)
            return

        tmp_path: Path | None = None
        try:
            logger.debug("opening src file %s", path)
            with path.open("r", encoding="utf-8", newline="\n") as src:
                tmp = tempfile.NamedTemporaryFile(
                    "w", encoding="utf-8", newline="", prefix=TEMP_FILE_PREFIX, delete=False
                )
                tmp_path = Path(tmp.name)
                logger.debug("opening tmp file %s", tmp_path)
                with tmp:
                    self.out_stream = tmp
                    self._scan(src)
            self._copy_over(tmp_path, path)
        finally:
            self.out_stream = None
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

    def _copy_over(self, tmp_path: Path, destination: Path) -> None:
        """Replace ``destination`` with the content of ``tmp_path``."""
        logger.debug("reopening tmp file %s", tmp_path)
        with open(tmp_path, "rb") as source:
            logger.debug("creating destination @ %s", destination)
            with open(destination, "wb") as target:
                shutil.copyfileobj(source, target)
        logger.trace("copied %s over %s", tmp_path, destination)

    def _scan(self, stream: Iterable[str]) -> None:
        self.line_count = 0
        self.block_count = 0
        self.block_line_count = 0

        lines = iter_lines(stream)
        for line in lines:
            self.line_count += 1
            self._read_line(line)
            if self.is_block_start(line):
                self._scan_block(lines)

        logger.debug(
            "finished %s: %d lines, %d blocks", self.file_name, self.line_count, self.block_count
        )

    def _scan_block(self, lines: Iterator[str]) -> None:
        """Consume lines up to and including the end marker of the current block."""
        buffer: list[str] = []
        self.block_line_count = 0
        self.block_count += 1

        for line in lines:
            self.line_count += 1
            self.block_line_count += 1

            if self.is_block_start(line):
                # The previous block never reached its end marker
                self._record(AnomalyKind.UNTERMINATED)
                passthrough(self, self.line_count, "".join(buffer))
                self._read_line(line)
                buffer = []
                self.block_count += 1
                self.block_line_count = 0
                continue

            if is_block_finished(line):
                self._dispatch_block("".join(buffer))
                self._read_line(line)
                return

            buffer.append(line)

        self._record(AnomalyKind.UNTERMINATED)
        passthrough(self, self.line_count, "".join(buffer))

    def _read_line(self, line: str) -> None:
        try:
            self.handler.on_line(self, self.line_count, line)
        except Exception as exc:
            raise LineCallbackError(self.file_name, self.line_count, line, exc) from exc

    def _dispatch_block(self, block: str) -> None:
        try:
            self.handler.on_block(self, self.line_count, block)
        except Exception as exc:
            self._record(AnomalyKind.FORMAT_FAILED, reason=str(exc))
            passthrough(self, self.line_count, block)

    def _record(self, kind: AnomalyKind, *, reason: str = "") -> None:
        self.sink.record(
            Anomaly(
                kind=kind,
                block_number=self.block_count,
                source=self.file_name,
                start_line=self.block_start_line,
                reason=reason,
            )
        )
