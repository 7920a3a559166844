# topmark:header:start
#
#   project      : blockfmt
#   file         : external.py
#   file_relpath : src/blockfmt/formatters/external.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Formatter backed by an external command.

The command reads the block on stdin and writes the formatted block on stdout,
as ``terraform fmt -`` does. A non-zero exit status is a formatting failure;
the command's stderr becomes the error message.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass

from blockfmt.config.logging import get_logger
from blockfmt.constants import DEFAULT_FORMATTER
from blockfmt.formatters.base import FormatError

logger = get_logger(__name__)

DEFAULT_TIMEOUT: float = 30.0


@dataclass(frozen=True)
class ExternalFormatter:
    """Run ``command`` once per block.

    Attributes:
        command (tuple[str, ...]): Program and arguments.
        timeout (float | None): Seconds before the command is killed.
    """

    command: tuple[str, ...] = DEFAULT_FORMATTER
    timeout: float | None = DEFAULT_TIMEOUT

    @property
    def program(self) -> str:
        """Return the program name (first element of the command)."""
        return self.command[0]

    def is_available(self) -> bool:
        """Return True if the program can be found on ``PATH``."""
        return shutil.which(self.program) is not None

    def format(self, text: str) -> str:
        """Pipe ``text`` through the command and return its stdout.

        Args:
            text (str): Block content.

        Returns:
            str: The formatted block content.

        Raises:
            FormatError: If the command is missing, times out, or exits non-zero.
        """
        logger.trace("running %s on %d chars", self.command, len(text))
        try:
            proc = subprocess.run(
                list(self.command),
                input=text,
                capture_output=True,
                encoding="utf-8",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise FormatError(f"formatter not found: {self.program}") from exc
        except subprocess.TimeoutExpired as exc:
            raise FormatError(f"formatter timed out after {self.timeout}s: {self.program}") from exc

        if proc.returncode != 0:
            detail = proc.stderr.strip() or f"exit status {proc.returncode}"
            logger.debug("%s failed: %s", self.program, detail)
            raise FormatError(detail)
        return proc.stdout
