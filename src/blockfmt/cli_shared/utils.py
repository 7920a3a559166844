# topmark:header:start
#
#   project      : blockfmt
#   file         : utils.py
#   file_relpath : src/blockfmt/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Output format and color resolution shared by the CLI commands."""

from __future__ import annotations

import os
import sys
from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = "default"
    JSON = "json"


class ColorMode(Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. **Machine formats**: ``json`` never uses color.
      2. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
      3. **Environment**: ``FORCE_COLOR`` (set, not ``"0"``) → True;
         ``NO_COLOR`` (set) → False.
      4. **Auto**: ``stdout.isatty()``.

    Args:
      cli_mode: Parsed `ColorMode` from ``--color``; None means not provided.
      output_format: Output format name, if known.
      stdout_isatty: Optional override for TTY detection.

    Returns:
      True if ANSI color should be enabled; False otherwise.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False

    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
