# topmark:header:start
#
#   project      : blockfmt
#   file         : exit_codes.py
#   file_relpath : src/blockfmt/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Exit codes for the blockfmt CLI.

blockfmt aligns with the BSD `sysexits` convention where practical. The one
divergence is `WOULD_CHANGE=2`, returned by ``diff --check`` when a file would
be reformatted; tests must assert ``result.exception is None`` to tell it apart
from Click's own usage errors (which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the blockfmt CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure.
        WOULD_CHANGE: ``diff --check`` found files that ``fmt`` would change.
        USAGE_ERROR: Command-line invocation error. Mirrors ``EX_USAGE (64)``.
        ENCODING_ERROR: A file is not valid UTF-8. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: A line could not be passed through. Mirrors ``EX_SOFTWARE (70)``.
        IO_ERROR: Reading, the temporary file or the final copy failed. Mirrors
            ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration or missing formatter. Mirrors
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
