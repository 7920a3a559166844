# topmark:header:start
#
#   project      : blockfmt
#   file         : __main__.py
#   file_relpath : src/blockfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Module entry point for running blockfmt via ``python -m blockfmt``.

Delegates directly to :func:`blockfmt.cli.main.cli`, the single CLI entry point.

Examples:
    Format all blocks in a documentation tree::

        python -m blockfmt fmt docs/
"""

from __future__ import annotations

from blockfmt.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
