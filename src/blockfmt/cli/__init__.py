# topmark:header:start
#
#   project      : blockfmt
#   file         : __init__.py
#   file_relpath : src/blockfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt CLI package.

Groups the Click command definitions and their supporting utilities.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        blockfmt = "blockfmt.cli.main:cli"
"""
