# topmark:header:start
#
#   project      : blockfmt
#   file         : __init__.py
#   file_relpath : src/blockfmt/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Click subcommands of the blockfmt CLI."""
