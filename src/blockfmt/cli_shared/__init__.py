# topmark:header:start
#
#   project      : blockfmt
#   file         : __init__.py
#   file_relpath : src/blockfmt/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Framework-agnostic CLI helpers (console protocol, exit codes, color resolution)."""
