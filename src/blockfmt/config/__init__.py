# topmark:header:start
#
#   project      : blockfmt
#   file         : __init__.py
#   file_relpath : src/blockfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Configuration handling for blockfmt.

Re-exports the configuration model and the TOML error type. Logging setup lives
in `blockfmt.config.logging`.
"""

from __future__ import annotations

from blockfmt.config.io import ConfigError
from blockfmt.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]
