# topmark:header:start
#
#   project      : blockfmt
#   file         : __init__.py
#   file_relpath : src/blockfmt/formatters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Formatters applied to block content."""

from __future__ import annotations

from blockfmt.formatters.base import FormatError, Formatter
from blockfmt.formatters.external import ExternalFormatter

__all__ = [
    "ExternalFormatter",
    "FormatError",
    "Formatter",
]
