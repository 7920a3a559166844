# topmark:header:start
#
#   project      : blockfmt
#   file         : __init__.py
#   file_relpath : src/blockfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt package.

blockfmt formats code blocks embedded in host files: HCL raw-string literals in
Go acceptance tests and fenced ``hcl`` blocks in Markdown documentation. Each
block is handed to an external formatter and the host file is rewritten with the
formatted blocks in place, leaving all surrounding text untouched.
"""

from __future__ import annotations
