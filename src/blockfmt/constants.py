# topmark:header:start
#
#   project      : blockfmt
#   file         : constants.py
#   file_relpath : src/blockfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""blockfmt constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BLOCKFMT_VERSION: str = get_version("blockfmt")

# Config file names (nearest-last merge; `blockfmt.toml` wins in the same directory)
BLOCKFMT_TOML_NAME: str = "blockfmt.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Acceptance-test style: HCL inside a Go raw string literal
ACCTEST_BLOCK_START: str = "return fmt.Sprintf(`\n"
ACCTEST_BLOCK_END: str = "`)"
ACCTEST_BLOCK_END_WITH_ARGS: str = "`, "

# Documentation style: fenced Markdown code block
FENCE_MARKER: str = "```"

DEFAULT_FENCE_LANGUAGES: tuple[str, ...] = ("hcl",)
DEFAULT_FORMATTER: tuple[str, ...] = ("terraform", "fmt", "-")
DEFAULT_INCLUDE: tuple[str, ...] = ("*.go", "*.md", "*.markdown")
DEFAULT_EXCLUDE: tuple[str, ...] = ("vendor/", ".git/")

STDIN_SOURCE_NAME: str = "stdin"
TEMP_FILE_PREFIX: str = "blockfmt-"
