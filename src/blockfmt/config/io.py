# topmark:header:start
#
#   project      : blockfmt
#   file         : io.py
#   file_relpath : src/blockfmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""TOML loading and value getters for blockfmt configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters are lenient: a value of the wrong shape is logged and replaced by the
default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from blockfmt.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from blockfmt.config.logging import BlockfmtLogger

TomlTable = dict[str, Any]

logger: BlockfmtLogger = get_logger(__name__)


class ConfigError(Exception):
    """A configuration file could not be read or parsed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``blockfmt.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return ``table[key]`` if it is a bool, else None."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Expected bool for key %s, got %r; ignoring", key, value)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return ``table[key]`` as a list of strings, or None when missing or malformed.

    A single string is accepted and wrapped in a list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    logger.warning("Expected list of strings for key %s, got %r; ignoring", key, value)
    return None
