# topmark:header:start
#
#   project      : blockfmt
#   file         : model.py
#   file_relpath : src/blockfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the commands.
    - `MutableConfig`: a mutable builder used during discovery and merge; it is
      frozen into `Config` and can be thawed back for edits.

Sources, lowest precedence first:
    1. built-in defaults;
    2. discovered files, walking upward from the working directory (root-most
       first, nearest last; in one directory ``pyproject.toml`` then
       ``blockfmt.toml``); a file setting ``root = true`` stops the walk;
    3. files passed explicitly with ``--config``;
    4. CLI overrides.

Builder fields use ``None`` for "not set" so that a later source only overrides
what it actually sets.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from blockfmt.config.io import (
    ConfigError,
    get_bool_value_or_none,
    get_string_list_or_none,
    load_toml_dict,
)
from blockfmt.config.logging import get_logger
from blockfmt.constants import (
    BLOCKFMT_TOML_NAME,
    DEFAULT_EXCLUDE,
    DEFAULT_FENCE_LANGUAGES,
    DEFAULT_FORMATTER,
    DEFAULT_INCLUDE,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from blockfmt.config.io import TomlTable
    from blockfmt.config.logging import BlockfmtLogger

logger: BlockfmtLogger = get_logger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset(
    {"root", "formatter", "fence_languages", "fmtcompat", "include", "exclude"}
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        formatter (tuple[str, ...]): External formatter command line.
        fence_languages (tuple[str, ...]): Language tags that open a fenced block.
        fmtcompat (bool): Escape Go format verbs around the formatter call.
        include (tuple[str, ...]): Patterns of files picked up when walking directories.
        exclude (tuple[str, ...]): Patterns of files and directories skipped when walking.
        config_files (tuple[Path, ...]): Files this configuration was loaded from.
    """

    formatter: tuple[str, ...] = DEFAULT_FORMATTER
    fence_languages: tuple[str, ...] = DEFAULT_FENCE_LANGUAGES
    fmtcompat: bool = False
    include: tuple[str, ...] = DEFAULT_INCLUDE
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            formatter=list(self.formatter),
            fence_languages=list(self.fence_languages),
            fmtcompat=self.fmtcompat,
            include=list(self.include),
            exclude=list(self.exclude),
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder (``None`` means "not set")."""

    formatter: list[str] | None = None
    fence_languages: list[str] | None = None
    fmtcompat: bool | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    root: bool = False
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into a `Config`, filling unset fields with defaults.

        Raises:
            ConfigError: If the formatter command or the fence language list is empty.
        """
        formatter = tuple(self.formatter) if self.formatter is not None else DEFAULT_FORMATTER
        if not formatter:
            raise ConfigError("formatter command must not be empty")
        languages = (
            tuple(self.fence_languages)
            if self.fence_languages is not None
            else DEFAULT_FENCE_LANGUAGES
        )
        if not languages:
            raise ConfigError("fence_languages must list at least one language")
        return Config(
            formatter=formatter,
            fence_languages=languages,
            fmtcompat=bool(self.fmtcompat),
            include=tuple(self.include) if self.include is not None else DEFAULT_INCLUDE,
            exclude=tuple(self.exclude) if self.exclude is not None else DEFAULT_EXCLUDE,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay the fields ``other`` sets onto this builder and return it."""
        if other.formatter is not None:
            self.formatter = list(other.formatter)
        if other.fence_languages is not None:
            self.fence_languages = list(other.fence_languages)
        if other.fmtcompat is not None:
            self.fmtcompat = other.fmtcompat
        if other.include is not None:
            self.include = list(other.include)
        if other.exclude is not None:
            self.exclude = list(other.exclude)
        self.config_files.extend(other.config_files)
        return self

    def apply_overrides(
        self,
        *,
        formatter: str | None = None,
        fmtcompat: bool | None = None,
        fence_languages: Sequence[str] | None = None,
    ) -> MutableConfig:
        """Apply command-line overrides and return this builder.

        Args:
            formatter (str | None): Formatter command line, split shell-style.
            fmtcompat (bool | None): Format-verb escaping switch.
            fence_languages (Sequence[str] | None): Fence languages; empty means unset.
        """
        if formatter is not None:
            self.formatter = shlex.split(formatter)
        if fmtcompat is not None:
            self.fmtcompat = fmtcompat
        if fence_languages:
            self.fence_languages = list(fence_languages)
        return self

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a builder from a parsed ``blockfmt`` table.

        Args:
            data (TomlTable): The table (top level of ``blockfmt.toml`` or
                ``[tool.blockfmt]``).
            config_file (Path | None): Source file, used for messages and provenance.

        Returns:
            MutableConfig: The builder; keys the table does not set stay unset.
        """
        where = str(config_file) if config_file else "<dict>"
        for key in sorted(set(data) - KNOWN_KEYS):
            logger.warning("Ignoring unknown config key '%s' in %s", key, where)

        draft = cls()
        raw_formatter: Any = data.get("formatter")
        if isinstance(raw_formatter, str):
            draft.formatter = shlex.split(raw_formatter)
        else:
            draft.formatter = get_string_list_or_none(data, "formatter")
        draft.fence_languages = get_string_list_or_none(data, "fence_languages")
        draft.fmtcompat = get_bool_value_or_none(data, "fmtcompat")
        draft.include = get_string_list_or_none(data, "include")
        draft.exclude = get_string_list_or_none(data, "exclude")
        draft.root = bool(get_bool_value_or_none(data, "root"))
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports ``blockfmt.toml`` (top-level keys) and ``pyproject.toml`` (the
        ``[tool.blockfmt]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or None for a ``pyproject.toml``
                without a ``[tool.blockfmt]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed, or if the
                ``tool`` key of a ``pyproject.toml`` is not a table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool: Any = data.get("tool", {})
            if not isinstance(tool, dict):
                raise ConfigError(f"{path}: [tool] must be a table")
            tool_section: Any = tool.get("blockfmt")
            if not isinstance(tool_section, dict):
                logger.debug("No [tool.blockfmt] section in %s", path)
                return None
            data = tool_section
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Root-most first, nearest last; within a directory
                ``pyproject.toml`` before ``blockfmt.toml``.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            entries: list[Path] = []
            stop_here = False
            for name in (PYPROJECT_TOML_NAME, BLOCKFMT_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    draft = cls.from_toml_file(p)
                except ConfigError as e:
                    # Reported again, fatally, when the file is actually loaded
                    logger.debug("Ignoring parse error in %s during discovery: %s", p, e)
                    entries.append(p)
                    continue
                if draft is None:
                    continue
                logger.debug("Discovered config file: %s", p)
                entries.append(p)
                stop_here = stop_here or draft.root
            if entries:
                per_dir.append(entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for entries in reversed(per_dir):
            ordered.extend(entries)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge discovered and explicit config files into one builder.

        Args:
            start (Path | None): Discovery anchor (defaults to the working directory).
            extra_files (Iterable[Path]): Explicit config files, merged last in order.
            no_config (bool): Skip discovery (explicit files are still loaded).

        Returns:
            MutableConfig: The merged builder.

        Raises:
            ConfigError: If a config file cannot be read or parsed.
        """
        merged = cls()
        paths: list[Path] = []
        if not no_config:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        paths.extend(Path(p) for p in extra_files)

        for path in paths:
            draft = cls.from_toml_file(path)
            if draft is not None:
                merged.merge_with(draft)
        logger.trace("Merged config: %s", merged)
        return merged
