# topmark:header:start
#
#   project      : blockfmt
#   file         : file_resolver.py
#   file_relpath : src/blockfmt/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The blockfmt authors
#
# topmark:header:end

"""Resolve host files to process from command-line paths.

Files named explicitly are always processed. Directories are walked
recursively; a file found that way is kept when it matches one of the
configured ``include`` patterns and none of the ``exclude`` patterns. Patterns
use .gitignore semantics and are matched against the path relative to the
directory being walked. The result is sorted and free of duplicates.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from blockfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from blockfmt.config import Config
    from blockfmt.config.logging import BlockfmtLogger

logger: BlockfmtLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or the path itself) for PathSpec matching."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def walk_directory(root: Path, *, include: PathSpec, exclude: PathSpec) -> list[Path]:
    """Return the files below ``root`` selected by the include and exclude specs.

    Args:
        root (Path): Directory to walk.
        include (PathSpec): Files must match this spec.
        exclude (PathSpec): Files (or any of their parent directories) must not match.

    Returns:
        list[Path]: Selected files, unsorted.
    """
    selected: list[Path] = []
    for p in root.rglob("*"):
        if not p.is_file():
            continue
        rel: str = _rel_for_match(p, root)
        if exclude.match_file(rel):
            logger.trace("Excluded: %s", p)
            continue
        if include.match_file(rel):
            selected.append(p)
    return selected


def resolve_file_list(paths: Iterable[str | Path], config: Config) -> list[Path]:
    """Return the sorted list of host files to process.

    Args:
        paths (Iterable[str | Path]): Files and directories given on the command line.
        config (Config): Supplies the ``include`` and ``exclude`` patterns.

    Returns:
        list[Path]: Sorted, de-duplicated files.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    include = PathSpec.from_lines(GitWildMatchPattern, list(config.include))
    exclude = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude))

    files: set[Path] = set()
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            found = walk_directory(p, include=include, exclude=exclude)
            logger.debug("Found %d file(s) under %s", len(found), p)
            files.update(found)
        elif p.is_file():
            files.add(p)
        else:
            raise FileNotFoundError(f"No such file or directory: {p}")

    logger.trace("Files to process: %d -- %s", len(files), sorted(files))
    return sorted(files)
