"""Resolve input files for Headstamp based on paths, patterns, and kinds.

This module expands positional paths (files, directories recursively, and
globs), applies gitignore-style include/exclude patterns, and keeps only
files whose document kind is recognized. Sibling artifacts left by earlier
runs are never picked up. The result is a deterministic, sorted list.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from headstamp.config.logging import get_logger
from headstamp.filetypes.kinds import DocumentKind, classify

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from headstamp.config import Config
    from headstamp.config.logging import HeadstampLogger

logger: HeadstampLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(p: Path) -> list[Path]:
    """Expand a base path into a list of files and directories.

    Relative globs are expanded from the current working directory, absolute
    globs from their anchor. Directories are walked recursively.

    Args:
        p (Path): Base path to expand.

    Returns:
        list[Path]: Expanded paths (files and directories).
    """
    if "*" in str(p):
        if p.is_absolute():
            return list(Path(p.anchor).glob(str(p.relative_to(p.anchor))))
        return list(Path(".").glob(str(p)))
    if p.is_dir():
        return list(p.rglob("*"))
    if p.is_file():
        return [p]
    return []


def resolve_file_list(
    paths: Iterable[str | Path],
    config: Config,
    *,
    workspace_root: Path | None = None,
    kinds: Collection[DocumentKind] | None = None,
) -> list[Path]:
    """Return the files to process, applying expansion and filters.

    The resolver implements these semantics:
      1. **Candidate set**: expand positional paths (files, directories
         recursively, and globs). Missing paths and empty globs are logged.
      2. **Include**: when ``config.include_patterns`` is set, keep only
         candidates matching at least one pattern.
      3. **Exclude**: drop candidates matching any ``config.exclude_patterns``.
      4. **Kinds**: drop files of unknown kind, sibling artifacts
         (``config.suffix``), and, if ``kinds`` is given, other kinds.

    Patterns are matched against paths relative to ``workspace_root``
    (default: the current working directory).

    Args:
        paths (Iterable[str | Path]): Positional paths or globs.
        config (Config): Effective configuration.
        workspace_root (Path | None): Base for pattern matching.
        kinds (Collection[DocumentKind] | None): Optional kind filter.

    Returns:
        list[Path]: Sorted, de-duplicated files.
    """
    root: Path = workspace_root or Path.cwd()

    candidate_set: set[Path] = set()
    for raw in paths:
        p = Path(raw)
        expanded: list[Path] = expand_path(p)
        candidate_set.update(expanded)
        if "*" in str(p):
            if not expanded:
                logger.warning("No matches for glob pattern: %s", p)
        elif not p.exists():
            logger.warning("No such file or directory: %s", p)

    candidate_set = {p for p in candidate_set if p.is_file()}

    if config.include_patterns:
        spec = PathSpec.from_lines(GitWildMatchPattern, list(config.include_patterns))
        candidate_set = {p for p in candidate_set if spec.match_file(_rel_for_match(p, root))}

    if config.exclude_patterns:
        spec = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude_patterns))
        candidate_set = {
            p for p in candidate_set if not spec.match_file(_rel_for_match(p, root))
        }

    files: list[Path] = []
    for p in sorted(candidate_set):
        if p.name.endswith(config.suffix):
            logger.debug("Skipping sibling artifact: %s", p)
            continue
        kind: DocumentKind = classify(p)
        if kind == DocumentKind.UNKNOWN:
            logger.trace("Skipping unknown kind: %s", p)
            continue
        if kinds is not None and kind not in kinds:
            continue
        files.append(p)

    logger.debug("Files to process: %d", len(files))
    return files
