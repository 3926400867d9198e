"""Deterministic glob resolution with a short-lived result cache."""

from __future__ import annotations

import fnmatch
import glob
import os
import stat
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import PurePath

from valid_class_name.files.models import ResolvedFile
from valid_class_name.logging import get_logger, warn

DEFAULT_EXCLUDE_GLOBS = ("**/node_modules/**", "**/dist/**", "**/build/**")
GLOB_CACHE_TTL_SECONDS = 1.0
NEGATION_PREFIX = "!"

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class _GlobCacheEntry:
    """One cached resolution and the inputs it was computed for."""

    patterns: tuple[str, ...]
    cwd: str
    resolved_files: list[ResolvedFile]
    timestamp: float


def should_exclude(relative_path: str, exclude_globs: tuple[str, ...]) -> bool:
    """Return True when a posix path matches any exclude glob."""
    anchored = f"/{relative_path.lstrip('/')}"
    return any(
        fnmatch.fnmatch(relative_path, pattern) or fnmatch.fnmatch(anchored, pattern)
        for pattern in exclude_globs
    )


def resolve_files_with_mtimes(
    patterns: Sequence[str],
    cwd: str,
    exclude_globs: tuple[str, ...] = DEFAULT_EXCLUDE_GLOBS,
) -> list[ResolvedFile]:
    """Expand glob patterns into sorted files with modification times."""
    root = os.path.abspath(cwd)
    included: dict[str, str] = {}
    negated: set[str] = set()
    for pattern in patterns:
        if pattern.startswith(NEGATION_PREFIX):
            negated.update(_expand(pattern[len(NEGATION_PREFIX) :], root))
            continue
        base = _pattern_base(pattern, root)
        for path in _expand(pattern, root):
            included.setdefault(path, base)

    resolved: list[ResolvedFile] = []
    for path in sorted(included.keys() - negated):
        if should_exclude(_exclusion_path(path, root, included[path]), exclude_globs):
            continue
        try:
            info = os.stat(path)
        except OSError as error:
            warn(LOGGER, f'Failed to stat file "{path}"', error)
            continue
        if not stat.S_ISREG(info.st_mode):
            continue
        resolved.append(ResolvedFile(path=path, mtime_ns=info.st_mtime_ns))
    return resolved


class FileResolverCache:
    """Single-entry resolution cache valid for a short TTL."""

    def __init__(
        self,
        ttl_seconds: float = GLOB_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        resolve: Callable[[Sequence[str], str], list[ResolvedFile]] = resolve_files_with_mtimes,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._resolve = resolve
        self._entry: _GlobCacheEntry | None = None

    def get_or_resolve(self, patterns: Sequence[str], cwd: str) -> list[ResolvedFile]:
        """Return cached files for identical inputs within the TTL, else resolve."""
        if not patterns:
            return []
        now = self._clock()
        key = tuple(patterns)
        entry = self._entry
        if (
            entry is not None
            and entry.patterns == key
            and entry.cwd == cwd
            and now - entry.timestamp < self._ttl_seconds
        ):
            return entry.resolved_files
        resolved_files = self._resolve(list(patterns), cwd)
        self._entry = _GlobCacheEntry(
            patterns=key,
            cwd=cwd,
            resolved_files=resolved_files,
            timestamp=now,
        )
        return resolved_files

    def clear(self) -> None:
        """Drop the cached resolution."""
        self._entry = None


def _expand(pattern: str, root: str) -> list[str]:
    if not pattern:
        return []
    if os.path.isabs(pattern):
        absolute_pattern = pattern
    else:
        absolute_pattern = os.path.join(glob.escape(root), pattern)
    try:
        matches = glob.glob(absolute_pattern, recursive=True)
    except OSError as error:
        warn(LOGGER, f'Failed to expand style glob "{pattern}"', error)
        return []
    return [os.path.normpath(os.path.abspath(match)) for match in matches]


def _pattern_base(pattern: str, root: str) -> str:
    """Return the directory a pattern starts globbing from."""
    parts: list[str] = []
    for part in PurePath(pattern).parts[:-1]:
        if glob.has_magic(part):
            break
        parts.append(part)
    return os.path.normpath(os.path.join(root, *parts))


def _exclusion_path(path: str, root: str, base: str) -> str:
    # Excludes apply below cwd, or below the pattern base for files outside cwd;
    # ancestor directory names never count.
    relative = _relative_posix(path, root)
    if relative is None:
        relative = _relative_posix(path, base)
    return relative if relative is not None else PurePath(path).name


def _relative_posix(path: str, start: str) -> str | None:
    try:
        relative = os.path.relpath(path, start)
    except ValueError:
        return None
    if relative == ".." or relative.startswith(f"..{os.sep}"):
        return None
    return relative.replace(os.sep, "/")
