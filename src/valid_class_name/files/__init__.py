"""Style file discovery with modification-time tracking."""

from .models import ResolvedFile
from .resolver import (
    DEFAULT_EXCLUDE_GLOBS,
    GLOB_CACHE_TTL_SECONDS,
    FileResolverCache,
    resolve_files_with_mtimes,
    should_exclude,
)

__all__ = [
    "DEFAULT_EXCLUDE_GLOBS",
    "FileResolverCache",
    "GLOB_CACHE_TTL_SECONDS",
    "ResolvedFile",
    "resolve_files_with_mtimes",
    "should_exclude",
]
