"""Glob-style class-name patterns with guards against pathological input."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from valid_class_name.logging import get_logger, warn

MAX_PATTERN_LENGTH: Final[int] = 200
WILDCARD: Final[str] = "*"

_DANGEROUS_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"\*{3,}"),
    re.compile(r"\+{2,}"),
    re.compile(r"(\(.*\+.*\))\+"),
)

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class CompiledPattern:
    """Raw pattern text and its anchored matcher; None never matches."""

    raw: str
    matcher: re.Pattern[str] | None

    def matches(self, name: str) -> bool:
        """Return True when the compiled matcher accepts the full name."""
        if self.matcher is None:
            return False
        return self.matcher.match(name) is not None


def is_wildcard(pattern: str) -> bool:
    """Return True when a pattern contains the wildcard character."""
    return WILDCARD in pattern


def validate_pattern(pattern: str) -> bool:
    """Return True when a pattern is safe to compile."""
    if not isinstance(pattern, str):
        raise TypeError(f"Pattern must be a string, got {type(pattern).__name__}.")
    if len(pattern) > MAX_PATTERN_LENGTH:
        return False
    return not any(dangerous.search(pattern) for dangerous in _DANGEROUS_PATTERNS)


def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile a wildcard pattern into an anchored regex, or None when unsafe."""
    if not validate_pattern(pattern):
        return None
    escaped = re.escape(pattern).replace(re.escape(WILDCARD), ".*")
    try:
        return re.compile(rf"\A{escaped}\Z", re.DOTALL)
    except re.error:
        return None


def matches_pattern(name: str, pattern: str) -> bool:
    """Return True when name matches pattern; unsafe patterns match nothing."""
    compiled = compile_pattern(pattern)
    if compiled is None:
        return False
    return compiled.match(name) is not None


def compile_patterns(patterns: Iterable[str]) -> tuple[CompiledPattern, ...]:
    """Compile patterns in order, logging each rejected one."""
    compiled: list[CompiledPattern] = []
    for raw in patterns:
        matcher = compile_pattern(raw)
        if matcher is None:
            warn(LOGGER, f'Ignoring unsafe or invalid class-name pattern "{raw}"')
        compiled.append(CompiledPattern(raw=raw, matcher=matcher))
    return tuple(compiled)


def matches_any(name: str, patterns: Iterable[CompiledPattern]) -> bool:
    """Return True when any compiled pattern matches name."""
    return any(pattern.matches(name) for pattern in patterns)
