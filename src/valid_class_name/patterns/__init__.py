"""Wildcard pattern safety and matching primitives."""

from .matcher import (
    MAX_PATTERN_LENGTH,
    CompiledPattern,
    compile_pattern,
    compile_patterns,
    is_wildcard,
    matches_any,
    matches_pattern,
    validate_pattern,
)

__all__ = [
    "CompiledPattern",
    "MAX_PATTERN_LENGTH",
    "compile_pattern",
    "compile_patterns",
    "is_wildcard",
    "matches_any",
    "matches_pattern",
    "validate_pattern",
]
