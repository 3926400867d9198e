"""Splitting composite utility class names into variants and a base."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Final

VARIANT_SEPARATOR: Final[str] = ":"
OPEN_BRACKET: Final[str] = "["
CLOSE_BRACKET: Final[str] = "]"

_NOT_FOUND: Final[int] = -1
_UNBALANCED: Final[int] = -2
_PARSE_CACHE_SIZE: Final[int] = 8192


@dataclass(slots=True, frozen=True)
class ParsedClassName:
    """Ordered variant prefixes and the remaining base class."""

    variants: tuple[str, ...]
    base: str


@lru_cache(maxsize=_PARSE_CACHE_SIZE)
def parse_class_name(class_name: str) -> ParsedClassName:
    """Split a class name such as ``sm:hover:[&>*]:mt-2`` into variants and base.

    Arbitrary variants are bracketed selectors that must be followed directly
    by the separator. A bracket that is never closed leaves the whole input as
    the base with no variants.
    """
    if not isinstance(class_name, str):
        raise TypeError(f"Class name must be a string, got {type(class_name).__name__}.")
    variants: list[str] = []
    position = 0
    length = len(class_name)
    while True:
        if class_name.startswith(OPEN_BRACKET, position):
            closing = _matching_bracket(class_name, position)
            if closing == _UNBALANCED:
                return ParsedClassName(variants=(), base=class_name)
            if closing + 1 < length and class_name[closing + 1] == VARIANT_SEPARATOR:
                variants.append(class_name[position : closing + 1])
                position = closing + 2
                continue
            break
        colon = _next_top_level_separator(class_name, position)
        if colon == _UNBALANCED:
            return ParsedClassName(variants=(), base=class_name)
        if colon == _NOT_FOUND:
            break
        variants.append(class_name[position:colon])
        position = colon + 1
    base = class_name[position:]
    if _next_top_level_separator(base, 0) == _UNBALANCED:
        return ParsedClassName(variants=(), base=class_name)
    return ParsedClassName(variants=tuple(variants), base=base)


def clear_parse_cache() -> None:
    """Drop memoized parse results."""
    parse_class_name.cache_clear()


def _matching_bracket(text: str, start: int) -> int:
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == OPEN_BRACKET:
            depth += 1
        elif char == CLOSE_BRACKET:
            depth -= 1
            if depth == 0:
                return index
    return _UNBALANCED


def _next_top_level_separator(text: str, start: int) -> int:
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == OPEN_BRACKET:
            depth += 1
        elif char == CLOSE_BRACKET:
            depth = max(0, depth - 1)
        elif char == VARIANT_SEPARATOR and depth == 0:
            return index
    return _UNBALANCED if depth > 0 else _NOT_FOUND
