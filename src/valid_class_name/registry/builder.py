"""Class registry combining style classes, allow/block rules and a utility validator."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from valid_class_name.files.models import ResolvedFile
from valid_class_name.patterns import CompiledPattern, compile_patterns, is_wildcard, matches_any
from valid_class_name.styles import StyleExtractor, extract_style_classes, read_style_classes
from valid_class_name.utility.base import UtilityValidator

STRUCTURAL_MARKERS = frozenset({"group", "peer"})


def partition_patterns(
    patterns: Iterable[str],
) -> tuple[frozenset[str], tuple[CompiledPattern, ...]]:
    """Split patterns into a literal set and compiled wildcard patterns."""
    literals: set[str] = set()
    wildcards: list[str] = []
    for pattern in patterns:
        if is_wildcard(pattern):
            wildcards.append(pattern)
            continue
        literals.add(pattern)
    return frozenset(literals), compile_patterns(wildcards)


class ClassRegistry:
    """Validity oracle with blocklist-first precedence.

    Style classes are kept apart from allowlist literals so that
    ``is_css_class`` and ``is_tailwind_class`` can tell the sources apart.
    Utility classes are never enumerated; they are checked one name at a time.
    """

    def __init__(
        self,
        css_classes: Iterable[str],
        allowlist: Sequence[str],
        blocklist: Sequence[str],
        utility_validator: UtilityValidator | None,
    ) -> None:
        self._css_classes = frozenset(css_classes)
        self._allow_literals, self._allow_patterns = partition_patterns(allowlist)
        self._block_literals, self._block_patterns = partition_patterns(blocklist)
        self._utility_validator = utility_validator

    @property
    def utility_validator(self) -> UtilityValidator | None:
        """Return the configured utility validator, if any."""
        return self._utility_validator

    def is_valid(self, class_name: str) -> bool:
        """Return True when any source accepts the name and the blocklist does not."""
        if self._is_blocked(class_name):
            return False
        if class_name in self._allow_literals or class_name in self._css_classes:
            return True
        if self._is_utility(class_name):
            return True
        return matches_any(class_name, self._allow_patterns)

    def is_tailwind_class(self, class_name: str) -> bool:
        """Return True for utility or allowlisted names, ignoring style classes."""
        if self._is_blocked(class_name):
            return False
        if class_name in self._allow_literals:
            return True
        if self._is_utility(class_name):
            return True
        return matches_any(class_name, self._allow_patterns)

    def is_tailwind_only(self, class_name: str) -> bool:
        """Return True only when the utility validator itself accepts the name."""
        if self._is_blocked(class_name):
            return False
        return self._is_utility(class_name)

    def is_css_class(self, class_name: str) -> bool:
        """Return True when the name was extracted from a stylesheet."""
        return class_name in self._css_classes

    def get_all_classes(self) -> set[str]:
        """Return style classes and literal allowlist entries."""
        return set(self._css_classes | self._allow_literals)

    def get_valid_variants(self) -> set[str]:
        """Return pre-computed variants; always empty, validation is per full name."""
        return set()

    def close(self) -> None:
        """Release the utility validator when it holds external resources."""
        close = getattr(self._utility_validator, "close", None)
        if callable(close):
            close()

    def _is_blocked(self, class_name: str) -> bool:
        if class_name in self._block_literals:
            return True
        return matches_any(class_name, self._block_patterns)

    def _is_utility(self, class_name: str) -> bool:
        validator = self._utility_validator
        if validator is None:
            return False
        if class_name in STRUCTURAL_MARKERS:
            return True
        return validator.is_valid_class_name(class_name)


def build_class_registry(
    css_classes: Iterable[str],
    allowlist: Sequence[str],
    blocklist: Sequence[str],
    utility_validator: UtilityValidator | None,
    cwd: str,
) -> ClassRegistry:
    """Build a registry from an already flattened style class set; cwd is not consulted."""
    return ClassRegistry(
        css_classes=css_classes,
        allowlist=allowlist,
        blocklist=blocklist,
        utility_validator=utility_validator,
    )


def build_class_registry_from_files(
    resolved_files: Iterable[ResolvedFile],
    allowlist: Sequence[str],
    blocklist: Sequence[str],
    utility_validator: UtilityValidator | None,
    cwd: str,
    extractor: StyleExtractor = extract_style_classes,
) -> ClassRegistry:
    """Read every style file, then build the registry over the merged class set."""
    css_classes = read_style_classes(resolved_files, cwd=cwd, extractor=extractor)
    return build_class_registry(css_classes, allowlist, blocklist, utility_validator, cwd)
