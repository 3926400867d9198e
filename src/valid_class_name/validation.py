"""Per-name validation that turns registry answers into reportable issues."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from valid_class_name.patterns import CompiledPattern, compile_patterns, matches_any
from valid_class_name.registry import ClassRegistry
from valid_class_name.variants import parse_class_name

IssueKind = Literal["invalid_class_name", "invalid_variant"]

INVALID_CLASS_NAME: IssueKind = "invalid_class_name"
INVALID_VARIANT: IssueKind = "invalid_variant"

_EMPTY_ARBITRARY_VALUE = re.compile(r"^[\w-]+-\[\]$")


@dataclass(slots=True, frozen=True)
class ClassNameIssue:
    """One reportable problem with a class name."""

    kind: IssueKind
    class_name: str
    variant: str | None = None

    @property
    def message(self) -> str:
        """Human-readable description of the issue."""
        if self.kind == INVALID_VARIANT:
            return f'Invalid variant "{self.variant}" in class name "{self.class_name}"'
        return (
            f'Class name "{self.class_name}" is not defined in any CSS files or configuration'
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable view."""
        payload: dict[str, object] = {
            "kind": self.kind,
            "class_name": self.class_name,
            "message": self.message,
        }
        if self.variant is not None:
            payload["variant"] = self.variant
        return payload


def is_class_name_ignored(class_name: str, ignore_patterns: Iterable[CompiledPattern]) -> bool:
    """Return True when any ignore pattern matches the name."""
    return matches_any(class_name, ignore_patterns)


def validate_class_names(
    class_names: Iterable[str],
    registry: ClassRegistry,
    ignore_patterns: Sequence[str] = (),
) -> list[ClassNameIssue]:
    """Validate names in order and return every issue found.

    Ignore patterns are matched against the base, after variants are removed.
    A base that only a stylesheet defines cannot take variants.
    """
    compiled_ignores = compile_patterns(ignore_patterns)
    issues: list[ClassNameIssue] = []
    for class_name in class_names:
        issue = _validate_one(class_name, registry, compiled_ignores)
        if issue is not None:
            issues.append(issue)
    return issues


def _validate_one(
    class_name: str,
    registry: ClassRegistry,
    ignore_patterns: Sequence[CompiledPattern],
) -> ClassNameIssue | None:
    parsed = parse_class_name(class_name)
    base = parsed.base
    if is_class_name_ignored(base, ignore_patterns):
        return None
    if _EMPTY_ARBITRARY_VALUE.match(base):
        return ClassNameIssue(kind=INVALID_CLASS_NAME, class_name=base)
    if not parsed.variants:
        if registry.is_valid(base):
            return None
        return ClassNameIssue(kind=INVALID_CLASS_NAME, class_name=base)

    if not registry.is_valid(base) or registry.is_css_class(base):
        return ClassNameIssue(kind=INVALID_CLASS_NAME, class_name=base)
    if registry.is_tailwind_only(base) and not registry.is_valid(class_name):
        return ClassNameIssue(
            kind=INVALID_VARIANT,
            class_name=class_name,
            variant=parsed.variants[0],
        )
    return None
