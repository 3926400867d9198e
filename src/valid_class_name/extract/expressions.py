"""Host-neutral expression shapes that may carry class-name strings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Literal:
    """A plain string literal."""

    text: str


@dataclass(slots=True, frozen=True)
class TemplateLiteralStatic:
    """A template literal without interpolation."""

    text: str


@dataclass(slots=True, frozen=True)
class Conditional:
    """``test ? consequent : alternate``; the test is never inspected."""

    consequent: Expression
    alternate: Expression


@dataclass(slots=True, frozen=True)
class Logical:
    """``left && right``, ``left || right`` or ``left ?? right``."""

    operator: str
    left: Expression
    right: Expression


@dataclass(slots=True, frozen=True)
class Call:
    """A call such as ``clsx(...)``; every argument is a candidate."""

    callee_name: str
    args: tuple[Expression, ...]


@dataclass(slots=True, frozen=True)
class ArrayLiteral:
    """An array literal; ``None`` marks a hole."""

    elements: tuple[Expression | None, ...]


@dataclass(slots=True, frozen=True)
class ObjectEntry:
    """One object property; ``key`` is None for computed keys and spreads.

    ``spread`` marks ``...value`` entries, whose value is another object.
    """

    key: str | None
    value: Expression
    spread: bool = False


@dataclass(slots=True, frozen=True)
class ObjectLiteral:
    """An object literal such as ``{ active: isActive }``."""

    entries: tuple[ObjectEntry, ...]


@dataclass(slots=True, frozen=True)
class Other:
    """Anything that cannot be resolved statically."""

    kind: str = ""


Expression = (
    Literal
    | TemplateLiteralStatic
    | Conditional
    | Logical
    | Call
    | ArrayLiteral
    | ObjectLiteral
    | Other
)
