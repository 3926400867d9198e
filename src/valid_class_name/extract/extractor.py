"""Static recovery of class-name strings from expression trees."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from valid_class_name.extract.expressions import (
    ArrayLiteral,
    Call,
    Conditional,
    Expression,
    Literal,
    Logical,
    ObjectLiteral,
    Other,
    TemplateLiteralStatic,
)

_WHITESPACE = re.compile(r"\s+")


def extract_class_names_from_string(class_string: str) -> list[str]:
    """Split a class attribute value into individual class names."""
    if not class_string or not isinstance(class_string, str):
        return []
    return [part for part in _WHITESPACE.split(class_string) if part]


def iter_class_strings(expression: Expression) -> Iterator[str]:
    """Yield every statically known class string in source order.

    Both branches of a conditional and every operand of a logical expression
    are visited regardless of runtime outcome. Object literals contribute
    their keys, never their values. Unresolvable shapes contribute nothing.
    """
    stack: list[Expression] = [expression]
    while stack:
        node = stack.pop()
        if isinstance(node, (Literal, TemplateLiteralStatic)):
            yield node.text
        elif isinstance(node, Conditional):
            stack.append(node.alternate)
            stack.append(node.consequent)
        elif isinstance(node, Logical):
            stack.append(node.right)
            stack.append(node.left)
        elif isinstance(node, Call):
            stack.extend(reversed(node.args))
        elif isinstance(node, ArrayLiteral):
            stack.extend(element for element in reversed(node.elements) if element is not None)
        elif isinstance(node, ObjectLiteral):
            for entry in node.entries:
                if entry.key is not None:
                    yield entry.key
        elif isinstance(node, Other):
            continue
        else:
            raise TypeError(f"Unsupported expression node: {type(node).__name__}")


def extract_class_strings(expression: Expression) -> list[str]:
    """Return every statically known class string in the expression."""
    return list(iter_class_strings(expression))


def extract_class_names(expression: Expression) -> list[str]:
    """Return individual class-name candidates, split on whitespace."""
    names: list[str] = []
    for class_string in iter_class_strings(expression):
        names.extend(extract_class_names_from_string(class_string))
    return names


def extract_class_strings_from_object_values(expression: ObjectLiteral) -> list[str]:
    """Return class strings from property values, for attributes like ``classes={{...}}``."""
    results: list[str] = []
    for entry in expression.entries:
        if entry.spread:
            continue
        results.extend(iter_class_strings(entry.value))
    return results


def extract_attribute_class_strings(
    attribute_name: str,
    expression: Expression,
    object_style_attributes: Sequence[str] = (),
) -> list[str]:
    """Return class strings for one attribute value.

    Attributes listed in ``object_style_attributes`` map slot names to class
    strings, so an object literal there contributes its values. Every other
    attribute goes through ``extract_class_strings``.
    """
    if attribute_name in object_style_attributes and isinstance(expression, ObjectLiteral):
        return extract_class_strings_from_object_values(expression)
    return extract_class_strings(expression)
