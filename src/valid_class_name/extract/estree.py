"""Conversion from ESTree-shaped mappings (as emitted by JS parsers) to expressions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from valid_class_name.extract.expressions import (
    ArrayLiteral,
    Call,
    Conditional,
    Expression,
    Literal,
    Logical,
    ObjectEntry,
    ObjectLiteral,
    Other,
    TemplateLiteralStatic,
)


def expression_from_estree(node: object) -> Expression:
    """Convert an ESTree node into the expression union.

    Non-string literals, interpolated templates and every other node type
    become ``Other``. Computed keys and spread properties keep their value
    but lose their key; spreads are marked ``spread``.
    """
    if not isinstance(node, Mapping):
        raise TypeError(f"ESTree node must be a mapping, got {type(node).__name__}.")
    node_type = node.get("type")
    if node_type == "Literal":
        value = node.get("value")
        if isinstance(value, str):
            return Literal(value)
        return Other("Literal")
    if node_type == "TemplateLiteral":
        return _template_literal(node)
    if node_type == "ConditionalExpression":
        return Conditional(
            consequent=expression_from_estree(node["consequent"]),
            alternate=expression_from_estree(node["alternate"]),
        )
    if node_type == "LogicalExpression":
        return Logical(
            operator=str(node.get("operator", "")),
            left=expression_from_estree(node["left"]),
            right=expression_from_estree(node["right"]),
        )
    if node_type == "CallExpression":
        return Call(
            callee_name=_callee_name(node.get("callee")),
            args=tuple(expression_from_estree(arg) for arg in _children(node, "arguments")),
        )
    if node_type == "ArrayExpression":
        return ArrayLiteral(
            elements=tuple(
                None if element is None else expression_from_estree(element)
                for element in _children(node, "elements")
            )
        )
    if node_type == "ObjectExpression":
        return ObjectLiteral(
            entries=tuple(_object_entry(prop) for prop in _children(node, "properties"))
        )
    return Other(str(node_type or ""))


def _children(node: Mapping[str, object], key: str) -> Sequence[object]:
    value = node.get(key)
    if isinstance(value, list | tuple):
        return value
    return ()


def _template_literal(node: Mapping[str, object]) -> Expression:
    quasis = _children(node, "quasis")
    if _children(node, "expressions") or len(quasis) != 1:
        return Other("TemplateLiteral")
    quasi = quasis[0]
    value = quasi.get("value") if isinstance(quasi, Mapping) else None
    cooked = value.get("cooked") if isinstance(value, Mapping) else None
    if not isinstance(cooked, str):
        return Other("TemplateLiteral")
    return TemplateLiteralStatic(cooked)


def _callee_name(callee: object) -> str:
    if not isinstance(callee, Mapping):
        return ""
    if callee.get("type") == "Identifier":
        return str(callee.get("name", ""))
    if callee.get("type") == "MemberExpression" and not callee.get("computed"):
        prop = callee.get("property")
        if isinstance(prop, Mapping) and prop.get("type") == "Identifier":
            return str(prop.get("name", ""))
    return ""


def _object_entry(prop: object) -> ObjectEntry:
    if not isinstance(prop, Mapping):
        raise TypeError(f"ESTree property must be a mapping, got {type(prop).__name__}.")
    if prop.get("type") == "SpreadElement":
        return ObjectEntry(
            key=None,
            value=expression_from_estree(prop["argument"]),
            spread=True,
        )
    value = expression_from_estree(prop["value"])
    if prop.get("computed"):
        return ObjectEntry(key=None, value=value)
    return ObjectEntry(key=_property_key(prop.get("key")), value=value)


def _property_key(key: object) -> str | None:
    if not isinstance(key, Mapping):
        return None
    if key.get("type") == "Identifier":
        name = key.get("name")
        return name if isinstance(name, str) else None
    if key.get("type") == "Literal":
        value = key.get("value")
        return value if isinstance(value, str) else None
    return None
