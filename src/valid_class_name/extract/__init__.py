"""Class-name extraction from host-neutral expression trees."""

from .estree import expression_from_estree
from .expressions import (
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
from .extractor import (
    extract_attribute_class_strings,
    extract_class_names,
    extract_class_names_from_string,
    extract_class_strings,
    extract_class_strings_from_object_values,
    iter_class_strings,
)

__all__ = [
    "ArrayLiteral",
    "Call",
    "Conditional",
    "Expression",
    "Literal",
    "Logical",
    "ObjectEntry",
    "ObjectLiteral",
    "Other",
    "TemplateLiteralStatic",
    "expression_from_estree",
    "extract_attribute_class_strings",
    "extract_class_names",
    "extract_class_names_from_string",
    "extract_class_strings",
    "extract_class_strings_from_object_values",
    "iter_class_strings",
]
