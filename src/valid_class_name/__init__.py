"""Class-name validity registry for CSS and utility-framework class references."""

from .config import RuleOptions, load_options, parse_options
from .registry import ClassRegistry, RegistryCache, create_cache_key, get_class_registry
from .validation import ClassNameIssue, validate_class_names
from .variants import ParsedClassName, parse_class_name

__all__ = [
    "ClassNameIssue",
    "ClassRegistry",
    "ParsedClassName",
    "RegistryCache",
    "RuleOptions",
    "create_cache_key",
    "get_class_registry",
    "load_options",
    "parse_class_name",
    "parse_options",
    "validate_class_names",
]
