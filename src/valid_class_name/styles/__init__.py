"""Stylesheet class-name sources."""

from .css import extract_class_names_from_css, extract_class_names_from_scss
from .source import StyleExtractor, extract_style_classes, read_style_classes

__all__ = [
    "StyleExtractor",
    "extract_class_names_from_css",
    "extract_class_names_from_scss",
    "extract_style_classes",
    "read_style_classes",
]
