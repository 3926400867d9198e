"""Class registry construction and caching."""

from .builder import (
    STRUCTURAL_MARKERS,
    ClassRegistry,
    build_class_registry,
    build_class_registry_from_files,
    partition_patterns,
)
from .cache import CacheEntry, RegistryCache, get_class_registry
from .cache_key import create_cache_key

__all__ = [
    "CacheEntry",
    "ClassRegistry",
    "RegistryCache",
    "STRUCTURAL_MARKERS",
    "build_class_registry",
    "build_class_registry_from_files",
    "create_cache_key",
    "get_class_registry",
    "partition_patterns",
]
