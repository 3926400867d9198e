"""Utility-framework validator adapters."""

from .base import UtilityValidator, UtilityValidatorError
from .bridge import AsyncValidatorBridge
from .loader import (
    CONFIG_FILE_NAMES,
    CSS_CONFIG_PATHS,
    create_utility_validator,
    find_utility_config_path,
    is_utility_css_entry,
)
from .node import NODE_BRIDGE_SCRIPT, NodeProcessValidator

__all__ = [
    "AsyncValidatorBridge",
    "CONFIG_FILE_NAMES",
    "CSS_CONFIG_PATHS",
    "NODE_BRIDGE_SCRIPT",
    "NodeProcessValidator",
    "UtilityValidator",
    "UtilityValidatorError",
    "create_utility_validator",
    "find_utility_config_path",
    "is_utility_css_entry",
]
