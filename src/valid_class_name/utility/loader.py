"""Locating the utility-framework config and starting a validator for it."""

from __future__ import annotations

import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from valid_class_name.config import UtilityOption, UtilitySettings
from valid_class_name.logging import get_logger, warn
from valid_class_name.utility.base import UtilityValidator, UtilityValidatorError
from valid_class_name.utility.node import NODE_BRIDGE_SCRIPT, NodeProcessValidator

CONFIG_FILE_NAMES = (
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
    "tailwind.config.ts",
)
CSS_CONFIG_PATHS = (
    "src/styles/tailwind.css",
    "src/app.css",
    "src/index.css",
    "src/main.css",
    "tailwind.css",
)
CSS_ENTRY_MARKERS = ("@import 'tailwindcss'", '@import "tailwindcss"')
DEFAULT_NODE_COMMAND = ("node",)
_CSS_ENTRY_SNIFF_CHARS = 1000

LOGGER = get_logger(__name__)


def is_utility_css_entry(path: Path) -> bool:
    """Return True when a CSS file imports the framework near its top."""
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            head = handle.read(_CSS_ENTRY_SNIFF_CHARS)
    except OSError:
        return False
    return any(marker in head for marker in CSS_ENTRY_MARKERS)


def find_utility_config_path(config_path: str | None, cwd: str) -> str | None:
    """Resolve an explicit config path, or auto-detect one under cwd."""
    root = Path(cwd)
    if config_path:
        candidate = Path(config_path)
        absolute = candidate if candidate.is_absolute() else root / candidate
        if absolute.exists():
            return str(absolute.resolve())
        warn(LOGGER, f'Utility framework config file not found at "{config_path}"')
        return None

    for file_name in CONFIG_FILE_NAMES:
        candidate = root / file_name
        if candidate.is_file():
            return str(candidate.resolve())
    for relative in CSS_CONFIG_PATHS:
        candidate = root / relative
        if candidate.is_file() and is_utility_css_entry(candidate):
            return str(candidate.resolve())
    return None


def create_utility_validator(
    option: UtilityOption,
    cwd: str,
    node_command: Sequence[str] = DEFAULT_NODE_COMMAND,
) -> UtilityValidator | None:
    """Start a validator for the configured framework, or None when unavailable."""
    if not option:
        return None
    config_path = option.config_path if isinstance(option, UtilitySettings) else None
    resolved = find_utility_config_path(config_path, cwd)
    if resolved is None:
        warn(LOGGER, "Utility framework config file not found, skipping utility validation")
        return None
    if not os.path.exists(resolved):
        warn(LOGGER, f'Utility framework config file no longer exists at "{resolved}"')
        return None

    executable = shutil.which(node_command[0])
    if executable is None:
        warn(LOGGER, f'"{node_command[0]}" is not available, skipping utility validation')
        return None
    command = [executable, *node_command[1:], "-e", NODE_BRIDGE_SCRIPT, resolved, cwd]
    try:
        return NodeProcessValidator(command, cwd=cwd)
    except UtilityValidatorError as error:
        warn(LOGGER, f'Failed to create utility validator from "{resolved}"', error)
        return None
