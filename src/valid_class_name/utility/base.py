"""Utility validator protocol shared by every adapter."""

from __future__ import annotations

from typing import Protocol


class UtilityValidatorError(Exception):
    """Raised when a utility validator cannot be started."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class UtilityValidator(Protocol):
    """Blocking oracle answering whether one exact string is a utility class."""

    def is_valid_class_name(self, class_name: str) -> bool:
        """Return True when the framework recognizes the full class name."""
