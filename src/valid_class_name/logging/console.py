"""Logger helpers shared by every degraded-input path."""

from __future__ import annotations

import logging
import os

ROOT_LOGGER_NAME = "valid_class_name"
QUIET_ENV_VAR = "VALID_CLASS_NAME_QUIET"
_TRUTHY = {"1", "true", "yes"}


def is_quiet() -> bool:
    """Return True when warnings are suppressed via the environment."""
    return os.getenv(QUIET_ENV_VAR, "").strip().lower() in _TRUTHY


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def warn(logger: logging.Logger, message: str, error: BaseException | None = None) -> None:
    """Log one warning, appending the error text when present."""
    if is_quiet():
        return
    if error is None:
        logger.warning(message)
        return
    logger.warning("%s: %s", message, error)
