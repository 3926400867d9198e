"""Warning-level logging utilities."""

from .console import QUIET_ENV_VAR, get_logger, is_quiet, warn

__all__ = ["QUIET_ENV_VAR", "get_logger", "is_quiet", "warn"]
