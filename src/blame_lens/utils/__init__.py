"""Utility modules for blame-lens."""

from blame_lens.utils.debug import DebugLogger
from blame_lens.utils.progress import (
    log_debug,
    log_error,
    log_info,
    log_warning,
)

__all__ = [
    "DebugLogger",
    "log_debug",
    "log_info",
    "log_warning",
    "log_error",
]
