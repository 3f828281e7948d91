"""Logging helpers for mimewire."""

from mimewire.logging.manager import (
    FALLBACK_PRESETS,
    LOGGING_LEVEL,
    SUCCESS_LEVEL,
    TRACE_LEVEL,
    LogManager,
)

__all__ = [
    "FALLBACK_PRESETS",
    "LOGGING_LEVEL",
    "SUCCESS_LEVEL",
    "TRACE_LEVEL",
    "LogManager",
]
