"""Observability - structured logging."""

from .logger import (
    LogContext,
    add_context,
    clear_all_context,
    clear_context,
    configure_logging,
    get_context,
)

__all__ = [
    "configure_logging",
    "add_context",
    "clear_context",
    "clear_all_context",
    "get_context",
    "LogContext",
]
