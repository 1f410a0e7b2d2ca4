"""Observability and logging facades."""

from .logging import (
    ContextualFormatter,
    current_log_context,
    get_logger,
    log_context,
    log_exception,
)

__all__ = [
    "ContextualFormatter",
    "current_log_context",
    "get_logger",
    "log_context",
    "log_exception",
]
