"""Logging helpers for the TopCheck API client.

The client is a library: it only obtains loggers and never installs handlers
or changes levels. Host applications decide where records go. Attach
:class:`ContextualFormatter` to a handler to see the ``log_context`` fields
(such as the order id) next to each message.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

_log_context: ContextVar[dict[str, Any]] = ContextVar(
    "log_context", default={})


class ContextualFormatter(logging.Formatter):
    """Formatter that appends the active context fields to the formatted line."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = _log_context.get()
        if not ctx:
            return line
        ctx_str = " ".join(f"{k}={v}" for k, v in ctx.items())
        return f"{line} [{ctx_str}]"


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Temporarily add context fields to all log messages.

    Usage::

        with log_context(tc_id="577638D868907"):
            logger.info("Setting order converted")

    Fields are merged with any existing context and restored on exit.
    """
    current = _log_context.get()
    token = _log_context.set({**current, **fields})
    try:
        yield
    finally:
        _log_context.reset(token)


def current_log_context() -> dict[str, Any]:
    """Return a copy of the context fields currently in effect."""
    return dict(_log_context.get())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``)."""
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """Log a handled exception at ERROR level with extra context fields."""
    with log_context(**context):
        logger.error("%s: %s", message, exc)
