"""
Core Logging Module

Logging configuration with trace_id injection for request tracing.
The API sets the trace id per request; every log line emitted while that
request is handled carries it, including DEBUG lines from the scoring engine.

Usage:
    # At application startup:
    from app.core.logging import setup_logging
    setup_logging()

    # In request handlers:
    from app.core.logging import set_trace_id
    set_trace_id("abc123")
    logging.getLogger(__name__).info("Scoring loads")
"""

import logging
import sys
from contextvars import ContextVar
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(trace_id)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ==================== Context Variables ====================

TRACE_ID: ContextVar[str] = ContextVar("trace_id", default="-")


def set_trace_id(trace_id: str) -> None:
    """Set the trace_id for the current context."""
    TRACE_ID.set(trace_id)


def get_trace_id() -> str:
    """Current trace_id, or "-" outside a request."""
    return TRACE_ID.get()


# ==================== Log Filters ====================

class TraceIdFilter(logging.Filter):
    """Copies the context trace_id onto each record for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        return True


# ==================== Logging Setup ====================

_logging_setup_done = False


def setup_logging(log_level: Optional[str] = None, force: bool = False) -> None:
    """
    Configure root logging with a stdout handler and trace_id support.

    Idempotent unless force=True.

    Args:
        log_level: Optional level override (defaults to settings.LOG_LEVEL)
        force: Replace existing root handlers
    """
    global _logging_setup_done

    if _logging_setup_done and not force:
        return

    if log_level is None:
        from app.core.config import settings
        log_level = settings.LOG_LEVEL

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if force:
        root_logger.handlers.clear()

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler.addFilter(TraceIdFilter())
        root_logger.addHandler(console_handler)

    _logging_setup_done = True

    logging.getLogger(__name__).info(f"Logging configured with level: {log_level.upper()}")
