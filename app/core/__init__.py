"""
Core Package

Centralized configuration, logging and error handling for the
load recommendation service.

Modules:
- config: Environment configuration and settings
- logging: Structured logging with trace_id support
- errors: Standardized error classes and HTTP conversion

Usage:
    from app.core import settings, setup_logging, set_trace_id
    from app.core import ValidationError, NotFoundError
"""

# Configuration
from app.core.config import settings, get_settings, is_production, is_development

# Logging
from app.core.logging import (
    setup_logging,
    set_trace_id,
    get_trace_id
)

# Errors
from app.core.errors import (
    AppError,
    ValidationError,
    NotFoundError,
    InternalError,
    error_payload,
    to_http_exception
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "is_production",
    "is_development",

    # Logging
    "setup_logging",
    "set_trace_id",
    "get_trace_id",

    # Errors
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
    "error_payload",
    "to_http_exception",
]
