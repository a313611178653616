"""
Core Errors Module

Error types raised by the API layer when a request cannot be served.
The scoring engine itself never raises these: it defaults missing data instead.

Usage:
    from app.core.errors import NotFoundError, to_http_exception

    try:
        ...
    except AppError as e:
        raise to_http_exception(e)
"""

import logging
from typing import Optional, Dict, Any

from fastapi import HTTPException

logger = logging.getLogger(__name__)


# ==================== Base Error Class ====================

class AppError(Exception):
    """
    Base application error.

    Subclasses set `status_code`, `default_message` and optionally `code`;
    without an explicit code the snake_case class name (minus "Error") is used.
    """

    status_code: int = 500
    default_message: str = "Application error"
    code: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        code: Optional[str] = None
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details or {}
        self.code = code or self.code or self._default_code()

    def _default_code(self) -> str:
        name = self.__class__.__name__
        if name.endswith("Error"):
            name = name[:-5]

        result = []
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                result.append("_")
            result.append(char.lower())

        return "".join(result)

    def to_dict(self, trace_id: Optional[str] = None) -> Dict[str, Any]:
        return error_payload(self.code, self.message, self.details, trace_id)


# ==================== Specific Error Classes ====================

class ValidationError(AppError):
    """Request inputs cannot be assembled into an engine request."""
    status_code = 400
    default_message = "Validation failed"
    code = "validation_error"


class NotFoundError(AppError):
    """Truck or load does not exist in the fleet service."""
    status_code = 404
    default_message = "Resource not found"
    code = "not_found"


class InternalError(AppError):
    status_code = 500
    default_message = "Internal server error"
    code = "internal_error"


# ==================== Helper Functions ====================

def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    trace_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the JSON body of an error response; empty details and trace ids are omitted.

    Example:
        >>> error_payload("not_found", "Truck not found")
        {'code': 'not_found', 'message': 'Truck not found'}
    """
    payload: Dict[str, Any] = {"code": code, "message": message}
    if details:
        payload["details"] = details
    if trace_id:
        payload["trace_id"] = trace_id
    return payload


def to_http_exception(error: AppError) -> HTTPException:
    """
    Convert an AppError into an HTTPException tagged with the current trace id.

    Server-side failures (5xx) are logged here; client errors are not.
    """
    from app.core.logging import get_trace_id

    trace_id = get_trace_id()
    if trace_id == "-":
        trace_id = None

    if error.status_code >= 500:
        logger.error(f"{error.code}: {error.message}")

    return HTTPException(
        status_code=error.status_code,
        detail=error.to_dict(trace_id=trace_id)
    )
