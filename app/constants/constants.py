"""
Global Constants

Non-business constants used throughout the application.
These are infrastructure/technical constants, not scoring thresholds.

Configuration values loaded from environment variables live in app.core.config.
"""

import uuid
from typing import Optional

# ============================================================================
# HTTP Headers
# ============================================================================

TRACE_HEADER_NAME = "x-request-id"
USER_ID_HEADER_NAME = "x-user-id"
AUTHORIZATION_HEADER_NAME = "authorization"


# ============================================================================
# Default Values
# ============================================================================

# Caller identity when no x-user-id header is sent
ANONYMOUS_USER_ID = "anonymous"

# Full HOS budget used when analysing the market without a specific driver
DEFAULT_DRIVE_TIME_HOURS = 11.0
DEFAULT_ON_DUTY_HOURS = 14.0

# Upper bound accepted by the API for either HOS clock
MAX_HOS_HOURS = 14.0


# ============================================================================
# Response Metadata
# ============================================================================

ALGORITHM_NAME = "deterministic_weighted_scoring"
SOURCE_FLEET_SERVICE = "fleet_service"
SOURCE_LOAD_BOARD = "load_board"


# ============================================================================
# Helper Functions
# ============================================================================

def normalize_trace_id(trace_id: Optional[str]) -> str:
    """
    Normalize trace ID, generate new one if missing/invalid.

    Example:
        >>> normalize_trace_id("abc123")
        'abc123'
        >>> normalize_trace_id(None)  # generates new UUID
        'xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx'
    """
    if not trace_id or not isinstance(trace_id, str) or not trace_id.strip():
        return str(uuid.uuid4())
    return trace_id.strip()


def short_request_id(trace_id: str) -> str:
    """
    Get short version of trace ID for logging (first 8 chars).

    Example:
        >>> short_request_id("abc12345-6789-0000-1111-222222222222")
        'abc12345'
    """
    if not trace_id or not isinstance(trace_id, str):
        return "unknown"
    return trace_id[:8]
