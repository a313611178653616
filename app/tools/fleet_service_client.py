"""
Fleet Service HTTP Client

Provides async interface to the fleet backend for trucks and load board listings.
Uses a module-level singleton AsyncClient for efficient connection pooling.

Functions:
- get_truck: Get one truck with its cost data
- list_trucks: Get the caller's trucks
- list_loads: Get load board listings
- get_load: Get one load board listing
- avg_cost_per_mile: Derive operating cost per mile from a normalized truck
- aclose_client: Close the HTTP client (call during app shutdown)

All functions forward Authorization headers and handle common HTTP errors.
"""

import os
import logging
from typing import Optional, Dict, Any, List
import httpx
from fastapi import HTTPException, status

from app.core.config import settings

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration - Read from environment
# ============================================================================

# Endpoint paths (configurable via env)
TRUCKS_PATH = os.getenv("FLEET_TRUCKS_PATH", "/api/trucks")
TRUCK_PATH = os.getenv("FLEET_TRUCK_PATH", "/api/trucks/{truck_id}")
LOAD_BOARD_PATH = os.getenv("FLEET_LOAD_BOARD_PATH", "/api/load-board")
LOAD_PATH = os.getenv("FLEET_LOAD_PATH", "/api/load-board/{load_id}")


# ============================================================================
# Module-level HTTP Client (Singleton with Connection Pooling)
# ============================================================================

_client: Optional[httpx.AsyncClient] = None


def get_client() -> httpx.AsyncClient:
    """Get or create the module-level httpx.AsyncClient singleton."""
    global _client

    if _client is None or _client.is_closed:
        limits = httpx.Limits(
            max_connections=settings.FLEET_CLIENT_MAX_CONNECTIONS,
            max_keepalive_connections=settings.FLEET_CLIENT_MAX_KEEPALIVE
        )

        _client = httpx.AsyncClient(
            base_url=settings.FLEET_SERVICE_URL,
            timeout=settings.FLEET_CLIENT_TIMEOUT,
            limits=limits,
            follow_redirects=False
        )
        logger.info(f"Initialized Fleet Service httpx.AsyncClient ({settings.FLEET_SERVICE_URL})")

    return _client


async def aclose_client() -> None:
    """Close the module-level httpx.AsyncClient gracefully."""
    global _client

    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.info("Closed Fleet Service httpx.AsyncClient")
    _client = None


# ============================================================================
# Helper Functions
# ============================================================================


def _build_headers(
    auth_header: Optional[str] = None,
    request_id: Optional[str] = None
) -> Dict[str, str]:
    """Build request headers with optional Authorization and x-request-id."""
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    if auth_header:
        headers["Authorization"] = auth_header

    if request_id:
        headers["x-request-id"] = request_id

    return headers


def _handle_http_error(e: httpx.HTTPStatusError, resource: str) -> None:
    """
    Map httpx HTTP errors to FastAPI HTTPException.
    Logs full error server-side, exposes only safe messages.
    """
    status_code = e.response.status_code

    try:
        error_data = e.response.json()
        error_message = error_data.get("message") or error_data.get("detail") or str(error_data)
    except Exception:
        error_message = e.response.text or f"Status {status_code}"

    logger.warning(f"Fleet service error {status_code} for {resource}: {error_message}")

    if status_code == 401:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required"
        )
    elif status_code == 403:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access forbidden"
        )
    elif status_code == 404:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource.capitalize()} not found"
        )
    else:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Fleet service unavailable"
        )


def _handle_connection_error(e: Exception) -> None:
    """Handle connection errors (timeout, network issues, etc.)."""
    logger.error(f"Fleet service connection error: {type(e).__name__}: {e}")
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"Cannot connect to fleet service: {type(e).__name__}"
    )


def safe_float(value: Any, default: float = 0.0) -> float:
    """
    Safely convert value to float, returning default on error.
    Handles None, empty strings, non-numeric strings gracefully.
    """
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def _unwrap(data: Any) -> Any:
    """Strip a {"data": ...} envelope if the backend sent one."""
    if isinstance(data, dict) and "data" in data:
        return data["data"]
    return data


def _first(raw: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def normalize_truck(data: Any) -> Dict[str, Any]:
    """
    Normalize a truck record to consistent snake_case fields:
    id, name, equipment_type, total_miles, fixed_costs, variable_costs.
    """
    raw = _unwrap(data)
    if not isinstance(raw, dict):
        raw = {}

    truck_id = _first(raw, "id", "truck_id", "truckId")
    return {
        "id": str(truck_id) if truck_id is not None else "",
        "name": str(raw.get("name") or ""),
        "equipment_type": str(
            _first(raw, "equipment_type", "equipmentType") or settings.DEFAULT_EQUIPMENT_TYPE
        ),
        "total_miles": safe_float(_first(raw, "total_miles", "totalMiles")),
        "fixed_costs": safe_float(_first(raw, "fixed_costs", "fixedCosts")),
        "variable_costs": safe_float(_first(raw, "variable_costs", "variableCosts")),
    }


def normalize_load_list(data: Any) -> List[Dict[str, Any]]:
    """Extract load records from a list or a {"data"/"loads": [...]} envelope."""
    raw = _unwrap(data)
    if isinstance(raw, dict):
        raw = raw.get("loads", [])
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict)]


def avg_cost_per_mile(truck: Dict[str, Any], weekly_standard_miles: Optional[float] = None) -> float:
    """
    Operating cost per mile for a normalized truck.

    Trucks without recorded miles spread their costs over a standard week.
    """
    total_costs = truck.get("fixed_costs", 0.0) + truck.get("variable_costs", 0.0)
    total_miles = truck.get("total_miles", 0.0)
    if total_miles > 0:
        return total_costs / total_miles

    standard = weekly_standard_miles or settings.WEEKLY_STANDARD_MILES
    return total_costs / standard if standard > 0 else 0.0


async def _get_json(
    path: str,
    resource: str,
    auth_header: Optional[str] = None,
    request_id: Optional[str] = None
) -> Any:
    """GET a fleet service path and return decoded JSON, mapping failures to HTTPException."""
    headers = _build_headers(auth_header, request_id)

    try:
        client = get_client()
        response = await client.get(path, headers=headers)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        _handle_http_error(e, resource)
    except (httpx.ConnectError, httpx.TimeoutException, httpx.NetworkError) as e:
        _handle_connection_error(e)
    except Exception as e:
        logger.exception(f"Unexpected error fetching {resource}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unexpected error: {type(e).__name__}"
        )


# ============================================================================
# Public API Functions
# ============================================================================


async def get_truck(
    truck_id: str,
    auth_header: Optional[str] = None,
    request_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Get one truck.

    Returns:
        Normalized truck dict (see normalize_truck)

    Raises:
        HTTPException: 404 when the truck does not exist, 503 on backend errors
    """
    data = await _get_json(TRUCK_PATH.format(truck_id=truck_id), "truck", auth_header, request_id)
    truck = normalize_truck(data)
    logger.info(f"Retrieved truck {truck_id} ({truck['equipment_type']})")
    return truck


async def list_trucks(
    auth_header: Optional[str] = None,
    request_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Get the caller's trucks, normalized."""
    data = await _get_json(TRUCKS_PATH, "trucks", auth_header, request_id)
    raw = _unwrap(data)
    if isinstance(raw, dict):
        raw = raw.get("trucks", [])
    trucks = [normalize_truck(item) for item in raw or [] if isinstance(item, dict)]
    logger.info(f"Retrieved {len(trucks)} trucks")
    return trucks


async def list_loads(
    auth_header: Optional[str] = None,
    request_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Get load board listings as raw dicts.

    Records keep the backend's camelCase keys; app.schemas.loads.Load accepts them.
    """
    data = await _get_json(LOAD_BOARD_PATH, "load board", auth_header, request_id)
    loads = normalize_load_list(data)
    logger.info(f"Retrieved {len(loads)} load board listings")
    return loads


async def get_load(
    load_id: str,
    auth_header: Optional[str] = None,
    request_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Get one load board listing.

    Raises:
        HTTPException: 404 when the load does not exist, 503 on backend errors
    """
    data = await _get_json(LOAD_PATH.format(load_id=load_id), "load", auth_header, request_id)
    raw = _unwrap(data)
    return raw if isinstance(raw, dict) else {}
