"""
Recommendations API Endpoints

Load recommendation, forward-leg planning and market insight endpoints.
Truck economics and load board listings are fetched from the fleet service;
scoring is delegated to app.algorithms.

Endpoints:
- POST /recommendations/loads - Rank load board listings for a truck
- POST /recommendations/loads/forward-leg - Rank next loads after a completed load
- GET /recommendations/market-insights - Market summary for the caller's primary truck
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import ValidationError as PydanticValidationError

from app.algorithms import (
    generate_forward_leg_recommendations,
    generate_market_insights,
    generate_recommendations,
)
from app.constants.constants import (
    ALGORITHM_NAME,
    ANONYMOUS_USER_ID,
    AUTHORIZATION_HEADER_NAME,
    DEFAULT_DRIVE_TIME_HOURS,
    DEFAULT_ON_DUTY_HOURS,
    SOURCE_FLEET_SERVICE,
    SOURCE_LOAD_BOARD,
    USER_ID_HEADER_NAME,
    short_request_id,
)
from app.constants.thresholds import DEFAULT_FUEL_PRICE, DEFAULT_SEASON
from app.core.errors import AppError, InternalError, NotFoundError, ValidationError, to_http_exception
from app.core.logging import get_trace_id
from app.schemas.base import ServiceResponse
from app.schemas.loads import (
    DriverHours,
    FleetData,
    Load,
    Location,
    MarketConditions,
    RecommendationRequest,
)
from app.schemas.requests import ForwardLegBody, LoadRecommendationBody
from app.tools import fleet_service_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# ============================================================================
# Utilities
# ============================================================================

def get_auth_header(request: Request) -> Optional[str]:
    """Extract Authorization header."""
    return request.headers.get(AUTHORIZATION_HEADER_NAME)


def get_user_id(request: Request) -> str:
    """Extract caller identity from headers."""
    return request.headers.get(USER_ID_HEADER_NAME) or ANONYMOUS_USER_ID


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def standard_response(
    message: str,
    data: Dict[str, Any],
    user_id: str,
    started: float
) -> Dict[str, Any]:
    """Build standard response format."""
    return {
        "message": message,
        "data": data,
        "proofs": {
            "trace_id": get_trace_id(),
            "user_id": user_id,
            "algorithm": ALGORITHM_NAME,
            "sources": [SOURCE_FLEET_SERVICE, SOURCE_LOAD_BOARD],
            "latency_ms": round((time.perf_counter() - started) * 1000, 2),
        }
    }


async def _fetch_truck(truck_id: str, auth_header: Optional[str], request_id: str) -> Dict[str, Any]:
    try:
        return await fleet_service_client.get_truck(truck_id, auth_header=auth_header, request_id=request_id)
    except HTTPException as e:
        if e.status_code == status.HTTP_404_NOT_FOUND:
            raise NotFoundError("Truck not found", details={"truck_id": truck_id})
        raise


async def _fetch_loads(auth_header: Optional[str], request_id: str) -> List[Load]:
    """
    Load board listings as validated Load records.

    An unreachable load board yields an empty list; malformed listings are skipped.
    """
    try:
        raw_loads = await fleet_service_client.list_loads(auth_header=auth_header, request_id=request_id)
    except HTTPException as e:
        logger.warning(f"[{request_id}] Load board unavailable ({e.status_code}), continuing with no loads")
        return []

    loads = []
    for raw in raw_loads:
        try:
            loads.append(Load.model_validate(raw))
        except PydanticValidationError as e:
            logger.warning(f"[{request_id}] Skipping malformed load {raw.get('id')}: {e.error_count()} errors")
    return loads


def _build_request(
    user_id: str,
    truck: Dict[str, Any],
    driver_hours: DriverHours,
    loads: List[Load],
    current_location: Optional[Location] = None,
    market_conditions: Optional[MarketConditions] = None
) -> RecommendationRequest:
    return RecommendationRequest(
        truck_id=truck["id"],
        user_id=user_id,
        driver_hours=driver_hours,
        current_location=current_location,
        fleet_data=FleetData(
            avg_cost_per_mile=fleet_service_client.avg_cost_per_mile(truck),
            equipment_type=truck["equipment_type"],
            preferred_routes=[],
            historical_performance=None,
        ),
        available_loads=loads,
        market_conditions=market_conditions,
    )


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/loads", response_model=ServiceResponse)
async def recommend_loads(body: LoadRecommendationBody, request: Request):
    """
    Rank load board listings for a truck.

    Returns up to 10 recommendations (highest score first), market insights
    for the same candidate set, and request metadata.
    """
    started = time.perf_counter()
    request_id = short_request_id(get_trace_id())
    auth_header = get_auth_header(request)
    user_id = get_user_id(request)

    try:
        truck = await _fetch_truck(body.truck_id, auth_header, request_id)
        truck["id"] = truck["id"] or body.truck_id
        loads = await _fetch_loads(auth_header, request_id)

        engine_request = _build_request(
            user_id, truck, body.driver_hours, loads,
            current_location=body.current_location,
            market_conditions=body.market_conditions,
        )

        recommendations = generate_recommendations(engine_request)
        insights = generate_market_insights(engine_request)

        logger.info(
            f"[{request_id}] Truck {body.truck_id}: {len(recommendations)} recommendations "
            f"from {len(loads)} loads"
        )

        return standard_response(
            message=f"{len(recommendations)} loads recommended for truck {body.truck_id}",
            data={
                "recommendations": [rec.model_dump() for rec in recommendations],
                "market_insights": insights.model_dump(),
                "metadata": {
                    "total_loads_analyzed": len(loads),
                    "recommendations_generated": len(recommendations),
                    "truck_info": {
                        "name": truck["name"],
                        "equipment_type": truck["equipment_type"],
                        "avg_cost_per_mile": engine_request.fleet_data.avg_cost_per_mile,
                    },
                    "timestamp": utc_timestamp(),
                },
            },
            user_id=user_id,
            started=started,
        )

    except HTTPException:
        raise
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"[{request_id}] Failed to generate load recommendations: {e}")
        raise to_http_exception(InternalError("Failed to generate load recommendations"))


@router.post("/loads/forward-leg", response_model=ServiceResponse)
async def recommend_forward_leg(body: ForwardLegBody, request: Request):
    """
    Rank loads to pick up after the completed load is delivered.

    Only loads originating in the completed load's destination state are
    considered; the driver's hours are reduced by the completed trip.
    """
    started = time.perf_counter()
    request_id = short_request_id(get_trace_id())
    auth_header = get_auth_header(request)
    user_id = get_user_id(request)

    try:
        try:
            raw_completed = await fleet_service_client.get_load(
                body.completed_load_id, auth_header=auth_header, request_id=request_id
            )
        except HTTPException as e:
            if e.status_code == status.HTTP_404_NOT_FOUND:
                raise NotFoundError("Completed load not found", details={"load_id": body.completed_load_id})
            raise

        try:
            completed_load = Load.model_validate(raw_completed)
        except PydanticValidationError as e:
            raise ValidationError("Completed load record is malformed", details={"errors": e.error_count()})
        if not completed_load.id:
            completed_load = completed_load.model_copy(update={"id": body.completed_load_id})

        truck = await _fetch_truck(body.truck_id, auth_header, request_id)
        truck["id"] = truck["id"] or body.truck_id
        loads = await _fetch_loads(auth_header, request_id)

        engine_request = _build_request(
            user_id, truck, body.driver_hours, loads,
            current_location=body.current_location,
            market_conditions=body.market_conditions,
        )

        forward_leg = generate_forward_leg_recommendations(completed_load, engine_request)

        logger.info(
            f"[{request_id}] Forward leg after load {completed_load.id}: "
            f"{len(forward_leg)} recommendations"
        )

        return standard_response(
            message=f"{len(forward_leg)} forward-leg loads from {completed_load.destination}",
            data={
                "forward_leg_recommendations": [rec.model_dump() for rec in forward_leg],
                "completed_load": {
                    "id": completed_load.id,
                    "destination": str(completed_load.destination),
                },
                "metadata": {
                    "nearby_loads_analyzed": len(forward_leg),
                    "timestamp": utc_timestamp(),
                },
            },
            user_id=user_id,
            started=started,
        )

    except HTTPException:
        raise
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"[{request_id}] Failed to generate forward-leg recommendations: {e}")
        raise to_http_exception(InternalError("Failed to generate forward-leg recommendations"))


@router.get("/market-insights", response_model=ServiceResponse)
async def market_insights(
    request: Request,
    fuel_price: float = Query(DEFAULT_FUEL_PRICE, gt=0, description="Diesel price ($/gallon)"),
    seasonality: str = Query(DEFAULT_SEASON, description="spring/summer/fall/winter/standard"),
    market_demand: Literal["high", "medium", "low"] = Query("medium", description="Freight demand level")
):
    """
    Market summary for the caller's primary (first) truck.

    Uses a full HOS budget since no specific driver is involved.
    """
    started = time.perf_counter()
    request_id = short_request_id(get_trace_id())
    auth_header = get_auth_header(request)
    user_id = get_user_id(request)

    try:
        trucks = await fleet_service_client.list_trucks(auth_header=auth_header, request_id=request_id)
        if not trucks:
            raise ValidationError("No trucks found for market analysis")

        primary_truck = trucks[0]
        loads = await _fetch_loads(auth_header, request_id)

        engine_request = _build_request(
            user_id, primary_truck,
            DriverHours(
                drive_time_remaining=DEFAULT_DRIVE_TIME_HOURS,
                on_duty_remaining=DEFAULT_ON_DUTY_HOURS,
            ),
            loads,
            market_conditions=MarketConditions(
                fuel_price=fuel_price,
                seasonality=seasonality,
                market_demand=market_demand,
            ),
        )

        insights = generate_market_insights(engine_request)

        return standard_response(
            message=insights.overall_trends,
            data={
                "market_insights": insights.model_dump(),
                "fleet_context": {
                    "total_trucks": len(trucks),
                    "primary_equipment_type": primary_truck["equipment_type"],
                    "avg_fleet_cost_per_mile": engine_request.fleet_data.avg_cost_per_mile,
                },
                "market_data": {
                    "total_loads_analyzed": len(loads),
                    "analysis_timestamp": utc_timestamp(),
                },
            },
            user_id=user_id,
            started=started,
        )

    except HTTPException:
        raise
    except AppError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception(f"[{request_id}] Failed to generate market insights: {e}")
        raise to_http_exception(InternalError("Failed to generate market insights"))
