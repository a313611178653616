"""
Load Recommendation Pipeline

Ranks candidate loads for a truck and chains recommendations across trip legs.

Pipeline: available status -> equipment compatibility -> score -> sort -> top 10.
The forward-leg planner reruns the same pipeline from the destination of a
load that is about to be completed, with the driver's hours reduced.
"""

import logging
from typing import List, Optional

from app.algorithms.load_scoring import (
    ScoringTables,
    analyze_load,
    is_equipment_compatible,
)
from app.constants.thresholds import (
    AVAILABLE_STATUS,
    AVERAGE_SPEED_MPH,
    DOCK_TIME_HOURS,
    MAX_RECOMMENDATIONS,
)
from app.schemas.loads import DriverHours, Load, Location, RecommendationRequest
from app.schemas.recommendation import Recommendation

logger = logging.getLogger(__name__)


def generate_recommendations(
    request: RecommendationRequest,
    tables: Optional[ScoringTables] = None
) -> List[Recommendation]:
    """
    Recommend the best loads for a truck.

    Args:
        request: Truck, driver, market context and candidate loads.
        tables: Optional lookup table overrides.

    Returns:
        Up to 10 recommendations, highest score first. Ties keep the order
        of request.available_loads.
    """
    truck_equipment = request.fleet_data.equipment_type

    available = [load for load in request.available_loads if load.status == AVAILABLE_STATUS]
    compatible = [
        load for load in available
        if is_equipment_compatible(load.equipment_type, truck_equipment)
    ]

    scored = [analyze_load(load, request, tables) for load in compatible]
    scored.sort(key=lambda rec: rec.score, reverse=True)

    logger.debug(
        f"Truck {request.truck_id}: {len(request.available_loads)} candidates, "
        f"{len(available)} available, {len(compatible)} compatible ({truck_equipment})"
    )

    return scored[:MAX_RECOMMENDATIONS]


def hours_after_load(driver_hours: DriverHours, miles: float) -> DriverHours:
    """HOS clocks left once a load of the given length is delivered (floored at 0)."""
    drive_time = miles / AVERAGE_SPEED_MPH
    return DriverHours(
        drive_time_remaining=max(0.0, driver_hours.drive_time_remaining - drive_time),
        on_duty_remaining=max(0.0, driver_hours.on_duty_remaining - (drive_time + DOCK_TIME_HOURS)),
    )


def is_location_nearby(location: Location, reference: Location) -> bool:
    """Same-state proximity check. No geocoding is performed."""
    return location.state == reference.state


def generate_forward_leg_recommendations(
    completed_load: Load,
    request: RecommendationRequest,
    tables: Optional[ScoringTables] = None
) -> List[Recommendation]:
    """
    Recommend the next load to pick up after completed_load is delivered.

    Candidates must originate in the completed load's destination state and
    must not be the completed load itself. An empty list is a normal result.
    """
    destination = completed_load.destination

    nearby = [
        load for load in request.available_loads
        if load.id != completed_load.id and is_location_nearby(load.origin, destination)
    ]

    updated = request.model_copy(update={
        "current_location": destination,
        "driver_hours": hours_after_load(request.driver_hours, completed_load.miles),
        "available_loads": nearby,
    })

    logger.debug(
        f"Forward leg from load {completed_load.id} ({destination}): "
        f"{len(nearby)} nearby candidates"
    )

    return generate_recommendations(updated, tables)
