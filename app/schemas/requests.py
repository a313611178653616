"""
API Request Schemas

Request bodies for the recommendation endpoints.
Truck economics and loads are not part of the body: the API fetches them
from the fleet service.
"""

from typing import Optional
from pydantic import Field

from app.constants.constants import MAX_HOS_HOURS
from app.schemas.loads import CamelModel, DriverHours, Location, MarketConditions


class DriverHoursBody(DriverHours):
    """HOS clocks as accepted from callers (both capped at 14h)."""
    drive_time_remaining: float = Field(..., ge=0, le=MAX_HOS_HOURS)
    on_duty_remaining: float = Field(..., ge=0, le=MAX_HOS_HOURS)


class LoadRecommendationBody(CamelModel):
    """
    Body for POST /recommendations/loads.

    Example:
        {
            "truck_id": "truck-1",
            "driver_hours": {"drive_time_remaining": 11, "on_duty_remaining": 14},
            "market_conditions": {"fuel_price": 3.8, "seasonality": "fall", "market_demand": "high"}
        }
    """
    truck_id: str = Field(..., min_length=1, description="Truck to plan for")
    driver_hours: DriverHoursBody
    current_location: Optional[Location] = None
    market_conditions: Optional[MarketConditions] = None


class ForwardLegBody(LoadRecommendationBody):
    """Body for POST /recommendations/loads/forward-leg."""
    completed_load_id: str = Field(..., min_length=1, description="Load the truck is finishing")
