"""
Load and Request Schemas

Validated value types for everything the scoring engine consumes.
The fleet backend speaks camelCase; every model here also accepts snake_case.

Missing or null numeric fields are read as 0 so the engine never sees None.
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.constants.thresholds import DEFAULT_FUEL_PRICE, DEFAULT_SEASON

MarketDemand = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    """Base for input records: camelCase aliases, extra keys tolerated."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Location(CamelModel):
    """City/state pair. Proximity is judged on state only."""
    city: str = ""
    state: str = ""

    def __str__(self) -> str:
        return f"{self.city}, {self.state}"


class Load(CamelModel):
    """
    Freight load as posted on a load board.

    Only the fields the engine reads are declared; anything else the backend
    sends (pickup dates, broker, weight...) is kept as extra data.
    """
    id: str = Field("", description="Load identifier")
    status: str = Field("", description="Load board status; only \"available\" loads are scored")
    equipment_type: str = Field("", description="Required trailer type")
    rate: float = Field(0.0, description="Gross payment ($)")
    miles: float = Field(0.0, description="Loaded miles")
    origin_city: str = ""
    origin_state: str = ""
    destination_city: str = ""
    destination_state: str = ""
    commodity: Optional[str] = None
    load_board_source: str = Field("", description="Board the load was posted on")
    rate_per_mile: float = Field(0.0, description="Posted $/mile (0 when not posted)")

    @field_validator("rate", "miles", "rate_per_mile", mode="before")
    @classmethod
    def _missing_number_is_zero(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0.0
        return value

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Any:
        if value is None:
            return ""
        return str(value)

    @field_validator(
        "status", "equipment_type", "origin_city", "origin_state",
        "destination_city", "destination_state", "load_board_source",
        mode="before",
    )
    @classmethod
    def _missing_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def origin(self) -> Location:
        return Location(city=self.origin_city, state=self.origin_state)

    @property
    def destination(self) -> Location:
        return Location(city=self.destination_city, state=self.destination_state)


class DriverHours(CamelModel):
    """Remaining hours-of-service clocks."""
    drive_time_remaining: float = Field(..., ge=0, description="Driving hours left (max 11)")
    on_duty_remaining: float = Field(..., ge=0, description="On-duty hours left (max 14)")


class FleetData(CamelModel):
    """Truck economics and equipment."""
    avg_cost_per_mile: float = Field(0.0, description="Operating cost ($/mile)")
    equipment_type: str = Field(..., description="Trailer type of the truck")
    preferred_routes: Optional[List[str]] = None
    historical_performance: Optional[Dict[str, Any]] = None

    @field_validator("avg_cost_per_mile", mode="before")
    @classmethod
    def _missing_cost_is_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class MarketConditions(CamelModel):
    """Current market signals from an external pricing/demand source."""
    fuel_price: float = Field(DEFAULT_FUEL_PRICE, gt=0, description="Diesel price ($/gallon)")
    seasonality: str = Field(DEFAULT_SEASON, description="spring/summer/fall/winter/standard")
    market_demand: MarketDemand = Field("medium", description="Freight demand level")


class RecommendationRequest(CamelModel):
    """
    Complete engine input for one invocation.

    Built by the API layer from the request body plus truck and load board
    data fetched from the fleet service.
    """
    truck_id: str
    user_id: str
    driver_hours: DriverHours
    current_location: Optional[Location] = None
    fleet_data: FleetData
    available_loads: List[Load] = Field(default_factory=list)
    market_conditions: Optional[MarketConditions] = None

    @field_validator("truck_id", "user_id", mode="before")
    @classmethod
    def _ids_as_string(cls, value: Any) -> Any:
        return value if isinstance(value, str) else str(value)
