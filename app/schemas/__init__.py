"""
Pydantic Schemas Package

Typed value models for the load recommendation engine and its HTTP API.

Schema Conventions:
- Input records accept camelCase (fleet backend) or snake_case keys
- Engine outputs are frozen models
- API responses: {message: str, data: dict, proofs: Proofs}

Export Groups:
- Base: Proofs, ServiceResponse
- Loads: Location, Load, DriverHours, FleetData, MarketConditions, RecommendationRequest
- Recommendation: Recommendation and nested parts, MarketInsights
- Requests: API request bodies
"""

# Base schemas
from app.schemas.base import (
    Proofs,
    ServiceResponse
)

# Engine input schemas
from app.schemas.loads import (
    Location,
    Load,
    DriverHours,
    FleetData,
    MarketConditions,
    RecommendationRequest
)

# Engine output schemas
from app.schemas.recommendation import (
    AdvisoryNotes,
    LoadMarketAnalysis,
    RouteOptimization,
    TimeCompatibility,
    Recommendation,
    RateAnalysis,
    DemandAnalysis,
    MarketInsights
)

# API request bodies
from app.schemas.requests import (
    DriverHoursBody,
    LoadRecommendationBody,
    ForwardLegBody
)

__all__ = [
    # Base
    "Proofs",
    "ServiceResponse",
    # Loads
    "Location",
    "Load",
    "DriverHours",
    "FleetData",
    "MarketConditions",
    "RecommendationRequest",
    # Recommendation
    "AdvisoryNotes",
    "LoadMarketAnalysis",
    "RouteOptimization",
    "TimeCompatibility",
    "Recommendation",
    "RateAnalysis",
    "DemandAnalysis",
    "MarketInsights",
    # Requests
    "DriverHoursBody",
    "LoadRecommendationBody",
    "ForwardLegBody"
]
