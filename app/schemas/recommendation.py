"""
Recommendation Schemas

Pydantic models for the scoring engine output.
Instances are frozen: a recommendation is derived once and never edited.
"""

from typing import Dict, List, Literal
from pydantic import BaseModel, Field, ConfigDict

RiskLevel = Literal["low", "medium", "high"]


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class AdvisoryNotes(FrozenModel):
    """Human-readable notes. Descriptive only, never used for ranking."""
    reasons: List[str] = Field(default_factory=list, description="Why the load is attractive")
    warnings: List[str] = Field(default_factory=list, description="What to watch out for")
    optimizations: List[str] = Field(default_factory=list, description="Operational tips")


class LoadMarketAnalysis(FrozenModel):
    """Per-load market view."""
    rate_competitiveness: float = Field(..., ge=0, le=100, description="Rate vs equipment benchmark (0-100)")
    demand_forecast: str = Field(..., description="Demand outlook text")
    seasonal_factors: List[str] = Field(..., description="Seasonal notes")


class RouteOptimization(FrozenModel):
    suggested_route: str = Field(..., description="Origin → destination")
    estimated_fuel_cost: float = Field(..., description="Fuel cost estimate ($)")
    deadhead_optimization: str = Field(..., description="Deadhead advice")


class TimeCompatibility(FrozenModel):
    estimated_drive_time: float = Field(..., description="Driving hours at average speed")
    buffer_time: float = Field(..., ge=0, description="On-duty hours left after the load")
    compatible: bool = Field(..., description="Fits both HOS clocks")


class Recommendation(FrozenModel):
    """
    Scored load.

    Matches analyze_load() output from load_scoring.py.
    """
    load_id: str = Field(..., description="Load identifier")
    score: int = Field(..., ge=0, le=100, description="Composite score (0-100)")
    profit_potential: float = Field(..., description="Profit margin percent (may be negative)")
    risk_assessment: RiskLevel = Field(..., description="Qualitative risk tier")
    recommendations: AdvisoryNotes
    market_analysis: LoadMarketAnalysis
    route_optimization: RouteOptimization
    time_compatibility: TimeCompatibility


class RateAnalysis(FrozenModel):
    """Rate statistics over equipment-compatible loads."""
    avg_rate: float = Field(0.0, description="Average $/mile")
    max_rate: float = Field(0.0, description="Highest $/mile")
    min_rate: float = Field(0.0, description="Lowest positive $/mile")
    total_loads: int = Field(0, ge=0, description="Compatible loads considered")


class DemandAnalysis(FrozenModel):
    """Load counts over the whole candidate set."""
    total_available: int = Field(0, ge=0)
    by_equipment_type: Dict[str, int] = Field(default_factory=dict)


class MarketInsights(FrozenModel):
    """
    Aggregate market view.

    Matches generate_market_insights() output from market_insights.py.
    """
    overall_trends: str
    rate_forecast: str
    recommended_strategy: str
    seasonal_factors: List[str]
    emerging_opportunities: List[str]
    rate_analysis: RateAnalysis
    demand_analysis: DemandAnalysis
