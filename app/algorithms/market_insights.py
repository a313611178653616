"""
Market Insight Aggregator

Read-only analysis of the candidate load set: rate statistics for the
fleet's equipment, demand by equipment type, and short text summaries.
"""

import logging
from typing import Dict, List, Optional

from app.algorithms.load_scoring import (
    ScoringTables,
    is_equipment_compatible,
    rate_per_mile,
    seasonal_factors,
)
from app.constants.thresholds import (
    INSIGHT_SHORT_HAUL_MILES,
    MIN_SHORT_HAULS_FOR_OPPORTUNITY,
    PREMIUM_RATE_PER_MILE,
    STABLE_MARKET_RATE,
    STRATEGY_COST_MULTIPLIER,
    STRONG_MARKET_RATE,
)
from app.schemas.loads import FleetData, Load, MarketConditions, RecommendationRequest
from app.schemas.recommendation import DemandAnalysis, MarketInsights, RateAnalysis

logger = logging.getLogger(__name__)


def load_rate_per_mile(load: Load) -> float:
    """Posted $/mile, derived from rate and miles when the board did not post one."""
    if load.rate_per_mile:
        return load.rate_per_mile
    return rate_per_mile(load.rate, load.miles)


def analyze_rates(loads: List[Load], equipment_type: str) -> RateAnalysis:
    """Average/max/min $/mile over loads the truck can haul. Empty sets give zeros."""
    relevant = [load for load in loads if is_equipment_compatible(load.equipment_type, equipment_type)]
    rates = [load_rate_per_mile(load) for load in relevant]

    avg_rate = sum(rates) / len(rates) if rates else 0.0
    max_rate = max(rates, default=0.0)
    min_rate = min((rate for rate in rates if rate > 0), default=0.0)

    return RateAnalysis(
        avg_rate=avg_rate,
        max_rate=max_rate,
        min_rate=min_rate,
        total_loads=len(relevant),
    )


def analyze_demand(loads: List[Load]) -> DemandAnalysis:
    by_equipment: Dict[str, int] = {}
    for load in loads:
        by_equipment[load.equipment_type] = by_equipment.get(load.equipment_type, 0) + 1
    return DemandAnalysis(total_available=len(loads), by_equipment_type=by_equipment)


def summarize_trends(rates: RateAnalysis) -> str:
    if rates.avg_rate > STRONG_MARKET_RATE:
        return "Strong market with premium rates available"
    if rates.avg_rate > STABLE_MARKET_RATE:
        return "Stable market with decent opportunities"
    return "Soft market - focus on operational efficiency"


def forecast_rates(rates: RateAnalysis, market_conditions: Optional[MarketConditions]) -> str:
    demand = market_conditions.market_demand if market_conditions else None
    if demand == "high":
        trend = "increasing"
    elif demand == "low":
        trend = "decreasing"
    else:
        trend = "stable"
    return f"Rates trending {trend} - average ${rates.avg_rate:.2f}/mile"


def recommend_strategy(rates: RateAnalysis, fleet_data: FleetData) -> str:
    if rates.avg_rate > fleet_data.avg_cost_per_mile * STRATEGY_COST_MULTIPLIER:
        return "Take advantage of strong rates - prioritize high-paying loads"
    return "Focus on operational efficiency and preferred lanes"


def identify_opportunities(loads: List[Load]) -> List[str]:
    opportunities = []

    premium = sum(1 for load in loads if load_rate_per_mile(load) > PREMIUM_RATE_PER_MILE)
    if premium > 0:
        opportunities.append(f"{premium} premium rate loads available")

    short_hauls = sum(1 for load in loads if load.miles < INSIGHT_SHORT_HAUL_MILES)
    if short_hauls > MIN_SHORT_HAULS_FOR_OPPORTUNITY:
        opportunities.append("Multiple short hauls available for quick turnaround")

    return opportunities


def generate_market_insights(
    request: RecommendationRequest,
    tables: Optional[ScoringTables] = None
) -> MarketInsights:
    """
    Summarize the market seen through the request's candidate loads.

    Rate statistics only consider loads compatible with the fleet's
    equipment; demand counts and opportunities look at every candidate.
    """
    loads = request.available_loads
    market_conditions = request.market_conditions

    rates = analyze_rates(loads, request.fleet_data.equipment_type)
    demand = analyze_demand(loads)
    seasonality = market_conditions.seasonality if market_conditions else None

    logger.debug(
        f"Market insights for truck {request.truck_id}: {rates.total_loads}/{demand.total_available} "
        f"compatible loads, avg ${rates.avg_rate:.2f}/mile"
    )

    return MarketInsights(
        overall_trends=summarize_trends(rates),
        rate_forecast=forecast_rates(rates, market_conditions),
        recommended_strategy=recommend_strategy(rates, request.fleet_data),
        seasonal_factors=seasonal_factors(seasonality, tables),
        emerging_opportunities=identify_opportunities(loads),
        rate_analysis=rates,
        demand_analysis=demand,
    )
