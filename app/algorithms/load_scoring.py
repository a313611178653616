"""
Load Scoring Algorithm

Deterministic multi-factor scoring of a single freight load for a given truck
and driver. Produces a score (0-100), a risk tier (low/medium/high), advisory
notes, and route/fuel/market estimates.

No external dependencies or randomness - fixed formulas over the request data.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.constants.thresholds import (
    AVERAGE_SPEED_MPH,
    AVERAGE_TRUCK_MPG,
    BUFFER_FLOOR_SCORE,
    BUFFER_TIERS,
    CHEAP_FUEL_PRICE,
    COMFORTABLE_BUFFER_HOURS,
    DEFAULT_FUEL_PRICE,
    DEFAULT_RATE_BENCHMARK,
    DEFAULT_RELIABILITY_SCORE,
    DEFAULT_SEASON,
    DOCK_TIME_HOURS,
    DRY_VAN,
    DRY_VAN_ALIASES,
    EXCELLENT_RATE_PER_MILE,
    EXPENSIVE_FUEL_PRICE,
    HIGH_MARGIN_PERCENT,
    HIGH_RISK_MARGIN_PERCENT,
    LOAD_BOARD_RELIABILITY,
    LONG_HAUL_MILES,
    LOW_MARGIN_PERCENT,
    MARKET_BASELINE_SCORE,
    MARKET_DEMAND_BONUS,
    MEDIUM_RISK_BUFFER_HOURS,
    MEDIUM_RISK_MARGIN_PERCENT,
    MODERATE_FUEL_PRICE,
    OPTIMAL_MAX_MILES,
    OPTIMAL_MIN_MILES,
    PROFIT_MARGIN_TIERS,
    RATE_BENCHMARKS,
    RATE_FLOOR_POINTS,
    RATE_PER_MILE_TIERS,
    REST_STOP_MILES,
    SEASONAL_FACTORS,
    SHORT_HAUL_MILES,
    WEIGHT_DISTANCE,
    WEIGHT_MARKET,
    WEIGHT_PROFITABILITY,
    WEIGHT_RELIABILITY,
    WEIGHT_TIME_COMPLIANCE,
    distance_band_score,
    tier_points,
)
from app.schemas.loads import DriverHours, Load, MarketConditions, RecommendationRequest
from app.schemas.recommendation import (
    AdvisoryNotes,
    LoadMarketAnalysis,
    Recommendation,
    RouteOptimization,
    TimeCompatibility,
)

logger = logging.getLogger(__name__)

DEADHEAD_ADVICE = "Plan return load to minimize deadhead miles"


# ============================================================================
# Lookup Tables
# ============================================================================


@dataclass(frozen=True)
class ScoringTables:
    """
    Lookup tables used by the scorers.

    Defaults come from app.constants.thresholds; pass a custom instance to
    score against other reliability ratings, benchmarks or seasonal notes.
    """
    reliability: Dict[str, int] = field(default_factory=lambda: dict(LOAD_BOARD_RELIABILITY))
    default_reliability: int = DEFAULT_RELIABILITY_SCORE
    rate_benchmarks: Dict[str, float] = field(default_factory=lambda: dict(RATE_BENCHMARKS))
    default_benchmark: float = DEFAULT_RATE_BENCHMARK
    seasonal_factors: Dict[str, List[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in SEASONAL_FACTORS.items()}
    )
    default_season: str = DEFAULT_SEASON


DEFAULT_TABLES = ScoringTables()


# ============================================================================
# Compatibility Filter
# ============================================================================


def is_equipment_compatible(load_equipment: str, truck_equipment: str) -> bool:
    """
    Check whether a truck can haul a load.

    Dry vans also take loads posted as plain "Van"; every other trailer type
    needs an exact (case-sensitive) match.
    """
    if truck_equipment == DRY_VAN:
        return load_equipment in DRY_VAN_ALIASES
    return load_equipment == truck_equipment


# ============================================================================
# Derived Metrics
# ============================================================================


def rate_per_mile(rate: float, miles: float) -> float:
    """Gross $/mile, 0 for loads without miles."""
    return rate / miles if miles > 0 else 0.0


def profit_margin(rate: float, miles: float, avg_cost_per_mile: float) -> float:
    """Profit margin in percent, 0 for loads without a rate."""
    if rate <= 0:
        return 0.0
    return (rate - miles * avg_cost_per_mile) / rate * 100


@dataclass(frozen=True)
class TimeCheck:
    """HOS feasibility of one load."""
    estimated_drive_time: float
    total_time_required: float
    drive_compatible: bool
    duty_compatible: bool
    buffer_time: float

    @property
    def compatible(self) -> bool:
        return self.drive_compatible and self.duty_compatible


def check_time(miles: float, driver_hours: DriverHours) -> TimeCheck:
    """Compare drive + dock time for a load against the remaining HOS clocks."""
    drive_time = miles / AVERAGE_SPEED_MPH
    total_time = drive_time + DOCK_TIME_HOURS
    return TimeCheck(
        estimated_drive_time=drive_time,
        total_time_required=total_time,
        drive_compatible=drive_time <= driver_hours.drive_time_remaining,
        duty_compatible=total_time <= driver_hours.on_duty_remaining,
        buffer_time=driver_hours.on_duty_remaining - total_time,
    )


# ============================================================================
# Factor Scorers (0-100 each)
# ============================================================================


def score_profitability(rate_per_mile_value: float, margin_percent: float) -> int:
    """Rate tier (10-50 points) plus margin tier (0-50 points)."""
    score = tier_points(rate_per_mile_value, RATE_PER_MILE_TIERS, RATE_FLOOR_POINTS)
    score += tier_points(margin_percent, PROFIT_MARGIN_TIERS)
    return max(0, min(100, score))


def score_time_compliance(time_check: TimeCheck) -> int:
    """0 when either HOS clock is exceeded, otherwise tiered by on-duty buffer."""
    if not time_check.compatible:
        return 0
    return tier_points(time_check.buffer_time, BUFFER_TIERS, BUFFER_FLOOR_SCORE)


def score_distance_band(miles: float) -> int:
    """Prefer medium-haul loads (300-600 miles)."""
    return distance_band_score(miles)


def score_source_reliability(source: Optional[str], tables: Optional[ScoringTables] = None) -> int:
    tables = tables or DEFAULT_TABLES
    return tables.reliability.get(source or "", tables.default_reliability)


def score_market_conditions(market_conditions: Optional[MarketConditions]) -> int:
    """
    Baseline 50, adjusted for demand and fuel price.

    Without market data the neutral baseline is returned unchanged.
    """
    if market_conditions is None:
        return MARKET_BASELINE_SCORE

    score = MARKET_BASELINE_SCORE
    score += MARKET_DEMAND_BONUS.get(market_conditions.market_demand, 0)

    fuel_price = market_conditions.fuel_price
    if fuel_price < CHEAP_FUEL_PRICE:
        score += 20
    elif fuel_price < MODERATE_FUEL_PRICE:
        score += 10
    elif fuel_price > EXPENSIVE_FUEL_PRICE:
        score -= 10

    return max(0, min(100, score))


def composite_score(
    profitability: float,
    time_compliance: float,
    distance: float,
    reliability: float,
    market: float
) -> int:
    """Weighted sum of the factor scores, rounded half up and clamped to 0-100."""
    weighted = (
        profitability * WEIGHT_PROFITABILITY +
        time_compliance * WEIGHT_TIME_COMPLIANCE +
        distance * WEIGHT_DISTANCE +
        reliability * WEIGHT_RELIABILITY +
        market * WEIGHT_MARKET
    )
    return max(0, min(100, math.floor(weighted + 0.5)))


# ============================================================================
# Route, Fuel and Market Estimates
# ============================================================================


def estimate_fuel_cost(miles: float, fuel_price: float = DEFAULT_FUEL_PRICE) -> float:
    return miles / AVERAGE_TRUCK_MPG * fuel_price


def rate_competitiveness(
    rate_per_mile_value: float,
    equipment_type: str,
    tables: Optional[ScoringTables] = None
) -> float:
    """Rate as a percentage of the equipment benchmark, capped at 100."""
    tables = tables or DEFAULT_TABLES
    benchmark = tables.rate_benchmarks.get(equipment_type, tables.default_benchmark)
    if benchmark <= 0:
        return 0.0
    return max(0.0, min(100.0, rate_per_mile_value / benchmark * 100))


def demand_forecast(market_conditions: Optional[MarketConditions]) -> str:
    demand = market_conditions.market_demand if market_conditions else None
    if demand == "high":
        return "High demand expected - rates likely to remain strong"
    if demand == "low":
        return "Soft demand - consider flexible pricing strategies"
    return "Stable demand forecasted based on current trends"


def seasonal_factors(seasonality: Optional[str], tables: Optional[ScoringTables] = None) -> List[str]:
    """Seasonal notes for a bucket; unknown buckets fall back to the default season."""
    tables = tables or DEFAULT_TABLES
    factors = tables.seasonal_factors.get(seasonality or "")
    if factors is None:
        factors = tables.seasonal_factors.get(tables.default_season, [])
    return list(factors)


# ============================================================================
# Composite Analysis
# ============================================================================


def analyze_load(
    load: Load,
    request: RecommendationRequest,
    tables: Optional[ScoringTables] = None
) -> Recommendation:
    """
    Score one load for the requesting truck.

    Args:
        load: Candidate load (already equipment-compatible).
        request: Truck, driver and market context.
        tables: Optional lookup table overrides.

    Returns:
        Frozen Recommendation with score, risk and advisory notes.
    """
    tables = tables or DEFAULT_TABLES
    market_conditions = request.market_conditions

    miles = load.miles
    rpm = rate_per_mile(load.rate, miles)
    margin = profit_margin(load.rate, miles, request.fleet_data.avg_cost_per_mile)
    time_check = check_time(miles, request.driver_hours)

    profitability = score_profitability(rpm, margin)
    time_score = score_time_compliance(time_check)
    distance = score_distance_band(miles)
    reliability = score_source_reliability(load.load_board_source, tables)
    market = score_market_conditions(market_conditions)

    score = composite_score(profitability, time_score, distance, reliability, market)

    logger.debug(
        f"Load {load.id}: profit={profitability} time={time_score} distance={distance} "
        f"reliability={reliability} market={market} -> {score}"
    )

    fuel_price = market_conditions.fuel_price if market_conditions else DEFAULT_FUEL_PRICE
    seasonality = market_conditions.seasonality if market_conditions else tables.default_season

    return Recommendation(
        load_id=load.id,
        score=score,
        profit_potential=margin,
        risk_assessment=_assess_risk(margin, time_check),
        recommendations=_build_advice(rpm, margin, time_check, miles),
        market_analysis=LoadMarketAnalysis(
            rate_competitiveness=rate_competitiveness(rpm, load.equipment_type, tables),
            demand_forecast=demand_forecast(market_conditions),
            seasonal_factors=seasonal_factors(seasonality, tables),
        ),
        route_optimization=RouteOptimization(
            suggested_route=f"{load.origin} → {load.destination}",
            estimated_fuel_cost=estimate_fuel_cost(miles, fuel_price),
            deadhead_optimization=DEADHEAD_ADVICE,
        ),
        time_compatibility=TimeCompatibility(
            estimated_drive_time=time_check.estimated_drive_time,
            buffer_time=max(0.0, time_check.buffer_time),
            compatible=time_check.compatible,
        ),
    )


def _assess_risk(margin: float, time_check: TimeCheck) -> str:
    if margin < HIGH_RISK_MARGIN_PERCENT or not time_check.compatible:
        return "high"
    if margin < MEDIUM_RISK_MARGIN_PERCENT or time_check.buffer_time < MEDIUM_RISK_BUFFER_HOURS:
        return "medium"
    return "low"


def _build_advice(rpm: float, margin: float, time_check: TimeCheck, miles: float) -> AdvisoryNotes:
    """Generate reasons, warnings and optimizations for one load."""
    reasons = []
    warnings = []
    optimizations = []

    # Profitability
    if rpm >= EXCELLENT_RATE_PER_MILE:
        reasons.append(f"Excellent rate: ${rpm:.2f}/mile")
    if margin > HIGH_MARGIN_PERCENT:
        reasons.append(f"High profit margin: {margin:.1f}%")
    if margin < LOW_MARGIN_PERCENT:
        warnings.append("Low profit margin - consider negotiating")

    # Hours of service
    if time_check.compatible:
        reasons.append("Compatible with current HOS")
        if time_check.buffer_time > COMFORTABLE_BUFFER_HOURS:
            reasons.append("Comfortable time buffer available")
    else:
        warnings.append("HOS constraints - check timing carefully")

    # Distance
    if OPTIMAL_MIN_MILES <= miles <= OPTIMAL_MAX_MILES:
        reasons.append("Optimal distance range")
    if miles < SHORT_HAUL_MILES:
        optimizations.append("Consider combining with short backhaul")
    if miles > LONG_HAUL_MILES:
        warnings.append("Long haul - monitor driver fatigue")

    optimizations.append("Plan fuel stops for cost savings")
    if miles > REST_STOP_MILES:
        optimizations.append("Consider rest stop locations for HOS compliance")
    optimizations.append("Monitor weather conditions along route")

    return AdvisoryNotes(reasons=reasons, warnings=warnings, optimizations=optimizations)
