"""
Threshold Constants

Centralized threshold values and lookup tables used by the load scoring algorithms.

IMPORTANT: These values MUST stay in sync with algorithm implementations.
Do not modify without updating corresponding tests.

Values are documented with SYNC comments showing which algorithm uses them.
"""

from typing import Dict, List, Tuple

# ============================================================================
# Operating Assumptions
# SYNC WITH: app/algorithms/load_scoring.py, app/algorithms/load_recommender.py
# ============================================================================

AVERAGE_SPEED_MPH = 55.0        # Average highway speed used for drive time
DOCK_TIME_HOURS = 2.0           # Loading + unloading allowance per load
AVERAGE_TRUCK_MPG = 6.5         # Fuel economy used for fuel cost estimates
DEFAULT_FUEL_PRICE = 3.50       # $/gallon when market conditions are missing

MAX_RECOMMENDATIONS = 10        # Pipeline truncation (top-N)
AVAILABLE_STATUS = "available"  # Only loads with this status are scored


# ============================================================================
# Composite Weights (must sum to 1.0)
# ============================================================================

WEIGHT_PROFITABILITY = 0.40
WEIGHT_TIME_COMPLIANCE = 0.25
WEIGHT_DISTANCE = 0.20
WEIGHT_RELIABILITY = 0.10
WEIGHT_MARKET = 0.05


# ============================================================================
# Factor Tiers
# Each tier list is (threshold, points), checked in order with ">=".
# ============================================================================

# Rate per mile ($) -> points; anything below the last threshold gets RATE_FLOOR_POINTS
RATE_PER_MILE_TIERS: List[Tuple[float, int]] = [
    (3.00, 50),
    (2.50, 40),
    (2.00, 30),
    (1.50, 20),
]
RATE_FLOOR_POINTS = 10

# Profit margin (%) -> points; below 5% earns nothing
PROFIT_MARGIN_TIERS: List[Tuple[float, int]] = [
    (25.0, 50),
    (20.0, 40),
    (15.0, 30),
    (10.0, 20),
    (5.0, 10),
]

# Remaining on-duty buffer (hours) -> time score
BUFFER_TIERS: List[Tuple[float, int]] = [
    (4.0, 100),
    (2.0, 80),
    (1.0, 60),
    (0.5, 40),
]
BUFFER_FLOOR_SCORE = 20

# Inclusive mileage bands (low, high, score); medium haul is preferred
DISTANCE_BANDS: List[Tuple[float, float, int]] = [
    (300, 600, 100),
    (200, 800, 80),
    (100, 1000, 60),
    (50, 1200, 40),
]
DISTANCE_FLOOR_SCORE = 20

# Market condition adjustments
MARKET_BASELINE_SCORE = 50
MARKET_DEMAND_BONUS: Dict[str, int] = {
    "high": 30,
    "medium": 15,
    "low": 0,
}
CHEAP_FUEL_PRICE = 3.00          # below -> +20
MODERATE_FUEL_PRICE = 3.50       # below -> +10
EXPENSIVE_FUEL_PRICE = 4.00      # above -> -10


# ============================================================================
# Lookup Tables
# ============================================================================

# Load board source -> reliability score (0-100)
LOAD_BOARD_RELIABILITY: Dict[str, int] = {
    "DAT": 100,
    "Truckstop": 90,
    "123Loadboard": 80,
    "SuperDispatch": 75,
    "Manual": 70,
}
DEFAULT_RELIABILITY_SCORE = 60

# Equipment type -> market benchmark rate ($/mile)
RATE_BENCHMARKS: Dict[str, float] = {
    "Dry Van": 2.0,
    "Reefer": 2.5,
    "Flatbed": 2.3,
    "Van": 2.0,
}
DEFAULT_RATE_BENCHMARK = 2.0

# Seasonality bucket -> factors shown to dispatchers
DEFAULT_SEASON = "standard"
SEASONAL_FACTORS: Dict[str, List[str]] = {
    "spring": ["Produce season beginning", "Construction activity increasing"],
    "summer": ["Peak shipping season", "Vacation impact on drivers"],
    "fall": ["Harvest season", "Holiday preparation shipping"],
    "winter": ["Weather delays possible", "Holiday shipping premium"],
    "standard": ["Normal seasonal patterns apply"],
}

# Generic dry van trucks also haul loads posted with the bare "Van" label
DRY_VAN = "Dry Van"
DRY_VAN_ALIASES = ("Dry Van", "Van")


# ============================================================================
# Advisory and Risk Thresholds
# SYNC WITH: app/algorithms/load_scoring.py _build_advice(), _assess_risk()
# ============================================================================

EXCELLENT_RATE_PER_MILE = 3.00   # reason: rate called out explicitly
HIGH_MARGIN_PERCENT = 25.0       # reason: margin called out (strictly greater)
LOW_MARGIN_PERCENT = 10.0        # warning: consider negotiating
COMFORTABLE_BUFFER_HOURS = 3.0   # reason: comfortable buffer (strictly greater)
OPTIMAL_MIN_MILES = 300
OPTIMAL_MAX_MILES = 600
LONG_HAUL_MILES = 800            # warning: fatigue (strictly greater)
REST_STOP_MILES = 500            # optimization: rest stops (strictly greater)
SHORT_HAUL_MILES = 200           # optimization: combine backhaul (strictly less)

HIGH_RISK_MARGIN_PERCENT = 5.0
MEDIUM_RISK_MARGIN_PERCENT = 15.0
MEDIUM_RISK_BUFFER_HOURS = 1.0


# ============================================================================
# Market Insight Thresholds
# SYNC WITH: app/algorithms/market_insights.py
# ============================================================================

STRONG_MARKET_RATE = 2.5
STABLE_MARKET_RATE = 2.0
PREMIUM_RATE_PER_MILE = 2.5
STRATEGY_COST_MULTIPLIER = 1.5
INSIGHT_SHORT_HAUL_MILES = 300
MIN_SHORT_HAULS_FOR_OPPORTUNITY = 5  # strictly more than this many


# ============================================================================
# Helper Functions
# ============================================================================

def tier_points(value: float, tiers: List[Tuple[float, int]], floor: int = 0) -> int:
    """
    Look up points for a value in a descending ">=" tier list.

    Example:
        >>> tier_points(2.75, RATE_PER_MILE_TIERS, RATE_FLOOR_POINTS)
        40
        >>> tier_points(1.0, RATE_PER_MILE_TIERS, RATE_FLOOR_POINTS)
        10
    """
    for threshold, points in tiers:
        if value >= threshold:
            return points
    return floor


def distance_band_score(miles: float) -> int:
    """
    Score a trip length against the inclusive DISTANCE_BANDS.

    Example:
        >>> distance_band_score(400)
        100
        >>> distance_band_score(0)
        20
    """
    for low, high, score in DISTANCE_BANDS:
        if low <= miles <= high:
            return score
    return DISTANCE_FLOOR_SCORE


def total_weight() -> float:
    """Sum of composite weights (1.0 when the table is consistent)."""
    return (
        WEIGHT_PROFITABILITY
        + WEIGHT_TIME_COMPLIANCE
        + WEIGHT_DISTANCE
        + WEIGHT_RELIABILITY
        + WEIGHT_MARKET
    )
