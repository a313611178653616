"""
Constants Package

Centralized constants for the load recommendation service.

Exports:
- Operating assumptions (speed, dock time, MPG, default fuel price)
- Composite weights and factor tiers
- Lookup tables (load board reliability, rate benchmarks, seasonal factors)
- Global constants (headers, defaults, response metadata)

Safe to import anywhere - no heavy dependencies or circular imports.
"""

from .thresholds import (
    # Operating assumptions
    AVERAGE_SPEED_MPH,
    DOCK_TIME_HOURS,
    AVERAGE_TRUCK_MPG,
    DEFAULT_FUEL_PRICE,
    MAX_RECOMMENDATIONS,
    AVAILABLE_STATUS,
    # Weights
    WEIGHT_PROFITABILITY,
    WEIGHT_TIME_COMPLIANCE,
    WEIGHT_DISTANCE,
    WEIGHT_RELIABILITY,
    WEIGHT_MARKET,
    # Lookup tables
    LOAD_BOARD_RELIABILITY,
    DEFAULT_RELIABILITY_SCORE,
    RATE_BENCHMARKS,
    DEFAULT_RATE_BENCHMARK,
    SEASONAL_FACTORS,
    DEFAULT_SEASON,
    # Helpers
    tier_points,
    distance_band_score,
    total_weight,
)

from .constants import (
    TRACE_HEADER_NAME,
    USER_ID_HEADER_NAME,
    AUTHORIZATION_HEADER_NAME,
    ANONYMOUS_USER_ID,
    DEFAULT_DRIVE_TIME_HOURS,
    DEFAULT_ON_DUTY_HOURS,
    MAX_HOS_HOURS,
    ALGORITHM_NAME,
    SOURCE_FLEET_SERVICE,
    SOURCE_LOAD_BOARD,
    normalize_trace_id,
    short_request_id,
)

__all__ = [
    "AVERAGE_SPEED_MPH",
    "DOCK_TIME_HOURS",
    "AVERAGE_TRUCK_MPG",
    "DEFAULT_FUEL_PRICE",
    "MAX_RECOMMENDATIONS",
    "AVAILABLE_STATUS",
    "WEIGHT_PROFITABILITY",
    "WEIGHT_TIME_COMPLIANCE",
    "WEIGHT_DISTANCE",
    "WEIGHT_RELIABILITY",
    "WEIGHT_MARKET",
    "LOAD_BOARD_RELIABILITY",
    "DEFAULT_RELIABILITY_SCORE",
    "RATE_BENCHMARKS",
    "DEFAULT_RATE_BENCHMARK",
    "SEASONAL_FACTORS",
    "DEFAULT_SEASON",
    "tier_points",
    "distance_band_score",
    "total_weight",
    "TRACE_HEADER_NAME",
    "USER_ID_HEADER_NAME",
    "AUTHORIZATION_HEADER_NAME",
    "ANONYMOUS_USER_ID",
    "DEFAULT_DRIVE_TIME_HOURS",
    "DEFAULT_ON_DUTY_HOURS",
    "MAX_HOS_HOURS",
    "ALGORITHM_NAME",
    "SOURCE_FLEET_SERVICE",
    "SOURCE_LOAD_BOARD",
    "normalize_trace_id",
    "short_request_id",
]
