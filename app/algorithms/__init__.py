"""
Algorithms Package

Provides the deterministic load recommendation engine:
- load_scoring: Multi-factor scoring of one load (0-100) with risk tier and notes
- load_recommender: Ranking pipeline and forward-leg planning
- market_insights: Rate/demand aggregation over the candidate loads

All algorithms are pure functions (no I/O, no randomness, no shared state).
"""

from app.algorithms.load_scoring import ScoringTables, analyze_load, is_equipment_compatible
from app.algorithms.load_recommender import (
    generate_recommendations,
    generate_forward_leg_recommendations
)
from app.algorithms.market_insights import generate_market_insights

__all__ = [
    "ScoringTables",
    "analyze_load",
    "is_equipment_compatible",
    "generate_recommendations",
    "generate_forward_leg_recommendations",
    "generate_market_insights"
]
