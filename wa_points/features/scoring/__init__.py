"""
Performance scoring module.

Usage:
    from wa_points.features.scoring import calculate, list_events
    result = calculate("100m", "9.58")

Components:
- parse: raw text -> CanonicalPerformance
- adjust: wind / downhill correction
- score: coefficient formula -> points
- ScoringService: the calculation entry point
"""

from .models import (
    AdjustmentContext,
    CanonicalPerformance,
    CombinedScoreResult,
    PerformanceInput,
    ScoreResult,
)
from .parser import parse, parse_input
from .adjuster import adjust
from .engine import score, verify_catalog, verify_direction
from .service import (
    ScoringService,
    get_scoring_service,
    list_events,
    calculate,
    calculate_placement,
    calculate_combined,
)

__all__ = [
    # Models
    "AdjustmentContext",
    "CanonicalPerformance",
    "CombinedScoreResult",
    "PerformanceInput",
    "ScoreResult",
    # Components
    "parse",
    "parse_input",
    "adjust",
    "score",
    "verify_catalog",
    "verify_direction",
    # Service
    "ScoringService",
    "get_scoring_service",
    "list_events",
    "calculate",
    "calculate_placement",
    "calculate_combined",
]
