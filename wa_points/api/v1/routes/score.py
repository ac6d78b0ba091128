"""
Score Routes

Endpoints for result scores.
"""

from fastapi import APIRouter, Depends

from wa_points.api.v1.routes import http_error
from wa_points.features.scoring import ScoringService, get_scoring_service
from wa_points.features.scoring.schemas import (
    CombinedScoreRequest,
    CombinedScoreResponse,
    ScoreRequest,
    ScoreResponse,
)
from wa_points.shared.errors import ScoringError

router = APIRouter()


@router.post("", response_model=ScoreResponse)
def score_performance(
    request: ScoreRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    """
    Score a performance.

    Wind applies to wind-affected events only, net downhill to road
    running only; sending either for another event is an error.
    """
    try:
        result = service.calculate(
            request.event_id,
            request.performance,
            wind=request.wind,
            elevation=request.elevation,
            gender=request.gender,
        )
    except ScoringError as e:
        raise http_error(e)
    return ScoreResponse.from_result(result)


@router.post("/combined", response_model=CombinedScoreResponse)
def score_with_placement(
    request: CombinedScoreRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    """Score a performance and its place, and report both plus the total."""
    try:
        combined = service.calculate_combined(
            request.event_id,
            request.performance,
            request.category,
            request.place,
            wind=request.wind,
            elevation=request.elevation,
            gender=request.gender,
            round_type=request.round,
            size_of_final=request.size_of_final,
            qualified_to_final=request.qualified_to_final,
        )
    except ScoringError as e:
        raise http_error(e)
    return CombinedScoreResponse.from_result(combined)
