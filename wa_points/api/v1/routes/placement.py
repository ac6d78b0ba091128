"""
Placement Routes

Endpoint for placing scores.
"""

from fastapi import APIRouter, Depends

from wa_points.api.v1.routes import http_error
from wa_points.features.scoring import ScoringService, get_scoring_service
from wa_points.features.scoring.schemas import PlacementRequest, PlacementResponse
from wa_points.shared.errors import ScoringError

router = APIRouter()


@router.post("", response_model=PlacementResponse)
def score_placement(
    request: PlacementRequest,
    service: ScoringService = Depends(get_scoring_service),
):
    """Placing score for a category, round and place."""
    try:
        points = service.calculate_placement(
            request.category,
            request.place,
            event_group=request.event_group,
            round_type=request.round,
            size_of_final=request.size_of_final,
            qualified_to_final=request.qualified_to_final,
        )
    except ScoringError as e:
        raise http_error(e)
    return PlacementResponse(category=request.category, place=request.place, points=points)
