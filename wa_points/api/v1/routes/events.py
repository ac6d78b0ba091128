"""
Event Routes

Event selector content.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from wa_points.features.scoring import ScoringService, get_scoring_service
from wa_points.features.scoring.schemas import EventListResponse, EventSchema
from wa_points.shared.constants import Gender

router = APIRouter()


@router.get("", response_model=EventListResponse)
def list_events(
    gender: Optional[Gender] = None,
    service: ScoringService = Depends(get_scoring_service),
):
    """Get scorable events, optionally for one gender."""
    return EventListResponse(
        events=[EventSchema.from_event(e) for e in service.list_events(gender)]
    )
