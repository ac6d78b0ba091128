"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from wa_points import __version__
from wa_points.api.v1.routes import events, placement, score

api_router = APIRouter()

api_router.include_router(events.router, prefix="/events", tags=["Events"])
api_router.include_router(score.router, prefix="/score", tags=["Score"])
api_router.include_router(placement.router, prefix="/placement", tags=["Placement"])


@api_router.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
