"""API v1 route modules."""

from fastapi import HTTPException

from wa_points.shared.errors import ScoringError

NOT_FOUND_CODES = {"unknown_event", "unknown_category"}


def http_error(error: ScoringError) -> HTTPException:
    """Map a scoring error to an HTTP error with a structured body."""
    status_code = 404 if error.code in NOT_FOUND_CODES else 422
    return HTTPException(status_code=status_code, detail=error.to_dict())
