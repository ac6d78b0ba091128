"""
Scoring schemas.

Pydantic schemas for API request/response serialization.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from wa_points.features.events import Event
from wa_points.features.placement.tables import DEFAULT_SIZE_OF_FINAL
from wa_points.shared.constants import (
    Direction,
    EventFamily,
    Gender,
    PerformanceUnit,
    PlacementGroup,
    RoundType,
)

from .models import CanonicalPerformance, CombinedScoreResult, ScoreResult


class EventSchema(BaseModel):
    """One entry of the event selector."""
    id: str
    gender: Gender
    family: EventFamily
    direction: Direction
    unit: PerformanceUnit
    accepts_wind: bool
    accepts_elevation: bool
    placement_group: PlacementGroup

    @classmethod
    def from_event(cls, event: Event) -> "EventSchema":
        return cls(
            id=event.id,
            gender=event.gender,
            family=event.family,
            direction=event.direction,
            unit=event.unit,
            accepts_wind=event.accepts_wind,
            accepts_elevation=event.accepts_elevation,
            placement_group=event.placement_group,
        )


class PerformanceSchema(BaseModel):
    """Canonical performance with its display form."""
    value: float
    unit: PerformanceUnit
    display: str

    @classmethod
    def from_performance(cls, perf: CanonicalPerformance) -> "PerformanceSchema":
        return cls(value=perf.value, unit=perf.unit, display=perf.display())


class ScoreRequest(BaseModel):
    """Request for a result score."""
    event_id: str = Field(..., examples=["100m"])
    performance: str = Field(..., examples=["9.58"])
    gender: Gender = Gender.MEN
    wind: Optional[float] = Field(default=None, description="m/s, positive = tailwind")
    elevation: Optional[float] = Field(default=None, description="Net drop in m/km")


class ScoreResponse(BaseModel):
    """Result score."""
    event_id: str
    gender: Gender
    points: int
    raw_performance: PerformanceSchema
    performance: PerformanceSchema
    wind: Optional[float] = None
    elevation: Optional[float] = None

    @classmethod
    def from_result(cls, result: ScoreResult) -> "ScoreResponse":
        return cls(
            event_id=result.event.id,
            gender=result.event.gender,
            points=result.points,
            raw_performance=PerformanceSchema.from_performance(result.raw_performance),
            performance=PerformanceSchema.from_performance(result.performance),
            wind=result.wind,
            elevation=result.elevation,
        )


class PlacementRequest(BaseModel):
    """Request for a placing score."""
    category: str = Field(..., examples=["OW"])
    place: int = Field(..., description="1-based finishing place")
    event_group: PlacementGroup = PlacementGroup.TRACK_AND_FIELD
    round: RoundType = RoundType.FINAL
    size_of_final: int = DEFAULT_SIZE_OF_FINAL
    qualified_to_final: bool = False


class PlacementResponse(BaseModel):
    """Placing score."""
    category: str
    place: int
    points: int


class CombinedScoreRequest(ScoreRequest):
    """Result score plus placing score."""
    category: str = Field(..., examples=["OW"])
    place: int
    round: RoundType = RoundType.FINAL
    size_of_final: int = DEFAULT_SIZE_OF_FINAL
    qualified_to_final: bool = False


class CombinedScoreResponse(BaseModel):
    """Both scores and their sum."""
    result: ScoreResponse
    placement_points: int
    total_points: int

    @classmethod
    def from_result(cls, combined: CombinedScoreResult) -> "CombinedScoreResponse":
        return cls(
            result=ScoreResponse.from_result(combined.result),
            placement_points=combined.placement_points,
            total_points=combined.total_points,
        )


class EventListResponse(BaseModel):
    """Event selector content."""
    events: List[EventSchema]
