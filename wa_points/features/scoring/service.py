"""
Scoring Service

Orchestrates the scoring components:
- Performance parsing
- Wind / downhill adjustment
- Result score formula
- Placing score lookup

This is the main entry point for hosts (API, CLI). The catalog and the
placing tables are loaded once and shared read-only by every call.
"""

import logging
from functools import lru_cache
from typing import Optional

from wa_points.config import Settings, settings
from wa_points.features.events import Event, EventCatalog
from wa_points.features.placement import PlacementTables
from wa_points.features.placement.tables import DEFAULT_SIZE_OF_FINAL
from wa_points.shared.constants import Gender, PlacementGroup, RoundType

from .adjuster import adjust
from .engine import score, verify_catalog
from .models import AdjustmentContext, CombinedScoreResult, PerformanceInput, ScoreResult
from .parser import parse_input

logger = logging.getLogger(__name__)


class ScoringService:
    """Stateless calculations over one catalog and one set of placing tables."""

    def __init__(self, catalog: EventCatalog, placement_tables: PlacementTables):
        self.catalog = catalog
        self.placement_tables = placement_tables

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "ScoringService":
        """Load tables named by settings and run the direction check."""
        config = config or settings
        catalog = EventCatalog.from_files(
            config.resolve(config.events_file),
            config.resolve(config.coefficients_file),
        )
        if config.verify_catalog_on_load:
            verify_catalog(catalog)
        placement_tables = PlacementTables.from_file(config.resolve(config.placement_file))
        return cls(catalog, placement_tables)

    def list_events(self, gender: Gender | str | None = None) -> tuple[Event, ...]:
        """Scorable events for an event selector."""
        return self.catalog.events(gender)

    def calculate(
        self,
        event_id: str,
        raw_performance: str,
        wind: Optional[float] = None,
        elevation: Optional[float] = None,
        gender: Gender | str = Gender.MEN,
    ) -> ScoreResult:
        """
        Result score of a performance.

        Args:
            event_id: Table key, e.g. "100m", "Long Jump"
            raw_performance: Text as entered, e.g. "9.58", "2:05:30"
            wind: Wind in m/s (positive = tailwind), wind events only
            elevation: Net drop in m/km, road running only
            gender: "men" or "women"

        Returns:
            ScoreResult with points and the adjusted performance

        Raises:
            ScoringError subclasses (see wa_points.shared.errors)
        """
        event = self.catalog.lookup(event_id, gender)
        raw = parse_input(PerformanceInput(raw=raw_performance, event=event))
        ctx = AdjustmentContext(wind=wind, elevation=elevation)
        performance = raw if ctx.is_empty else adjust(raw, ctx, event)
        points = score(performance, event)

        logger.debug(
            f"{event}: {raw_performance!r} -> {performance.value} -> {points} pts"
        )
        return ScoreResult(
            event=event,
            points=points,
            raw_performance=raw,
            performance=performance,
            wind=wind,
            elevation=elevation,
        )

    def calculate_placement(
        self,
        category_id: str,
        place: int,
        event_group: PlacementGroup | str = PlacementGroup.TRACK_AND_FIELD,
        round_type: RoundType | str = RoundType.FINAL,
        size_of_final: int = DEFAULT_SIZE_OF_FINAL,
        qualified_to_final: bool = False,
    ) -> int:
        """Placing score; see PlacementTables.score."""
        return self.placement_tables.score(
            category_id,
            place,
            event_group=event_group,
            round_type=round_type,
            size_of_final=size_of_final,
            qualified_to_final=qualified_to_final,
        )

    def calculate_combined(
        self,
        event_id: str,
        raw_performance: str,
        category_id: str,
        place: int,
        wind: Optional[float] = None,
        elevation: Optional[float] = None,
        gender: Gender | str = Gender.MEN,
        round_type: RoundType | str = RoundType.FINAL,
        size_of_final: int = DEFAULT_SIZE_OF_FINAL,
        qualified_to_final: bool = False,
    ) -> CombinedScoreResult:
        """Result score and placing score (event's own placing group) together."""
        result = self.calculate(event_id, raw_performance, wind, elevation, gender)
        placement_points = self.calculate_placement(
            category_id,
            place,
            event_group=result.event.placement_group,
            round_type=round_type,
            size_of_final=size_of_final,
            qualified_to_final=qualified_to_final,
        )
        return CombinedScoreResult(result=result, placement_points=placement_points)


@lru_cache(maxsize=1)
def get_scoring_service() -> ScoringService:
    """Process-wide service built from the configured tables (loaded once)."""
    return ScoringService.from_settings()


# === Module-level shortcuts over the default service ===


def list_events(gender: Gender | str | None = None) -> tuple[Event, ...]:
    return get_scoring_service().list_events(gender)


def calculate(
    event_id: str,
    raw_performance: str,
    wind: Optional[float] = None,
    elevation: Optional[float] = None,
    gender: Gender | str = Gender.MEN,
) -> ScoreResult:
    return get_scoring_service().calculate(event_id, raw_performance, wind, elevation, gender)


def calculate_placement(
    category_id: str,
    place: int,
    event_group: PlacementGroup | str = PlacementGroup.TRACK_AND_FIELD,
    round_type: RoundType | str = RoundType.FINAL,
    size_of_final: int = DEFAULT_SIZE_OF_FINAL,
    qualified_to_final: bool = False,
) -> int:
    return get_scoring_service().calculate_placement(
        category_id, place, event_group, round_type, size_of_final, qualified_to_final
    )


def calculate_combined(
    event_id: str,
    raw_performance: str,
    category_id: str,
    place: int,
    **kwargs,
) -> CombinedScoreResult:
    return get_scoring_service().calculate_combined(
        event_id, raw_performance, category_id, place, **kwargs
    )
