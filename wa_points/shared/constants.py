"""
Unified constants for events, genders and competition rules.

This module provides a single source of truth for the enum values used
in the data files, the API and the CLI.
"""

from enum import Enum


class Gender(str, Enum):
    """Gender section of the scoring tables."""
    MEN = "men"
    WOMEN = "women"


class EventFamily(str, Enum):
    """
    Event family from the scoring tables.

    The family decides how a performance is entered (time, distance,
    points) and which way is better.
    """
    TRACK = "track"
    ROAD = "road"
    WALK = "walk"
    FIELD = "field"
    COMBINED = "combined"


class Direction(str, Enum):
    """Which way a performance improves."""
    LOWER_IS_BETTER = "lower_is_better"
    HIGHER_IS_BETTER = "higher_is_better"


class PerformanceUnit(str, Enum):
    """Unit of a canonical performance value."""
    SECONDS = "seconds"
    METERS = "meters"
    POINTS = "points"


# Mapping: family -> direction.
# Combined is the one non-field family scored HIGHER_IS_BETTER: its results
# are points totals.
FAMILY_DIRECTION: dict[EventFamily, Direction] = {
    EventFamily.TRACK: Direction.LOWER_IS_BETTER,
    EventFamily.ROAD: Direction.LOWER_IS_BETTER,
    EventFamily.WALK: Direction.LOWER_IS_BETTER,
    EventFamily.FIELD: Direction.HIGHER_IS_BETTER,
    EventFamily.COMBINED: Direction.HIGHER_IS_BETTER,
}

# Mapping: family -> unit of the canonical performance
FAMILY_UNIT: dict[EventFamily, PerformanceUnit] = {
    EventFamily.TRACK: PerformanceUnit.SECONDS,
    EventFamily.ROAD: PerformanceUnit.SECONDS,
    EventFamily.WALK: PerformanceUnit.SECONDS,
    EventFamily.FIELD: PerformanceUnit.METERS,
    EventFamily.COMBINED: PerformanceUnit.POINTS,
}

# Families entered as h:mm:ss.ss
TIME_FAMILIES: frozenset[EventFamily] = frozenset(
    f for f, unit in FAMILY_UNIT.items() if unit == PerformanceUnit.SECONDS
)


# =============================================================================
# Condition rules
# =============================================================================

# Tailwind up to +2.0 m/s is legal and not corrected.
# Above it the correction is counted from 0.0 m/s.
TAILWIND_ALLOWANCE_MS = 2.0

# Net drop up to 1.0 m/km is allowed on road courses.
# Above it the correction is counted from 0.0 m/km.
DOWNHILL_ALLOWANCE_M_PER_KM = 1.0


# =============================================================================
# Placement
# =============================================================================

class CompetitionCategory(str, Enum):
    """Competition category of the placing score tables."""
    F = "F"
    E = "E"
    D = "D"
    C = "C"
    B = "B"
    A = "A"
    GL = "GL"
    GW = "GW"
    DF = "DF"
    OW = "OW"

    @property
    def description(self) -> str:
        return CATEGORY_DESCRIPTIONS[self]


CATEGORY_DESCRIPTIONS: dict[CompetitionCategory, str] = {
    CompetitionCategory.F: "Other competitions",
    CompetitionCategory.E: "International matches",
    CompetitionCategory.D: "Continental Tour Challenger",
    CompetitionCategory.C: "Continental Tour Bronze",
    CompetitionCategory.B: "Continental Tour Silver",
    CompetitionCategory.A: "Major games and Gold meetings",
    CompetitionCategory.GL: "Area senior outdoor championships",
    CompetitionCategory.GW: "Minor championships",
    CompetitionCategory.DF: "Diamond League Final",
    CompetitionCategory.OW: "Olympic Games and World Championships",
}


class RoundType(str, Enum):
    """Round in which the place was achieved."""
    FINAL = "final"
    SEMI_FINAL = "semi_final"
    OTHER = "other"


class PlacementGroup(str, Enum):
    """Group of events sharing one set of placing tables."""
    TRACK_AND_FIELD = "track_and_field"
    DISTANCE_5000M_3000MSC = "distance_5000m_3000msc"
    DISTANCE_10000M = "distance_10000m"
    ROAD_10KM = "road_10km"
    ROAD_MARATHON = "road_marathon"
    HALF_MARATHON = "half_marathon"
    RACE_WALKING_20KM = "race_walking_20km"
    RACE_WALKING_35KM = "race_walking_35km"
    RACE_WALKING_35KM_SIMILAR = "race_walking_35km_similar"
    COMBINED_EVENT = "combined_event"
    ROAD_RUNNING = "road_running"
    CROSS_COUNTRY = "cross_country"


# Final sizes up to this use the *_semi_max9 tables
SEMI_FINAL_SMALL_FINAL_MAX = 9
