"""
Shared utilities (NOT business logic).

Usage:
    from wa_points.shared import Gender, quadratic_points
    from wa_points.shared.formatters import format_time
"""
from .constants import (
    Gender,
    EventFamily,
    Direction,
    PerformanceUnit,
    CompetitionCategory,
    RoundType,
    PlacementGroup,
    FAMILY_DIRECTION,
    FAMILY_UNIT,
    TAILWIND_ALLOWANCE_MS,
    DOWNHILL_ALLOWANCE_M_PER_KM,
)
from .errors import (
    ScoringError,
    UnknownEventError,
    EmptyInputError,
    MalformedFormatError,
    OutOfRangeComponentError,
    NonPositiveValueError,
    InapplicableModifierError,
    OutOfScaleError,
    InvalidPlaceError,
    UnknownCategoryError,
    CatalogIntegrityError,
)
from .formatters import (
    format_time,
    format_distance,
    format_points,
)
from .formulas import (
    quadratic_points,
    power_points,
)

__all__ = [
    # constants
    "Gender",
    "EventFamily",
    "Direction",
    "PerformanceUnit",
    "CompetitionCategory",
    "RoundType",
    "PlacementGroup",
    "FAMILY_DIRECTION",
    "FAMILY_UNIT",
    "TAILWIND_ALLOWANCE_MS",
    "DOWNHILL_ALLOWANCE_M_PER_KM",
    # errors
    "ScoringError",
    "UnknownEventError",
    "EmptyInputError",
    "MalformedFormatError",
    "OutOfRangeComponentError",
    "NonPositiveValueError",
    "InapplicableModifierError",
    "OutOfScaleError",
    "InvalidPlaceError",
    "UnknownCategoryError",
    "CatalogIntegrityError",
    # formatters
    "format_time",
    "format_distance",
    "format_points",
    # formulas
    "quadratic_points",
    "power_points",
]
