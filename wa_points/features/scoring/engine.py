"""
Scoring Formula Engine

Evaluates an event's coefficient row on a canonical performance. The
engine never branches on direction; the coefficients encode it. The
direction check below makes sure they actually do.
"""

import logging
import math
from typing import Callable, Dict, Iterable, Sequence

from wa_points.features.events.models import Event, FormulaKind
from wa_points.shared.constants import Direction
from wa_points.shared.errors import CatalogIntegrityError, OutOfScaleError
from wa_points.shared.formulas import (
    power_points,
    power_slope,
    quadratic_points,
    quadratic_slope,
)

from .models import CanonicalPerformance

logger = logging.getLogger(__name__)

FORMULAS: Dict[FormulaKind, Callable[[float, Sequence[float]], int]] = {
    FormulaKind.QUADRATIC: quadratic_points,
    FormulaKind.POWER: power_points,
}

SLOPES: Dict[FormulaKind, Callable[[float, Sequence[float]], float]] = {
    FormulaKind.QUADRATIC: quadratic_slope,
    FormulaKind.POWER: power_slope,
}

# Samples taken across check_range by the direction check
DIRECTION_CHECK_SAMPLES = 50


def points_for(x: float, event: Event) -> int:
    """
    Points for a bare value in the event's unit.

    Raises:
        OutOfScaleError: the formula overflows or is undefined at x
    """
    coefficients = event.coefficients
    try:
        return FORMULAS[coefficients.formula](x, coefficients.as_tuple())
    except (OverflowError, ValueError) as e:
        raise OutOfScaleError(f"{event}: cannot score {x!r}") from e


def slope_at(x: float, event: Event) -> float:
    """Points gained per unit of performance at x (negative for times)."""
    coefficients = event.coefficients
    try:
        slope = SLOPES[coefficients.formula](x, coefficients.as_tuple())
    except (OverflowError, ZeroDivisionError) as e:
        raise OutOfScaleError(f"{event}: no points slope at {x!r}") from e
    if slope == 0 or not math.isfinite(slope):
        raise OutOfScaleError(f"{event}: no points slope at {x!r}")
    return slope


def score(perf: CanonicalPerformance, event: Event) -> int:
    """
    Result score of a (possibly adjusted) performance.

    Args:
        perf: Canonical performance, value > 0
        event: Event with coefficients

    Returns:
        Floored points; not clamped, so extreme marks can give
        very large or negative scores

    Raises:
        OutOfScaleError: the mark is too large for the formula
    """
    return points_for(perf.value, event)


def verify_direction(event: Event, samples: int = DIRECTION_CHECK_SAMPLES) -> None:
    """
    Check that the coefficients move points the way the event's direction says.

    Raises:
        CatalogIntegrityError: points rise with the mark for a
            lower-is-better event, or fall for a higher-is-better one
    """
    low, high = event.definition.check_range
    if not 0 < low < high:
        raise CatalogIntegrityError(f"{event}: invalid check range {low}..{high}")

    step = (high - low) / (samples - 1)
    marks = [low + i * step for i in range(samples)]
    points = [points_for(x, event) for x in marks]

    for (x0, p0), (x1, p1) in zip(zip(marks, points), zip(marks[1:], points[1:])):
        if event.direction == Direction.LOWER_IS_BETTER and p1 > p0:
            raise CatalogIntegrityError(
                f"{event}: points rise from {p0} to {p1} between {x0:.3f} and "
                f"{x1:.3f}, but lower marks should score higher"
            )
        if event.direction == Direction.HIGHER_IS_BETTER and p1 < p0:
            raise CatalogIntegrityError(
                f"{event}: points fall from {p0} to {p1} between {x0:.3f} and "
                f"{x1:.3f}, but higher marks should score higher"
            )


def verify_catalog(events: Iterable[Event]) -> int:
    """Run the direction check on every event. Returns how many were checked."""
    checked = 0
    for event in events:
        verify_direction(event)
        checked += 1
    logger.info(f"Direction check passed for {checked} events")
    return checked
