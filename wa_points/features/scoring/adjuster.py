"""
Condition Adjuster

Converts a raw performance into the equivalent performance under legal
conditions, before it is scored. Corrections are rated in points per
unit of condition and turned into a mark offset through the event's
points slope at the raw mark, so the adjusted mark scores that many
points less (or more):

- Wind (sprints, short hurdles, horizontal jumps): tailwind above the
  +2.0 m/s allowance costs wind * wind_coefficient points, counted from
  0.0 m/s; any headwind earns the same rate.
- Net downhill (road running): a drop above the 1.0 m/km allowance costs
  drop * elevation_coefficient points, counted from 0.0 m/km.

Adjusting is not idempotent. Call it once per raw performance.
"""

import logging
import math

from wa_points.features.events.models import Event
from wa_points.shared.constants import DOWNHILL_ALLOWANCE_M_PER_KM, TAILWIND_ALLOWANCE_MS
from wa_points.shared.errors import (
    InapplicableModifierError,
    NonPositiveValueError,
    OutOfScaleError,
)

from .engine import slope_at
from .models import AdjustmentContext, CanonicalPerformance

logger = logging.getLogger(__name__)


def adjust(
    perf: CanonicalPerformance,
    ctx: AdjustmentContext,
    event: Event,
) -> CanonicalPerformance:
    """
    Apply wind and elevation corrections.

    Args:
        perf: Raw canonical performance
        ctx: Conditions; absent modifiers are skipped
        event: Event the performance belongs to

    Returns:
        Adjusted performance (same unit and precision)

    Raises:
        InapplicableModifierError: modifier given for an event that
            does not take it
        OutOfScaleError: modifier or adjusted mark is not a finite number
        NonPositiveValueError: correction leaves a non-positive mark
    """
    _check_applicable(ctx, event)

    points = 0.0
    if ctx.wind is not None:
        points += wind_points(ctx.wind, event)
    if ctx.elevation is not None:
        points += downhill_points(ctx.elevation, event)
    if points == 0:
        return perf

    value = perf.value + points / slope_at(perf.value, event)
    if not math.isfinite(value):
        raise OutOfScaleError(f"Adjusted performance is out of scale for {event}")
    if value <= 0:
        raise NonPositiveValueError(
            f"Adjusted performance is not positive for {event}: {value:.3f}"
        )

    logger.debug(f"{event}: {perf.value} adjusted to {value} ({points:+.1f} pts, {ctx})")
    return perf.with_value(value)


def wind_points(wind: float, event: Event) -> float:
    """
    Points change caused by wind.

    -1.0 m/s -> +6, +2.0 m/s -> 0, +3.0 m/s -> -18 at 6 points per m/s.
    """
    if 0.0 <= wind <= TAILWIND_ALLOWANCE_MS:
        return 0.0
    return -wind * event.wind_coefficient


def downhill_points(drop_m_per_km: float, event: Event) -> float:
    """Points lost for a net drop above the allowance (1.5 m/km -> -9 at 6 per m/km)."""
    if drop_m_per_km <= DOWNHILL_ALLOWANCE_M_PER_KM:
        return 0.0
    return -drop_m_per_km * event.elevation_coefficient


def _check_applicable(ctx: AdjustmentContext, event: Event) -> None:
    if ctx.wind is not None and not event.accepts_wind:
        raise InapplicableModifierError(f"Wind is not used for {event.id}")
    if ctx.elevation is not None and not event.accepts_elevation:
        raise InapplicableModifierError(f"Net downhill is not used for {event.id}")
    for name, value in (("Wind", ctx.wind), ("Net downhill", ctx.elevation)):
        if value is not None and not math.isfinite(value):
            raise OutOfScaleError(f"{name} must be a finite number, got {value}")
