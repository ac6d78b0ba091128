"""Value objects of a single calculation (dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass, replace

from wa_points.features.events.models import Event
from wa_points.shared.constants import PerformanceUnit
from wa_points.shared.formatters import format_distance, format_points, format_time


@dataclass(frozen=True)
class PerformanceInput:
    """Raw text as entered, plus the event it was entered for."""

    raw: str
    event: Event


@dataclass(frozen=True)
class CanonicalPerformance:
    """
    A performance in a single unit.

    value is always > 0. precision is the number of decimal places the
    user supplied; it only affects display, never scoring.
    """

    value: float
    unit: PerformanceUnit
    precision: int = 2

    def with_value(self, value: float) -> "CanonicalPerformance":
        return replace(self, value=value)

    def display(self) -> str:
        """Human-readable mark, e.g. '1:30.25' or '8.95 m'."""
        if self.unit == PerformanceUnit.SECONDS:
            return format_time(self.value, self.precision)
        if self.unit == PerformanceUnit.METERS:
            return format_distance(self.value, self.precision)
        return format_points(self.value, self.precision)


@dataclass(frozen=True)
class AdjustmentContext:
    """Optional conditions of the performance."""

    wind: float | None = None  # m/s, positive = tailwind
    elevation: float | None = None  # net drop in m/km, positive = downhill

    @property
    def is_empty(self) -> bool:
        return self.wind is None and self.elevation is None


@dataclass(frozen=True)
class ScoreResult:
    """Result score of one performance."""

    event: Event
    points: int
    raw_performance: CanonicalPerformance
    performance: CanonicalPerformance  # after wind/elevation adjustment
    wind: float | None = None
    elevation: float | None = None

    @property
    def adjusted(self) -> bool:
        return self.performance.value != self.raw_performance.value


@dataclass(frozen=True)
class CombinedScoreResult:
    """Result score and placing score reported side by side."""

    result: ScoreResult
    placement_points: int

    @property
    def total_points(self) -> int:
        return self.result.points + self.placement_points
