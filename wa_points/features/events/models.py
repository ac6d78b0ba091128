"""Data models for the event catalog (frozen dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wa_points.shared.constants import (
    FAMILY_DIRECTION,
    FAMILY_UNIT,
    TIME_FAMILIES,
    Direction,
    EventFamily,
    Gender,
    PerformanceUnit,
    PlacementGroup,
)


class FormulaKind(str, Enum):
    """Shape of the points formula a coefficient row is fitted for."""
    QUADRATIC = "quadratic"  # floor(a*x^2 + b*x + c)
    POWER = "power"          # floor(a - b*x^c)


@dataclass(frozen=True)
class Coefficients:
    """One coefficient row of the scoring tables."""

    a: float
    b: float
    c: float
    formula: FormulaKind = FormulaKind.QUADRATIC

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.a, self.b, self.c)


@dataclass(frozen=True)
class EventDefinition:
    """Gender-independent description of an event (from events.yaml)."""

    id: str  # table key: "100m", "Long Jump", "Road Marathon"
    family: EventFamily
    placement_group: PlacementGroup
    check_range: tuple[float, float]  # realistic marks for the direction check
    wind_coefficient: float | None = None  # points per m/s
    elevation_coefficient: float | None = None  # points per m/km of net drop
    genders: tuple[Gender, ...] = (Gender.MEN, Gender.WOMEN)


@dataclass(frozen=True)
class Event:
    """A scorable event: definition plus coefficients for one gender."""

    definition: EventDefinition
    gender: Gender
    coefficients: Coefficients

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def family(self) -> EventFamily:
        return self.definition.family

    @property
    def direction(self) -> Direction:
        return FAMILY_DIRECTION[self.definition.family]

    @property
    def unit(self) -> PerformanceUnit:
        return FAMILY_UNIT[self.definition.family]

    @property
    def is_timed(self) -> bool:
        return self.definition.family in TIME_FAMILIES

    @property
    def accepts_wind(self) -> bool:
        return self.definition.wind_coefficient is not None

    @property
    def accepts_elevation(self) -> bool:
        return self.definition.elevation_coefficient is not None

    @property
    def wind_coefficient(self) -> float | None:
        return self.definition.wind_coefficient

    @property
    def elevation_coefficient(self) -> float | None:
        return self.definition.elevation_coefficient

    @property
    def placement_group(self) -> PlacementGroup:
        return self.definition.placement_group

    @property
    def key(self) -> tuple[Gender, str]:
        return (self.gender, self.id)

    def __str__(self) -> str:
        return f"{self.gender.value} {self.id}"
