"""Placing score models (frozen dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from wa_points.shared.constants import CompetitionCategory
from wa_points.shared.errors import InvalidPlaceError


@dataclass(frozen=True)
class PlacementCategory:
    """Place -> points table of one competition category."""

    id: CompetitionCategory
    points_by_place: Mapping[int, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    fallback: int = 0  # places without an entry

    @property
    def max_place(self) -> int:
        """Highest tabulated place (0 for an empty table)."""
        return max(self.points_by_place, default=0)


def score_placement(category: PlacementCategory, place: int) -> int:
    """
    Placing score for a place in a category.

    Places beyond the table (or in a gap of it) score the category's
    fallback, not an error.

    Raises:
        InvalidPlaceError: place < 1
    """
    if place < 1:
        raise InvalidPlaceError(f"Place must be 1 or more, got {place}")
    return category.points_by_place.get(place, category.fallback)
