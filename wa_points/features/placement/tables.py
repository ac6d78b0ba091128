"""Placing score tables: reads placement YAML and picks the right table."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from wa_points.shared.constants import (
    SEMI_FINAL_SMALL_FINAL_MAX,
    CompetitionCategory,
    PlacementGroup,
    RoundType,
)
from wa_points.shared.errors import (
    CatalogIntegrityError,
    InvalidPlaceError,
    UnknownCategoryError,
)

from .models import PlacementCategory, score_placement

logger = logging.getLogger(__name__)

DEFAULT_SIZE_OF_FINAL = 8


def table_name(
    group: PlacementGroup,
    round_type: RoundType,
    size_of_final: int = DEFAULT_SIZE_OF_FINAL,
) -> str | None:
    """Name of the table for a group and round, None for unscored rounds."""
    if round_type == RoundType.FINAL:
        return f"{group.value}_final"
    if round_type == RoundType.SEMI_FINAL:
        if size_of_final <= SEMI_FINAL_SMALL_FINAL_MAX:
            return f"{group.value}_semi_max9"
        return f"{group.value}_semi_10plus"
    return None


class PlacementTables:
    """Read-only collection of placing tables."""

    def __init__(
        self,
        tables: Mapping[str, Mapping[CompetitionCategory, PlacementCategory]],
        fallback: int = 0,
    ):
        self._tables = MappingProxyType(
            {name: MappingProxyType(dict(rows)) for name, rows in tables.items()}
        )
        self.fallback = fallback

    @classmethod
    def from_data(cls, data: dict) -> "PlacementTables":
        """Build from parsed placement YAML."""
        data = data or {}
        fallback = int(data.get("fallback", 0))
        tables = {}
        for name, categories in (data.get("tables") or {}).items():
            rows = {}
            for category_id, places in (categories or {}).items():
                try:
                    category = CompetitionCategory(str(category_id))
                    points = {int(p): int(v) for p, v in (places or {}).items()}
                except (TypeError, ValueError) as e:
                    raise CatalogIntegrityError(
                        f"Invalid placing table {name}/{category_id}: {e}"
                    ) from e
                if any(p < 1 for p in points):
                    raise CatalogIntegrityError(f"Place below 1 in {name}/{category_id}")
                rows[category] = PlacementCategory(
                    id=category,
                    points_by_place=MappingProxyType(points),
                    fallback=fallback,
                )
            tables[str(name)] = rows
        return cls(tables, fallback=fallback)

    @classmethod
    def from_file(cls, path: Path) -> "PlacementTables":
        """Load tables from YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        tables = cls.from_data(data)
        logger.info(f"Placing tables loaded: {len(tables.table_names)} from {path.name}")
        return tables

    @property
    def table_names(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def category(self, name: str, category: CompetitionCategory) -> PlacementCategory:
        """Category table; an empty one (fallback only) when not published."""
        found = self._tables.get(name, {}).get(category)
        if found is None:
            logger.debug(f"No placing table {name}/{category.value}, using fallback")
            return PlacementCategory(id=category, fallback=self.fallback)
        return found

    def score(
        self,
        category_id: CompetitionCategory | str,
        place: int,
        event_group: PlacementGroup | str = PlacementGroup.TRACK_AND_FIELD,
        round_type: RoundType | str = RoundType.FINAL,
        size_of_final: int = DEFAULT_SIZE_OF_FINAL,
        qualified_to_final: bool = False,
    ) -> int:
        """
        Placing score for a place.

        Args:
            category_id: Competition category ("OW", "DF", ...)
            place: Finishing place, 1-based
            event_group: Placing group of the event
            round_type: final / semi_final / other
            size_of_final: Athletes in the final; picks the semi-final
                           table and decides who qualified
            qualified_to_final: Semi-final athlete reached the final

        Returns:
            Points; fallback when the place or table is not tabulated

        Raises:
            UnknownCategoryError: category id is not known
            InvalidPlaceError: place or size_of_final below 1
        """
        try:
            category = CompetitionCategory(category_id)
        except ValueError:
            raise UnknownCategoryError(f"Unknown competition category: {category_id}") from None
        group = PlacementGroup(event_group)
        round_type = RoundType(round_type)

        if place < 1:
            raise InvalidPlaceError(f"Place must be 1 or more, got {place}")
        if size_of_final < 1:
            raise InvalidPlaceError(f"Size of final must be 1 or more, got {size_of_final}")

        name = table_name(group, round_type, size_of_final)
        if name is None:
            return self.fallback

        # Semi-finalists who reach the final all score as the semi-final winner
        if round_type == RoundType.SEMI_FINAL and (
            qualified_to_final or place <= size_of_final
        ):
            place = 1

        return score_placement(self.category(name, category), place)
