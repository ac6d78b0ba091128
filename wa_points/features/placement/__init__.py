"""Placing score module: points for finishing places."""

from .models import PlacementCategory, score_placement
from .tables import PlacementTables, table_name

__all__ = [
    "PlacementCategory",
    "score_placement",
    "PlacementTables",
    "table_name",
]
