"""
Tests for placing scores.

Table choice (final / semi-final by final size), semi-final
qualification and the fallback for untabulated places.
"""

from types import MappingProxyType

import pytest

from wa_points.features.placement import PlacementCategory, PlacementTables, score_placement, table_name
from wa_points.shared.constants import CompetitionCategory, PlacementGroup, RoundType
from wa_points.shared.errors import CatalogIntegrityError, InvalidPlaceError, UnknownCategoryError


# =============================================================================
# Test Table Selection
# =============================================================================

class TestTableName:
    """Tests for table_name function."""

    def test_final(self):
        assert table_name(PlacementGroup.ROAD_10KM, RoundType.FINAL) == "road_10km_final"

    def test_semi_small_final(self):
        assert table_name(PlacementGroup.TRACK_AND_FIELD, RoundType.SEMI_FINAL, 9) == (
            "track_and_field_semi_max9"
        )

    def test_semi_large_final(self):
        assert table_name(PlacementGroup.TRACK_AND_FIELD, RoundType.SEMI_FINAL, 10) == (
            "track_and_field_semi_10plus"
        )

    def test_other_round(self):
        assert table_name(PlacementGroup.TRACK_AND_FIELD, RoundType.OTHER) is None


# =============================================================================
# Test Published Cases
# =============================================================================

class TestPlacementScore:
    """Tests for PlacementTables.score with the bundled tables."""

    def test_world_final_winner(self, placement_tables):
        assert placement_tables.score("OW", 1, "track_and_field", "final", 8) == 375

    def test_road_10km_third(self, placement_tables):
        assert placement_tables.score("OW", 3, "road_10km", "final", 32) == 75

    def test_semi_not_qualified_large_final(self, placement_tables):
        """11th in the semi, 10-athlete final: scores place 11 of semi_10plus."""
        assert placement_tables.score("DF", 11, "track_and_field", "semi_final", 10) == 85

    def test_semi_qualified_large_final(self, placement_tables):
        """11th in the semi, 11-athlete final: qualified, scores as place 1."""
        assert placement_tables.score("DF", 11, "track_and_field", "semi_final", 11) == 90

    def test_semi_qualified_small_final(self, placement_tables):
        assert placement_tables.score("OW", 2, "track_and_field", "semi_final", 8) == 140

    def test_semi_explicit_qualification(self, placement_tables):
        """Qualified on time from 12th place."""
        assert placement_tables.score(
            "OW", 12, "track_and_field", "semi_final", 8, qualified_to_final=True
        ) == 140
        assert placement_tables.score("OW", 12, "track_and_field", "semi_final", 8) == 100

    def test_accepts_enums(self, placement_tables):
        assert placement_tables.score(
            CompetitionCategory.DF, 2, PlacementGroup.TRACK_AND_FIELD, RoundType.FINAL
        ) == 210


# =============================================================================
# Test Fallback
# =============================================================================

class TestFallback:
    """Untabulated places and tables score the fallback."""

    def test_beyond_table(self, placement_tables):
        assert placement_tables.score("OW", 17) == 0

    def test_short_table(self, placement_tables):
        assert placement_tables.score("F", 4) == 0

    def test_category_without_table(self, placement_tables):
        assert placement_tables.score("C", 1) == 0

    def test_empty_semi_table(self, placement_tables):
        assert placement_tables.score("OW", 1, "distance_5000m_3000msc", "semi_final") == 0

    def test_other_round(self, placement_tables):
        assert placement_tables.score("OW", 1, round_type="other") == 0

    def test_custom_fallback(self):
        tables = PlacementTables.from_data(
            {"fallback": 5, "tables": {"track_and_field_final": {"OW": {1: 375}}}}
        )
        assert tables.score("OW", 2) == 5
        assert tables.score("A", 1) == 5


# =============================================================================
# Test Errors
# =============================================================================

class TestErrors:
    """Tests for invalid places and categories."""

    @pytest.mark.parametrize("place", [0, -1])
    def test_invalid_place(self, placement_tables, place):
        with pytest.raises(InvalidPlaceError):
            placement_tables.score("OW", place)

    def test_invalid_place_in_other_round(self, placement_tables):
        with pytest.raises(InvalidPlaceError):
            placement_tables.score("OW", 0, round_type="other")

    def test_invalid_final_size(self, placement_tables):
        with pytest.raises(InvalidPlaceError):
            placement_tables.score("OW", 1, round_type="semi_final", size_of_final=0)

    def test_unknown_category(self, placement_tables):
        with pytest.raises(UnknownCategoryError):
            placement_tables.score("ZZ", 1)

    def test_bad_table_data(self):
        with pytest.raises(CatalogIntegrityError):
            PlacementTables.from_data({"tables": {"track_and_field_final": {"XX": {1: 10}}}})

    def test_place_below_one_in_data(self):
        with pytest.raises(CatalogIntegrityError):
            PlacementTables.from_data({"tables": {"track_and_field_final": {"OW": {0: 10}}}})


# =============================================================================
# Test Category Model
# =============================================================================

class TestPlacementCategory:
    """Tests for PlacementCategory and score_placement."""

    def test_lookup(self):
        category = PlacementCategory(
            id=CompetitionCategory.F,
            points_by_place=MappingProxyType({1: 15, 2: 10, 3: 5}),
        )
        assert score_placement(category, 2) == 10
        assert score_placement(category, 9) == 0
        assert category.max_place == 3

    def test_empty(self):
        category = PlacementCategory(id=CompetitionCategory.A, fallback=3)
        assert score_placement(category, 1) == 3
        assert category.max_place == 0

    def test_invalid_place(self):
        with pytest.raises(InvalidPlaceError):
            score_placement(PlacementCategory(id=CompetitionCategory.A), 0)

    def test_descriptions(self):
        assert CompetitionCategory.OW.description == "Olympic Games and World Championships"
