"""
Shared fixtures.

`fixture_catalog` is a small catalog built in memory. Sprint and jump
rows are the published men's coefficients; the road, 800m and combined
rows are made-up curves with round numbers so adjusted scores are easy
to follow.
"""

import pytest

from wa_points.config import DATA_DIR
from wa_points.features.events import EventCatalog
from wa_points.features.placement import PlacementTables
from wa_points.features.scoring import ScoringService


FIXTURE_EVENTS = {
    "events": [
        {"id": "100m", "family": "track", "placement_group": "track_and_field",
         "check_range": [9.5, 15.0], "wind_coefficient": 6.0},
        {"id": "800m", "family": "track", "placement_group": "track_and_field",
         "check_range": [100.0, 160.0]},
        {"id": "Long Jump", "family": "field", "placement_group": "track_and_field",
         "check_range": [5.0, 9.0], "wind_coefficient": 6.0},
        {"id": "Road 10 km", "family": "road", "placement_group": "road_10km",
         "check_range": [1600.0, 2700.0], "elevation_coefficient": 6.0},
        {"id": "Dec.", "family": "combined", "placement_group": "combined_event",
         "check_range": [5000.0, 9200.0], "genders": ["men"]},
    ]
}

FIXTURE_COEFFICIENTS = {
    "men": {
        "100m": [24.642211664166098, -837.7135408530303, 7119.3125116789015],
        "800m": [0.1, -40.0, 5000.0],
        "Long Jump": [1.931092872960562, 186.73134733641928, -479.70640445759636],
        # 30:00 -> 1200.5 raw points, -2.2 points per second
        "Road 10 km": [0.0005, -4.0, 6780.5],
        # points = floor(x)
        "Dec.": {"formula": "power", "coefficients": [0.0, -1.0, 1.0]},
    },
    "women": {
        "Long Jump": [1.958114032649064, 193.69548254413166, -233.98988652729167],
    },
}


@pytest.fixture
def fixture_catalog():
    """In-memory catalog with wind, elevation and combined events."""
    return EventCatalog.from_data(FIXTURE_EVENTS, FIXTURE_COEFFICIENTS)


@pytest.fixture
def placement_tables():
    """Bundled placing tables."""
    return PlacementTables.from_file(DATA_DIR / "placement_2025.yaml")


@pytest.fixture
def fixture_service(fixture_catalog, placement_tables):
    """Scoring service over the fixture catalog."""
    return ScoringService(fixture_catalog, placement_tables)


@pytest.fixture
def bundled_service():
    """Scoring service over the bundled tables (direction check included)."""
    return ScoringService.from_settings()
