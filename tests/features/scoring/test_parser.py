"""
Tests for the performance parser.

Time formats (SS.ss, MM:SS.ss, HH:MM:SS.ss), field marks and
combined-event totals, plus every rejection kind.
"""

import pytest

from wa_points.features.scoring import PerformanceInput, parse, parse_input
from wa_points.shared.constants import PerformanceUnit
from wa_points.shared.errors import (
    EmptyInputError,
    MalformedFormatError,
    NonPositiveValueError,
    OutOfRangeComponentError,
    OutOfScaleError,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sprint(fixture_catalog):
    return fixture_catalog.lookup("100m")


@pytest.fixture
def middle_distance(fixture_catalog):
    return fixture_catalog.lookup("800m")


@pytest.fixture
def road(fixture_catalog):
    return fixture_catalog.lookup("Road 10 km")


@pytest.fixture
def jump(fixture_catalog):
    return fixture_catalog.lookup("Long Jump")


@pytest.fixture
def decathlon(fixture_catalog):
    return fixture_catalog.lookup("Dec.")


# =============================================================================
# Test Time Formats
# =============================================================================

class TestParseTime:
    """Tests for time-family parsing."""

    def test_seconds(self, sprint):
        perf = parse("9.58", sprint)
        assert perf.value == pytest.approx(9.58)
        assert perf.unit == PerformanceUnit.SECONDS
        assert perf.precision == 2

    def test_minutes_seconds(self, middle_distance):
        assert parse("1:30.25", middle_distance).value == 90.25

    def test_hours_minutes_seconds(self, road):
        perf = parse("2:15:30.50", road)
        assert perf.value == 8130.5
        assert perf.precision == 2

    def test_whole_minutes(self, road):
        perf = parse("14:00", road)
        assert perf.value == 840.0
        assert perf.precision == 0

    def test_surrounding_whitespace(self, sprint):
        assert parse("  10.50 ", sprint).value == pytest.approx(10.5)

    def test_leading_component_unbounded(self, road):
        """Only components after the first are limited to 59."""
        assert parse("75:00", road).value == 4500.0

    def test_precision_from_last_component(self, middle_distance):
        assert parse("1:45.1", middle_distance).precision == 1

    def test_display_keeps_precision(self, road):
        assert parse("2:15:30.50", road).display() == "2:15:30.50"

    @pytest.mark.parametrize("raw", ["1:75", "1:60", "1:60:00", "1:30:60", "2:59:60.5"])
    def test_component_out_of_range(self, road, raw):
        with pytest.raises(OutOfRangeComponentError):
            parse(raw, road)

    @pytest.mark.parametrize("raw", [
        "1:2:3:4",   # too many separators
        "abc",
        "1:",        # empty component
        ":30",
        "1.5:30",    # fraction only allowed in the last component
        "1:30.5.2",
        "1:-30",     # sign only on the leading component
        "9,58",
    ])
    def test_malformed(self, road, raw):
        with pytest.raises(MalformedFormatError):
            parse(raw, road)


# =============================================================================
# Test Field and Combined Marks
# =============================================================================

class TestParseMark:
    """Tests for single-number marks."""

    def test_distance(self, jump):
        perf = parse("8.95", jump)
        assert perf.value == pytest.approx(8.95)
        assert perf.unit == PerformanceUnit.METERS

    def test_points_total(self, decathlon):
        perf = parse("8126", decathlon)
        assert perf.value == 8126.0
        assert perf.unit == PerformanceUnit.POINTS
        assert perf.precision == 0

    @pytest.mark.parametrize("raw", ["8:95", "8.95m", "eight"])
    def test_malformed(self, jump, raw):
        with pytest.raises(MalformedFormatError):
            parse(raw, jump)


# =============================================================================
# Test Rejections
# =============================================================================

class TestRejections:
    """Tests for empty and non-positive input."""

    @pytest.mark.parametrize("raw", ["", "   ", "\t"])
    def test_empty(self, sprint, raw):
        with pytest.raises(EmptyInputError):
            parse(raw, sprint)

    def test_none_is_empty(self, sprint):
        with pytest.raises(EmptyInputError):
            parse(None, sprint)

    @pytest.mark.parametrize("raw", ["-5.0", "0", "0.00", "-1:30"])
    def test_non_positive_time(self, road, raw):
        with pytest.raises(NonPositiveValueError):
            parse(raw, road)

    def test_non_positive_mark(self, jump):
        with pytest.raises(NonPositiveValueError):
            parse("-8.95", jump)

    def test_too_large_for_a_float(self, jump):
        with pytest.raises(OutOfScaleError):
            parse("9" * 400, jump)

    def test_large_but_representable(self, sprint):
        """1e200 parses; scoring decides what to do with it."""
        assert parse("1" + "0" * 200, sprint).value == pytest.approx(1e200)

    def test_errors_carry_codes(self, sprint):
        with pytest.raises(EmptyInputError) as exc_info:
            parse("", sprint)
        assert exc_info.value.code == "empty_input"
        assert isinstance(exc_info.value, ValueError)


class TestParseInput:
    """Tests for parse_input wrapper."""

    def test_same_as_parse(self, sprint):
        assert parse_input(PerformanceInput(raw="10.50", event=sprint)) == parse("10.50", sprint)
