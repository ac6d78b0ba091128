"""
Performance Parser

Turns the text a user typed into a CanonicalPerformance:
- time events: "SS.ss", "MM:SS.ss" or "HH:MM:SS.ss" -> seconds
- field events: "8.95" -> meters
- combined events: "8126" -> points

Range policy is strict: every component after the leading one must be
below 60 ("1:75" is rejected, "75:00" is 4500 s). Components are summed
as Decimals so "1:30.25" is exactly 90.25.
"""

import math
import re
from decimal import Decimal
from typing import List, Tuple

from wa_points.features.events.models import Event
from wa_points.shared.errors import (
    EmptyInputError,
    MalformedFormatError,
    NonPositiveValueError,
    OutOfRangeComponentError,
    OutOfScaleError,
)

from .models import CanonicalPerformance, PerformanceInput

MAX_TIME_COMPONENTS = 3  # hours, minutes, seconds
COMPONENT_LIMIT = Decimal(60)

_SIGNED_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
_SIGNED_INTEGER = re.compile(r"^[+-]?\d+$")
_NUMBER = re.compile(r"^(\d+(\.\d*)?|\.\d+)$")
_INTEGER = re.compile(r"^\d+$")

_MULTIPLIERS = {
    1: (1,),
    2: (60, 1),
    3: (3600, 60, 1),
}

TIME_FORMAT_HINT = "Use formats like 10.50, 1:30.25 or 2:15:30.50"
MARK_FORMAT_HINT = "Enter a single number, e.g. 8.95"


def parse(raw: str, event: Event) -> CanonicalPerformance:
    """
    Parse a raw performance for an event.

    Args:
        raw: Text as entered (surrounding whitespace is ignored)
        event: Event the performance belongs to

    Returns:
        CanonicalPerformance in the event's unit

    Raises:
        EmptyInputError: nothing entered
        MalformedFormatError: wrong separator count or non-numeric part
        OutOfRangeComponentError: minutes/seconds component >= 60
        NonPositiveValueError: result is zero or negative
        OutOfScaleError: too large to represent as a float
    """
    text = (raw or "").strip()
    if not text:
        raise EmptyInputError("Performance is empty")

    if event.is_timed:
        value, precision = _parse_time(text)
    else:
        value, precision = _parse_mark(text)

    if value <= 0:
        raise NonPositiveValueError(f"Performance must be positive: {text}")

    number = float(value)
    if not math.isfinite(number):
        raise OutOfScaleError(f"Performance is too large: {text[:20]}...")

    return CanonicalPerformance(value=number, unit=event.unit, precision=precision)


def parse_input(performance: PerformanceInput) -> CanonicalPerformance:
    """Parse a PerformanceInput (raw text + event)."""
    return parse(performance.raw, performance.event)


def _parse_time(text: str) -> Tuple[Decimal, int]:
    """Parse [[HH:]MM:]SS[.ss] into (seconds, decimal places)."""
    parts = text.split(":")
    if len(parts) > MAX_TIME_COMPONENTS:
        raise MalformedFormatError(f"Invalid time format: {text}. {TIME_FORMAT_HINT}")

    sign = -1 if parts[0].startswith("-") else 1
    components: List[Decimal] = []

    for index, part in enumerate(parts):
        is_first = index == 0
        is_last = index == len(parts) - 1
        if is_first:
            pattern = _SIGNED_NUMBER if is_last else _SIGNED_INTEGER
        else:
            pattern = _NUMBER if is_last else _INTEGER

        if not pattern.match(part):
            raise MalformedFormatError(
                f"Invalid time component '{part}' in {text}. {TIME_FORMAT_HINT}"
            )

        component = abs(Decimal(part))
        if not is_first and component >= COMPONENT_LIMIT:
            raise OutOfRangeComponentError(
                f"Component '{part}' in {text} must be below 60"
            )
        components.append(component)

    total = sum(
        (c * m for c, m in zip(components, _MULTIPLIERS[len(components)])),
        Decimal(0),
    )
    return sign * total, _decimal_places(parts[-1])


def _parse_mark(text: str) -> Tuple[Decimal, int]:
    """Parse a single number (meters or points)."""
    if ":" in text or not _SIGNED_NUMBER.match(text):
        raise MalformedFormatError(f"Invalid mark: {text}. {MARK_FORMAT_HINT}")
    return Decimal(text), _decimal_places(text)


def _decimal_places(token: str) -> int:
    _, dot, fraction = token.partition(".")
    return len(fraction) if dot else 0
