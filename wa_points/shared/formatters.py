"""
Formatting utilities for display.

Used by the API responses and the CLI.
"""

from decimal import Decimal, ROUND_HALF_UP


def format_time(seconds: float, precision: int = 2) -> str:
    """Format seconds as a performance time string.

    9.58,    2 → "9.58"
    90.25,   2 → "1:30.25"
    8130.5,  2 → "2:15:30.50"
    840.0,   0 → "14:00"
    """
    if seconds < 0:
        return "—"

    quantum = Decimal(1).scaleb(-precision)
    total = Decimal(repr(seconds)).quantize(quantum, rounding=ROUND_HALF_UP)

    whole, fraction = divmod(total, 1)
    hours, remainder = divmod(int(whole), 3600)
    minutes, secs = divmod(remainder, 60)
    fraction_str = f"{fraction:.{precision}f}"[1:] if precision > 0 else ""

    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}{fraction_str}"
    if minutes:
        return f"{minutes}:{secs:02d}{fraction_str}"
    return f"{secs}{fraction_str}"


def format_distance(meters: float, precision: int = 2) -> str:
    """
    Format a field-event mark.

    Args:
        meters: Distance or height in meters
        precision: Decimal places to show

    Returns:
        Formatted string (e.g., '8.95 m')
    """
    return f"{meters:.{precision}f} m"


def format_points(points: float, precision: int = 0) -> str:
    """Format a combined-event points total (e.g., '8126 pts')."""
    return f"{points:.{precision}f} pts"
