"""
Points formulas of the scoring tables.

The coefficient rows are fitted by the table publisher; these functions
only evaluate them. Both forms floor the raw value, never round it.
"""

import math
from typing import Sequence


def quadratic_points(x: float, coefficients: Sequence[float]) -> int:
    """
    Calculate points with the quadratic scoring-table formula.

    Formula: points = floor(a * x^2 + b * x + c)

    Args:
        x: Performance in the event's unit (seconds, meters or points)
        coefficients: (a, b, c) as published, e.g. men's 100m
                      (24.642, -837.714, 7119.313)

    Returns:
        Points as int (not clamped, may be negative)

    Notes:
        - The parabola's vertex sits near 0 points, so each event only
          uses one branch: left of the vertex for times, right of it
          for distances.
    """
    a, b, c = coefficients
    return math.floor(a * x * x + b * x + c)


def power_points(x: float, coefficients: Sequence[float]) -> int:
    """
    Calculate points with the power-law formula.

    Formula: points = floor(a - b * x^c)

    Args:
        x: Performance in the event's unit, must be positive
        coefficients: (a, b, c)

    Returns:
        Points as int (not clamped)
    """
    a, b, c = coefficients
    return math.floor(a - b * x ** c)


def quadratic_slope(x: float, coefficients: Sequence[float]) -> float:
    """Points gained per unit of performance at x: 2ax + b."""
    a, b, _ = coefficients
    return 2 * a * x + b


def power_slope(x: float, coefficients: Sequence[float]) -> float:
    """Points gained per unit of performance at x: -b * c * x^(c-1)."""
    _, b, c = coefficients
    return -b * c * x ** (c - 1)
