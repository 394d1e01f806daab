"""
Numeric helpers shared by the color core.

Small scalar utilities for interpolation, clamping, angle arithmetic and 3x3
matrix products. Rounding is half away from zero throughout,
not Python's banker's rounding.
"""

import math
from typing import Sequence, List


def signum(num: float) -> int:
    """Return -1, 0 or 1 according to the sign of num."""
    if num < 0:
        return -1
    elif num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """
    Linear interpolation between start and stop.

    Args:
        start: Value returned when amount is 0.0
        stop: Value returned when amount is 1.0
        amount: Interpolation factor, not clamped

    Returns:
        Interpolated value
    """
    return (1.0 - amount) * start + amount * stop


def clamp_int(lower: int, upper: int, value: int) -> int:
    """Clamp an integer to the inclusive range [lower, upper]."""
    if value < lower:
        return lower
    elif value > upper:
        return upper
    return value


def clamp_double(lower: float, upper: float, value: float) -> float:
    """Clamp a float to the inclusive range [lower, upper]."""
    if value < lower:
        return lower
    elif value > upper:
        return upper
    return value


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Args:
        value: Finite float

    Returns:
        Rounded integer (2.5 -> 3, -2.5 -> -3)
    """
    magnitude = abs(value)
    floored = math.floor(magnitude)
    if magnitude - floored >= 0.5:
        floored += 1
    return int(floored) if value >= 0 else -int(floored)


def sanitize_degrees_int(degrees: int) -> int:
    """Wrap an integer angle into [0, 360)."""
    degrees = degrees % 360
    if degrees < 0:
        degrees += 360
    return degrees


def sanitize_degrees_double(degrees: float) -> float:
    """
    Wrap an angle in degrees into [0, 360).

    Uses fmod semantics (sign of the dividend) followed by a single shift, so
    negative inputs wrap the same way as in C.
    """
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
        # A tiny negative angle shifts up to exactly 360.0 in floating point.
        if degrees >= 360.0:
            degrees = 0.0
    return degrees


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """
    Sign of the direction to travel along the shortest arc.

    Returns:
        1.0 when going from from_degrees to to_degrees is shortest
        counter-clockwise (increasing), -1.0 otherwise
    """
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance of two points on a circle, in degrees, in [0, 180]."""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(row: Sequence[float], matrix: Sequence[Sequence[float]]) -> List[float]:
    """Multiply a 3x3 matrix by a column vector (given as a row)."""
    a = row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2]
    b = row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2]
    c = row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2]
    return [a, b, c]
