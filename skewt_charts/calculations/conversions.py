"""
Unit conversions and small numeric helpers shared by the wind barb and probe code.
"""

import math

from ..constants import BARB_SPEED_STEP, MS_TO_KMH, MS_TO_KNOTS


def convert_wind_speed(ms_value: float, unit: str) -> float:
    """
    Convert a wind speed from m/s to a display unit.
    
    Args:
        ms_value: Wind speed in meters per second
        unit: "kt" for knots, "kmh" for km/h; any other token keeps m/s
        
    Returns:
        Wind speed in the requested unit
        
    Example:
        >>> convert_wind_speed(10, "kmh")
        36.0
    """
    if unit == "kt":
        return ms_value * MS_TO_KNOTS
    if unit == "kmh":
        return ms_value * MS_TO_KMH
    return ms_value


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def wind_speed_bucket(ms_value: float) -> int:
    """
    Discretize a wind speed in m/s into a 5-knot barb bucket.
    
    Example:
        >>> wind_speed_bucket(12)
        25
    """
    knots = convert_wind_speed(ms_value, "kt")
    return round_half_up(knots / BARB_SPEED_STEP) * BARB_SPEED_STEP


def normalize_string(value: str) -> str:
    """Trim surrounding whitespace; None or empty input yields an empty string."""
    if not value:
        return ""
    return value.strip()
