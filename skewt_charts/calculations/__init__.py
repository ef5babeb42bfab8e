"""
Coordinate and numeric calculations for SkewTCharts.

This module provides the scale engine that maps (temperature, pressure) onto
skewed screen space, the thermodynamic relation behind the dry adiabats, wind
speed unit conversions, and the nearest-sample lookup used by the probe.

Main Functions:
    From scales module:
        - CoordinateFrame: Linear temperature scale, log pressure scale, skew
        - compute_top_pressure: Top of the displayed pressure range
    
    From conversions module:
        - convert_wind_speed: m/s to "kt", "kmh" or pass-through
        - wind_speed_bucket: m/s to a 5-knot barb bucket
    
    From thermo module:
        - dry_adiabat_temperature: Poisson's equation
    
    From lookup module:
        - find_nearest_sample: Bisect a profile by pressure

Example:
    >>> from skewt_charts.calculations import CoordinateFrame
    >>> frame = CoordinateFrame.build(680, 520, top_pressure=690)
    >>> round(frame.pressure_from_y(frame.y_from_pressure(850)), 6)
    850.0
"""

from .scales import (
    LinearScale,
    LogScale,
    CoordinateFrame,
    compute_top_pressure
)
from .conversions import (
    convert_wind_speed,
    wind_speed_bucket,
    round_half_up,
    round_to_tenth,
    normalize_string
)
from .thermo import dry_adiabat_temperature
from .lookup import find_nearest_sample

__all__ = [
    "LinearScale",
    "LogScale",
    "CoordinateFrame",
    "compute_top_pressure",
    "convert_wind_speed",
    "wind_speed_bucket",
    "round_half_up",
    "round_to_tenth",
    "normalize_string",
    "dry_adiabat_temperature",
    "find_nearest_sample",
]
