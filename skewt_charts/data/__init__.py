"""
Sounding data model for SkewTCharts.

This module provides the immutable sample/profile types consumed by the
diagram, the definedness rules for optional readings, and loading of
sounding records from JSON or YAML files.

Main Classes:
    SoundingSample: One atmospheric observation at a pressure level
    SoundingProfile: Ordered, immutable sequence of samples

Example:
    >>> from skewt_charts.data import SoundingProfile
    >>> profile = SoundingProfile.from_records([
    ...     {"press": 1000, "temp": 25, "dwpt": 20, "wdir": 160, "wspd": 5},
    ...     {"press": 850, "temp": 14, "dwpt": 8, "wdir": 220, "wspd": 12},
    ... ])
    >>> profile.min_pressure()
    850.0
"""

from .sounding import (
    SoundingSample,
    SoundingProfile,
    LoadedSounding,
    is_defined,
    has_wind,
    load_sounding,
)

__all__ = [
    "SoundingSample",
    "SoundingProfile",
    "LoadedSounding",
    "is_defined",
    "has_wind",
    "load_sounding",
]
