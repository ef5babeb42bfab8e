"""
Nearest-sample lookup by pressure.
"""

import logging
from bisect import bisect_left
from typing import Optional

from ..data.sounding import SoundingProfile, SoundingSample

logger = logging.getLogger("skewt_charts.calculations.lookup")


def find_nearest_sample(profile: SoundingProfile, pressure: float) -> Optional[SoundingSample]:
    """
    Find the sample whose pressure is closest to ``pressure``.
    
    Bisects the profile for the insertion index bounded to [1, n-1] and
    compares the two neighbours; a tie goes to the later sample. Profiles
    ordered by decreasing pressure are searched on negated keys.
    
    Args:
        profile: Sounding with monotonic pressures
        pressure: Probe pressure in hPa
        
    Returns:
        Closest sample, or None when the profile has fewer than 2 samples
        
    Example:
        >>> profile = SoundingProfile.from_records(
        ...     [{"press": p} for p in (1000, 850, 700, 500)])
        >>> find_nearest_sample(profile, 780).pressure
        850.0
    """
    n = len(profile)
    if n < 2:
        return None
    
    if profile.is_descending():
        keys = [-p for p in profile.pressures()]
        target = -pressure
    else:
        keys = profile.pressures()
        target = pressure
    
    i = bisect_left(keys, target, 1, n - 1)
    d0 = profile[i - 1]
    d1 = profile[i]
    
    if abs(pressure - d0.pressure) < abs(pressure - d1.pressure):
        return d0
    return d1
