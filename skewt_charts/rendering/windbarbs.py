"""
Wind barb glyph synthesis and placement.

A glyph is built once per 5-knot speed bucket (5 to 100 kt) and shared by
every placement in a render pass. Glyphs are drawn in local coordinates with
the stem running from the origin down the +y axis; the speed marks start at
the stem tip and walk back toward the origin.

Placement puts the glyph origin on the right edge of the plot at the
sample's pressure and rotates it by ``wind_direction + 180`` degrees so the
barb points into the wind.
"""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..calculations.conversions import wind_speed_bucket
from ..calculations.scales import CoordinateFrame
from ..constants import (
    BARB_SPEEDS,
    BARB_SPEED_STEP,
    DEFAULT_BARB_SIZE,
    FLAG_HEIGHT,
    FLAG_SPACING,
    FLAG_SPEED,
    FLAG_WIDTH,
    HALF_PENNANT_LENGTH,
    HALF_PENNANT_RISE,
    HALF_PENNANT_SPEED,
    PENNANT_LENGTH,
    PENNANT_RISE,
    PENNANT_SPACING,
    PENNANT_SPEED,
)
from ..data.sounding import SoundingProfile
from ..exceptions import InvalidParameterError
from .commands import GlyphElement, GlyphPlacement, WindBarbGlyph

logger = logging.getLogger("skewt_charts.rendering.windbarbs")


def decompose_speed(speed: int):
    """
    Split a bucketed speed into (flags, pennants, half_pennants).

    Example:
        >>> decompose_speed(65)
        (1, 1, 1)
    """
    flags = speed // FLAG_SPEED
    pennants = (speed - flags * FLAG_SPEED) // PENNANT_SPEED
    half_pennants = (speed - flags * FLAG_SPEED - pennants * PENNANT_SPEED) // HALF_PENNANT_SPEED
    return flags, pennants, half_pennants


def build_glyph(speed: int, barb_size: float = DEFAULT_BARB_SIZE) -> WindBarbGlyph:
    """
    Build the barb geometry for one speed bucket.

    Args:
        speed: Bucket speed in knots, a positive multiple of 5
        barb_size: Stem length in pixels

    Returns:
        WindBarbGlyph with the stem followed by flags, pennants and half-pennants

    Raises:
        InvalidParameterError: If ``speed`` is not a positive multiple of 5
    """
    if speed <= 0 or speed % BARB_SPEED_STEP != 0:
        raise InvalidParameterError(f"Barb speed must be a positive multiple of {BARB_SPEED_STEP}, got {speed}")

    flags, pennants, half_pennants = decompose_speed(speed)
    elements = [GlyphElement("stem", ((0.0, 0.0), (0.0, float(barb_size))))]

    px = float(barb_size)
    for _ in range(flags):
        elements.append(GlyphElement(
            "flag",
            ((0.0, px), (-FLAG_WIDTH, px), (0.0, px - FLAG_HEIGHT)),
        ))
        px -= FLAG_SPACING

    for _ in range(pennants):
        elements.append(GlyphElement(
            "pennant",
            ((0.0, px), (-PENNANT_LENGTH, px + PENNANT_RISE)),
        ))
        px -= PENNANT_SPACING

    for _ in range(half_pennants):
        elements.append(GlyphElement(
            "half_pennant",
            ((0.0, px), (-HALF_PENNANT_LENGTH, px + HALF_PENNANT_RISE)),
        ))
        px -= PENNANT_SPACING

    return WindBarbGlyph(
        speed=speed,
        flags=flags,
        pennants=pennants,
        half_pennants=half_pennants,
        elements=tuple(elements),
    )


@lru_cache(maxsize=8)
def build_glyph_set(barb_size: float = DEFAULT_BARB_SIZE) -> Mapping[int, WindBarbGlyph]:
    """
    Read-only glyph set for every bucket from 5 to 100 kt.

    Memoized by ``barb_size``; repeated render passes share the same set.
    """
    logger.debug(f"Building wind barb glyph set (barb_size={barb_size})")
    return MappingProxyType({speed: build_glyph(speed, barb_size) for speed in BARB_SPEEDS})


def select_bucket(wind_speed: float) -> Optional[int]:
    """
    Glyph bucket for a wind speed in m/s.

    Calm winds (0 kt bucket) get no barb; buckets above the largest glyph use
    the largest glyph.
    """
    bucket = wind_speed_bucket(wind_speed)
    if bucket < BARB_SPEEDS[0]:
        return None
    return min(bucket, BARB_SPEEDS[-1])


def place_wind_barbs(
    profile: SoundingProfile,
    frame: CoordinateFrame
) -> List[GlyphPlacement]:
    """
    Barb placements for every sample with a displayable wind.

    Args:
        profile: Sounding profile
        frame: Coordinate frame of the render pass

    Returns:
        List of GlyphPlacement at (plot width, y(pressure)), rotated by
        ``(wind_direction + 180) % 360`` degrees
    """
    placements = []
    calm = 0
    for sample in profile.wind_samples(frame.top_pressure):
        bucket = select_bucket(sample.wind_speed)
        if bucket is None:
            calm += 1
            continue
        placements.append(GlyphPlacement(
            bucket=bucket,
            x=frame.width,
            y=frame.y(sample.pressure),
            rotation=(sample.wind_direction + 180) % 360,
            pressure=sample.pressure,
        ))

    logger.debug(f"Placed {len(placements)} wind barbs ({calm} calm level(s) skipped)")
    return placements
