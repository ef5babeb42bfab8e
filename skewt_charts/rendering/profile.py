"""
Temperature and dew-point profile lines.

A sample contributes a point to a curve only while the curve's value is
defined (a real number above the -1000 sentinel). A run of undefined samples
ends the current segment, so one profile may be drawn as several disjoint
segments; gaps are never bridged.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from ..calculations.scales import CoordinateFrame
from ..constants import (
    PRIMARY_PROFILE_LIMIT,
    PROFILE_STROKE_WIDTHS,
    SECONDARY_PROFILE_LIMIT,
)
from ..data.sounding import SoundingProfile, SoundingSample, is_defined
from .commands import PathCommand, Point, freeze_segments

logger = logging.getLogger("skewt_charts.rendering.profile")


@dataclass(frozen=True)
class ProfileStyle:
    """Curve class and stroke width of the n-th profile in a multi-profile plot."""

    kind: str
    linewidth: float


def profile_style(index: int) -> ProfileStyle:
    """
    Style tier for the profile at ``index``.

    The first ten profiles are primary lines; the rest are "mean" lines in
    two thinner tiers.
    """
    if index < PRIMARY_PROFILE_LIMIT:
        return ProfileStyle("skline", PROFILE_STROKE_WIDTHS[0])
    if index < SECONDARY_PROFILE_LIMIT:
        return ProfileStyle("mean", PROFILE_STROKE_WIDTHS[1])
    return ProfileStyle("mean", PROFILE_STROKE_WIDTHS[2])


def build_segments(
    samples: Sequence[SoundingSample],
    frame: CoordinateFrame,
    value: Callable[[SoundingSample], Optional[float]]
) -> List[List[Point]]:
    """
    Split a profile into drawable segments for one variable.

    Args:
        samples: Sounding samples in profile order
        frame: Coordinate frame of the render pass
        value: Accessor returning the plotted temperature of a sample

    Returns:
        List of point lists; consecutive defined samples share a segment
    """
    segments: List[List[Point]] = []
    current: List[Point] = []
    for sample in samples:
        v = value(sample)
        if is_defined(v):
            current.append(frame.point(v, sample.pressure))
        elif current:
            segments.append(current)
            current = []
    if current:
        segments.append(current)
    return segments


def build_profile_lines(
    profile: SoundingProfile,
    frame: CoordinateFrame,
    index: int = 0
) -> Tuple[PathCommand, PathCommand]:
    """
    Temperature and dew-point paths of one profile.

    Args:
        profile: Sounding profile
        frame: Coordinate frame of the render pass
        index: Position of the profile when several are drawn together

    Returns:
        Tuple of (temperature path, dew-point path)
    """
    style = profile_style(index)
    temp_segments = build_segments(profile.samples, frame, lambda s: s.temperature)
    dwpt_segments = build_segments(profile.samples, frame, lambda s: s.dew_point)

    logger.debug(
        f"Profile {index}: temperature {len(temp_segments)} segment(s), "
        f"dew point {len(dwpt_segments)} segment(s)"
    )

    temperature = PathCommand(
        segments=freeze_segments(temp_segments),
        style=f"temp {style.kind}",
        clip=True,
        linewidth=style.linewidth,
    )
    dew_point = PathCommand(
        segments=freeze_segments(dwpt_segments),
        style=f"dwpt {style.kind}",
        clip=True,
        linewidth=style.linewidth,
    )
    return temperature, dew_point


def build_all_profile_lines(
    profiles: Sequence[SoundingProfile],
    frame: CoordinateFrame
) -> List[PathCommand]:
    """Paths for every profile: all temperature lines, then all dew-point lines."""
    temperatures = []
    dew_points = []
    for i, profile in enumerate(profiles):
        temperature, dew_point = build_profile_lines(profile, frame, index=i)
        temperatures.append(temperature)
        dew_points.append(dew_point)
    return temperatures + dew_points
