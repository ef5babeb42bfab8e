"""
Interactive probe for the SkewT diagram.

The probe engine turns pointer positions over the plot into readouts of the
nearest sounding sample. It is independent of any input-event API: the host
adapter converts raw events to plot-space pixel coordinates and calls
:meth:`ProbeEngine.pointer_enter`, :meth:`ProbeEngine.pointer_move` and
:meth:`ProbeEngine.pointer_leave`.

Each readout channel (temperature, dew point, height, wind speed) is gated
on its own; a missing reading hides that channel only.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..calculations.conversions import convert_wind_speed, round_half_up, round_to_tenth
from ..calculations.lookup import find_nearest_sample
from ..calculations.scales import CoordinateFrame
from ..constants import DEFAULT_WIND_SPEED_UNIT, WIND_READOUT_OFFSET
from ..data.sounding import SoundingProfile, SoundingSample

logger = logging.getLogger("skewt_charts.rendering.probe")


class ProbeState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


@dataclass(frozen=True)
class ChannelReadout:
    """Position, raw value and label of one readout channel."""

    x: float
    y: float
    value: float
    text: str


@dataclass(frozen=True)
class ProbeReadout:
    """
    Readouts for the sample nearest to the pointer.

    Attributes:
        sample: Selected sounding sample
        pointer_pressure: Pressure under the pointer in hPa
        temperature: Temperature marker and label, or None
        dew_point: Dew-point marker and label, or None
        height: Height label, or None
        wind_speed: Wind speed label in the display unit, or None
    """

    sample: SoundingSample
    pointer_pressure: float
    temperature: Optional[ChannelReadout]
    dew_point: Optional[ChannelReadout]
    height: Optional[ChannelReadout]
    wind_speed: Optional[ChannelReadout]


def build_readout(
    sample: SoundingSample,
    frame: CoordinateFrame,
    speed_unit: str = DEFAULT_WIND_SPEED_UNIT,
    pointer_pressure: Optional[float] = None
) -> ProbeReadout:
    """
    Format the readout channels of a sample.

    Temperatures are rounded to whole degrees, the wind speed is converted to
    ``speed_unit`` and rounded to one decimal.
    """
    y = frame.y(sample.pressure)

    temperature = None
    if sample.has_temperature:
        temperature = ChannelReadout(
            x=frame.skew_x(sample.temperature, sample.pressure),
            y=y,
            value=sample.temperature,
            text=f"{round_half_up(sample.temperature)}°C",
        )

    dew_point = None
    if sample.has_dew_point:
        dew_point = ChannelReadout(
            x=frame.skew_x(sample.dew_point, sample.pressure),
            y=y,
            value=sample.dew_point,
            text=f"{round_half_up(sample.dew_point)}°C",
        )

    height = None
    if sample.has_height:
        height = ChannelReadout(
            x=0.0,
            y=y,
            value=sample.height,
            text=f"-- {round_half_up(sample.height)} m",
        )

    wind_speed = None
    if sample.has_wind_speed:
        speed = round_to_tenth(convert_wind_speed(sample.wind_speed, speed_unit))
        wind_speed = ChannelReadout(
            x=frame.width - WIND_READOUT_OFFSET,
            y=y,
            value=speed,
            text=f"{speed:g} {speed_unit}",
        )

    return ProbeReadout(
        sample=sample,
        pointer_pressure=sample.pressure if pointer_pressure is None else pointer_pressure,
        temperature=temperature,
        dew_point=dew_point,
        height=height,
        wind_speed=wind_speed,
    )


class ProbeEngine:
    """
    Two-state pointer probe: ``idle`` and ``active``.

    Transitions:
        idle -> active on pointer_enter (or a pointer_move)
        active -> active on pointer_move (readout recomputed)
        active -> idle on pointer_leave

    Only the result of the most recent move is kept.

    Example:
        >>> engine = ProbeEngine(profile, frame, speed_unit="kt")
        >>> engine.pointer_enter()
        >>> readout = engine.pointer_move(frame.y(780))
        >>> readout.sample.pressure
        850.0
    """

    def __init__(
        self,
        profile: SoundingProfile,
        frame: CoordinateFrame,
        speed_unit: str = DEFAULT_WIND_SPEED_UNIT
    ):
        self.profile = profile
        self.frame = frame
        self.speed_unit = speed_unit
        self.state = ProbeState.IDLE
        self.readout: Optional[ProbeReadout] = None

    @property
    def is_active(self) -> bool:
        return self.state is ProbeState.ACTIVE

    def pointer_enter(self) -> None:
        self.state = ProbeState.ACTIVE
        logger.debug("Probe active")

    def pointer_move(self, pixel_y: float) -> Optional[ProbeReadout]:
        """
        Recompute the readout for a pointer at plot-space ``pixel_y``.

        Returns:
            ProbeReadout of the nearest sample, or None when the profile has
            fewer than two samples
        """
        if self.state is ProbeState.IDLE:
            self.pointer_enter()

        pressure = self.frame.pressure_from_y(pixel_y)
        sample = find_nearest_sample(self.profile, pressure)
        if sample is None:
            self.readout = None
            return None

        self.readout = build_readout(sample, self.frame, self.speed_unit, pointer_pressure=pressure)
        return self.readout

    def pointer_leave(self) -> None:
        self.state = ProbeState.IDLE
        self.readout = None
        logger.debug("Probe idle")
