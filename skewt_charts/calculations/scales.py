"""
Scale engine for the SkewT-logP coordinate frame.

This module maps physical space (temperature, pressure) to screen space. The
temperature axis is linear, the pressure axis is logarithmic with smaller
pressures closer to the top (y=0), and the temperature axis is skewed so that
isotherms lean to the right with height. Every curve family computes its
screen x with :meth:`CoordinateFrame.skew_x` so curves stay consistent.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import (
    DEFAULT_BASE_PRESSURE,
    DEFAULT_TEMP_RANGE,
    DEFAULT_TOP_PRESSURE,
    MIN_TOP_PRESSURE,
    SKEW_ANGLE,
    TOP_PRESSURE_MARGIN,
)
from ..exceptions import InvalidParameterError

logger = logging.getLogger("skewt_charts.calculations.scales")


@dataclass(frozen=True)
class LinearScale:
    """Linear map from ``domain`` onto ``range`` with an exact inverse."""
    
    domain: Tuple[float, float]
    range: Tuple[float, float]
    
    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)
    
    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)


@dataclass(frozen=True)
class LogScale:
    """Logarithmic map from a positive ``domain`` onto ``range``."""
    
    domain: Tuple[float, float]
    range: Tuple[float, float]
    
    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        t = (math.log(value) - math.log(d0)) / (math.log(d1) - math.log(d0))
        return r0 + t * (r1 - r0)
    
    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        t = (pixel - r0) / (r1 - r0)
        return math.exp(math.log(d0) + t * (math.log(d1) - math.log(d0)))


def compute_top_pressure(min_pressure: Optional[float]) -> float:
    """
    Top of the displayed pressure range.
    
    Args:
        min_pressure: Smallest sounding pressure in hPa, or None without data
        
    Returns:
        ``max(50, min_pressure - 10)``, or the 100 hPa default without data
    """
    if min_pressure is None:
        return float(DEFAULT_TOP_PRESSURE)
    return float(max(MIN_TOP_PRESSURE, min_pressure - TOP_PRESSURE_MARGIN))


@dataclass(frozen=True)
class CoordinateFrame:
    """
    Per-render coordinate state of the diagram.
    
    Built once per render pass by :meth:`build` and discarded afterwards.
    
    Attributes:
        width: Plot width in pixels
        height: Plot height in pixels
        x: Temperature (°C) to pixel scale
        y: Pressure (hPa) to pixel scale, top pressure at y=0
        base_pressure: Pressure at the bottom edge
        top_pressure: Pressure at the top edge
        skew_angle: Skew angle in degrees
        tan: Precomputed tangent of the skew angle
    """
    
    width: float
    height: float
    x: LinearScale
    y: LogScale
    base_pressure: float
    top_pressure: float
    skew_angle: float
    tan: float
    
    @classmethod
    def build(
        cls,
        width: float,
        height: float,
        top_pressure: float,
        base_pressure: float = DEFAULT_BASE_PRESSURE,
        temp_range: Tuple[float, float] = DEFAULT_TEMP_RANGE,
        skew_angle: float = SKEW_ANGLE
    ) -> "CoordinateFrame":
        """
        Build and validate a coordinate frame.
        
        Args:
            width: Plot width in pixels
            height: Plot height in pixels
            top_pressure: Smallest displayed pressure in hPa
            base_pressure: Largest displayed pressure in hPa
            temp_range: Temperature domain (min, max) in °C
            skew_angle: Skew angle in degrees
            
        Returns:
            CoordinateFrame instance
            
        Raises:
            InvalidParameterError: If any dimension, domain or the skew angle
                would produce undefined geometry
        """
        if not (width > 0 and height > 0):
            raise InvalidParameterError(f"Plot dimensions must be positive, got {width}x{height}")
        
        t_min, t_max = temp_range
        if not t_max > t_min:
            raise InvalidParameterError(f"Temperature domain must have positive span, got {temp_range}")
        
        if not (top_pressure > 0 and base_pressure > 0):
            raise InvalidParameterError(
                f"Pressures must be positive, got top={top_pressure} base={base_pressure}"
            )
        if not top_pressure < base_pressure:
            raise InvalidParameterError(
                f"Top pressure {top_pressure} hPa must be below base pressure {base_pressure} hPa"
            )
        
        if math.isclose(math.fmod(skew_angle, 180.0), 0.0, abs_tol=1e-9):
            raise InvalidParameterError(f"Skew angle {skew_angle} has no usable tangent")
        
        tan = math.tan(math.radians(skew_angle))
        
        frame = cls(
            width=float(width),
            height=float(height),
            x=LinearScale((float(t_min), float(t_max)), (0.0, float(width))),
            y=LogScale((float(top_pressure), float(base_pressure)), (0.0, float(height))),
            base_pressure=float(base_pressure),
            top_pressure=float(top_pressure),
            skew_angle=float(skew_angle),
            tan=tan,
        )
        logger.debug(
            f"Coordinate frame: {width}x{height} px, "
            f"p=[{top_pressure}, {base_pressure}] hPa, T={temp_range} °C, skew={skew_angle}°"
        )
        return frame
    
    def y_from_pressure(self, pressure: float) -> float:
        return self.y(pressure)
    
    def pressure_from_y(self, pixel_y: float) -> float:
        return self.y.invert(pixel_y)
    
    def skew_x(self, temperature: float, pressure: float) -> float:
        """Screen x of a temperature at a pressure level (the skew formula)."""
        return self.x(temperature) + (self.y(self.base_pressure) - self.y(pressure)) / self.tan
    
    def point(self, temperature: float, pressure: float) -> Tuple[float, float]:
        """Screen (x, y) of a (temperature, pressure) pair."""
        return self.skew_x(temperature, pressure), self.y(pressure)
