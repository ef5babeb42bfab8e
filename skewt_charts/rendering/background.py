"""
Background geometry for the SkewT-logP diagram.

This module generates the static reference curves: skewed isotherms,
horizontal isobars, dry adiabats, plus the axis lines and tick labels. Each
function is pure and returns draw commands in plot space; the families are
independent of each other and layered by the caller.
"""

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from ..calculations.conversions import round_half_up
from ..calculations.scales import CoordinateFrame
from ..calculations.thermo import dry_adiabat_temperature
from ..constants import (
    DRY_ADIABAT_PRESSURE_STEP,
    DRY_ADIABAT_THETAS,
    ISOTHERM_TEMPERATURES,
    STANDARD_PRESSURE_LINES,
    STANDARD_PRESSURE_TICKS,
    TEMPERATURE_TICK_STEP,
    TICK_FONT_SIZE,
)
from .commands import LineCommand, PathCommand, TextCommand

logger = logging.getLogger("skewt_charts.rendering.background")

TICK_LENGTH = 5


def generate_isotherms(
    frame: CoordinateFrame,
    temperatures: Sequence[float] = ISOTHERM_TEMPERATURES
) -> List[LineCommand]:
    """
    Skewed lines of constant temperature from the top to the base pressure.

    The 0 °C isotherm is tagged ``tempzero`` so it can be emphasized.

    Args:
        frame: Coordinate frame of the render pass
        temperatures: Isotherm values in °C

    Returns:
        List of LineCommand, one per temperature
    """
    top = frame.top_pressure
    base = frame.base_pressure
    lines = []
    for t in temperatures:
        lines.append(LineCommand(
            x1=frame.skew_x(t, top),
            y1=frame.y(top),
            x2=frame.skew_x(t, base),
            y2=frame.y(base),
            style="tempzero" if t == 0 else "gridline",
            clip=True,
            value=float(t),
        ))
    return lines


def generate_isobars(
    frame: CoordinateFrame,
    pressures: Sequence[float] = STANDARD_PRESSURE_LINES
) -> List[LineCommand]:
    """
    Horizontal lines of constant pressure across the full plot width.

    Levels outside the displayed range are still emitted; they fall outside
    the plot rectangle and are removed by clipping.
    """
    return [
        LineCommand(
            x1=0.0,
            y1=frame.y(p),
            x2=frame.width,
            y2=frame.y(p),
            style="gridline",
            clip=True,
            value=float(p),
        )
        for p in pressures
    ]


def dry_adiabat_pressures(frame: CoordinateFrame, step: float = DRY_ADIABAT_PRESSURE_STEP) -> List[float]:
    """Pressure grid for the dry adiabats, from the top pressure down to the base."""
    return np.arange(frame.top_pressure, frame.base_pressure + 1, step).tolist()


def generate_dry_adiabats(
    frame: CoordinateFrame,
    thetas: Sequence[float] = DRY_ADIABAT_THETAS,
    pressures: Optional[Sequence[float]] = None
) -> List[PathCommand]:
    """
    Curves of constant potential temperature.

    For each θ, the temperature at every grid pressure follows Poisson's
    equation and is placed with the skew formula. Non-finite x coordinates
    are clamped to 0 so a bad point never invalidates the curve.

    Args:
        frame: Coordinate frame of the render pass
        thetas: Potential temperatures in °C
        pressures: Pressure grid in hPa (defaults to 10 hPa steps top to base)

    Returns:
        List of PathCommand, one per θ
    """
    if pressures is None:
        pressures = dry_adiabat_pressures(frame)

    curves = []
    clamped = 0
    for theta in thetas:
        points = []
        for p in pressures:
            x = frame.skew_x(dry_adiabat_temperature(theta, p), p)
            if not math.isfinite(x):
                x = 0.0
                clamped += 1
            points.append((x, frame.y(p)))
        curves.append(PathCommand(
            segments=(tuple(points),),
            style="gridline",
            clip=True,
            value=float(theta),
        ))

    if clamped:
        logger.debug(f"Clamped {clamped} non-finite dry adiabat coordinates")

    return curves


def _pressure_label(pressure: float) -> str:
    return f"{round_half_up(pressure)}"


def _in_domain(frame: CoordinateFrame, pressure: float) -> bool:
    return frame.top_pressure <= pressure <= frame.base_pressure


def generate_axes(
    frame: CoordinateFrame,
    pressure_lines: Sequence[float] = STANDARD_PRESSURE_LINES,
    pressure_ticks: Sequence[float] = STANDARD_PRESSURE_TICKS
) -> List:
    """
    Axis lines and tick labels.

    Emits the right edge line, the temperature axis along the bottom with a
    label every 10 °C, the pressure axis on the left with labels at the
    standard pressure lines, and short right-pointing ticks at the standard
    tick levels plus the top pressure.
    """
    w = frame.width
    h = frame.height
    commands: List = [
        LineCommand(w, 0.0, w, h, style="gridline"),
        LineCommand(0.0, h, w, h, style="axis"),
        LineCommand(0.0, 0.0, 0.0, h, style="axis"),
    ]

    t_min, t_max = frame.x.domain
    first_tick = math.ceil(t_min / TEMPERATURE_TICK_STEP) * TEMPERATURE_TICK_STEP
    for t in np.arange(first_tick, t_max + 1e-9, TEMPERATURE_TICK_STEP).tolist():
        commands.append(TextCommand(
            x=frame.x(t),
            y=h + 14,
            text=f"{round_half_up(t)}",
            style="tick label",
            anchor="middle",
            font_size=TICK_FONT_SIZE,
        ))

    for p in pressure_lines:
        if not _in_domain(frame, p):
            continue
        commands.append(TextCommand(
            x=-3.0,
            y=frame.y(p),
            text=_pressure_label(p),
            style="tick label",
            anchor="end",
            font_size=TICK_FONT_SIZE,
        ))

    for p in sorted(set(pressure_ticks) | {frame.top_pressure}, reverse=True):
        if not _in_domain(frame, p):
            continue
        y = frame.y(p)
        commands.append(LineCommand(0.0, y, TICK_LENGTH, y, style="tick", value=float(p)))
        commands.append(TextCommand(
            x=TICK_LENGTH + 3.0,
            y=y,
            text=_pressure_label(p),
            style="tick label",
            anchor="start",
            font_size=TICK_FONT_SIZE,
        ))

    return commands


def generate_background(frame: CoordinateFrame) -> List:
    """
    Complete background: isotherms, isobars, dry adiabats, then axes.

    Example:
        >>> frame = CoordinateFrame.build(680, 520, top_pressure=690)
        >>> len([c for c in generate_background(frame) if c.style == "tempzero"])
        1
    """
    isotherms = generate_isotherms(frame)
    isobars = generate_isobars(frame)
    adiabats = generate_dry_adiabats(frame)
    axes = generate_axes(frame)

    logger.debug(
        f"Background: {len(isotherms)} isotherms, {len(isobars)} isobars, "
        f"{len(adiabats)} dry adiabats"
    )
    return [*isotherms, *isobars, *adiabats, *axes]
