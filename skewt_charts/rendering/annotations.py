"""
Annotation module for SkewT chart text and legend.

This module provides the title, axis labels and the two-entry legend of the
diagram as draw commands. Positions are in plot space; the title sits in the
top margin above the plot.
"""

import logging
from typing import List

from ..calculations.conversions import normalize_string
from ..calculations.scales import CoordinateFrame
from ..constants import LABEL_FONT_SIZE, LEGEND_OFFSET, TITLE_FONT_SIZE
from .commands import RectCommand, TextCommand

logger = logging.getLogger("skewt_charts.rendering.annotations")

LEGEND_SWATCH_WIDTH = 10
LEGEND_SWATCH_HEIGHT = 15
LEGEND_ENTRY_SPACING = 120


def format_title(site_name: str, source_name: str) -> str:
    """
    Title text of the chart.

    Example:
        >>> format_title("Payerne", "  Radiosonde ")
        'Site: Payerne / Data source: Radiosonde'
    """
    return f"Site: {site_name} / Data source: {normalize_string(source_name)}"


def add_title_annotation(
    frame: CoordinateFrame,
    site_name: str,
    source_name: str,
    margin_top: float
) -> TextCommand:
    """Title centred over the plot, inside the top margin."""
    return TextCommand(
        x=frame.width / 2,
        y=-margin_top / 2,
        text=format_title(site_name, source_name),
        style="title",
        anchor="middle",
        font_size=TITLE_FONT_SIZE,
    )


def add_axis_labels(frame: CoordinateFrame) -> List[TextCommand]:
    """Temperature label under the plot and rotated pressure label on the left."""
    return [
        TextCommand(
            x=frame.width / 2,
            y=frame.height + 30,
            text="Temperature (°C)",
            style="x-axis-label",
            anchor="middle",
            font_size=LABEL_FONT_SIZE,
        ),
        TextCommand(
            x=-40.0,
            y=frame.height / 2,
            text="Pressure Level (hPa)",
            style="y-axis-label",
            anchor="middle",
            rotation=-90.0,
            font_size=LABEL_FONT_SIZE,
        ),
    ]


def add_legend(frame: CoordinateFrame) -> List:
    """
    Legend entries for air temperature and dew point.

    The legend origin is at (w / 3, h + 40) in plot space.
    """
    x0 = frame.width / 3
    y0 = frame.height + LEGEND_OFFSET
    entries = [
        ("legend temp", "Air Temperature"),
        ("legend dwpt", "Dew Point Temperature"),
    ]

    commands: List = []
    for i, (style, label) in enumerate(entries):
        x = x0 + i * LEGEND_ENTRY_SPACING
        commands.append(RectCommand(x, y0, LEGEND_SWATCH_WIDTH, LEGEND_SWATCH_HEIGHT, style))
        commands.append(TextCommand(
            x=x + LEGEND_SWATCH_WIDTH + 5,
            y=y0 + 10,
            text=label,
            style="legend",
            anchor="start",
            font_size=LABEL_FONT_SIZE,
        ))
    return commands


def annotate_chart(
    frame: CoordinateFrame,
    site_name: str,
    source_name: str,
    margin_top: float
) -> List:
    """
    All annotations of the chart.

    Returns:
        Title, axis labels and legend commands
    """
    logger.debug(f"Annotating chart for site '{site_name}'")
    return [
        add_title_annotation(frame, site_name, source_name, margin_top),
        *add_axis_labels(frame),
        *add_legend(frame),
    ]
