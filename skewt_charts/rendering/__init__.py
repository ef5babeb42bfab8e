"""
Rendering subsystem for SkewTCharts.

This module turns sounding profiles into skewed screen-space geometry and
paints it. Geometry generation is pure and produces draw commands; painting
is delegated to a matplotlib adapter.

Main Classes:
    SkewTChart: Orchestrates the render pass, painting, probe and export
    ProbeEngine: Pointer-driven nearest-sample readouts
    Scene: Draw commands of one render pass

Key Features:
    - Skewed isotherms, isobars and dry adiabats
    - Temperature/dew-point lines split at missing readings
    - Cached wind barb glyphs per 5-knot bucket
    - Hover readouts decoupled from any event API

Coordinate System:
    - Plot space: origin at the top-left of the plot area, y downward
    - Pressure on a log axis, temperature on a linear axis skewed to the right

Example:
    >>> from skewt_charts.rendering import SkewTChart
    >>> from skewt_charts import Config
    >>> 
    >>> chart = SkewTChart(config=Config())
    >>> fig, ax = chart.render_chart(records, "Payerne", "Radiosonde")
    >>> fig.savefig("skewt.png")
"""

from .commands import (
    LineCommand,
    PathCommand,
    RectCommand,
    TextCommand,
    GlyphElement,
    WindBarbGlyph,
    GlyphPlacement,
    Scene
)
from .background import (
    generate_isotherms,
    generate_isobars,
    generate_dry_adiabats,
    generate_axes,
    generate_background
)
from .profile import build_profile_lines, build_segments, profile_style
from .windbarbs import (
    build_glyph,
    build_glyph_set,
    decompose_speed,
    place_wind_barbs
)
from .annotations import annotate_chart, format_title
from .probe import ProbeEngine, ProbeReadout, ProbeState, build_readout
from .painter import paint_scene, paint_readout, connect_probe
from .chart import SkewTChart, compute_scene

__all__ = [
    "LineCommand",
    "PathCommand",
    "RectCommand",
    "TextCommand",
    "GlyphElement",
    "WindBarbGlyph",
    "GlyphPlacement",
    "Scene",
    "generate_isotherms",
    "generate_isobars",
    "generate_dry_adiabats",
    "generate_axes",
    "generate_background",
    "build_profile_lines",
    "build_segments",
    "profile_style",
    "build_glyph",
    "build_glyph_set",
    "decompose_speed",
    "place_wind_barbs",
    "annotate_chart",
    "format_title",
    "ProbeEngine",
    "ProbeReadout",
    "ProbeState",
    "build_readout",
    "paint_scene",
    "paint_readout",
    "connect_probe",
    "SkewTChart",
    "compute_scene",
]
