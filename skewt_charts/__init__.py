"""
SkewTCharts - Lightweight Python package for drawing SkewT-logP diagrams.

This package turns atmospheric soundings (temperature, dew point and wind by
pressure level) into SkewT-logP charts with skewed isotherms, isobars, dry
adiabats, temperature/dew-point profile lines, wind barbs, and an interactive
hover probe.

Quick Start:
    >>> from skewt_charts import create_skewt
    >>>
    >>> records = [
    ...     {"press": 1000, "hght": 110, "temp": 25, "dwpt": 20, "wdir": 160, "wspd": 5},
    ...     {"press": 850, "hght": 1500, "temp": 14, "dwpt": 8, "wdir": 220, "wspd": 12},
    ...     {"press": 700, "hght": 3100, "temp": 2, "dwpt": -5, "wdir": 250, "wspd": 25},
    ... ]
    >>> create_skewt(records, "Payerne", "Radiosonde", output_path="skewt.png")

    >>> # From a JSON/YAML sounding file
    >>> from skewt_charts import create_skewt_from_file
    >>> create_skewt_from_file("sounding.json", output_path="skewt.png")

Advanced Usage:
    >>> # Direct access to components
    >>> from skewt_charts import Config, SkewTChart, compute_scene
    >>>
    >>> # Custom configuration
    >>> config = Config(width=900, height=720, speed_unit="kt")
    >>>
    >>> # Geometry only (no painting)
    >>> scene = compute_scene(records, "Payerne", "Radiosonde", config)
    >>> scene.layer_sizes()
    >>>
    >>> # Manual workflow with hover probe
    >>> chart = SkewTChart(config)
    >>> fig, ax = chart.render_chart(records, "Payerne", "Radiosonde", interactive=True)
    >>> chart.export(on_download=lambda svg: open("skewt.svg", "w").write(svg))
"""

__version__ = "0.1.0"

# Initialize logging with default settings
from .logging_config import setup_logging
setup_logging()

# Core constants and configuration
from .constants import STANDARD_PRESSURE_LINES, STANDARD_PRESSURE_TICKS, WIND_SPEED_UNITS
from .config import Config

# Sounding data
from .data import SoundingSample, SoundingProfile, load_sounding

# Calculations
from . import calculations
from .calculations import CoordinateFrame, convert_wind_speed

# Rendering components
from .rendering import ProbeEngine, Scene, SkewTChart

# Export
from .export import export_filename, export_scene, scene_to_svg

# User-facing API
from .api import (
    compute_scene,
    create_skewt,
    create_skewt_from_file,
    export_skewt,
    probe_sounding
)

# Exceptions
from .exceptions import (
    SkewTChartsError,
    SoundingDataError,
    RenderError,
    ExportError,
    InvalidParameterError
)

__all__ = [
    # Version info
    "__version__",

    # Constants and config
    "STANDARD_PRESSURE_LINES",
    "STANDARD_PRESSURE_TICKS",
    "WIND_SPEED_UNITS",
    "Config",

    # Sounding data
    "SoundingSample",
    "SoundingProfile",
    "load_sounding",

    # Core components
    "calculations",
    "CoordinateFrame",
    "convert_wind_speed",
    "ProbeEngine",
    "Scene",
    "SkewTChart",

    # Export
    "export_filename",
    "export_scene",
    "scene_to_svg",

    # User-facing API
    "compute_scene",
    "create_skewt",
    "create_skewt_from_file",
    "export_skewt",
    "probe_sounding",

    # Exceptions
    "SkewTChartsError",
    "SoundingDataError",
    "RenderError",
    "ExportError",
    "InvalidParameterError",
]
