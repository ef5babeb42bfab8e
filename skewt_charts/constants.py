"""
Constants and fixed parameters for SkewTCharts package.

This module defines chart dimensions, pressure and temperature ranges, the
reference isopleth families, wind barb parameters, and the styling table used
by every curve class drawn on the diagram.
"""

import numpy as np

# ============================================================================
# Chart Dimensions
# ============================================================================

DEFAULT_WIDTH = 750  # pixels
DEFAULT_HEIGHT = 620  # pixels
DEFAULT_MARGIN = {"top": 30, "right": 40, "bottom": 20, "left": 30}

# Vertical strip below the plot reserved for the legend
LEGEND_STRIP_HEIGHT = 50
LEGEND_OFFSET = 40

# ============================================================================
# Pressure and Temperature Domains
# ============================================================================

DEFAULT_BASE_PRESSURE = 1050  # hPa
DEFAULT_TOP_PRESSURE = 100  # hPa, used when there is no sounding data
MIN_TOP_PRESSURE = 50  # hPa
TOP_PRESSURE_MARGIN = 10  # hPa above the highest sample

# Standard pressure levels (hPa) for grid lines
STANDARD_PRESSURE_LINES = [1000, 850, 700, 500, 300, 200, 100, 50]

# Standard pressure levels (hPa) for tick marks
STANDARD_PRESSURE_TICKS = [950, 850, 750, 650, 550, 450, 350, 250, 150, 50]

# Temperature range for the x-axis (°C)
DEFAULT_TEMP_RANGE = (-70, 50)
TEMPERATURE_TICK_STEP = 10

SKEW_ANGLE = 55  # degrees

# ============================================================================
# Reference Isopleths
# ============================================================================

ISOTHERM_TEMPERATURES = np.arange(-100, 45, 10).tolist()  # °C
DRY_ADIABAT_THETAS = np.arange(-30, 240, 20).tolist()  # °C potential temperature
DRY_ADIABAT_PRESSURE_STEP = 10  # hPa

# ============================================================================
# Sounding Data Conventions
# ============================================================================

# Values at or below this threshold mark a missing temperature/dew point
MISSING_VALUE_THRESHOLD = -1000

# ============================================================================
# Wind Barbs
# ============================================================================

DEFAULT_BARB_SIZE = 25  # pixels
BARB_SPEED_STEP = 5  # knots
BARB_SPEEDS = np.arange(5, 105, 5).tolist()  # knots

FLAG_SPEED = 50  # knots per flag
PENNANT_SPEED = 10  # knots per pennant
HALF_PENNANT_SPEED = 5  # knots per half-pennant

FLAG_SPACING = 7  # pixels consumed along the stem by one flag
PENNANT_SPACING = 3
FLAG_WIDTH = 10
FLAG_HEIGHT = 4
PENNANT_LENGTH = 10
PENNANT_RISE = 4
HALF_PENNANT_LENGTH = 5
HALF_PENNANT_RISE = 2

# ============================================================================
# Wind Speed Units
# ============================================================================

MS_TO_KNOTS = 1.943844492
MS_TO_KMH = 3.6
WIND_SPEED_UNITS = ("ms", "kt", "kmh")
DEFAULT_WIND_SPEED_UNIT = "kmh"

# ============================================================================
# Physical Constants
# ============================================================================

ZERO_CELSIUS = 273.15  # K
REFERENCE_PRESSURE = 1000.0  # hPa
POISSON_EXPONENT = 0.286  # R_d / c_p

# ============================================================================
# Styling Constants
# ============================================================================

# Stroke/fill per curve class; widths are in pixels.
STYLES = {
    "gridline": {"color": "#dfdfdf", "linewidth": 0.75, "opacity": 1.0, "fill": None},
    "tempzero": {"color": "#aaaaaa", "linewidth": 1.25, "opacity": 1.0, "fill": None},
    "axis": {"color": "#000000", "linewidth": 2.0, "opacity": 1.0, "fill": None},
    "tick": {"color": "#000000", "linewidth": 1.0, "opacity": 1.0, "fill": None},
    "temp skline": {"color": "red", "linewidth": 3.0, "opacity": 0.8, "fill": None},
    "temp mean": {"color": "black", "linewidth": 2.5, "opacity": 1.0, "fill": None},
    "dwpt skline": {"color": "green", "linewidth": 3.0, "opacity": 0.8, "fill": None},
    "dwpt mean": {"color": "black", "linewidth": 2.5, "opacity": 1.0, "fill": None},
    "windbarb": {"color": "#000000", "linewidth": 0.75, "opacity": 1.0, "fill": None},
    "flag": {"color": "#000000", "linewidth": 0.75, "opacity": 1.0, "fill": "#000000"},
    "legend temp": {"color": "red", "linewidth": 0.0, "opacity": 1.0, "fill": "red"},
    "legend dwpt": {"color": "green", "linewidth": 0.0, "opacity": 1.0, "fill": "green"},
    "focus tmpc": {"color": "red", "linewidth": 0.0, "opacity": 1.0, "fill": "red"},
    "focus dwpc": {"color": "green", "linewidth": 0.0, "opacity": 1.0, "fill": "green"},
}

# Profiles beyond these indices are drawn as thinner "mean" lines
PRIMARY_PROFILE_LIMIT = 10
SECONDARY_PROFILE_LIMIT = 15
PROFILE_STROKE_WIDTHS = (3.0, 2.5, 1.8)

# Font Sizes (pixels)
LABEL_FONT_SIZE = 12
TICK_FONT_SIZE = 10
TITLE_FONT_SIZE = 14

FOCUS_MARKER_RADIUS = 4
WIND_READOUT_OFFSET = 65  # pixels left of the plot's right edge
