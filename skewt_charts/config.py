"""
Configuration management for SkewTCharts package.

This module provides configuration options for diagram generation including
pixel dimensions, margins, pressure/temperature domains, skew angle, wind
barb size, display units, and output settings.
"""

import json
import math
import yaml
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Tuple

from .constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_MARGIN,
    DEFAULT_BASE_PRESSURE,
    DEFAULT_TEMP_RANGE,
    DEFAULT_BARB_SIZE,
    DEFAULT_WIND_SPEED_UNIT,
    LEGEND_STRIP_HEIGHT,
    SKEW_ANGLE,
    WIND_SPEED_UNITS,
)


@dataclass
class Config:
    """Configuration for SkewT-logP diagram generation.
    
    Attributes:
        width: Total diagram width in pixels.
        height: Total diagram height in pixels.
        margin_top: Space above the plot area in pixels.
        margin_right: Space right of the plot area (wind barbs live here).
        margin_bottom: Space below the plot area in pixels.
        margin_left: Space left of the plot area (pressure labels).
        legend_height: Strip below the plot reserved for the legend.
        base_pressure: Pressure at the bottom of the chart in hPa.
        temp_range: Temperature domain (min, max) of the x-axis in °C.
        skew_angle: Isotherm skew angle in degrees.
        barb_size: Wind barb stem length in pixels.
        speed_unit: Wind speed readout unit, one of "ms", "kt", "kmh".
        dpi: Resolution used when painting with matplotlib.
        output_dir: Directory for exported PNG files.
        class_name: Id of the figure group in exported SVG.
        background_color: Figure background color (any Matplotlib color spec).
    """
    
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    margin_top: int = DEFAULT_MARGIN["top"]
    margin_right: int = DEFAULT_MARGIN["right"]
    margin_bottom: int = DEFAULT_MARGIN["bottom"]
    margin_left: int = DEFAULT_MARGIN["left"]
    legend_height: int = LEGEND_STRIP_HEIGHT
    base_pressure: float = DEFAULT_BASE_PRESSURE
    temp_range: Tuple[float, float] = DEFAULT_TEMP_RANGE
    skew_angle: float = SKEW_ANGLE
    barb_size: float = DEFAULT_BARB_SIZE
    speed_unit: str = DEFAULT_WIND_SPEED_UNIT
    dpi: int = 100
    output_dir: Path = field(default_factory=lambda: Path("./output"))
    class_name: str = "skewt-chart"
    background_color: str = "white"
    
    def __post_init__(self):
        """Normalize values loaded from YAML/JSON (lists, strings)."""
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
        if isinstance(self.temp_range, list):
            self.temp_range = tuple(self.temp_range)
    
    @property
    def plot_width(self) -> float:
        """Width of the plot area in pixels."""
        return self.width - self.margin_left - self.margin_right
    
    @property
    def plot_height(self) -> float:
        """Height of the plot area in pixels (legend strip excluded)."""
        return self.height - self.margin_top - self.margin_bottom - self.legend_height
    
    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a YAML or JSON file.
        
        Args:
            path: Path to configuration file (.yaml, .yml, or .json).
            
        Returns:
            Config instance with loaded settings.
            
        Raises:
            ValueError: If file format is not supported.
            FileNotFoundError: If file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        
        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif path.suffix == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")
        
        return cls(**(data or {}))
    
    def save_to_file(self, path: Path) -> None:
        """Save configuration to a YAML or JSON file.
        
        Args:
            path: Path where configuration should be saved.
            
        Raises:
            ValueError: If file format is not supported.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        
        data = asdict(self)
        data['output_dir'] = str(data['output_dir'])
        data['temp_range'] = list(data['temp_range'])
        
        with open(path, 'w') as f:
            if path.suffix in ['.yaml', '.yml']:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            elif path.suffix == '.json':
                json.dump(data, f, indent=2)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")
    
    def validate(self) -> bool:
        """Validate configuration parameters.
        
        Returns:
            True if configuration is valid.
            
        Raises:
            ValueError: If any configuration parameter is invalid.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Chart dimensions must be positive")
        
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise ValueError("Margins leave no room for the plot area")
        
        if self.dpi <= 0:
            raise ValueError("dpi must be positive")
        
        if len(self.temp_range) != 2 or self.temp_range[1] <= self.temp_range[0]:
            raise ValueError("temp_range must be (min, max) with max > min")
        
        if self.base_pressure <= 0:
            raise ValueError("base_pressure must be positive")
        
        if math.isclose(math.fmod(self.skew_angle, 180.0), 0.0, abs_tol=1e-9):
            raise ValueError("skew_angle must not be a multiple of 180 degrees")
        
        if self.barb_size <= 0:
            raise ValueError("barb_size must be positive")
        
        if self.speed_unit not in WIND_SPEED_UNITS:
            raise ValueError(f"speed_unit must be one of: {', '.join(WIND_SPEED_UNITS)}")
        
        if not isinstance(self.background_color, str) or not self.background_color:
            raise ValueError("background_color must be a non-empty string")
        
        return True
    
    def ensure_directories(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """
    Get a Config instance with default settings.
    
    Returns:
        Config instance initialized with default values.
    """
    return Config()
