"""
Sounding samples, profiles, and file loading.

A sample carries a required pressure and optional readings. Missing readings
follow a sentinel-or-absent convention: a temperature or dew point is only
"defined" when it is a real number strictly greater than -1000, and wind is
only present when both direction and speed are non-negative numbers.
"""

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import yaml

from ..constants import MISSING_VALUE_THRESHOLD
from ..exceptions import SoundingDataError

logger = logging.getLogger("skewt_charts.data.sounding")

# Short record keys used by sounding feeds -> field names
FIELD_ALIASES = {
    "press": "pressure",
    "hght": "height",
    "temp": "temperature",
    "dwpt": "dew_point",
    "wdir": "wind_direction",
    "wspd": "wind_speed",
    "dewPoint": "dew_point",
    "windDirection": "wind_direction",
    "windSpeed": "wind_speed",
}

OPTIONAL_FIELDS = ("height", "temperature", "dew_point", "wind_direction", "wind_speed")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def is_defined(value: Optional[float]) -> bool:
    """
    Check whether an optional reading counts as a real observation.
    
    Args:
        value: Reading in its native unit, or None
        
    Returns:
        True only for finite numbers greater than the -1000 sentinel
        
    Example:
        >>> is_defined(12.5), is_defined(-9999.0), is_defined(None)
        (True, False, False)
    """
    return _is_number(value) and math.isfinite(value) and value > MISSING_VALUE_THRESHOLD


def _is_non_negative(value: Optional[float]) -> bool:
    return _is_number(value) and math.isfinite(value) and value >= 0


@dataclass(frozen=True)
class SoundingSample:
    """
    One atmospheric observation.
    
    Attributes:
        pressure: Pressure level in hPa (ordering key, always positive)
        height: Height above sea level in meters
        temperature: Air temperature in °C
        dew_point: Dew point temperature in °C
        wind_direction: Direction the wind blows from, degrees 0-360
        wind_speed: Wind speed in m/s
    """
    
    pressure: float
    height: Optional[float] = None
    temperature: Optional[float] = None
    dew_point: Optional[float] = None
    wind_direction: Optional[float] = None
    wind_speed: Optional[float] = None
    
    def __post_init__(self):
        if not _is_number(self.pressure) or not math.isfinite(self.pressure) or self.pressure <= 0:
            raise SoundingDataError(f"Sample pressure must be a positive number, got {self.pressure!r}")
    
    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "SoundingSample":
        """
        Build a sample from a record using short or long field names.
        
        Non-numeric optional values are treated as absent.
        
        Args:
            record: Mapping such as {"press": 850, "temp": 14, "wspd": 12}
            
        Returns:
            SoundingSample instance
            
        Raises:
            SoundingDataError: If the pressure is missing or invalid
        """
        if not isinstance(record, Mapping):
            raise SoundingDataError(f"Sounding record must be a mapping, got {type(record).__name__}")
        
        values: Dict[str, Any] = {}
        for key, value in record.items():
            values[FIELD_ALIASES.get(key, key)] = value
        
        if "pressure" not in values:
            raise SoundingDataError(f"Sounding record has no pressure: {dict(record)}")
        
        pressure = values["pressure"]
        kwargs = {"pressure": float(pressure) if _is_number(pressure) else pressure}
        for name in OPTIONAL_FIELDS:
            value = values.get(name)
            if _is_number(value):
                kwargs[name] = float(value)
        
        return cls(**kwargs)
    
    @property
    def has_temperature(self) -> bool:
        return is_defined(self.temperature)
    
    @property
    def has_dew_point(self) -> bool:
        return is_defined(self.dew_point)
    
    @property
    def has_height(self) -> bool:
        return is_defined(self.height)
    
    @property
    def has_wind_speed(self) -> bool:
        return _is_non_negative(self.wind_speed)


def has_wind(sample: SoundingSample) -> bool:
    """True when both wind direction and speed are present and non-negative."""
    return _is_non_negative(sample.wind_direction) and _is_non_negative(sample.wind_speed)


@dataclass(frozen=True)
class SoundingProfile:
    """
    Ordered, immutable sequence of sounding samples.
    
    Ordering by pressure is the caller's responsibility; lookups assume the
    pressures are monotonic (ascending or descending).
    """
    
    samples: Tuple[SoundingSample, ...] = ()
    
    def __post_init__(self):
        object.__setattr__(self, "samples", tuple(self.samples))
    
    @classmethod
    def from_records(cls, records: Iterable[Union[Mapping[str, Any], SoundingSample]]) -> "SoundingProfile":
        """Build a profile from dict records or existing samples."""
        samples = []
        for record in records:
            if isinstance(record, SoundingSample):
                samples.append(record)
            else:
                samples.append(SoundingSample.from_dict(record))
        return cls(tuple(samples))
    
    def __len__(self) -> int:
        return len(self.samples)
    
    def __iter__(self) -> Iterator[SoundingSample]:
        return iter(self.samples)
    
    def __getitem__(self, index: int) -> SoundingSample:
        return self.samples[index]
    
    def __bool__(self) -> bool:
        return bool(self.samples)
    
    def pressures(self) -> List[float]:
        return [s.pressure for s in self.samples]
    
    def min_pressure(self) -> Optional[float]:
        """Smallest pressure in the profile (highest level), or None if empty."""
        if not self.samples:
            return None
        return float(min(s.pressure for s in self.samples))
    
    def is_descending(self) -> bool:
        """True when pressure decreases along the profile (surface first)."""
        return len(self.samples) >= 2 and self.samples[0].pressure > self.samples[-1].pressure
    
    def wind_samples(self, top_pressure: float) -> List[SoundingSample]:
        """Samples with a usable wind reading inside the displayed pressure range."""
        return [s for s in self.samples if has_wind(s) and s.pressure >= top_pressure]


@dataclass(frozen=True)
class LoadedSounding:
    """Profile read from disk together with its optional labels."""
    
    profile: SoundingProfile
    site: Optional[str] = None
    source: Optional[str] = None


def load_sounding(path: Union[str, Path]) -> LoadedSounding:
    """
    Load a sounding from a JSON or YAML file.
    
    The file holds either a list of records, or a mapping with a ``data`` list
    and optional ``site``/``source`` labels.
    
    Args:
        path: Path to a .json, .yaml or .yml file
        
    Returns:
        LoadedSounding with the parsed profile and labels
        
    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is not supported
        SoundingDataError: If the content cannot be parsed into samples
        
    Example:
        >>> sounding = load_sounding("examples/sample_sounding.json")
        >>> len(sounding.profile)
        12
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sounding file not found: {path}")
    
    logger.info(f"Loading sounding from {path}")
    
    try:
        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                content = yaml.safe_load(f)
            elif path.suffix == '.json':
                content = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SoundingDataError(f"Failed to parse sounding file {path}: {e}") from e
    
    site = None
    source = None
    if isinstance(content, Mapping):
        site = content.get("site")
        source = content.get("source")
        records = content.get("data")
    else:
        records = content
    
    if not isinstance(records, list):
        raise SoundingDataError(f"Sounding file {path} does not contain a list of records")
    
    profile = SoundingProfile.from_records(records)
    logger.info(f"Loaded {len(profile)} samples from {path}")
    
    return LoadedSounding(
        profile=profile,
        site=str(site) if site is not None else None,
        source=str(source) if source is not None else None,
    )
