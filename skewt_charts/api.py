"""
Main API module for SkewTCharts package.

This module provides simplified user-facing functions that abstract away the
render pass, painting and export. The primary function `create_skewt()`
handles the complete workflow from sounding records to a finished chart in a
single call.

Example:
    >>> from skewt_charts import create_skewt
    >>>
    >>> records = [
    ...     {"press": 1000, "temp": 25, "dwpt": 20, "wdir": 160, "wspd": 5},
    ...     {"press": 850, "temp": 14, "dwpt": 8, "wdir": 220, "wspd": 12},
    ...     {"press": 700, "temp": 2, "dwpt": -5, "wdir": 250, "wspd": 25},
    ... ]
    >>> create_skewt(records, "Payerne", "Radiosonde", output_path="skewt.png")

    >>> # Interactive use (returns figure and axes, hover probe attached)
    >>> fig, ax = create_skewt(records, "Payerne", "Radiosonde", interactive=True)
    >>> plt.show()
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

import matplotlib.pyplot as plt

from .config import Config
from .data import SoundingProfile, load_sounding
from .exceptions import InvalidParameterError, RenderError, SkewTChartsError
from .calculations.lookup import find_nearest_sample
from .rendering import ProbeReadout, SkewTChart, compute_scene
from .rendering.chart import build_frame, coerce_profiles
from .rendering.probe import build_readout

logger = logging.getLogger(__name__)


def _validated_config(config: Optional[Config]) -> Config:
    if config is None:
        logger.debug("Using default configuration")
        return Config()
    try:
        config.validate()
    except ValueError as e:
        raise InvalidParameterError(f"Invalid configuration: {e}") from e
    return config


def create_skewt(
    data,
    site_name: str,
    source_name: str,
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None,
    interactive: bool = False
) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """
    Create a SkewT-logP chart from sounding data.

    This is the primary API function that handles the complete workflow:
    1. Validate configuration
    2. Run the render pass (frame, background, profiles, barbs, annotations)
    3. Paint the scene with matplotlib
    4. Save to file or return figure/axes for interactive use

    Args:
        data: SoundingProfile, list of profiles, or list of record dicts
        site_name: Name of the site where the sounding was taken
        source_name: Source of the data (e.g., "Radiosonde", "Model")
        output_path: Output file path; if None, returns (fig, ax) for interactive use
        config: Optional Config object; if None, uses default configuration
        interactive: If True, connect the hover probe to the figure

    Returns:
        If output_path provided: path to saved chart file
        If output_path is None: tuple of (figure, axes) for interactive use

    Raises:
        InvalidParameterError: If the configuration is invalid
        SoundingDataError: If the records cannot be parsed
        RenderError: If chart rendering or saving fails
    """
    config = _validated_config(config)

    chart = SkewTChart(config=config)

    logger.info("Rendering chart")
    try:
        fig, ax = chart.render_chart(data, site_name, source_name, interactive=interactive)
    except SkewTChartsError:
        raise
    except Exception as e:
        raise RenderError(f"Failed to render chart: {e}") from e

    if output_path is None:
        logger.info("Returning figure and axes for interactive use")
        return fig, ax

    output_path = Path(output_path)
    logger.info(f"Saving chart to {output_path}")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        saved_path = chart.save_chart(str(output_path))
    except Exception as e:
        raise RenderError(f"Failed to save chart to {output_path}: {e}") from e
    finally:
        chart.close()

    logger.info(f"Chart saved successfully to {saved_path}")
    return saved_path


def create_skewt_from_file(
    input_path: Union[str, Path],
    site_name: Optional[str] = None,
    source_name: Optional[str] = None,
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None
) -> Union[str, Tuple[plt.Figure, plt.Axes]]:
    """
    Create a chart from a JSON or YAML sounding file.

    Labels given as arguments take precedence over the ones stored in the file.

    Example:
        >>> create_skewt_from_file("examples/sample_sounding.json", output_path="out.png")
    """
    sounding = load_sounding(input_path)
    site = site_name or sounding.site or Path(input_path).stem
    source = source_name or sounding.source or "unknown"
    return create_skewt(sounding.profile, site, source, output_path=output_path, config=config)


def export_skewt(
    data,
    site_name: str,
    source_name: str,
    output_dir: Optional[Union[str, Path]] = None,
    on_download: Optional[Callable[[str], None]] = None,
    on_error: Optional[Callable[[Exception], None]] = None,
    config: Optional[Config] = None
) -> Optional[Path]:
    """
    Render and export a chart in one call.

    Without ``on_download`` the chart is written as
    ``SkewT-{site}-{source}.png``; with it, the SVG string is handed over
    instead. Export failures go to ``on_error`` and yield None.
    """
    config = _validated_config(config)
    chart = SkewTChart(config=config)
    chart.compute_scene(data, site_name, source_name)
    return chart.export(output_dir=output_dir, on_download=on_download, on_error=on_error)


def probe_sounding(
    data,
    pressure: Optional[float] = None,
    pixel_y: Optional[float] = None,
    config: Optional[Config] = None
) -> Optional[ProbeReadout]:
    """
    Readout of the sample nearest to a pressure or plot-space y coordinate.

    Args:
        data: SoundingProfile or list of record dicts
        pressure: Probe pressure in hPa
        pixel_y: Probe position in plot pixels (used when pressure is None)
        config: Configuration providing plot size and speed unit

    Returns:
        ProbeReadout, or None when the profile has fewer than two samples

    Raises:
        InvalidParameterError: If neither pressure nor pixel_y is given
    """
    if pressure is None and pixel_y is None:
        raise InvalidParameterError("Either pressure or pixel_y must be given")

    config = _validated_config(config)
    profiles = coerce_profiles(data)
    profile = profiles[0] if profiles else SoundingProfile()
    frame = build_frame(profiles, config)

    if pressure is None:
        pressure = frame.pressure_from_y(pixel_y)

    sample = find_nearest_sample(profile, pressure)
    if sample is None:
        logger.warning("Profile has fewer than two samples; nothing to probe")
        return None
    return build_readout(sample, frame, config.speed_unit, pointer_pressure=pressure)


__all__ = [
    "compute_scene",
    "create_skewt",
    "create_skewt_from_file",
    "export_skewt",
    "probe_sounding",
]
