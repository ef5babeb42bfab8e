"""
Orchestration module for complete SkewT-logP chart creation.

This module provides the render pass that turns sounding profiles into a
:class:`Scene` of draw commands, and the SkewTChart class that coordinates
the render pass, painting through matplotlib, the interactive probe, and
export.
"""

import logging
import os
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt

from ..calculations.scales import CoordinateFrame, compute_top_pressure
from ..config import Config
from ..data.sounding import SoundingProfile
from ..exceptions import InvalidParameterError
from ..export import export_scene
from .annotations import annotate_chart
from .background import generate_background
from .commands import Scene
from .painter import connect_probe, paint_scene
from .probe import ProbeEngine
from .profile import build_all_profile_lines
from .windbarbs import build_glyph_set, place_wind_barbs

logger = logging.getLogger("skewt_charts.rendering.chart")

ProfileInput = Union[SoundingProfile, Sequence[Any]]


def coerce_profiles(data: Union[ProfileInput, Sequence[ProfileInput], None]) -> List[SoundingProfile]:
    """
    Normalize the accepted data shapes into a list of profiles.

    Accepts None, a SoundingProfile, a list of records/samples (one profile),
    or a list of profiles.
    """
    if data is None:
        return []
    if isinstance(data, SoundingProfile):
        return [data]
    items = list(data)
    if items and all(isinstance(item, SoundingProfile) for item in items):
        return items
    return [SoundingProfile.from_records(items)]


def build_frame(profiles: Sequence[SoundingProfile], config: Config) -> CoordinateFrame:
    """
    Coordinate frame for a render pass.

    The top pressure is derived from the smallest pressure across all
    profiles (100 hPa without data).
    """
    minimums = [p.min_pressure() for p in profiles if len(p)]
    min_pressure = min(minimums) if minimums else None
    return CoordinateFrame.build(
        width=config.plot_width,
        height=config.plot_height,
        top_pressure=compute_top_pressure(min_pressure),
        base_pressure=config.base_pressure,
        temp_range=config.temp_range,
        skew_angle=config.skew_angle,
    )


def compute_scene(
    data: Union[ProfileInput, Sequence[ProfileInput], None],
    site_name: str = "",
    source_name: str = "",
    config: Optional[Config] = None,
    frame: Optional[CoordinateFrame] = None
) -> Scene:
    """
    Run one render pass and return its draw commands.

    The pass is pure: the only state shared between calls is the memoized
    wind barb glyph set. Wind barbs are placed for the first profile only.

    Args:
        data: Sounding profile(s) or raw records
        site_name: Site label
        source_name: Data source label
        config: Chart configuration (default: Config())
        frame: Precomputed coordinate frame (default: derived from data)

    Returns:
        Scene with background, profile, barb and annotation layers

    Raises:
        InvalidParameterError: If the configuration yields an invalid frame

    Example:
        >>> scene = compute_scene(
        ...     [{"press": 1000, "temp": 25, "dwpt": 20, "wdir": 160, "wspd": 5}],
        ...     "Payerne", "Radiosonde")
        >>> len(scene.barbs)
        1
    """
    if config is None:
        config = Config()

    profiles = coerce_profiles(data)
    if frame is None:
        frame = build_frame(profiles, config)

    scene = Scene(
        frame=frame,
        site_name=site_name,
        source_name=source_name,
        width=config.width,
        height=config.height,
        margin={
            "top": config.margin_top,
            "right": config.margin_right,
            "bottom": config.margin_bottom,
            "left": config.margin_left,
        },
        glyphs=build_glyph_set(config.barb_size),
    )

    scene.background = generate_background(frame)
    scene.profiles = build_all_profile_lines(profiles, frame)
    if profiles:
        scene.barbs = place_wind_barbs(profiles[0], frame)
    scene.annotations = annotate_chart(frame, site_name, source_name, config.margin_top)

    logger.debug(f"Scene computed: {scene.layer_sizes()}")
    return scene


class SkewTChart:
    """
    Orchestrate complete SkewT-logP chart creation.

    The rendering workflow:
    1. Derive the coordinate frame from the data and configuration
    2. Compute background, profile lines, wind barbs and annotations
    3. Paint the scene onto a matplotlib figure
    4. Optionally attach the interactive probe and export the result

    Attributes:
        config: Configuration object with display settings
        profiles: Profiles of the last render pass
        scene: Scene of the last render pass (None until rendered)
        fig: Matplotlib Figure (None until render_chart called)
        ax: Matplotlib Axes (None until render_chart called)

    Example:
        >>> chart = SkewTChart(Config(speed_unit="kt"))
        >>> fig, ax = chart.render_chart(profile, "Payerne", "Radiosonde")
        >>> chart.save_chart("skewt.png")
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.profiles: List[SoundingProfile] = []
        self.scene: Optional[Scene] = None
        self.fig = None
        self.ax = None
        self.probe: Optional[ProbeEngine] = None

        logger.info(f"Initialized SkewTChart ({self.config.width}x{self.config.height} px)")

    def compute_scene(
        self,
        data: Union[ProfileInput, Sequence[ProfileInput], None],
        site_name: str,
        source_name: str
    ) -> Scene:
        """Run the render pass without painting; replaces the previous scene."""
        self.profiles = coerce_profiles(data)
        self.scene = compute_scene(self.profiles, site_name, source_name, self.config)
        return self.scene

    def render_chart(
        self,
        data: Union[ProfileInput, Sequence[ProfileInput], None],
        site_name: str,
        source_name: str,
        interactive: bool = False
    ) -> Tuple[plt.Figure, plt.Axes]:
        """
        Render the complete chart.

        Args:
            data: Sounding profile(s) or raw records
            site_name: Site label
            source_name: Data source label
            interactive: If True, connect the hover probe to the figure

        Returns:
            Tuple of (figure, axes) with the painted chart
        """
        logger.info(f"Rendering SkewT chart: site='{site_name}' source='{source_name}'")

        if self.fig is not None:
            plt.close(self.fig)

        scene = self.compute_scene(data, site_name, source_name)
        self.fig, self.ax = paint_scene(scene, self.config)

        self.probe = self.create_probe()
        if interactive and self.probe is not None:
            connect_probe(self.fig, self.ax, self.probe)

        logger.info("SkewT chart rendering complete")
        return self.fig, self.ax

    def create_probe(self) -> Optional[ProbeEngine]:
        """Probe engine over the primary profile of the last render pass."""
        if self.scene is None:
            return None
        profile = self.profiles[0] if self.profiles else SoundingProfile()
        return ProbeEngine(profile, self.scene.frame, self.config.speed_unit)

    def save_chart(self, output_path: str, dpi: Optional[int] = None) -> str:
        """
        Save rendered chart to file.

        Args:
            output_path: Path or string for output file
            dpi: Optional DPI override (uses config.dpi if None)

        Returns:
            Path to saved file

        Raises:
            ValueError: If chart has not been rendered yet
        """
        if self.fig is None:
            raise ValueError("Chart has not been rendered yet. Call render_chart() first.")

        if dpi is None:
            dpi = self.config.dpi

        logger.info(f"Saving chart to {output_path} (dpi={dpi})")
        self.fig.savefig(output_path, dpi=dpi, facecolor=self.fig.get_facecolor())

        try:
            file_size = os.path.getsize(output_path)
            logger.info(f"Chart saved: {output_path} ({file_size / 1024:.1f} KB)")
        except OSError:
            logger.info(f"Chart saved: {output_path}")

        return output_path

    def export(
        self,
        output_dir: Optional[str] = None,
        on_download: Optional[Callable[[str], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None
    ):
        """
        Export the last render pass (see :func:`skewt_charts.export.export_scene`).

        Raises:
            InvalidParameterError: If nothing has been rendered yet
        """
        if self.scene is None:
            raise InvalidParameterError("Nothing to export. Call render_chart() first.")
        return export_scene(
            self.scene,
            output_dir=output_dir,
            on_download=on_download,
            on_error=on_error,
            config=self.config,
        )

    def close(self) -> None:
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None
