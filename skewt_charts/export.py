"""
Export of rendered SkewT charts.

A rendered scene can be serialized to an SVG string or rasterized to a PNG
file named ``SkewT-{site}-{source}.png``. When a custom download handler is
supplied, it receives the SVG string and rasterization is skipped. Export
failures are logged and reported to the caller; they never propagate into
the render pass.
"""

import io
import logging
from pathlib import Path
from typing import Callable, Optional, Union

import matplotlib.pyplot as plt

from .config import Config
from .exceptions import ExportError
from .rendering.commands import Scene
from .rendering.painter import paint_scene

logger = logging.getLogger("skewt_charts.export")


def export_filename(site_name: str, source_name: str) -> str:
    """
    Default PNG filename for an exported chart.

    Example:
        >>> export_filename("Payerne", "Radiosonde")
        'SkewT-Payerne-Radiosonde.png'
    """
    return f"SkewT-{site_name}-{source_name}.png"


def scene_to_svg(scene: Scene, config: Optional[Config] = None) -> str:
    """
    Serialize a scene to an SVG document string.

    Raises:
        ExportError: If matplotlib fails to paint or serialize the scene
    """
    if config is None:
        config = Config()

    fig = None
    try:
        fig, _ax = paint_scene(scene, config)
        buffer = io.StringIO()
        fig.savefig(buffer, format="svg", facecolor=fig.get_facecolor())
        return buffer.getvalue()
    except Exception as e:
        raise ExportError(f"Failed to serialize chart to SVG: {e}") from e
    finally:
        if fig is not None:
            plt.close(fig)


def rasterize_scene(
    scene: Scene,
    output_path: Union[str, Path],
    config: Optional[Config] = None
) -> Path:
    """
    Rasterize a scene into a PNG file.

    Raises:
        ExportError: If the figure cannot be painted or written
    """
    if config is None:
        config = Config()

    output_path = Path(output_path)
    fig = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig, _ax = paint_scene(scene, config)
        fig.savefig(output_path, format="png", dpi=config.dpi, facecolor=fig.get_facecolor())
    except Exception as e:
        raise ExportError(f"Failed to rasterize chart to {output_path}: {e}") from e
    finally:
        if fig is not None:
            plt.close(fig)

    logger.info(f"Chart exported: {output_path}")
    return output_path


def export_scene(
    scene: Scene,
    output_dir: Optional[Union[str, Path]] = None,
    on_download: Optional[Callable[[str], None]] = None,
    on_error: Optional[Callable[[Exception], None]] = None,
    config: Optional[Config] = None
) -> Optional[Path]:
    """
    Export a rendered scene.

    Args:
        scene: Scene of a completed render pass
        output_dir: Directory for the PNG (default: config.output_dir)
        on_download: Custom handler receiving the SVG string; when given,
            no PNG is written
        on_error: Callback receiving the failure, if any
        config: Configuration providing dpi and output directory

    Returns:
        Path of the written PNG, or None when a custom handler was used or
        the export failed

    Example:
        >>> export_scene(scene, on_download=lambda svg: print(len(svg) > 0))
        True
    """
    if config is None:
        config = Config()

    try:
        if on_download is not None:
            svg = scene_to_svg(scene, config)
            logger.info(f"Handing {len(svg)} bytes of SVG to custom download handler")
            on_download(svg)
            return None

        directory = Path(output_dir) if output_dir is not None else config.output_dir
        path = directory / export_filename(scene.site_name, scene.source_name)
        return rasterize_scene(scene, path, config)

    except ExportError as e:
        logger.error(f"Chart export failed: {e}", exc_info=True)
        if on_error is not None:
            on_error(e)
        return None
