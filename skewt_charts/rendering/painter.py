"""
Matplotlib rendering adapter.

Paints a :class:`Scene` onto a matplotlib figure sized in pixels. The axes
cover the whole figure and use plot-space coordinates directly (origin at
the plot's top-left corner, y growing downward), so draw commands need no
conversion besides pixel widths to points.
"""

import logging
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Polygon, Rectangle
from matplotlib.transforms import Affine2D

from ..config import Config
from ..constants import FOCUS_MARKER_RADIUS, LABEL_FONT_SIZE, STYLES
from .commands import GlyphPlacement, LineCommand, PathCommand, RectCommand, Scene, TextCommand
from .probe import ProbeEngine, ProbeReadout

logger = logging.getLogger("skewt_charts.rendering.painter")

ZORDER = {
    "background": 1,
    "profiles": 2,
    "barbs": 3,
    "annotations": 4,
    "readout": 5,
}

HORIZONTAL_ALIGNMENT = {"start": "left", "middle": "center", "end": "right"}

DEFAULT_STYLE = {"color": "#000000", "linewidth": 1.0, "opacity": 1.0, "fill": None}


def resolve_style(tag: str) -> Dict:
    return STYLES.get(tag, DEFAULT_STYLE)


def px_to_pt(pixels: float, dpi: float) -> float:
    """Convert a length in pixels to points at ``dpi``."""
    return pixels * 72.0 / dpi


def _plot_clip(ax: plt.Axes, scene: Scene) -> Rectangle:
    return Rectangle(
        (0, 0), scene.frame.width, scene.frame.height,
        transform=ax.transData, fill=False
    )


def _draw_line(ax, cmd: LineCommand, dpi: float, zorder: int, clip: Rectangle) -> None:
    style = resolve_style(cmd.style)
    line = Line2D(
        [cmd.x1, cmd.x2], [cmd.y1, cmd.y2],
        color=style["color"],
        linewidth=px_to_pt(style["linewidth"], dpi),
        alpha=style["opacity"],
        zorder=zorder,
    )
    ax.add_line(line)
    if cmd.clip:
        line.set_clip_path(clip)


def _draw_path(ax, cmd: PathCommand, dpi: float, zorder: int, clip: Rectangle) -> None:
    if not cmd.segments:
        return
    style = resolve_style(cmd.style)
    width = cmd.linewidth if cmd.linewidth is not None else style["linewidth"]
    collection = LineCollection(
        [list(segment) for segment in cmd.segments],
        colors=style["color"],
        linewidths=px_to_pt(width, dpi),
        alpha=style["opacity"],
        zorder=zorder,
    )
    ax.add_collection(collection)
    if cmd.clip:
        collection.set_clip_path(clip)


def _draw_rect(ax, cmd: RectCommand, zorder: int) -> None:
    style = resolve_style(cmd.style)
    ax.add_patch(Rectangle(
        (cmd.x, cmd.y), cmd.width, cmd.height,
        facecolor=style["fill"] or "none",
        edgecolor="none",
        alpha=style["opacity"],
        zorder=zorder,
    ))


def _draw_text(ax, cmd: TextCommand, dpi: float, zorder: int):
    font_size = cmd.font_size if cmd.font_size is not None else LABEL_FONT_SIZE
    # SVG rotation is clockwise on screen, matplotlib's is counter-clockwise
    return ax.text(
        cmd.x, cmd.y, cmd.text,
        ha=HORIZONTAL_ALIGNMENT.get(cmd.anchor, "left"),
        va="center",
        rotation=-cmd.rotation,
        fontsize=px_to_pt(font_size, dpi),
        family="sans-serif",
        zorder=zorder,
    )


def _draw_barb(ax, scene: Scene, placement: GlyphPlacement, dpi: float, zorder: int) -> None:
    glyph = scene.glyphs.get(placement.bucket)
    if glyph is None:
        logger.warning(f"No glyph for {placement.bucket} kt at {placement.pressure} hPa")
        return

    style = resolve_style(placement.style)
    flag_style = resolve_style("flag")
    transform = (
        Affine2D().rotate_deg(placement.rotation).translate(placement.x, placement.y)
        + ax.transData
    )
    linewidth = px_to_pt(style["linewidth"], dpi)

    for element in glyph.elements:
        if element.filled:
            ax.add_patch(Polygon(
                element.points,
                closed=True,
                facecolor=flag_style["fill"],
                edgecolor=flag_style["color"],
                linewidth=linewidth,
                transform=transform,
                zorder=zorder,
            ))
        else:
            xs, ys = zip(*element.points)
            ax.add_line(Line2D(
                xs, ys,
                color=style["color"],
                linewidth=linewidth,
                transform=transform,
                zorder=zorder,
            ))


def paint_scene(scene: Scene, config: Optional[Config] = None) -> Tuple[plt.Figure, plt.Axes]:
    """
    Paint a scene onto a new matplotlib figure.

    Args:
        scene: Scene produced by a render pass
        config: Configuration providing dpi and background color

    Returns:
        Tuple of (figure, axes)
    """
    if config is None:
        config = Config()
    dpi = config.dpi

    fig = plt.figure(
        figsize=(scene.width / dpi, scene.height / dpi),
        dpi=dpi,
        facecolor=config.background_color,
    )
    fig.set_gid(config.class_name)
    ax = fig.add_axes([0, 0, 1, 1])
    left = scene.margin["left"]
    top = scene.margin["top"]
    ax.set_xlim(-left, scene.width - left)
    ax.set_ylim(scene.height - top, -top)
    ax.set_axis_off()
    ax.set_facecolor(config.background_color)

    clip = _plot_clip(ax, scene)

    layers = (
        ("background", scene.background),
        ("profiles", scene.profiles),
        ("annotations", scene.annotations),
    )
    for layer_name, commands in layers:
        zorder = ZORDER[layer_name]
        for cmd in commands:
            if isinstance(cmd, LineCommand):
                _draw_line(ax, cmd, dpi, zorder, clip)
            elif isinstance(cmd, PathCommand):
                _draw_path(ax, cmd, dpi, zorder, clip)
            elif isinstance(cmd, RectCommand):
                _draw_rect(ax, cmd, zorder)
            elif isinstance(cmd, TextCommand):
                _draw_text(ax, cmd, dpi, zorder)
            else:
                logger.warning(f"Skipping unknown draw command {type(cmd).__name__}")

    for placement in scene.barbs:
        _draw_barb(ax, scene, placement, dpi, ZORDER["barbs"])

    logger.debug(f"Painted scene {scene.width}x{scene.height} px at {dpi} dpi")
    return fig, ax


def paint_readout(ax: plt.Axes, readout: Optional[ProbeReadout], dpi: float) -> List:
    """
    Draw focus markers and labels of a probe readout.

    Returns:
        Artists added to ``ax``; the caller removes them on the next move
    """
    artists: List = []
    if readout is None:
        return artists

    zorder = ZORDER["readout"]
    font_size = px_to_pt(LABEL_FONT_SIZE, dpi)

    for channel, style_tag, dx, ha in (
        (readout.temperature, "focus tmpc", 9, "left"),
        (readout.dew_point, "focus dwpc", -9, "right"),
    ):
        if channel is None:
            continue
        color = resolve_style(style_tag)["fill"]
        artists.append(ax.add_patch(Circle(
            (channel.x, channel.y), FOCUS_MARKER_RADIUS,
            facecolor=color, edgecolor="none", zorder=zorder,
        )))
        artists.append(ax.text(
            channel.x + dx, channel.y, channel.text,
            color=color, ha=ha, va="center", fontsize=font_size, zorder=zorder,
        ))

    for channel in (readout.height, readout.wind_speed):
        if channel is None:
            continue
        artists.append(ax.text(
            channel.x, channel.y, channel.text,
            ha="left", va="center", fontsize=font_size, zorder=zorder,
        ))

    return artists


def connect_probe(fig: plt.Figure, ax: plt.Axes, engine: ProbeEngine) -> List[int]:
    """
    Drive a probe engine from matplotlib pointer events.

    Pointer positions outside the plot rectangle count as leaving the plot.

    Returns:
        Callback ids registered on ``fig.canvas``
    """
    dpi = fig.dpi
    shown: List = []

    def _clear():
        while shown:
            shown.pop().remove()

    def _inside(event) -> bool:
        if event.inaxes is not ax or event.xdata is None or event.ydata is None:
            return False
        return 0 <= event.xdata <= engine.frame.width and 0 <= event.ydata <= engine.frame.height

    def on_enter(event):
        if event.inaxes is ax:
            engine.pointer_enter()

    def on_move(event):
        _clear()
        if not _inside(event):
            if engine.is_active:
                engine.pointer_leave()
            fig.canvas.draw_idle()
            return
        readout = engine.pointer_move(event.ydata)
        shown.extend(paint_readout(ax, readout, dpi))
        fig.canvas.draw_idle()

    def on_leave(event):
        _clear()
        engine.pointer_leave()
        fig.canvas.draw_idle()

    return [
        fig.canvas.mpl_connect("axes_enter_event", on_enter),
        fig.canvas.mpl_connect("motion_notify_event", on_move),
        fig.canvas.mpl_connect("axes_leave_event", on_leave),
    ]
