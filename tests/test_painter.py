import math

from matplotlib.backend_bases import LocationEvent, MouseEvent
from matplotlib.patches import Circle
import pytest

from skewt_charts.config import Config
from skewt_charts.data.sounding import SoundingSample
from skewt_charts.rendering.chart import SkewTChart, compute_scene
from skewt_charts.rendering.painter import ZORDER, paint_readout, paint_scene, px_to_pt, resolve_style
from skewt_charts.rendering.probe import build_readout


def test_px_to_pt():
    assert px_to_pt(100, 72) == 100
    assert px_to_pt(3, 100) == pytest.approx(2.16)


def test_unknown_style_falls_back_to_default():
    assert resolve_style("no such style")["color"] == "#000000"
    assert resolve_style("temp skline")["color"] == "red"


def test_figure_is_sized_in_pixels(scenario_records):
    config = Config(dpi=100)
    scene = compute_scene(scenario_records, "Payerne", "Radiosonde", config)
    fig, ax = paint_scene(scene, config)

    width_in, height_in = fig.get_size_inches()
    assert width_in * fig.dpi == pytest.approx(750)
    assert height_in * fig.dpi == pytest.approx(620)

    # plot space: origin at the top-left of the plot, y growing downward
    assert ax.get_xlim() == pytest.approx((-30, 720))
    assert ax.get_ylim() == pytest.approx((590, -30))


def test_scene_layers_are_painted(scenario_records):
    scene = compute_scene(scenario_records, "Payerne", "Radiosonde")
    fig, ax = paint_scene(scene)

    # dry adiabats + temperature + dew point
    assert len(ax.collections) == 14 + 2
    # one flag for the 50 kt barb, plus legend swatches
    assert len(ax.patches) == 1 + 2
    assert "Site: Payerne / Data source: Radiosonde" in [t.get_text() for t in ax.texts]


def test_paint_readout_draws_each_channel(scenario_frame, default_config):
    fig, ax = paint_scene(compute_scene(None), default_config)
    sample = SoundingSample(
        pressure=850, height=1520, temperature=14, dew_point=8, wind_direction=220, wind_speed=12
    )
    artists = paint_readout(ax, build_readout(sample, scenario_frame, "kt"), fig.dpi)

    assert len(artists) == 6
    assert len([a for a in artists if isinstance(a, Circle)]) == 2
    assert paint_readout(ax, None, fig.dpi) == []


def test_connected_probe_follows_pointer(scenario_records):
    chart = SkewTChart(Config(speed_unit="kt"))
    fig, ax = chart.render_chart(scenario_records, "Payerne", "Radiosonde", interactive=True)
    fig.canvas.draw()
    frame = chart.scene.frame

    x, y = ax.transData.transform((frame.width / 2, frame.y(780)))
    event = MouseEvent("motion_notify_event", fig.canvas, x, y)
    fig.canvas.callbacks.process("motion_notify_event", event)

    assert chart.probe.is_active
    assert chart.probe.readout.sample.pressure == 850

    x, y = ax.transData.transform((frame.width + 20, frame.y(780)))
    event = MouseEvent("motion_notify_event", fig.canvas, x, y)
    fig.canvas.callbacks.process("motion_notify_event", event)

    assert not chart.probe.is_active
    assert chart.probe.readout is None


def test_pointer_enter_and_leave_toggle_readout(scenario_records):
    chart = SkewTChart(Config(speed_unit="kt"))
    fig, ax = chart.render_chart(scenario_records, "Payerne", "Radiosonde", interactive=True)
    fig.canvas.draw()
    frame = chart.scene.frame
    idle_artists = len(ax.texts) + len(ax.patches)

    x, y = ax.transData.transform((frame.width / 2, frame.y(780)))
    fig.canvas.callbacks.process("axes_enter_event", LocationEvent("axes_enter_event", fig.canvas, x, y))
    assert chart.probe.is_active
    assert chart.probe.readout is None

    fig.canvas.callbacks.process("motion_notify_event", MouseEvent("motion_notify_event", fig.canvas, x, y))
    assert chart.probe.readout.sample.pressure == 850
    assert len(ax.texts) + len(ax.patches) > idle_artists

    fig.canvas.callbacks.process("axes_leave_event", LocationEvent("axes_leave_event", fig.canvas, x, y))
    assert not chart.probe.is_active
    assert chart.probe.readout is None
    assert len(ax.texts) + len(ax.patches) == idle_artists


def test_barb_rotates_about_its_origin_then_moves(scenario_records):
    scene = compute_scene(scenario_records, "Payerne", "Radiosonde")
    fig, ax = paint_scene(scene)

    # the last barb line painted is the last open stroke of the last placement
    placement = scene.barbs[-1]
    stroke = [e for e in scene.glyphs[placement.bucket].elements if not e.filled][-1]
    line = [line for line in ax.lines if line.get_zorder() == ZORDER["barbs"]][-1]

    local_x, local_y = stroke.points[-1]
    theta = math.radians(placement.rotation)
    expected = (
        placement.x + local_x * math.cos(theta) - local_y * math.sin(theta),
        placement.y + local_x * math.sin(theta) + local_y * math.cos(theta),
    )
    assert line.get_transform().transform((local_x, local_y)) == pytest.approx(
        ax.transData.transform(expected)
    )
