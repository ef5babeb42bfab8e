import pytest

from skewt_charts.config import Config
from skewt_charts.data.sounding import SoundingProfile
from skewt_charts.exceptions import InvalidParameterError
from skewt_charts.rendering.annotations import format_title
from skewt_charts.rendering.chart import SkewTChart, coerce_profiles, compute_scene
from skewt_charts.rendering.commands import PathCommand, RectCommand, TextCommand
from skewt_charts.rendering.windbarbs import build_glyph_set


def test_end_to_end_scenario(scenario_records):
    scene = compute_scene(scenario_records, "Payerne", "Radiosonde", Config(width=750, height=620))

    assert scene.frame.top_pressure == 690
    assert scene.frame.width == 680
    assert scene.frame.height == 520

    isobars = [c for c in scene.background if c.style == "gridline" and getattr(c, "y1", None) is not None
               and c.y1 == c.y2 and c.x1 == 0.0 and c.x2 == scene.frame.width]
    assert {c.value for c in isobars} == {1000.0, 850.0, 700.0, 500.0, 300.0, 200.0, 100.0, 50.0}

    temp_line = next(c for c in scene.profiles if c.style == "temp skline")
    dwpt_line = next(c for c in scene.profiles if c.style == "dwpt skline")
    assert len(temp_line.segments) == 1
    assert len(temp_line.segments[0]) == 3
    assert len(dwpt_line.segments) == 1

    assert len(scene.barbs) == 3
    assert [b.x for b in scene.barbs] == [680.0, 680.0, 680.0]
    assert [b.rotation for b in scene.barbs] == [340, 40, 70]


def test_scene_shares_cached_glyphs(scenario_records):
    first = compute_scene(scenario_records)
    second = compute_scene(scenario_records)
    assert first.glyphs is second.glyphs
    assert first.glyphs is build_glyph_set(Config().barb_size)
    assert all(b.bucket in first.glyphs for b in first.barbs)


def test_empty_profile_degrades_gracefully():
    for data in (None, [], SoundingProfile()):
        scene = compute_scene(data, "Nowhere", "None")
        assert scene.frame.top_pressure == 100
        assert scene.background
        assert scene.barbs == []
        assert all(not c.segments for c in scene.profiles if isinstance(c, PathCommand))


def test_annotations(scenario_records):
    scene = compute_scene(scenario_records, "Payerne", "  Radiosonde ")
    texts = [c for c in scene.annotations if isinstance(c, TextCommand)]
    assert texts[0].text == "Site: Payerne / Data source: Radiosonde"
    assert format_title("A", None) == "Site: A / Data source: "

    swatches = [c for c in scene.annotations if isinstance(c, RectCommand)]
    w, h = scene.frame.width, scene.frame.height
    assert [(s.x, s.y) for s in swatches] == [(w / 3, h + 40), (w / 3 + 120, h + 40)]
    assert [s.style for s in swatches] == ["legend temp", "legend dwpt"]


def test_barbs_only_for_first_profile(scenario_profile):
    second = SoundingProfile.from_records([
        {"press": 1000, "temp": 20, "dwpt": 10, "wdir": 0, "wspd": 30},
        {"press": 500, "temp": -20, "dwpt": -30, "wdir": 0, "wspd": 30},
    ])
    scene = compute_scene([scenario_profile, second])
    assert len(scene.barbs) == 3
    # the second profile still raises the displayed top
    assert scene.frame.top_pressure == 490


def test_coerce_profiles(scenario_records, scenario_profile):
    assert coerce_profiles(None) == []
    assert coerce_profiles(scenario_profile) == [scenario_profile]
    assert coerce_profiles(scenario_records) == [scenario_profile]
    assert coerce_profiles([scenario_profile, scenario_profile]) == [scenario_profile, scenario_profile]


def test_chart_render_and_save(scenario_records, tmp_path):
    chart = SkewTChart(Config())
    fig, ax = chart.render_chart(scenario_records, "Payerne", "Radiosonde")
    assert chart.scene is not None
    assert chart.probe is not None

    output = tmp_path / "chart.png"
    assert chart.save_chart(str(output)) == str(output)
    assert output.read_bytes()[:4] == b"\x89PNG"
    chart.close()
    assert chart.fig is None


def test_chart_requires_render_before_save_or_export():
    chart = SkewTChart()
    with pytest.raises(ValueError):
        chart.save_chart("never.png")
    with pytest.raises(InvalidParameterError):
        chart.export()
