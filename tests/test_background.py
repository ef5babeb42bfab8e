import math

from skewt_charts.calculations.scales import CoordinateFrame
from skewt_charts.calculations.thermo import dry_adiabat_temperature
from skewt_charts.constants import STANDARD_PRESSURE_LINES
from skewt_charts.data.sounding import SoundingProfile
from skewt_charts.rendering.background import (
    dry_adiabat_pressures,
    generate_axes,
    generate_background,
    generate_dry_adiabats,
    generate_isobars,
    generate_isotherms,
)
from skewt_charts.rendering.commands import LineCommand, TextCommand
from skewt_charts.rendering.profile import build_profile_lines


def test_isotherms_span_top_to_base(scenario_frame):
    lines = generate_isotherms(scenario_frame)
    assert len(lines) == 15
    assert [line.value for line in lines] == list(range(-100, 41, 10))
    for line in lines:
        assert line.y1 == scenario_frame.y(scenario_frame.top_pressure)
        assert line.y2 == scenario_frame.y(scenario_frame.base_pressure)
        assert line.clip


def test_only_zero_isotherm_is_emphasized(scenario_frame):
    zero = [line for line in generate_isotherms(scenario_frame) if line.style == "tempzero"]
    assert len(zero) == 1
    assert zero[0].value == 0


def test_isobars_emitted_for_every_standard_level(scenario_frame):
    isobars = generate_isobars(scenario_frame)
    assert [line.value for line in isobars] == [float(p) for p in STANDARD_PRESSURE_LINES]
    for line in isobars:
        assert line.x1 == 0.0
        assert line.x2 == scenario_frame.width
        assert line.y1 == line.y2


def test_dry_adiabat_family(scenario_frame):
    curves = generate_dry_adiabats(scenario_frame)
    assert len(curves) == 14
    pressures = dry_adiabat_pressures(scenario_frame)
    assert pressures[0] == scenario_frame.top_pressure
    assert pressures[-1] <= scenario_frame.base_pressure
    for curve in curves:
        assert len(curve.points) == len(pressures)
        assert all(math.isfinite(x) and math.isfinite(y) for x, y in curve.points)


def test_dry_adiabat_clamps_non_finite_x():
    frame = CoordinateFrame.build(680, 520, top_pressure=100)
    curve = generate_dry_adiabats(frame, thetas=[float("nan")], pressures=[500, 850])[0]
    assert [x for x, _ in curve.points] == [0.0, 0.0]


def test_skew_is_identical_across_curve_families(scenario_frame):
    f = scenario_frame

    isotherm = generate_isotherms(f, temperatures=[10])[0]
    assert isotherm.x1 == f.skew_x(10, f.top_pressure)
    assert isotherm.x2 == f.skew_x(10, f.base_pressure)

    profile = SoundingProfile.from_records([
        {"press": f.base_pressure, "temp": 10, "dwpt": 10},
        {"press": f.top_pressure, "temp": 10, "dwpt": 10},
    ])
    temp_line, _ = build_profile_lines(profile, f)
    assert temp_line.points[0] == (isotherm.x2, isotherm.y2)
    assert temp_line.points[1] == (isotherm.x1, isotherm.y1)

    adiabat = generate_dry_adiabats(f, thetas=[30], pressures=[850])[0]
    t = dry_adiabat_temperature(30, 850)
    assert adiabat.points[0] == (f.skew_x(t, 850), f.y(850))


def test_axis_labels_only_inside_domain(scenario_frame):
    commands = generate_axes(scenario_frame)
    texts = [c for c in commands if isinstance(c, TextCommand)]

    left_labels = {t.text for t in texts if t.anchor == "end"}
    assert left_labels == {"1000", "850", "700"}

    tick_labels = {t.text for t in texts if t.anchor == "start"}
    assert tick_labels == {"950", "850", "750", "690"}

    ticks = [c for c in commands if isinstance(c, LineCommand) and c.style == "tick"]
    assert len(ticks) == 4
    assert all(c.x1 == 0.0 and c.x2 == 5 for c in ticks)

    temperature_labels = [t.text for t in texts if t.anchor == "middle"]
    assert temperature_labels == [str(t) for t in range(-70, 51, 10)]


def test_axes_include_edges(scenario_frame):
    lines = [c for c in generate_axes(scenario_frame) if isinstance(c, LineCommand)]
    w, h = scenario_frame.width, scenario_frame.height
    assert LineCommand(w, 0.0, w, h, style="gridline") in lines
    assert LineCommand(0.0, h, w, h, style="axis") in lines
    assert LineCommand(0.0, 0.0, 0.0, h, style="axis") in lines


def test_background_with_default_top_pressure():
    frame = CoordinateFrame.build(680, 520, top_pressure=100)
    background = generate_background(frame)
    assert len([c for c in background if c.style == "tempzero"]) == 1
    labels = {c.text for c in background if isinstance(c, TextCommand) and c.anchor == "end"}
    assert labels == {"1000", "850", "700", "500", "300", "200", "100"}
