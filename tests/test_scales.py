import numpy as np
import pytest

from skewt_charts.calculations.scales import (
    CoordinateFrame,
    LinearScale,
    LogScale,
    compute_top_pressure,
)
from skewt_charts.exceptions import InvalidParameterError


def test_linear_scale_maps_and_inverts():
    scale = LinearScale((-70.0, 50.0), (0.0, 680.0))
    assert scale(-70) == 0.0
    assert scale(50) == pytest.approx(680.0)
    assert scale.invert(scale(12.5)) == pytest.approx(12.5)


def test_log_scale_endpoints():
    scale = LogScale((100.0, 1050.0), (0.0, 520.0))
    assert scale(100) == pytest.approx(0.0)
    assert scale(1050) == pytest.approx(520.0)
    # smaller pressures sit closer to the top
    assert scale(300) < scale(500) < scale(850)


def test_pressure_round_trip(scenario_frame):
    for p in np.linspace(scenario_frame.top_pressure, scenario_frame.base_pressure, 57):
        y = scenario_frame.y_from_pressure(p)
        assert scenario_frame.pressure_from_y(y) == pytest.approx(p, rel=1e-12)


def test_frame_edges(scenario_frame):
    assert scenario_frame.width == 680
    assert scenario_frame.height == 520
    assert scenario_frame.y(690) == pytest.approx(0.0)
    assert scenario_frame.y(1050) == pytest.approx(520.0)


def test_skew_formula(scenario_frame):
    f = scenario_frame
    expected = f.x(10) + (f.y(f.base_pressure) - f.y(700)) / f.tan
    assert f.skew_x(10, 700) == expected
    # at the base pressure there is no skew offset
    assert f.skew_x(10, f.base_pressure) == f.x(10)
    # isotherms lean right with height
    assert f.skew_x(10, 700) > f.skew_x(10, 1000)


@pytest.mark.parametrize("min_pressure,expected", [
    (700, 690.0),
    (100, 90.0),
    (55, 50.0),
    (10, 50.0),
    (None, 100.0),
])
def test_compute_top_pressure(min_pressure, expected):
    assert compute_top_pressure(min_pressure) == expected


@pytest.mark.parametrize("angle", [0, 180, 360, -180])
def test_skew_angle_without_tangent_fails_fast(angle):
    with pytest.raises(InvalidParameterError):
        CoordinateFrame.build(680, 520, top_pressure=690, skew_angle=angle)


def test_zero_temperature_span_fails_fast():
    with pytest.raises(InvalidParameterError):
        CoordinateFrame.build(680, 520, top_pressure=690, temp_range=(20, 20))


def test_top_pressure_not_above_base_fails_fast():
    with pytest.raises(InvalidParameterError):
        CoordinateFrame.build(680, 520, top_pressure=1050, base_pressure=1050)


@pytest.mark.parametrize("width,height", [(0, 520), (680, 0), (-5, 520)])
def test_non_positive_plot_size_fails_fast(width, height):
    with pytest.raises(InvalidParameterError):
        CoordinateFrame.build(width, height, top_pressure=690)
