import pytest

from skewt_charts.calculations.lookup import find_nearest_sample
from skewt_charts.data.sounding import SoundingProfile, SoundingSample
from skewt_charts.rendering.probe import ProbeEngine, ProbeState, build_readout


def _profile(pressures):
    return SoundingProfile.from_records([{"press": p} for p in pressures])


@pytest.mark.parametrize("pressures", [
    (1000, 850, 700, 500),
    (500, 700, 850, 1000),
])
def test_nearest_sample_for_780(pressures):
    assert find_nearest_sample(_profile(pressures), 780).pressure == 850


@pytest.mark.parametrize("probe,expected", [
    (1100, 1000),
    (990, 1000),
    (600, 500),
    (100, 500),
])
def test_nearest_sample_at_edges(probe, expected):
    assert find_nearest_sample(_profile((1000, 850, 700, 500)), probe).pressure == expected


def test_tie_goes_to_later_sample():
    assert find_nearest_sample(_profile((500, 700, 850, 1000)), 775).pressure == 850


def test_lookup_needs_two_samples():
    assert find_nearest_sample(SoundingProfile(), 850) is None
    assert find_nearest_sample(_profile((850,)), 850) is None


def test_readout_channels(scenario_frame):
    sample = SoundingSample(
        pressure=850, height=1520.4, temperature=14.5, dew_point=-2.5,
        wind_direction=220, wind_speed=12,
    )
    readout = build_readout(sample, scenario_frame, speed_unit="kt")

    assert readout.temperature.text == "15°C"
    assert readout.dew_point.text == "-2°C"
    assert readout.height.text == "-- 1520 m"
    assert readout.wind_speed.text == "23.3 kt"

    y = scenario_frame.y(850)
    assert (readout.temperature.x, readout.temperature.y) == (scenario_frame.skew_x(14.5, 850), y)
    assert (readout.height.x, readout.height.y) == (0.0, y)
    assert readout.wind_speed.x == scenario_frame.width - 65


@pytest.mark.parametrize("unit,text", [("kmh", "43.2 kmh"), ("ms", "12 ms")])
def test_readout_wind_units(scenario_frame, unit, text):
    sample = SoundingSample(pressure=850, wind_speed=12)
    assert build_readout(sample, scenario_frame, speed_unit=unit).wind_speed.text == text


def test_readout_channels_are_independent(scenario_frame):
    sample = SoundingSample(pressure=850, temperature=-9999, dew_point=3, height=-1000)
    readout = build_readout(sample, scenario_frame)

    assert readout.temperature is None
    assert readout.dew_point.text == "3°C"
    assert readout.height is None
    assert readout.wind_speed is None


def test_engine_state_transitions(scenario_profile, scenario_frame):
    engine = ProbeEngine(scenario_profile, scenario_frame, speed_unit="kt")
    assert engine.state is ProbeState.IDLE

    engine.pointer_enter()
    assert engine.is_active

    readout = engine.pointer_move(scenario_frame.y(780))
    assert readout.sample.pressure == 850
    assert readout.pointer_pressure == pytest.approx(780)
    assert engine.readout is readout

    latest = engine.pointer_move(scenario_frame.y(990))
    assert latest.sample.pressure == 1000
    assert engine.readout is latest

    engine.pointer_leave()
    assert engine.state is ProbeState.IDLE
    assert engine.readout is None


def test_move_while_idle_activates(scenario_profile, scenario_frame):
    engine = ProbeEngine(scenario_profile, scenario_frame)
    engine.pointer_move(scenario_frame.y(850))
    assert engine.is_active


def test_engine_on_empty_profile(scenario_frame):
    engine = ProbeEngine(SoundingProfile(), scenario_frame)
    engine.pointer_enter()
    assert engine.pointer_move(100) is None
    assert engine.readout is None
