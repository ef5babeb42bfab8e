import numpy as np
import pytest

from skewt_charts.calculations.conversions import (
    convert_wind_speed,
    normalize_string,
    round_half_up,
    round_to_tenth,
    wind_speed_bucket,
)
from skewt_charts.calculations.thermo import dry_adiabat_temperature
from skewt_charts.constants import MS_TO_KNOTS


def test_convert_wind_speed_units():
    assert convert_wind_speed(10, "kt") == pytest.approx(19.43844492)
    assert convert_wind_speed(10, "kmh") == 36
    assert convert_wind_speed(10, "ms") == 10
    assert convert_wind_speed(10, "unknown") == 10


def test_round_half_up_rounds_halves_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3
    assert round_to_tenth(23.25) == pytest.approx(23.3)


def test_wind_speed_bucket_examples():
    assert wind_speed_bucket(0) == 0
    assert wind_speed_bucket(5) == 10
    assert wind_speed_bucket(12) == 25
    assert wind_speed_bucket(25) == 50


def test_wind_speed_bucket_is_monotonic_step_function():
    speeds = [0, 4.9, 5.0, 5.1] + np.arange(5.2, 102.0001, 0.1).tolist()
    buckets = [wind_speed_bucket(s) for s in speeds]

    for bucket in buckets:
        assert bucket % 5 == 0

    for previous, current in zip(buckets, buckets[1:]):
        assert current - previous in (0, 5)

    for speed, bucket in zip(speeds, buckets):
        assert abs(bucket - speed * MS_TO_KNOTS) <= 2.5 + 1e-9


def test_normalize_string():
    assert normalize_string("  Radiosonde \n") == "Radiosonde"
    assert normalize_string("") == ""
    assert normalize_string(None) == ""


def test_dry_adiabat_equals_theta_at_reference_pressure():
    assert dry_adiabat_temperature(30, 1000) == pytest.approx(30)
    # air cools as it rises along an adiabat
    assert dry_adiabat_temperature(30, 500) < dry_adiabat_temperature(30, 850) < 30
