import json

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from skewt_charts.calculations.scales import CoordinateFrame
from skewt_charts.config import Config
from skewt_charts.data.sounding import SoundingProfile
from skewt_charts.logging_config import setup_logging


SCENARIO_RECORDS = [
    {"press": 1000, "temp": 25, "dwpt": 20, "wdir": 160, "wspd": 5},
    {"press": 850, "temp": 14, "dwpt": 8, "wdir": 220, "wspd": 12},
    {"press": 700, "temp": 2, "dwpt": -5, "wdir": 250, "wspd": 25},
]


@pytest.fixture
def scenario_records():
    return [dict(r) for r in SCENARIO_RECORDS]


@pytest.fixture
def scenario_profile():
    return SoundingProfile.from_records(SCENARIO_RECORDS)


@pytest.fixture
def default_config():
    return Config()


@pytest.fixture
def scenario_frame(default_config):
    # 750x620 with default margins -> 680x520 plot, top pressure 690 hPa
    return CoordinateFrame.build(
        width=default_config.plot_width,
        height=default_config.plot_height,
        top_pressure=690,
    )


@pytest.fixture
def sounding_file(tmp_path):
    path = tmp_path / "payerne.json"
    records = [dict(r) for r in SCENARIO_RECORDS]
    records[0]["hght"] = 491
    records[1]["hght"] = 1520
    records[2]["hght"] = 3110
    path.write_text(json.dumps({"site": "Payerne", "source": "Radiosonde", "data": records}))
    return path


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture(autouse=True)
def reset_logging():
    # the CLI rebinds the package handler to the captured stdout of a test
    yield
    setup_logging()
