from pathlib import Path

import pytest

from skewt_charts.config import Config, get_default_config


def test_defaults():
    config = get_default_config()
    assert (config.width, config.height) == (750, 620)
    assert config.plot_width == 680
    assert config.plot_height == 520
    assert config.speed_unit == "kmh"
    assert config.output_dir == Path("./output")
    assert config.validate()


@pytest.mark.parametrize("suffix", [".yaml", ".yml", ".json"])
def test_save_and_load_round_trip(tmp_path, suffix):
    config = Config(width=900, speed_unit="kt", temp_range=(-40, 40), output_dir=tmp_path / "out")
    path = tmp_path / f"config{suffix}"

    config.save_to_file(path)
    loaded = Config.load_from_file(path)

    assert loaded == config
    assert isinstance(loaded.temp_range, tuple)
    assert isinstance(loaded.output_dir, Path)


def test_load_missing_and_unsupported(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load_from_file(tmp_path / "missing.yaml")

    path = tmp_path / "config.txt"
    path.write_text("width: 10")
    with pytest.raises(ValueError):
        Config.load_from_file(path)
    with pytest.raises(ValueError):
        Config().save_to_file(path)


@pytest.mark.parametrize("overrides", [
    {"width": 0},
    {"margin_top": 400, "margin_bottom": 300},
    {"dpi": 0},
    {"temp_range": (10, 10)},
    {"base_pressure": 0},
    {"skew_angle": 180},
    {"barb_size": 0},
    {"speed_unit": "mph"},
    {"background_color": ""},
])
def test_validate_rejects(overrides):
    with pytest.raises(ValueError):
        Config(**overrides).validate()


def test_ensure_directories(tmp_path):
    config = Config(output_dir=tmp_path / "a" / "b")
    config.ensure_directories()
    assert (tmp_path / "a" / "b").is_dir()
