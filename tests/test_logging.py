import logging

from skewt_charts.logging_config import setup_logging


def test_verbosity_levels(monkeypatch):
    monkeypatch.delenv("SKEWT_CHARTS_LOG_LEVEL", raising=False)
    logger = logging.getLogger("skewt_charts")

    setup_logging(verbosity=1)
    assert logger.level == logging.DEBUG
    setup_logging(verbosity=-1)
    assert logger.level == logging.WARNING
    setup_logging(verbosity=-2)
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1
    assert not logger.propagate


def test_environment_overrides_verbosity(monkeypatch):
    monkeypatch.setenv("SKEWT_CHARTS_LOG_LEVEL", "warning")
    setup_logging(verbosity=1)
    assert logging.getLogger("skewt_charts").level == logging.WARNING


def test_log_file_receives_debug(tmp_path, monkeypatch):
    monkeypatch.delenv("SKEWT_CHARTS_LOG_LEVEL", raising=False)
    log_file = tmp_path / "skewt.log"
    setup_logging(verbosity=-1, log_file=str(log_file))

    logging.getLogger("skewt_charts.rendering.chart").warning("barb glyph missing")

    for handler in logging.getLogger("skewt_charts").handlers:
        handler.flush()
    assert "barb glyph missing" in log_file.read_text()


def test_log_file_keeps_debug_while_console_is_quiet(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("SKEWT_CHARTS_LOG_LEVEL", raising=False)
    log_file = tmp_path / "skewt.log"
    setup_logging(verbosity=-1, log_file=str(log_file))

    logging.getLogger("skewt_charts.calculations.scales").debug("top pressure 690")

    for handler in logging.getLogger("skewt_charts").handlers:
        handler.flush()
    assert "top pressure 690" in log_file.read_text()
    assert "top pressure 690" not in capsys.readouterr().out


def test_matplotlib_logger_held_at_warning(monkeypatch):
    monkeypatch.delenv("SKEWT_CHARTS_LOG_LEVEL", raising=False)
    logging.getLogger("matplotlib").setLevel(logging.DEBUG)

    setup_logging(verbosity=1)

    assert logging.getLogger("matplotlib").level == logging.WARNING
