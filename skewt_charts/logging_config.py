"""
Logging setup for the skewt_charts logger tree.

Console output follows the CLI verbosity flags; an optional log file always
records DEBUG. Matplotlib's own loggers are held at WARNING so font and
backend discovery messages stay out of verbose output.
"""

import logging
import os
import sys
from typing import Optional


LOGGER_NAME = "skewt_charts"
LOG_LEVEL_ENV = "SKEWT_CHARTS_LOG_LEVEL"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUIET_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"

_VERBOSITY_LEVELS = {
    1: logging.DEBUG,
    0: logging.INFO,
    -1: logging.WARNING,
}


def _console_level(verbosity: int) -> int:
    env_level = os.environ.get(LOG_LEVEL_ENV, "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return getattr(logging, env_level)
    if verbosity > 1:
        verbosity = 1
    return _VERBOSITY_LEVELS.get(verbosity, logging.ERROR)


def setup_logging(verbosity: int = 0, log_file: Optional[str] = None) -> None:
    """
    Configure the ``skewt_charts`` logger.

    Args:
        verbosity: 1 or more for DEBUG, 0 for INFO, -1 for WARNING, lower for ERROR
        log_file: Optional path; the file receives every record down to DEBUG

    Environment Variables:
        SKEWT_CHARTS_LOG_LEVEL: Console level override (DEBUG, INFO, WARNING, ERROR)

    Example:
        >>> setup_logging(verbosity=-1, log_file="skewt.log")
    """
    console_level = _console_level(verbosity)

    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(CONSOLE_FORMAT if verbosity >= 0 else QUIET_FORMAT)
    )
    logger.addHandler(console_handler)
    logger.setLevel(console_level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a")
        except OSError as e:
            logger.warning(f"Cannot open log file {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
            logger.addHandler(file_handler)
            # The file sees DEBUG even when the console is quieter
            logger.setLevel(logging.DEBUG)
            logger.debug(f"Logging to file: {log_file}")

    logger.debug(f"Console logging at {logging.getLevelName(console_level)}")
