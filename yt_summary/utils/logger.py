import os
import sys
import logging as _logging
from typing import Optional

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
console_str = "[%(levelname)s] %(message)s"

LOG_LEVELS = {
    "quiet": _logging.CRITICAL + 10,
    "error": _logging.ERROR,
    "info": _logging.INFO,
    "debug": _logging.DEBUG,
}


def setup_logging(level: str = "info", log_file: Optional[str] = None) -> _logging.Logger:
    """
    Configure the application logger.

    Args:
        level: One of quiet, error, info or debug
        log_file: Optional path of a file to mirror log records into

    Returns:
        The configured logger
    """
    logger = _logging.getLogger("ytsummary")
    logger.setLevel(LOG_LEVELS.get(level.lower(), _logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = _logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_logging.Formatter(console_str))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        file_handler = _logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(_logging.Formatter(logging_str))
        logger.addHandler(file_handler)

    return logger


logging = _logging.getLogger("ytsummary")
