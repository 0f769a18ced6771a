import os
import logging

from datetime import date
from pythonjsonlogger.json import JsonFormatter

from .app_config import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = '%(levelname)s | %(name)s | %(message)s'
JSON_FIELDS = '%(asctime)s %(levelname)s %(name)s %(message)s'


def log_file_path(log_dir=LOG_DIR, day=None):
    """Daily log file, shared by every named logger"""
    day = day or date.today()
    return os.path.join(log_dir, f"lifestyle_{day.isoformat()}.log")


def setup_logger(name="Lifestyle", log_dir=LOG_DIR, level=LOG_LEVEL):
    """
    Named logger writing JSON lines to the daily file and plain text to the
    console.

    Parameters:
        name (str): Logger name, usually the module's class
        log_dir (str): Directory for log files
        level (str | int): Threshold for both handlers

    Returns:
        logging.Logger: Configured logger instance
    """
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Repeated setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    file_handler = logging.FileHandler(log_file_path(log_dir), mode='a')
    file_handler.setFormatter(JsonFormatter(
        JSON_FIELDS,
        rename_fields={'asctime': 'timestamp', 'levelname': 'level'}
    ))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    for handler in (file_handler, console_handler):
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger
