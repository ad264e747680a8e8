import logging
import os
import tomllib
from logging.handlers import RotatingFileHandler
from pathlib import Path

from settings_service import SETTINGS_PATH, SettingsService

LOGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")


def configured_level(settings_path=SETTINGS_PATH):
    """Return log_level from settings.toml, or INFO when no usable settings file exists."""
    if not Path(settings_path).exists():
        return logging.INFO
    try:
        return SettingsService(settings_path).log_level.upper()
    except (OSError, tomllib.TOMLDecodeError):
        return logging.INFO


def setup_logging(name="huts", log_file="mountain_huts.log", level=None, max_bytes=5*1024*1024,
                  backup_count=3, settings_path=SETTINGS_PATH):
    """Set up a logger writing to a rotating file in ./logs/ and to stderr.

    Relative log file names are placed in the project's logs/ directory
    (any directory part is dropped); absolute paths are used as given.

    Args:
        name: The name of the logger.
        log_file: The name of the log file.
        level: Level name or number. Defaults to log_level in settings.toml,
            the value written by `huts log-level`.
        max_bytes: The maximum size of the log file.
        backup_count: The number of backup log files.
        settings_path: settings.toml consulted when level is None.

    Returns:
        logger: The configured logger.

    Example usage:
    from logging_config import setup_logging
    logger = setup_logging(__name__)
    """
    logger = logging.getLogger(name)
    # Repeated setup replaces handlers instead of stacking them
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s %(levelname)-8s "
                                  "[%(filename)s:%(lineno)d %(funcName)s()] "
                                  "%(message)s")

    os.makedirs(LOGS_DIR, exist_ok=True)
    if os.path.isabs(log_file):
        log_path = log_file
    else:
        log_path = os.path.join(LOGS_DIR, os.path.basename(log_file))

    file_handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.setLevel(configured_level(settings_path) if level is None else level)
    return logger
