"""Logging setup for the jukebox."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_size: int = 10485760,
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure the "jukebox" logger.

    Attaches a console handler and, when a log file is given, a rotating
    file handler. Calling it again replaces the handlers it installed
    before instead of stacking new ones.

    Args:
        log_level: Logging level name (e.g. "DEBUG", "INFO")
        log_file: Path to the log file, or None for console only
        max_size: Maximum size of the log file in bytes before rotating
        backup_count: Number of rotated log files to keep

    Returns:
        The configured "jukebox" logger

    Raises:
        ValueError: If the logging level name is unknown
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {log_level}")

    logger = logging.getLogger("jukebox")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
