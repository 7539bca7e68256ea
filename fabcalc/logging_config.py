"""
Logging Configuration
Sets up the package logger for the application.
"""
import logging
import sys
from typing import Optional

from . import config


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'fabcalc' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). Defaults to
            DEBUG when config.DEBUG is set, otherwise INFO.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger
    """
    if level is None:
        level = logging.DEBUG if config.DEBUG else logging.INFO

    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
