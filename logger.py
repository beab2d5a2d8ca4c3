"""Logging configuration for Spendbook.

Sets up logging to both file (with date-based naming) and console. The HTTP
server's request log (werkzeug) is written to the same dated file.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional
from config import Config

LOGGER_NAME = "spendbook"
REQUEST_LOGGER_NAME = "werkzeug"


def get_log_file_path(config: Config, day: Optional[date] = None) -> Path:
    """Get the log file for a given day (today by default)."""
    day = day or date.today()
    return config.log_dir / f"{LOGGER_NAME}-{day.isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Calling it again replaces the handlers instead of adding duplicates.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(get_log_file_path(config))
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    # werkzeug only adds its own stderr handler when the logger has none
    request_logger = logging.getLogger(REQUEST_LOGGER_NAME)
    request_logger.setLevel(config.log_level)
    request_logger.handlers.clear()
    request_logger.addHandler(file_handler)
    request_logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The spendbook logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
