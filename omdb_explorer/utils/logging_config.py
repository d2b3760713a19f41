"""
Logging configuration for the OMDb explorer.

Console logging always; a rotating file handler when a log file is given.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3
) -> None:
    """
    Configure the root logger.

    Args:
        log_file: File name under ``log_dir``; console only when None
        level: Logging level name
        log_dir: Directory for the log file
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files kept
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_path / log_file, maxBytes=max_bytes, backupCount=backup_count)
        )

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    numeric_level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    # Streamlit reruns the script on every interaction
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file:
        root_logger.info("Logging to file: %s", Path(log_dir) / log_file)

    # urllib3 logs full request URLs (including the apikey param) at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger; handlers come from setup_logging."""
    return logging.getLogger(name)


def configure_ui_logging(log_file: Optional[str] = None, level: str = "INFO"):
    """Configure logging for the Streamlit UI."""
    setup_logging(log_file=log_file, level=level, log_dir="logs")
