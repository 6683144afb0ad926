"""
Logging configuration for durationtool.
Provides centralized logging setup.
"""

import logging
import sys

from .config import LOG_DIR, LOG_FORMAT, LOG_LEVEL

LOG_DIR.mkdir(exist_ok=True)
LOG_FILE = LOG_DIR / "durationtool.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with both file and console handlers.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # File handler - detailed logs
    file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    # Console handler - INFO and above
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def log_series_stats(series, logger: logging.Logger, name: str = "Series"):
    """Log statistics about a DurationSeries."""
    if len(series) == 0:
        logger.warning(f"{name}: Empty series")
        return

    logger.info(
        f"{name}: {len(series)} rows, "
        f"date range: {series.first_date} to {series.last_date}"
    )
