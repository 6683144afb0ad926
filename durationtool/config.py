"""
Configuration constants for durationtool.
Centralized configuration for the data source, parsing and display behavior.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Data Source
DATA_BASE_URL = os.environ.get("DURATION_DATA_BASE_URL", "http://localhost:8000")
DATA_PATH = os.environ.get("DURATION_DATA_PATH", "/test.txt")
CACHE_BUST_PARAM = "t"  # Query parameter appended to every fetch
FETCH_TIMEOUT: Optional[float] = None  # No timeout, slow sources are waited on
DATA_FILE_ENCODING = "utf-8"

# Date Formats
SLASH_DATE_SEPARATOR = "/"
DASH_DATE_SEPARATOR = "-"

# Validation Rules
STRICT_DATES = _env_flag("DURATION_STRICT_DATES")  # Range-check month/day when enabled
MIN_MONTH, MAX_MONTH = 1, 12
MIN_DAY, MAX_DAY = 1, 31

# Statistics
STATS_PRECISION = 4  # Decimal places for displayed statistics

# API
API_VERSION = "v1"

# Logging
LOG_LEVEL = os.environ.get("DURATION_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DIR = Path(__file__).parent.parent / "logs"
