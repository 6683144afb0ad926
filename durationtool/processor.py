"""
Processor module - orchestrates fetching, parsing and statistics.
This module is the entry point for callers that do not need the service layer.
"""

import asyncio
from typing import Optional

import httpx

from .logger import setup_logger
from .api.fetcher import build_data_url, fetch_text
from .models import LoadResult

# Re-export parsing functions
from .parsing import normalize_date, parse_file, parse_text, tokenize_lines

# Re-export filter and metric functions
from .analytics import filter_series
from .metrics import calculate_statistics

logger = setup_logger(__name__)


async def load(url: Optional[str] = None,
               transport: Optional[httpx.AsyncBaseTransport] = None,
               strict: Optional[bool] = None) -> LoadResult:
    """
    Complete pipeline: fetch the data file, then parse it into a series.

    Args:
        url: Data file URL (defaults to the configured source)
        transport: Optional httpx transport
        strict: Range-check dates

    Returns:
        LoadResult with the sorted series and its default range

    Raises:
        FetchError, EmptyInputError, NoValidRowsError
    """
    url = url or build_data_url()
    text = await fetch_text(url, transport=transport)
    return parse_text(text, source=url, strict=strict)


def load_sync(url: Optional[str] = None, strict: Optional[bool] = None) -> LoadResult:
    """Blocking wrapper around load() for scripts."""
    return asyncio.run(load(url, strict=strict))
