"""
Data service - Centralized loading and range selection.
Provides a single source of truth for the current duration series.
"""

from typing import Optional

import httpx

from ..analytics import filter_series
from ..api.fetcher import build_data_url, fetch_text
from ..exceptions import DurationToolError
from ..logger import setup_logger
from ..metrics import calculate_statistics
from ..models import DateRange, DurationSeries, LoadResult, Statistics
from ..parsing import parse_file, parse_text

logger = setup_logger(__name__)


class DataService:
    """
    Service layer holding the loaded series and the selected date range.

    Each load replaces the snapshot wholesale. Loads are not serialized here;
    callers should check is_loading before starting another one.
    """

    def __init__(self, url: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 strict: Optional[bool] = None):
        self.url = url or build_data_url()
        self._transport = transport
        self._strict = strict
        self._result: Optional[LoadResult] = None
        self._range: DateRange = DateRange()
        self._loading = False

    @property
    def is_loaded(self) -> bool:
        return self._result is not None

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def result(self) -> Optional[LoadResult]:
        return self._result

    @property
    def date_range(self) -> DateRange:
        return self._range

    async def load(self) -> LoadResult:
        """
        Fetch the data file and parse it.

        Returns:
            LoadResult of the new snapshot

        Raises:
            FetchError, EmptyInputError, NoValidRowsError
        """
        self._loading = True
        try:
            logger.info(f"Loading duration data from {self.url}")
            text = await fetch_text(self.url, transport=self._transport)
            return self.load_text(text, source=self.url)
        finally:
            self._loading = False

    def load_text(self, text: str, source: str = "") -> LoadResult:
        """Parse an already fetched text blob and publish it as the current snapshot."""
        try:
            result = parse_text(text, source=source, strict=self._strict)
        except DurationToolError as e:
            logger.error(f"Failed to load {source or 'text'}: {e}")
            raise
        return self._publish(result)

    def load_file(self, filepath) -> LoadResult:
        """Parse a local data file and publish it as the current snapshot."""
        return self._publish(parse_file(filepath, strict=self._strict))

    def _publish(self, result: LoadResult) -> LoadResult:
        self._result = result
        self._range = result.date_range
        return result

    def get_series(self) -> Optional[DurationSeries]:
        """Full series, or None if nothing has been loaded."""
        return self._result.series if self._result else None

    def set_range(self, start: Optional[str] = None, end: Optional[str] = None) -> DateRange:
        """Select a new visible range; empty bounds are unbounded."""
        self._range = DateRange(start, end)
        logger.debug(f"Range set to {self._range.start}..{self._range.end}")
        return self._range

    def reset_range(self) -> DateRange:
        """Go back to the full extent of the loaded series."""
        self._range = self._result.date_range if self._result else DateRange()
        return self._range

    def get_filtered_series(self, date_range: Optional[DateRange] = None) -> Optional[DurationSeries]:
        """
        Series limited to a range (defaults to the selected one).

        Returns:
            Filtered series (may be empty), or None if nothing has been loaded
        """
        series = self.get_series()
        if series is None:
            return None
        return filter_series(series, date_range or self._range)

    def get_statistics(self, date_range: Optional[DateRange] = None) -> Optional[Statistics]:
        """Statistics over the filtered series, or None if nothing has been loaded."""
        filtered = self.get_filtered_series(date_range)
        if filtered is None:
            return None
        return calculate_statistics(filtered)

    def clear(self):
        """Drop the current snapshot."""
        logger.info("Clearing loaded series")
        self._result = None
        self._range = DateRange()


# Global singleton instance
_data_service = DataService()


def get_data_service() -> DataService:
    """
    Get the global DataService instance.

    Returns:
        DataService singleton
    """
    return _data_service
