"""
Metrics service - Summary figures for display.
"""

from ..analytics import filter_series
from ..config import STATS_PRECISION
from ..metrics import calculate_statistics
from ..models import DateRange, DurationSeries


class MetricsService:
    """
    Service layer for statistics shown next to the chart.
    """

    def __init__(self, precision: int = STATS_PRECISION):
        self.precision = precision

    def summarize(self, series: DurationSeries) -> dict:
        """
        Summarize a (filtered) series.

        Args:
            series: Series to summarize

        Returns:
            Dictionary with raw statistics, display strings and sample count
        """
        stats = calculate_statistics(series)
        return {
            'statistics': stats.to_dict(),
            'display': stats.formatted(self.precision),
            'sample_count': stats.count,
            'first_date': series.first_date,
            'last_date': series.last_date,
        }

    def summarize_range(self, series: DurationSeries, date_range: DateRange) -> dict:
        """Filter a series to a range and summarize the result."""
        summary = self.summarize(filter_series(series, date_range))
        summary['range'] = date_range.to_dict()
        return summary
