"""
Summary statistics for duration series.
"""

from ..logger import setup_logger
from ..models import DurationSeries, Statistics

logger = setup_logger(__name__)

EMPTY_STATISTICS = Statistics(max=0.0, min=0.0, avg=0.0, count=0)


def calculate_statistics(series: DurationSeries) -> Statistics:
    """
    Calculate max, min and mean over the values of a series.

    An empty series yields all-zero statistics rather than an error.

    Args:
        series: Series (usually a filtered one)

    Returns:
        Statistics with full-precision values
    """
    if series.is_empty():
        return EMPTY_STATISTICS

    values = series.to_frame()['value']
    high = float(values.max())
    low = float(values.min())
    # Rounding in the mean must not push it outside [min, max]
    avg = min(max(float(values.mean()), low), high)

    stats = Statistics(max=high, min=low, avg=avg, count=len(values))

    logger.debug(f"Calculated statistics for {stats.count} rows")

    return stats
