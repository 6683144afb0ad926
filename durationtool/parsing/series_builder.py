"""
Series builder - collects accepted rows into a sorted DurationSeries.
"""

from typing import Iterable

from ..exceptions import NoValidRowsError
from ..models import DateRange, DurationSeries, ParsedRow


def build_series(rows: Iterable[ParsedRow], line_count: int = 0, source: str = "") -> tuple[DurationSeries, DateRange]:
    """
    Sort accepted rows by canonical date and compute the default range.

    Sorting is stable, so rows sharing a date keep their input order.
    Duplicate dates are neither merged nor averaged.

    Args:
        rows: Accepted rows from one parse pass
        line_count: Number of data lines that were attempted, for the error message
        source: URL or path the rows came from, attached to the error

    Returns:
        Tuple of (series, full date range)

    Raises:
        NoValidRowsError: If no row was accepted
    """
    rows = list(rows)
    if not rows:
        raise NoValidRowsError(
            f"None of the {line_count} data lines could be parsed; "
            "check that date and value are separated by spaces or tabs",
            source=source,
            line_count=line_count,
        )

    series = DurationSeries(sorted(rows, key=lambda row: row.date))
    return series, DateRange.full(series)
