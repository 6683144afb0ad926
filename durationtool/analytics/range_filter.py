"""
Range filtering for duration series.
Selects the rows whose canonical date falls within an inclusive window.
"""

from ..models import DateRange, DurationSeries, ParsedRow


def filter_series(series: DurationSeries, date_range: DateRange) -> DurationSeries:
    """
    Filter a series to the rows within the given range.

    Canonical dates are fixed-width, so plain string comparison matches
    chronological order. Missing bounds leave that side open.

    Args:
        series: Sorted series to filter
        date_range: Inclusive range; None bounds are unbounded

    Returns:
        New DurationSeries, possibly empty, in the original order
    """
    if series.is_empty() or date_range.is_unbounded:
        return series

    df = series.to_frame()
    mask = df['date'].notna()
    if date_range.start is not None:
        mask &= df['date'] >= date_range.start
    if date_range.end is not None:
        mask &= df['date'] <= date_range.end

    df = df[mask]
    return DurationSeries(
        ParsedRow(date=date, value=float(value))
        for date, value in zip(df['date'], df['value'])
    )
