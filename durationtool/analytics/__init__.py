"""Analytics package for selecting parts of a duration series."""

from .range_filter import filter_series
