"""Metrics package for duration data analysis."""

from .statistics import EMPTY_STATISTICS, calculate_statistics
