"""
Models package - Data models and type definitions.
"""

from .series import (
    DateRange,
    DurationSeries,
    LoadResult,
    ParsedRow,
    RawRow,
    SkippedLine,
    Statistics,
)

__all__ = [
    'DateRange',
    'DurationSeries',
    'LoadResult',
    'ParsedRow',
    'RawRow',
    'SkippedLine',
    'Statistics',
]
