"""
Duration series data models and type definitions.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

import pandas as pd

from ..config import STATS_PRECISION


@dataclass(frozen=True)
class RawRow:
    """A row that split into a usable date token and a finite value."""
    raw_date: str
    value: float


@dataclass(frozen=True)
class ParsedRow:
    """
    One accepted line of the data file.

    Attributes:
        date: Canonical date string (YYYY-MM-DD)
        value: Finite duration value
    """
    date: str
    value: float

    def to_dict(self) -> dict:
        """Convert row to dictionary."""
        return {'date': self.date, 'value': self.value}


@dataclass(frozen=True)
class SkippedLine:
    """A data line that was dropped during parsing, kept for diagnostics."""
    line_number: int
    line: str
    reason: str


class DurationSeries:
    """
    Immutable, date-ordered sequence of ParsedRow.

    Rows are stored in the order given; building a sorted series is the job of
    the series builder. Consumers only get read-only views.
    """

    __slots__ = ('_rows',)

    def __init__(self, rows: Iterable[ParsedRow] = ()):
        self._rows = tuple(rows)

    @classmethod
    def empty(cls) -> 'DurationSeries':
        return cls(())

    @property
    def rows(self) -> tuple[ParsedRow, ...]:
        return self._rows

    @property
    def dates(self) -> list[str]:
        return [row.date for row in self._rows]

    @property
    def values(self) -> list[float]:
        return [row.value for row in self._rows]

    @property
    def first_date(self) -> Optional[str]:
        return self._rows[0].date if self._rows else None

    @property
    def last_date(self) -> Optional[str]:
        return self._rows[-1].date if self._rows else None

    def is_empty(self) -> bool:
        return not self._rows

    def to_frame(self) -> pd.DataFrame:
        """Return a fresh DataFrame copy with 'date' and 'value' columns."""
        return pd.DataFrame(
            {
                'date': pd.Series(self.dates, dtype=object),
                'value': pd.Series(self.values, dtype='float64'),
            }
        )

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[ParsedRow]:
        return iter(self._rows)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return DurationSeries(self._rows[index])
        return self._rows[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, DurationSeries):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"DurationSeries({len(self)} rows, {self.first_date}..{self.last_date})"


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive window over canonical dates.

    A bound of None means unbounded on that side. Empty strings coming from
    form inputs are treated the same as None.
    """
    start: Optional[str] = None
    end: Optional[str] = None

    def __post_init__(self):
        if self.start == '':
            object.__setattr__(self, 'start', None)
        if self.end == '':
            object.__setattr__(self, 'end', None)

    @classmethod
    def full(cls, series: DurationSeries) -> 'DateRange':
        """Range covering the whole series, from its first to its last date."""
        return cls(series.first_date, series.last_date)

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, date: str) -> bool:
        """Check if a canonical date falls within this range."""
        if self.start is not None and date < self.start:
            return False
        if self.end is not None and date > self.end:
            return False
        return True

    def to_dict(self) -> dict:
        return {'start': self.start, 'end': self.end}


@dataclass(frozen=True)
class Statistics:
    """Summary figures over a series; values keep full precision."""
    max: float = 0.0
    min: float = 0.0
    avg: float = 0.0
    count: int = 0

    def formatted(self, precision: int = STATS_PRECISION) -> dict[str, str]:
        """Display strings with fixed decimal precision."""
        return {
            'max': f"{self.max:.{precision}f}",
            'min': f"{self.min:.{precision}f}",
            'avg': f"{self.avg:.{precision}f}",
        }

    def to_dict(self) -> dict:
        return {'max': self.max, 'min': self.min, 'avg': self.avg, 'count': self.count}


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one successful load: the series, its default range and dropped lines."""
    series: DurationSeries
    date_range: DateRange
    skipped: tuple[SkippedLine, ...] = field(default_factory=tuple)
    source: str = ""

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
