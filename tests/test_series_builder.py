"""
Unit tests for the series builder
"""
import pytest

from durationtool.exceptions import NoValidRowsError
from durationtool.models import DateRange, ParsedRow
from durationtool.parsing.series_builder import build_series


@pytest.mark.unit
class TestBuildSeries:
    """Test build_series function."""

    def test_sorted_by_date(self):
        rows = [
            ParsedRow("2022-03-01", 3.0),
            ParsedRow("2021-12-31", 1.0),
            ParsedRow("2022-01-15", 2.0),
        ]
        series, _ = build_series(rows)

        assert series.dates == ["2021-12-31", "2022-01-15", "2022-03-01"]
        assert series.values == [1.0, 2.0, 3.0]

    def test_duplicates_kept_in_input_order(self):
        """Test equal dates are neither merged nor reordered."""
        rows = [
            ParsedRow("2022-01-05", 9.0),
            ParsedRow("2022-01-04", 2.0),
            ParsedRow("2022-01-05", 1.0),
            ParsedRow("2022-01-04", 8.0),
        ]
        series, _ = build_series(rows)

        assert series.rows == (
            ParsedRow("2022-01-04", 2.0),
            ParsedRow("2022-01-04", 8.0),
            ParsedRow("2022-01-05", 9.0),
            ParsedRow("2022-01-05", 1.0),
        )

    def test_default_range_is_full_extent(self):
        rows = [ParsedRow("2022-02-01", 1.0), ParsedRow("2022-01-01", 2.0)]
        _, date_range = build_series(rows)

        assert date_range == DateRange("2022-01-01", "2022-02-01")

    def test_single_row(self):
        series, date_range = build_series([ParsedRow("2022-01-01", 2.0)])

        assert len(series) == 1
        assert date_range.start == date_range.end == "2022-01-01"

    def test_no_rows_raises(self):
        with pytest.raises(NoValidRowsError) as exc_info:
            build_series([], line_count=3)

        assert exc_info.value.line_count == 3
        assert "3" in str(exc_info.value)

    def test_accepts_generator(self):
        series, _ = build_series(ParsedRow(d, 1.0) for d in ["2022-01-02", "2022-01-01"])
        assert series.first_date == "2022-01-01"
