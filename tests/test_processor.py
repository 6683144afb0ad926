"""
Tests for the end-to-end load pipeline
"""
import asyncio
from unittest.mock import patch

import pytest

from durationtool import processor
from durationtool.exceptions import EmptyInputError, FetchError, NoValidRowsError
from durationtool.models import DateRange


@pytest.mark.unit
class TestLoad:
    """Test processor.load and load_sync."""

    def test_load(self, make_transport, data_url, scenario_text):
        result = asyncio.run(processor.load(data_url, transport=make_transport(text=scenario_text)))

        assert result.series.dates == ["2022-01-04", "2022-01-05"]
        assert result.date_range == DateRange("2022-01-04", "2022-01-05")
        assert result.source == data_url

    def test_load_then_filter_and_stats(self, make_transport, data_url, scenario_text):
        result = asyncio.run(processor.load(data_url, transport=make_transport(text=scenario_text)))

        visible = processor.filter_series(result.series, result.date_range)
        stats = processor.calculate_statistics(visible)

        assert visible == result.series
        assert stats.avg == pytest.approx(1.7818)

    def test_load_http_error(self, make_transport, data_url):
        with pytest.raises(FetchError):
            asyncio.run(processor.load(data_url, transport=make_transport(status_code=500)))

    def test_load_no_valid_rows(self, make_transport, data_url):
        with pytest.raises(NoValidRowsError) as exc_info:
            asyncio.run(processor.load(data_url, transport=make_transport(text="header\nxx yy\n")))

        assert exc_info.value.source == data_url
        assert exc_info.value.line_count == 1
        assert data_url in str(exc_info.value)

    def test_load_header_only(self, make_transport, data_url):
        with pytest.raises(EmptyInputError) as exc_info:
            asyncio.run(processor.load(data_url, transport=make_transport(text="header\n")))

        assert exc_info.value.source == data_url
        assert data_url in str(exc_info.value)

    def test_load_http_error_source(self, make_transport, data_url):
        with pytest.raises(FetchError) as exc_info:
            asyncio.run(processor.load(data_url, transport=make_transport(status_code=404)))

        assert exc_info.value.source == exc_info.value.url == data_url

    def test_load_sync(self, data_url, scenario_text):
        with patch("durationtool.processor.fetch_text", return_value=scenario_text) as mock_fetch:
            result = processor.load_sync(data_url)

        mock_fetch.assert_called_once()
        assert len(result.series) == 2
