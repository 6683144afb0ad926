"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from durationtool.models import DurationSeries, ParsedRow  # noqa: E402

DATA_URL = "http://testserver/test.txt"


@pytest.fixture(scope="session")
def scenario_text():
    """Small file with one bad line and one NaN value."""
    return "header\n4/1/2022\t1.7636\n5/1/2022\t1.8000\nbadline\n6/1/2022\tNaN\n"


@pytest.fixture(scope="session")
def mixed_text():
    """Unsorted file mixing both date shapes, whitespace styles and a duplicate date."""
    return (
        "Date    Duration\r\n"
        "15/3/2023 \t 2.5\r\n"
        "2023-01-10   1.0  extra column\r\n"
        "\r\n"
        "1/2/2023\t3.0\r\n"
        "2023-01-10\t4.0\r\n"
        "   \r\n"
        "20/12/2022 0.5\r\n"
    )


@pytest.fixture
def sample_series():
    """Sorted series spanning one week, with a duplicated date."""
    return DurationSeries([
        ParsedRow("2022-01-03", 1.5),
        ParsedRow("2022-01-04", 1.7636),
        ParsedRow("2022-01-04", 1.9),
        ParsedRow("2022-01-05", 1.8),
        ParsedRow("2022-01-07", 2.1),
        ParsedRow("2022-01-10", 1.2),
    ])


@pytest.fixture
def data_url():
    return DATA_URL


@pytest.fixture
def make_transport():
    """Build an httpx MockTransport answering every request with one response."""
    def _make(status_code=200, text="", requests=None):
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, text=text)
        return httpx.MockTransport(handler)
    return _make
