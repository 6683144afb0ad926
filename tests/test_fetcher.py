"""
Unit tests for the HTTP fetcher
"""
import asyncio

import httpx
import pytest

from durationtool.api.fetcher import build_data_url, fetch_text
from durationtool.exceptions import FetchError


@pytest.mark.unit
class TestFetchText:
    """Test fetch_text coroutine."""

    def test_returns_body(self, make_transport, data_url, scenario_text):
        transport = make_transport(text=scenario_text)
        assert asyncio.run(fetch_text(data_url, transport=transport)) == scenario_text

    def test_single_get_with_cache_buster(self, make_transport, data_url):
        requests = []
        asyncio.run(fetch_text(data_url, transport=make_transport(text="x", requests=requests)))

        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert requests[0].url.path == "/test.txt"
        assert requests[0].url.params["t"].isdigit()

    def test_follows_redirect(self, data_url, scenario_text):
        """Test a moved data file is fetched from its new location."""
        requests = []

        def handler(request):
            requests.append(request)
            if request.url.scheme == "http":
                return httpx.Response(301, headers={"Location": "https://testserver/test.txt"})
            return httpx.Response(200, text=scenario_text)

        text = asyncio.run(fetch_text(data_url, transport=httpx.MockTransport(handler)))

        assert text == scenario_text
        assert [request.url.scheme for request in requests] == ["http", "https"]

    def test_404_has_file_not_found_message(self, make_transport, data_url):
        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetch_text(data_url, transport=make_transport(status_code=404)))

        error = exc_info.value
        assert error.status_code == 404
        assert error.url == data_url
        assert "not found" in error.message.lower()

    def test_500_message_differs_from_404(self, make_transport, data_url):
        messages = {}
        for status in (404, 500):
            with pytest.raises(FetchError) as exc_info:
                asyncio.run(fetch_text(data_url, transport=make_transport(status_code=status)))
            messages[status] = exc_info.value.message

        assert messages[404] != messages[500]
        assert "500" in messages[500]
        assert "Internal Server Error" in messages[500]
        assert "not found" not in messages[500].lower()

    def test_transport_error(self, data_url):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetch_text(data_url, transport=httpx.MockTransport(handler)))

        assert exc_info.value.status_code is None
        assert exc_info.value.url == data_url

    def test_error_to_dict(self, make_transport, data_url):
        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetch_text(data_url, transport=make_transport(status_code=503)))

        assert exc_info.value.to_dict() == {
            "message": exc_info.value.message,
            "url": data_url,
            "status_code": 503,
        }


@pytest.mark.unit
@pytest.mark.parametrize("base,path,expected", [
    ("http://host", "/test.txt", "http://host/test.txt"),
    ("http://host/", "test.txt", "http://host/test.txt"),
    ("http://host/app/", "/data/test.txt", "http://host/app/data/test.txt"),
])
def test_build_data_url(base, path, expected):
    assert build_data_url(base, path) == expected
