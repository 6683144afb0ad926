"""
Fetches the raw duration text file over HTTP.

One GET per load, with a timestamp query parameter so intermediate caches
never serve a stale copy. Redirects are followed; no timeout is enforced here.
"""

import time
from typing import Optional

import httpx

from ..config import CACHE_BUST_PARAM, DATA_BASE_URL, DATA_PATH, FETCH_TIMEOUT
from ..exceptions import FetchError
from ..logger import setup_logger

logger = setup_logger(__name__)


def build_data_url(base_url: str = DATA_BASE_URL, path: str = DATA_PATH) -> str:
    """Join the base URL and the data file path."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _status_error(url: str, response: httpx.Response) -> FetchError:
    reason = response.reason_phrase
    if response.status_code == 404:
        message = (
            f"Data file not found (404) at {url}. "
            "Make sure the file is placed in the directory the server publishes."
        )
    else:
        message = f"Server responded with {response.status_code} {reason}".rstrip()
    return FetchError(message, url=url, status_code=response.status_code, reason=reason)


async def fetch_text(url: Optional[str] = None,
                     transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """
    Download the data file and return its text.

    Args:
        url: Absolute URL of the data file (defaults to the configured source)
        transport: Optional httpx transport, mainly for tests

    Returns:
        Response body decoded as text

    Raises:
        FetchError: On transport failure or a non-2xx status
    """
    url = url or build_data_url()
    params = {CACHE_BUST_PARAM: str(int(time.time() * 1000))}

    logger.debug(f"Fetching data file: {url}")

    try:
        async with httpx.AsyncClient(timeout=FETCH_TIMEOUT, transport=transport,
                                     follow_redirects=True) as client:
            response = await client.get(url, params=params)
    except httpx.TransportError as e:
        logger.error(f"Connection error fetching {url}: {e}")
        raise FetchError(f"Could not reach {url}: {e}", url=url) from e

    if not response.is_success:
        error = _status_error(url, response)
        logger.error(error.message)
        raise error

    logger.info(f"Fetched {len(response.content)} bytes from {url}")
    return response.text
