"""
API package - Data source access (HTTP fetch) and REST surface.
"""

from .fetcher import build_data_url, fetch_text

__all__ = [
    'build_data_url',
    'fetch_text',
]
