"""
Date normalization for the two accepted date shapes.

- Slash form D/M/YYYY (day first), zero-padded into YYYY-MM-DD
- Dash form YYYY-MM-DD, passed through unchanged

Month and day ranges are only checked in strict mode, so a dash date such
as 2024-13-40 is accepted as-is by default.
"""

import re
from typing import Optional

from ..config import (
    DASH_DATE_SEPARATOR,
    MAX_DAY,
    MAX_MONTH,
    MIN_DAY,
    MIN_MONTH,
    SLASH_DATE_SEPARATOR,
    STRICT_DATES,
)

_DAY_OR_MONTH = re.compile(r'^\d{1,2}$', re.ASCII)
_YEAR = re.compile(r'^\d{4}$', re.ASCII)
_CANONICAL = re.compile(r'^\d{4}-\d{2}-\d{2}$', re.ASCII)


def _in_bounds(month: str, day: str) -> bool:
    return MIN_MONTH <= int(month) <= MAX_MONTH and MIN_DAY <= int(day) <= MAX_DAY


def _normalize_slash(token: str, strict: bool) -> Optional[str]:
    parts = token.split(SLASH_DATE_SEPARATOR)
    if len(parts) != 3:
        return None

    day, month, year = parts
    if not (_DAY_OR_MONTH.match(day) and _DAY_OR_MONTH.match(month) and _YEAR.match(year)):
        return None
    if strict and not _in_bounds(month, day):
        return None

    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def _normalize_dash(token: str, strict: bool) -> Optional[str]:
    if len(token.split(DASH_DATE_SEPARATOR)) != 3 or not _CANONICAL.match(token):
        return None

    _, month, day = token.split(DASH_DATE_SEPARATOR)
    if strict and not _in_bounds(month, day):
        return None

    return token


def normalize_date(token: str, strict: Optional[bool] = None) -> Optional[str]:
    """
    Convert a raw date token into canonical YYYY-MM-DD form.

    Args:
        token: Raw date field from a data line
        strict: Reject out-of-range months and days (defaults to STRICT_DATES)

    Returns:
        Canonical date string, or None if the token has neither shape
    """
    if strict is None:
        strict = STRICT_DATES

    if SLASH_DATE_SEPARATOR in token:
        return _normalize_slash(token, strict)
    if DASH_DATE_SEPARATOR in token:
        return _normalize_dash(token, strict)
    return None
