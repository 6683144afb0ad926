"""
Row parser - maps one data line onto a (raw date, value) pair.
Rejected rows return None and never abort the overall parse.
"""

import math
import re
from typing import Optional

from ..models import RawRow

# ASCII decimal or scientific notation, no underscores, no inf/nan words
_NUMBER = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$', re.ASCII)


def parse_value(token: str) -> Optional[float]:
    """Parse a numeric token, returning None unless it is a finite number."""
    if not _NUMBER.match(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def explain_row(line: str) -> Optional[str]:
    """Return why a line cannot be used as a row, or None if it can."""
    fields = line.split()
    if len(fields) < 2:
        return "expected a date and a value"
    if parse_value(fields[1]) is None:
        return f"value is not a finite number: {fields[1]!r}"
    return None


def parse_row(line: str) -> Optional[RawRow]:
    """
    Split a line on runs of whitespace into a date token and a value.

    Fields beyond the second are ignored.

    Args:
        line: One trimmed data line

    Returns:
        RawRow, or None if the line has too few fields or a bad value
    """
    fields = line.split()
    if len(fields) < 2:
        return None

    value = parse_value(fields[1])
    if value is None:
        return None

    return RawRow(raw_date=fields[0], value=value)
