"""
Line tokenizer for raw duration text files.
"""

import re

from ..exceptions import EmptyInputError

_LINE_BREAK = re.compile(r'\r?\n')


def number_lines(text: str) -> list[tuple[int, str]]:
    """
    Split text on \\n or \\r\\n, strip each line and drop blank ones.

    Returns:
        (line_number, line) pairs, numbered by physical line starting at 1
    """
    lines = (
        (line_number, line.strip())
        for line_number, line in enumerate(_LINE_BREAK.split(text), start=1)
    )
    return [(line_number, line) for line_number, line in lines if line]


def split_lines(text: str) -> list[str]:
    """Non-blank stripped lines, header included."""
    return [line for _, line in number_lines(text)]


def tokenize_numbered_lines(text: str, source: str = "") -> list[tuple[int, str]]:
    """
    Return the data lines of a raw text blob with their physical line numbers.

    The first non-blank line is always treated as a header and dropped.

    Raises:
        EmptyInputError: If there is no line left after the header
    """
    lines = number_lines(text)
    if len(lines) <= 1:
        raise EmptyInputError("File is empty or contains only a header line", source=source)
    return lines[1:]


def tokenize_lines(text: str, source: str = "") -> list[str]:
    """Data lines of a raw text blob, header dropped."""
    return [line for _, line in tokenize_numbered_lines(text, source=source)]
