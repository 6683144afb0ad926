"""
Text parsing module for duration data files.
Runs tokenizing, row parsing, date normalization and series building as one pass.
"""

from pathlib import Path
from typing import Optional

from ..config import DATA_FILE_ENCODING
from ..exceptions import DataFileNotFoundError
from ..logger import setup_logger, log_series_stats
from ..models import LoadResult, ParsedRow, SkippedLine
from .date_normalizer import normalize_date
from .row_parser import explain_row, parse_row
from .series_builder import build_series
from .tokenizer import tokenize_numbered_lines

logger = setup_logger(__name__)


def parse_lines(lines: list[tuple[int, str]], strict: Optional[bool] = None) -> tuple[list[ParsedRow], list[SkippedLine]]:
    """
    Parse tokenized data lines into rows.

    Args:
        lines: (line_number, line) pairs without the header
        strict: Passed on to the date normalizer

    Returns:
        Tuple of (accepted rows in input order, skipped lines)
    """
    accepted = []
    skipped = []

    for line_number, line in lines:
        raw = parse_row(line)
        if raw is None:
            skipped.append(SkippedLine(line_number, line, explain_row(line) or "unusable row"))
            continue

        date = normalize_date(raw.raw_date, strict=strict)
        if date is None:
            skipped.append(SkippedLine(line_number, line, f"unrecognized date: {raw.raw_date!r}"))
            continue

        accepted.append(ParsedRow(date=date, value=raw.value))

    return accepted, skipped


def parse_text(text: str, source: str = "", strict: Optional[bool] = None) -> LoadResult:
    """
    Parse a raw duration text blob into a validated, sorted series.

    Malformed lines are dropped; only whole-file problems raise.

    Args:
        text: Full file contents
        source: URL or path the text came from, used in logs and errors
        strict: Range-check dates (defaults to config STRICT_DATES)

    Returns:
        LoadResult with the series, its default range and skipped lines

    Raises:
        EmptyInputError: If there are no data lines after the header
        NoValidRowsError: If no data line could be parsed
    """
    lines = tokenize_numbered_lines(text, source=source)
    logger.debug(f"Tokenized {len(lines)} data lines from {source or 'text'}")

    rows, skipped = parse_lines(lines, strict=strict)
    series, date_range = build_series(rows, line_count=len(lines), source=source)

    if skipped:
        logger.warning(f"Skipped {len(skipped)} of {len(lines)} data lines")
        for item in skipped:
            logger.debug(f"Line {item.line_number} skipped ({item.reason}): {item.line}")

    log_series_stats(series, logger, "Parsed series")

    return LoadResult(series=series, date_range=date_range, skipped=tuple(skipped), source=source)


def parse_file(filepath: str | Path, encoding: str = DATA_FILE_ENCODING,
               strict: Optional[bool] = None) -> LoadResult:
    """
    Parse a local duration text file.

    Raises:
        DataFileNotFoundError: If the file doesn't exist
        EmptyInputError: If there are no data lines after the header
        NoValidRowsError: If no data line could be parsed
    """
    filepath = Path(filepath)

    if not filepath.exists():
        logger.error(f"Data file not found: {filepath}")
        raise DataFileNotFoundError(str(filepath))

    logger.info(f"Parsing data file: {filepath.name}")
    text = filepath.read_text(encoding=encoding)
    return parse_text(text, source=str(filepath), strict=strict)
