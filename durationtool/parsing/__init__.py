"""Parsing package for duration text ingestion and date handling."""

from .date_normalizer import normalize_date
from .row_parser import explain_row, parse_row, parse_value
from .series_builder import build_series
from .text_parser import parse_file, parse_lines, parse_text
from .tokenizer import number_lines, split_lines, tokenize_lines, tokenize_numbered_lines
