"""Custom exceptions for the duration data pipeline."""

from typing import Optional


def _with_source(message: str, source: str) -> str:
    return f"{message} (source: {source})" if source else message


class DurationToolError(RuntimeError):
    """Base error for loading duration data; source is the URL or path attempted."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(_with_source(message, source))
        self.message = message
        self.source = source


class FetchError(DurationToolError):
    """Raised when the data source cannot be reached or answers with a non-2xx status."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None, reason: str = ""):
        super().__init__(message, source=url)
        self.url = url
        self.status_code = status_code
        self.reason = reason

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "url": self.url,
            "status_code": self.status_code,
        }


class DataFileNotFoundError(FetchError):
    """Raised when a local data file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Data file not found: {path}", url=str(path))


class EmptyInputError(DurationToolError):
    """Raised when the source contains no data lines after the header."""


class NoValidRowsError(DurationToolError):
    """Raised when data lines exist but none of them parse into a valid row."""

    def __init__(self, message: str, source: str = "", line_count: int = 0):
        super().__init__(message, source=source)
        self.line_count = line_count
