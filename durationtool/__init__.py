"""Duration time-series loading, range filtering and statistics."""

__version__ = "0.1.0"
