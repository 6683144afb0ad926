"""
Services package - Business logic layer.
"""

from .data_service import DataService, get_data_service
from .metrics_service import MetricsService

__all__ = ['DataService', 'MetricsService', 'get_data_service']
