"""Data access and background execution services."""

from .errors import LiveApiError, describe_error
from .live_api_client import LiveApiClient

__all__ = ["LiveApiClient", "LiveApiError", "describe_error"]
