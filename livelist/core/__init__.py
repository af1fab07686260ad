"""Core interfaces and dependency injection."""

from .di_container import AppContainer
from .protocols import FetchSchedulerPort, LiveDataSourcePort

__all__ = ["AppContainer", "FetchSchedulerPort", "LiveDataSourcePort"]
