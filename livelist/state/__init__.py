"""View state and change notification."""

from .observable import Observable
from .view_state import ViewState, ViewStatus

__all__ = ["Observable", "ViewState", "ViewStatus"]
