"""Manager classes for list state and window input."""

from .pagination_manager import PaginationManager

__all__ = ["PaginationManager"]
