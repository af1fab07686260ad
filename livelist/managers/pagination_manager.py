"""Pagination state management for infinite scroll."""

from typing import Optional


class PaginationManager:
    def __init__(self, prefetch_distance: int = 5):
        self.prefetch_distance = prefetch_distance
        self.loading = False
        self.requested_cursor: Optional[str] = None

    def should_prefetch(
        self, index: int, item_count: int, next_cursor: Optional[str]
    ) -> bool:
        """Whether the row at ``index`` is close enough to the end to page."""
        if next_cursor is None:
            return False
        return index >= item_count - self.prefetch_distance

    def can_load_more(self, next_cursor: Optional[str]) -> bool:
        if next_cursor is None:
            return False
        return not self.loading and next_cursor != self.requested_cursor

    def start_loading(self, cursor: str) -> None:
        self.loading = True
        self.requested_cursor = cursor

    def finish_loading(self) -> None:
        self.loading = False
        self.requested_cursor = None

    def reset(self) -> None:
        self.loading = False
        self.requested_cursor = None
