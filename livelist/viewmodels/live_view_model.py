"""View model driving the live list screen."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from livelist.domain import LiveItem, LivePage
from livelist.managers.pagination_manager import PaginationManager
from livelist.services.errors import describe_error
from livelist.state import Observable, ViewState

if TYPE_CHECKING:
    from livelist.core.protocols import FetchSchedulerPort, LiveDataSourcePort

logger = logging.getLogger("LiveList.ViewModel")


@dataclass(frozen=True)
class LiveListSnapshot:
    view_state: ViewState
    items: Tuple[LiveItem, ...]
    next_id: Optional[str]

    @property
    def is_empty(self) -> bool:
        return not self.items


class LiveViewModel:
    """Owns the view state, the loaded items and the pagination cursor.

    Every fetch gets a request id; only the completion carrying the latest id
    is applied, so a slow response can never overwrite a newer one.
    """

    def __init__(
        self,
        data_source: "LiveDataSourcePort",
        scheduler: "FetchSchedulerPort",
        pagination: Optional[PaginationManager] = None,
    ):
        self.data_source = data_source
        self.scheduler = scheduler
        self.pagination = pagination or PaginationManager()

        self.view_state = ViewState.idle()
        self.live_items: List[LiveItem] = []
        self.next_id: Optional[str] = None

        self._request_id = 0
        self._snapshots = Observable(self.snapshot())

    def snapshot(self) -> LiveListSnapshot:
        return LiveListSnapshot(
            view_state=self.view_state,
            items=tuple(self.live_items),
            next_id=self.next_id,
        )

    def subscribe(
        self, callback: Callable[[LiveListSnapshot], None], emit_current: bool = True
    ) -> Callable[[], None]:
        return self._snapshots.subscribe(callback, emit_current=emit_current)

    def _publish(self) -> None:
        self._snapshots.set(self.snapshot())

    def _next_request_id(self) -> int:
        self._request_id += 1
        return self._request_id

    def _is_stale(self, request_id: int) -> bool:
        if request_id != self._request_id:
            logger.info(
                f"Discarding stale response for request {request_id} "
                f"(latest is {self._request_id})"
            )
            return True
        return False

    # ========== Commands ==========

    def on_appear(self) -> None:
        if not self.live_items:
            self.fetch_initial_data()

    def on_item_visible(self, index: int) -> None:
        if self.pagination.should_prefetch(index, len(self.live_items), self.next_id):
            self.fetch_more_data()

    def fetch_initial_data(self) -> None:
        """Load page 1 and replace whatever is loaded. Used for refresh and retry too."""
        request_id = self._next_request_id()
        # A refresh supersedes any page still in flight
        self.pagination.reset()
        logger.info(f"Fetching first page (request {request_id})")

        self.view_state = ViewState.loading()
        self._publish()

        self.scheduler.submit(
            lambda: self.data_source.fetch_page(None),
            lambda page: self._on_initial_page(request_id, page),
            lambda error: self._on_fetch_failed(request_id, error),
        )

    def fetch_more_data(self) -> bool:
        """Request the next page. Returns False when nothing was requested."""
        cursor = self.next_id
        if cursor is None:
            logger.debug("No next page cursor, not loading more")
            return False
        if self.view_state.is_loading or not self.pagination.can_load_more(cursor):
            logger.debug(f"Fetch already in flight, skipping load more (next={cursor})")
            return False

        request_id = self._next_request_id()
        self.pagination.start_loading(cursor)
        logger.info(f"Fetching next page (next={cursor}, request {request_id})")

        self.view_state = ViewState.loading()
        self._publish()

        self.scheduler.submit(
            lambda: self.data_source.fetch_page(cursor),
            lambda page: self._on_more_page(request_id, page),
            lambda error: self._on_fetch_failed(request_id, error),
        )
        return True

    # ========== Completions ==========

    def _on_initial_page(self, request_id: int, page: LivePage) -> None:
        if self._is_stale(request_id):
            return

        self.live_items = list(page.items)
        self.next_id = page.next_id
        self.view_state = ViewState.loaded()
        logger.info(f"Loaded {len(self.live_items)} items (next={self.next_id})")
        self._publish()

    def _on_more_page(self, request_id: int, page: LivePage) -> None:
        if self._is_stale(request_id):
            return

        self.pagination.finish_loading()
        known = {item.id for item in self.live_items}
        new_items = [item for item in self._unique(page.items) if item.id not in known]
        if len(new_items) != len(page.items):
            logger.debug(f"Dropped {len(page.items) - len(new_items)} duplicate items")

        self.live_items.extend(new_items)
        self.next_id = page.next_id
        self.view_state = ViewState.loaded()
        logger.info(
            f"Appended {len(new_items)} items, {len(self.live_items)} total (next={self.next_id})"
        )
        self._publish()

    def _on_fetch_failed(self, request_id: int, error: Exception) -> None:
        if self._is_stale(request_id):
            return

        self.pagination.finish_loading()
        message = describe_error(error)
        logger.error(f"Live list fetch failed: {message}")
        # Loaded items are kept so a retry or later page can still use them
        self.view_state = ViewState.error(message)
        self._publish()

    @staticmethod
    def _unique(items: List[LiveItem]) -> List[LiveItem]:
        seen = set()
        unique = []
        for item in items:
            if item.id not in seen:
                seen.add(item.id)
                unique.append(item)
        return unique
