"""In-memory fakes for the data source and the fetch scheduler."""

import asyncio
from typing import Dict, List, Optional

from livelist.domain import LiveItem, LivePage, UserInfo


def make_item(item_id: str, nickname: str = None, title: Optional[str] = "Live now") -> LiveItem:
    return LiveItem(
        id=item_id,
        user_info=UserInfo(nickname=nickname or f"member-{item_id}"),
        title=title,
    )


def make_page(ids: List[str], next_id: Optional[str] = None) -> LivePage:
    return LivePage(items=[make_item(i) for i in ids], next_id=next_id)


class FakeLiveDataSource:
    """Serves pre-built pages keyed by cursor."""

    def __init__(self, pages: Dict[Optional[str], LivePage] = None):
        self.pages: Dict[Optional[str], LivePage] = dict(pages or {})
        self.errors: Dict[Optional[str], Exception] = {}
        self.requested_cursors: List[Optional[str]] = []

    async def fetch_page(self, next_id: Optional[str] = None) -> LivePage:
        self.requested_cursors.append(next_id)
        if next_id in self.errors:
            raise self.errors[next_id]
        return self.pages[next_id]


class ManualFetchScheduler:
    """Holds submitted fetches until the test decides to complete them."""

    def __init__(self):
        self.pending = []

    def submit(self, work, on_success, on_error) -> None:
        self.pending.append((work, on_success, on_error))

    @property
    def pending_count(self) -> int:
        return len(self.pending)

    def complete(self, index: int = 0) -> None:
        work, on_success, on_error = self.pending.pop(index)
        try:
            result = asyncio.run(work())
        except Exception as e:
            on_error(e)
        else:
            on_success(result)

    def complete_all(self) -> None:
        while self.pending:
            self.complete(0)
