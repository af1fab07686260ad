"""Protocol definitions for dependency injection."""

from typing import Awaitable, Callable, Optional, Protocol, TypeVar

from livelist.domain import LivePage

T = TypeVar("T")


class LiveDataSourcePort(Protocol):
    async def fetch_page(self, next_id: Optional[str] = None) -> LivePage: ...


class FetchSchedulerPort(Protocol):
    def submit(
        self,
        work: Callable[[], Awaitable[T]],
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None: ...
