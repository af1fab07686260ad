"""Runs fetch coroutines off the GTK main loop and hands results back to it."""

import asyncio
import logging
import threading
from typing import Awaitable, Callable, Optional

from gi.repository import GLib

logger = logging.getLogger("LiveList.FetchScheduler")


class GLibFetchScheduler:
    """Background asyncio loop whose results are delivered via GLib.idle_add.

    Callbacks therefore always run on the GTK main thread, which is the only
    thread that touches the view model.
    """

    def __init__(self):
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._ready = threading.Event()

    def start(self) -> None:
        if self._thread is None or not self._thread.is_alive():
            self._ready.clear()
            self._thread = threading.Thread(target=self._run_loop, daemon=True)
            self._thread.start()
            self._ready.wait()

    def _run_loop(self):
        self._loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self._loop)
        self._ready.set()
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()

    def submit(
        self,
        work: Callable[[], Awaitable],
        on_success: Callable,
        on_error: Callable[[Exception], None],
    ) -> None:
        self.start()
        future = asyncio.run_coroutine_threadsafe(work(), self._loop)

        def done(fut):
            GLib.idle_add(self._deliver, fut, on_success, on_error)

        future.add_done_callback(done)

    @staticmethod
    def _deliver(future, on_success, on_error) -> bool:
        if future.cancelled():
            logger.debug("Fetch was cancelled before completing")
            return GLib.SOURCE_REMOVE

        error = future.exception()
        if error is not None:
            on_error(error)
        else:
            on_success(future.result())
        return GLib.SOURCE_REMOVE

    def run_sync(self, work: Callable[[], Awaitable], timeout: float = 2.0):
        """Run ``work`` on the background loop and block for its result."""
        self.start()
        return asyncio.run_coroutine_threadsafe(work(), self._loop).result(timeout)

    def stop(self) -> None:
        if self._loop and self._loop.is_running():
            self._loop.call_soon_threadsafe(self._loop.stop)
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=1)

        self._thread = None
        self._loop = None
