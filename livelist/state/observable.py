"""Minimal subject/observer used to push state changes to the UI."""

import logging
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger("LiveList.Observable")

T = TypeVar("T")


class Observable(Generic[T]):
    """Holds a value and notifies subscribers every time it is set."""

    def __init__(self, value: T):
        self._value = value
        self._subscribers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        # Copy so callbacks may unsubscribe while being notified
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(
        self, callback: Callable[[T], None], emit_current: bool = False
    ) -> Callable[[], None]:
        """Register ``callback`` for future values.

        Args:
            callback: Called with each new value
            emit_current: Also call it immediately with the current value

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)
        logger.debug(f"Subscriber added ({len(self._subscribers)} total)")
        if emit_current:
            callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
