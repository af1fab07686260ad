"""Loading phase of the live list screen."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViewStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    status: ViewStatus
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> "ViewState":
        return cls(ViewStatus.IDLE)

    @classmethod
    def loading(cls) -> "ViewState":
        return cls(ViewStatus.LOADING)

    @classmethod
    def loaded(cls) -> "ViewState":
        return cls(ViewStatus.LOADED)

    @classmethod
    def error(cls, message: str) -> "ViewState":
        return cls(ViewStatus.ERROR, message)

    @property
    def is_idle(self) -> bool:
        return self.status is ViewStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is ViewStatus.LOADED

    @property
    def is_error(self) -> bool:
        return self.status is ViewStatus.ERROR
