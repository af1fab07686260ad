"""Domain models."""

from .live_item import DEFAULT_TITLE, LiveItem, LivePage, UserInfo, display_title

__all__ = ["DEFAULT_TITLE", "LiveItem", "LivePage", "UserInfo", "display_title"]
