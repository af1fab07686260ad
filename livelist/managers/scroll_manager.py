"""Translates scrolling of the live list into paging and refresh requests."""

import logging
from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

logger = logging.getLogger("LiveList.ScrollManager")


class ScrollManager:
    def __init__(
        self,
        scrolled: Gtk.ScrolledWindow,
        listbox: Gtk.ListBox,
        get_item_count: Callable[[], int],
        on_item_visible: Callable[[int], None],
        on_pull_to_refresh: Callable[[], None],
        is_busy: Callable[[], bool] = lambda: False,
    ):
        """Initialize ScrollManager.

        Args:
            scrolled: ScrolledWindow wrapping the list
            listbox: ListBox holding item rows followed by the optional loading row
            get_item_count: Returns the number of item rows currently rendered
            on_item_visible: Called with the bottom-most visible item index
            on_pull_to_refresh: Called when the user overscrolls the top edge
            is_busy: Returns True while a fetch is in flight; overscrolls are ignored then
        """
        self.scrolled = scrolled
        self.listbox = listbox
        self.get_item_count = get_item_count
        self.on_item_visible = on_item_visible
        self.on_pull_to_refresh = on_pull_to_refresh
        self.is_busy = is_busy

        adjustment = self.scrolled.get_vadjustment()
        adjustment.connect("value-changed", self._on_scroll_changed)
        # Content height changes only after new rows are laid out
        adjustment.connect("notify::upper", self._on_content_resized)
        self.scrolled.connect("edge-overshot", self._on_edge_overshot)

    def _on_scroll_changed(self, adjustment) -> None:
        self.report_visible_rows()

    def _on_content_resized(self, adjustment, pspec) -> None:
        self.report_visible_rows()

    def _on_edge_overshot(self, scrolled, position) -> None:
        if position != Gtk.PositionType.TOP:
            return
        if self.is_busy():
            logger.debug("Ignoring pull to refresh while a fetch is in flight")
            return
        logger.info("Pulled past the top of the list, refreshing")
        self.on_pull_to_refresh()

    def last_visible_index(self) -> Optional[int]:
        """Index of the bottom-most visible item row.

        Returns None for an empty list or while the rows have not been laid out.
        """
        item_count = self.get_item_count()
        if item_count == 0:
            return None

        adjustment = self.scrolled.get_vadjustment()
        page_size = adjustment.get_page_size()
        if page_size <= 0:
            return None

        last_row = self.listbox.get_row_at_index(item_count - 1)
        if last_row is None or last_row.get_height() == 0:
            return None

        bottom = adjustment.get_value() + page_size
        row = self.listbox.get_row_at_y(max(0, int(bottom) - 1))

        if row is None:
            # Below the last row only when the content ends inside the viewport
            if bottom >= adjustment.get_upper():
                return item_count - 1
            return None
        if row.get_height() == 0:
            return None
        # The trailing loading row counts as the last item
        return min(row.get_index(), item_count - 1)

    def report_visible_rows(self) -> None:
        index = self.last_visible_index()
        if index is not None:
            self.on_item_visible(index)

    def scroll_to_top(self) -> None:
        self.scrolled.get_vadjustment().set_value(0)
