"""LiveListWindow - Main application window."""

import logging
from typing import List, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gtk

from livelist.components import ErrorFeedbackView, LoadingMoreIndicator, LoadingView
from livelist.config import AppSettings
from livelist.managers.keyboard_shortcut_handler import KeyboardShortcutHandler
from livelist.managers.scroll_manager import ScrollManager
from livelist.rows.live_item_row import LiveItemRow
from livelist.viewmodels import (
    LiveListSnapshot,
    LiveViewModel,
    LoadingMoreRow,
    Screen,
    build_list_rows,
    plan_row_updates,
    select_screen,
)

logger = logging.getLogger("LiveList.UI")

PLACEHOLDER_TEXT = "Unknown state or processing data..."


def _clear_children(container) -> None:
    while True:
        child = container.get_first_child()
        if not child:
            break
        container.remove(child)


class LiveListWindow(Adw.ApplicationWindow):
    """Main application window"""

    def __init__(self, app, view_model: LiveViewModel, settings: AppSettings):
        super().__init__(application=app, title=settings.window.title)
        self.view_model = view_model
        self.settings = settings
        self.set_default_size(settings.window.default_width, settings.window.default_height)

        self._rendered_ids: List[str] = []
        self._loading_more_row: Optional[LoadingMoreIndicator] = None
        self.current_screen: Optional[Screen] = None

        self._build()

        self.scroll_manager = ScrollManager(
            scrolled=self.scrolled,
            listbox=self.listbox,
            get_item_count=lambda: len(self._rendered_ids),
            on_item_visible=self.view_model.on_item_visible,
            on_pull_to_refresh=self.view_model.fetch_initial_data,
            is_busy=lambda: self.view_model.view_state.is_loading,
        )
        self.keyboard_handler = KeyboardShortcutHandler(
            self, on_refresh=self.view_model.fetch_initial_data
        )

        self.connect("close-request", self._on_close_request)
        self.connect("map", self._on_map)

        self._unsubscribe = self.view_model.subscribe(self.render)

    def _build(self) -> None:
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)

        header = Adw.HeaderBar()
        title_label = Gtk.Label(label=self.settings.window.title)
        title_label.add_css_class("title")
        header.set_title_widget(title_label)

        refresh_button = Gtk.Button()
        refresh_button.set_icon_name("view-refresh-symbolic")
        refresh_button.set_tooltip_text("Refresh")
        refresh_button.add_css_class("flat")
        refresh_button.connect("clicked", lambda _: self.view_model.fetch_initial_data())
        header.pack_end(refresh_button)
        main_box.append(header)

        self.stack = Gtk.Stack()
        self.stack.set_transition_type(Gtk.StackTransitionType.CROSSFADE)
        self.stack.set_vexpand(True)

        self.stack.add_named(LoadingView().build(), Screen.LOADING.value)

        self.error_container = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        self.error_container.set_vexpand(True)
        self.stack.add_named(self.error_container, Screen.ERROR.value)

        self.scrolled = Gtk.ScrolledWindow()
        self.scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.scrolled.set_vexpand(True)
        self.listbox = Gtk.ListBox()
        self.listbox.set_selection_mode(Gtk.SelectionMode.NONE)
        self.listbox.add_css_class("navigation-sidebar")
        self.scrolled.set_child(self.listbox)
        self.stack.add_named(self.scrolled, Screen.LIST.value)

        placeholder = Gtk.Label(label=PLACEHOLDER_TEXT)
        placeholder.add_css_class("dim-label")
        self.stack.add_named(placeholder, Screen.PLACEHOLDER.value)

        main_box.append(self.stack)
        self.set_content(main_box)

    # ========== Rendering ==========

    def render(self, snapshot: LiveListSnapshot) -> None:
        screen = select_screen(snapshot.view_state, snapshot.is_empty)

        if screen is Screen.ERROR:
            self._show_error(snapshot.view_state.message or "")
        elif screen is Screen.LIST:
            self._update_list(snapshot)

        if screen is not self.current_screen:
            logger.debug(f"Switching to {screen.value} screen")
            self.current_screen = screen
            self.stack.set_visible_child_name(screen.value)

    def _show_error(self, message: str) -> None:
        _clear_children(self.error_container)
        view = ErrorFeedbackView(message, on_retry=self.view_model.fetch_initial_data)
        self.error_container.append(view.build())

    def _update_list(self, snapshot: LiveListSnapshot) -> None:
        plan = plan_row_updates(self._rendered_ids, snapshot.items)

        if plan.reset:
            _clear_children(self.listbox)
            self._rendered_ids = []
            self._loading_more_row = None
            self.scroll_manager.scroll_to_top()
        elif self._loading_more_row is not None and plan.to_append:
            # New rows go above the trailing loading row
            self.listbox.remove(self._loading_more_row)
            self._loading_more_row = None

        for row in plan.to_append:
            self.listbox.append(LiveItemRow(row.item, self.settings.display.empty_title_text))
            self._rendered_ids.append(row.item.id)

        rows = build_list_rows(snapshot.items, snapshot.next_id)
        wants_loading_row = bool(rows) and isinstance(rows[-1], LoadingMoreRow)
        if wants_loading_row and self._loading_more_row is None:
            self._loading_more_row = LoadingMoreIndicator()
            self.listbox.append(self._loading_more_row)
        elif not wants_loading_row and self._loading_more_row is not None:
            self.listbox.remove(self._loading_more_row)
            self._loading_more_row = None

    # ========== Window events ==========

    def _on_map(self, widget) -> None:
        self.view_model.on_appear()

    def _on_close_request(self, window) -> bool:
        logger.info("Window closing")
        self._unsubscribe()
        return False
