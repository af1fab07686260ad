"""Handles keyboard shortcuts for the live list window."""

import logging
from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk, Gtk

logger = logging.getLogger("LiveList.KeyboardShortcutHandler")


class KeyboardShortcutHandler:
    """Maps F5 and Ctrl+R to a refresh of the list."""

    def __init__(self, window: Gtk.Widget, on_refresh: Callable[[], None]):
        self.window = window
        self.on_refresh = on_refresh

        key_controller = Gtk.EventControllerKey()
        key_controller.connect("key-pressed", self._on_key_pressed)
        self.window.add_controller(key_controller)

    def _on_key_pressed(
        self, controller: Gtk.EventControllerKey, keyval: int, keycode: int, state: int
    ) -> bool:
        if self.is_refresh_shortcut(keyval, state):
            logger.info("[KEYBOARD] Refresh requested")
            self.on_refresh()
            return True
        return False

    @staticmethod
    def is_refresh_shortcut(keyval: int, state: int) -> bool:
        if keyval == Gdk.KEY_F5:
            return True
        ctrl = bool(state & Gdk.ModifierType.CONTROL_MASK)
        return ctrl and keyval in (Gdk.KEY_r, Gdk.KEY_R)
