"""CSS loading service."""

import logging
from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk, GLib, Gtk

logger = logging.getLogger("LiveList.CssLoader")


class CssLoader:
    def load(self, css_path: str) -> bool:
        if not css_path or not Path(css_path).exists():
            return False

        display = Gdk.Display.get_default()
        if display is None:
            logger.warning("No display available, skipping stylesheet")
            return False

        try:
            provider = Gtk.CssProvider()
            provider.load_from_path(css_path)
        except GLib.Error as e:
            logger.warning(f"Could not load stylesheet {css_path}: {e}")
            return False

        Gtk.StyleContext.add_provider_for_display(
            display,
            provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
        )
        return True
