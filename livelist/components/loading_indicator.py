"""Spinners for the initial load and for the end of the list."""

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

LOADING_TEXT = "Loading..."


class LoadingView:
    def __init__(self, text: str = LOADING_TEXT):
        self.text = text
        self.spinner = None

    def build(self) -> Gtk.Widget:
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        box.set_halign(Gtk.Align.CENTER)
        box.set_valign(Gtk.Align.CENTER)
        box.set_vexpand(True)

        self.spinner = Gtk.Spinner()
        self.spinner.set_size_request(32, 32)
        self.spinner.start()
        box.append(self.spinner)

        label = Gtk.Label(label=self.text)
        label.add_css_class("dim-label")
        box.append(label)

        return box


class LoadingMoreIndicator(Gtk.ListBoxRow):
    """Trailing list row shown while more pages exist."""

    def __init__(self):
        super().__init__()
        self.set_activatable(False)
        self.set_selectable(False)
        self.add_css_class("loading-more-row")

        self.spinner = Gtk.Spinner()
        self.spinner.set_halign(Gtk.Align.CENTER)
        self.spinner.set_hexpand(True)
        self.spinner.set_margin_top(12)
        self.spinner.set_margin_bottom(12)
        self.spinner.start()
        self.set_child(self.spinner)
