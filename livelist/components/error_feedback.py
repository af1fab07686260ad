"""Error panel with a retry button."""

from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

RETRY_LABEL = "Retry"


class ErrorFeedbackView:
    def __init__(self, error_message: str, on_retry: Callable[[], None]):
        self.error_message = error_message
        self.on_retry = on_retry
        self.message_label = None
        self.retry_button = None

    def build(self) -> Gtk.Widget:
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=20)
        box.set_halign(Gtk.Align.CENTER)
        box.set_valign(Gtk.Align.CENTER)
        box.set_vexpand(True)
        box.set_margin_start(24)
        box.set_margin_end(24)

        self.message_label = Gtk.Label(label=self.error_message)
        self.message_label.set_wrap(True)
        self.message_label.set_justify(Gtk.Justification.CENTER)
        self.message_label.add_css_class("error")
        box.append(self.message_label)

        self.retry_button = Gtk.Button(label=RETRY_LABEL)
        self.retry_button.set_halign(Gtk.Align.CENTER)
        self.retry_button.add_css_class("suggested-action")
        self.retry_button.add_css_class("pill")
        self.retry_button.connect("clicked", self._on_retry_clicked)
        box.append(self.retry_button)

        return box

    def _on_retry_clicked(self, button) -> None:
        self.on_retry()
