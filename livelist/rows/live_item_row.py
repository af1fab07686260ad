"""LiveItemRow - nickname and title of a single live stream."""

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, Pango

from livelist.domain import DEFAULT_TITLE, LiveItem, display_title


class LiveItemRow(Gtk.ListBoxRow):
    def __init__(self, item: LiveItem, empty_title_text: str = DEFAULT_TITLE):
        super().__init__()
        self.item = item
        self.set_activatable(False)
        self.add_css_class("live-item-row")

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)
        box.set_margin_top(4)
        box.set_margin_bottom(4)
        box.set_margin_start(12)
        box.set_margin_end(12)

        self.nickname_label = Gtk.Label(label=item.user_info.nickname)
        self.nickname_label.set_halign(Gtk.Align.START)
        self.nickname_label.add_css_class("heading")
        box.append(self.nickname_label)

        self.title_label = Gtk.Label(label=display_title(item, empty_title_text))
        self.title_label.set_halign(Gtk.Align.START)
        self.title_label.set_single_line_mode(True)
        self.title_label.set_ellipsize(Pango.EllipsizeMode.END)
        self.title_label.add_css_class("dim-label")
        box.append(self.title_label)

        self.set_child(box)
