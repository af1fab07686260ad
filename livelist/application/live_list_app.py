"""Main Live List application."""

import logging
import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio

from livelist.application.css_loader import CssLoader
from livelist.core.di_container import AppContainer

logger = logging.getLogger("LiveList.UI")

APPLICATION_ID = "org.livelist.LiveList"


class LiveListApp(Adw.Application):
    """Main application"""

    def __init__(self, container: AppContainer = None):
        super().__init__(
            application_id=APPLICATION_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )
        self.container = container or AppContainer.create()
        self.main_window = None

    def do_startup(self):
        Adw.Application.do_startup(self)

        css_path = str(self.container.paths.css_path)
        if CssLoader().load(css_path):
            logger.info(f"Loaded custom CSS from {css_path}")

        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", lambda *_: self.quit())
        self.add_action(quit_action)
        self.set_accels_for_action("app.quit", ["<Control>q"])

    def do_activate(self):
        if self.main_window is None:
            from livelist.windows.live_list_window import LiveListWindow

            self.main_window = LiveListWindow(
                self, self.container.view_model, self.container.settings
            )
            logger.info("Main window created")
        self.main_window.present()

    def do_shutdown(self):
        logger.info("Shutting down, stopping background fetches")
        self.container.shutdown()
        Adw.Application.do_shutdown(self)


def main():
    """Entry point"""
    app = LiveListApp()
    try:
        return app.run(sys.argv)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down UI...")
        sys.exit(0)
