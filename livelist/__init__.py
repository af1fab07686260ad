"""Live List - GTK4 paginated live stream browser."""

__version__ = "0.1.0"
