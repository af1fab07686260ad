"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from livelist.viewmodels import LiveViewModel
from tests.fakes import FakeLiveDataSource, ManualFetchScheduler


@pytest.fixture
def data_source() -> FakeLiveDataSource:
    return FakeLiveDataSource()


@pytest.fixture
def scheduler() -> ManualFetchScheduler:
    return ManualFetchScheduler()


@pytest.fixture
def view_model(data_source, scheduler) -> LiveViewModel:
    return LiveViewModel(data_source=data_source, scheduler=scheduler)


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def temp_css_path(tmp_path: Path) -> Path:
    css_path = tmp_path / "style.css"
    css_path.write_text("/* test css */")
    return css_path


@pytest.fixture
def gtk():
    """GTK 4 with a usable display, or skip."""
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
        gi.require_version("Gdk", "4.0")
    except ValueError:
        pytest.skip("GTK 4 not available")
    from gi.repository import Gdk, Gtk

    if Gdk.Display.get_default() is None:
        pytest.skip("No display available")
    return Gtk
